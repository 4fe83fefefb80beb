"""Entity extraction models."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class EntitySet:
    """Entities found in a clause, each family in first-occurrence order."""
    parties: Tuple[str, ...] = ()
    dates: Tuple[str, ...] = ()
    amounts: Tuple[str, ...] = ()
    obligations: Tuple[str, ...] = ()

    @property
    def total_count(self) -> int:
        return (
            len(self.parties) + len(self.dates)
            + len(self.amounts) + len(self.obligations)
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "parties": list(self.parties),
            "dates": list(self.dates),
            "amounts": list(self.amounts),
            "obligations": list(self.obligations),
        }


@dataclass(frozen=True)
class AgentActionPatient:
    """
    Who does what to whom, split at the first verb of a clause.

    Every part is None when the clause has no verb; agent or patient
    alone is None when nothing precedes or follows the verb.
    """
    agent: Optional[str] = None
    action: Optional[str] = None
    patient: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.action is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "agent": self.agent,
            "action": self.action,
            "patient": self.patient,
        }
