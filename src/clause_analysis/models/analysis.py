"""The assembled result of analysing one clause."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .enums import DocumentType
from .extraction import AgentActionPatient, EntitySet
from .logic import LogicFormula
from .rewrite import DiffResult, RewriteResult
from .scoring import ModalProfile, RuliadState, ScoreResult, VaguenessResult
from .token import Token, TokenStats


@dataclass(frozen=True)
class AnalysisResult:
    """
    Everything the engine knows about a single clause.

    Instances are immutable and may be shared between callers through the
    result cache.
    """
    text: str
    tokens: Tuple[Token, ...]
    stats: TokenStats
    clarity: ScoreResult
    enforceability: ScoreResult
    risk: ScoreResult
    completeness: ScoreResult
    overall_quality: float
    vagueness: VaguenessResult
    modal_profile: ModalProfile
    entities: EntitySet
    agent_action_patient: AgentActionPatient
    document_type: DocumentType
    logic: LogicFormula
    state: RuliadState
    rewrite: Optional[RewriteResult] = None
    diff: Optional[DiffResult] = None
    diff_html: Optional[str] = None

    @property
    def token_count(self) -> int:
        return len(self.tokens)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "text": self.text,
            "token_count": self.token_count,
            "scores": {
                "clarity": self.clarity.to_dict(),
                "enforceability": self.enforceability.to_dict(),
                "risk": self.risk.to_dict(),
                "completeness": self.completeness.to_dict(),
            },
            "overall_quality": self.overall_quality,
            "vagueness": self.vagueness.to_dict(),
            "modal_profile": self.modal_profile.to_dict(),
            "entities": self.entities.to_dict(),
            "agent_action_patient": self.agent_action_patient.to_dict(),
            "document_type": self.document_type.value,
            "logic": self.logic.to_dict(),
            "state": self.state.to_dict(),
            "rewrite": self.rewrite.to_dict() if self.rewrite else None,
            "diff": self.diff.to_dict() if self.diff else None,
            "diff_html": self.diff_html,
        }
