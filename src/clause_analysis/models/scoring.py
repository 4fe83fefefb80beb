"""Score and interpretive-state models."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple


def clamp(value: float, lower: float = 0.0, upper: float = 1.0) -> float:
    """Clamp a value into [lower, upper]."""
    return max(lower, min(upper, value))


@dataclass(frozen=True)
class ScoreResult:
    """
    Result of one scoring dimension.

    Attributes:
        score: Value in [0, 1]; always clamped on construction.
        label: Band label derived from the score.
        notes: Human-readable descriptions of the signals that fired.
        breakdown: Read-only mapping of component name to contribution.
    """
    score: float
    label: str
    notes: Tuple[str, ...] = ()
    breakdown: Mapping[str, float] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self):
        object.__setattr__(self, "score", round(clamp(float(self.score)), 4))
        object.__setattr__(self, "notes", tuple(self.notes))
        if not isinstance(self.breakdown, MappingProxyType):
            object.__setattr__(
                self, "breakdown", MappingProxyType(dict(self.breakdown))
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "score": self.score,
            "label": self.label,
            "notes": list(self.notes),
            "breakdown": dict(self.breakdown),
        }


@dataclass(frozen=True)
class RuliadState:
    """
    One of eight interpretive states of a clause.

    The state is built from three bits: ``q`` (clear), ``l`` (binding)
    and ``k`` (balanced). ``index`` is ``q + 2*l + 4*k``.
    """
    q: int
    l: int
    k: int
    label: str
    explanation: str

    @property
    def index(self) -> int:
        return self.q + 2 * self.l + 4 * self.k

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "bits": {"q": self.q, "l": self.l, "k": self.k},
            "label": self.label,
            "explanation": self.explanation,
        }


@dataclass(frozen=True)
class ModalProfile:
    """Counts of obligation, permission and recommendation modals."""
    obligation: int = 0
    permission: int = 0
    recommendation: int = 0

    @property
    def total(self) -> int:
        return self.obligation + self.permission + self.recommendation

    @property
    def summary(self) -> str:
        return (
            f"Obligation: {self.obligation} · Permission: {self.permission} · "
            f"Recommendation: {self.recommendation}"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "counts": {
                "obligation": self.obligation,
                "permission": self.permission,
                "recommendation": self.recommendation,
            },
            "summary": self.summary,
        }


@dataclass(frozen=True)
class VaguenessResult:
    """
    Lexical vagueness of a clause; 1.0 means no vague words.

    Attributes:
        score: Value in [0, 1]; clamped on construction.
        label: Short verdict.
        notes: Human-readable description.
        hits: Vague words in clause order, as written.
    """
    score: float
    label: str
    notes: str
    hits: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "score", round(clamp(float(self.score)), 4))
        object.__setattr__(self, "hits", tuple(self.hits))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "label": self.label,
            "notes": self.notes,
            "hits": list(self.hits),
        }
