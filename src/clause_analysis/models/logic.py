"""Models for the relational logic form of a clause."""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .enums import SegmentType
from .token import Token


@dataclass(frozen=True)
class Segment:
    """A maximal phrase, or a single relator token."""
    type: SegmentType
    tokens: Tuple[Token, ...]

    @property
    def text(self) -> str:
        return " ".join(t.raw for t in self.tokens)


@dataclass(frozen=True)
class Relation:
    """A binary relation between two entities, e.g. ``Of(fee, services)``."""
    name: str
    left: str
    right: str

    def __str__(self) -> str:
        return f"{self.name}({self.left}, {self.right})"


@dataclass(frozen=True)
class LogicFormula:
    """
    Compiled logic form of a clause.

    Attributes:
        entities: Distinct entity identifiers in first-seen order.
        relations: Relations in clause order.
        formula: Conjunction of the relations, the sole entity when there
            are no relations, or an empty string for an empty clause.
        negations: Negation words found in the clause.
        warnings: Recoverable problems met while compiling.
        tone: Summary of the relators used, most frequent first.
    """
    entities: Tuple[str, ...] = ()
    relations: Tuple[Relation, ...] = ()
    formula: str = ""
    negations: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()
    tone: str = ""

    @property
    def existential_form(self) -> str:
        """Render as ``∃ a, b · E(a) ∧ E(b) ∧ Of(a, b)``."""
        if not self.entities:
            return ""
        conjuncts = [f"E({e})" for e in self.entities]
        conjuncts.extend(str(r) for r in self.relations)
        return f"∃ {', '.join(self.entities)} · " + " ∧ ".join(conjuncts)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "entities": list(self.entities),
            "relations": [str(r) for r in self.relations],
            "formula": self.formula,
            "existential_form": self.existential_form,
            "negations": list(self.negations),
            "warnings": list(self.warnings),
            "tone": self.tone,
        }
