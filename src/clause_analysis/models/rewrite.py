"""Rewrite and diff models."""

import html
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple

from .enums import DiffType, TransformationCategory


@dataclass(frozen=True)
class Transformation:
    """A single rule application inside a rewrite."""
    original: str
    suggestion: str
    category: TransformationCategory
    strength: float
    rule_id: str
    position: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "original": self.original,
            "suggestion": self.suggestion,
            "category": self.category.value,
            "strength": self.strength,
            "rule_id": self.rule_id,
            "position": self.position,
        }


@dataclass(frozen=True)
class CategoryMetrics:
    """Aggregate figures for the transformations of one category."""
    count: int = 0
    avg_strength: float = 0.0
    total_impact: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "count": self.count,
            "avg_strength": self.avg_strength,
            "total_impact": self.total_impact,
        }


@dataclass(frozen=True)
class RewriteResult:
    """Outcome of running the rewrite rules over a clause."""
    original_text: str
    rewritten_text: str
    transformations: Tuple[Transformation, ...] = ()
    metrics: Mapping[str, CategoryMetrics] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self):
        object.__setattr__(self, "transformations", tuple(self.transformations))
        if not isinstance(self.metrics, MappingProxyType):
            object.__setattr__(self, "metrics", MappingProxyType(dict(self.metrics)))

    @property
    def changed(self) -> bool:
        return bool(self.transformations)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "original_text": self.original_text,
            "rewritten_text": self.rewritten_text,
            "transformations": [t.to_dict() for t in self.transformations],
            "metrics": {k: m.to_dict() for k, m in self.metrics.items()},
        }


@dataclass(frozen=True)
class DiffSpan:
    """A run of consecutive words sharing one diff type."""
    words: Tuple[str, ...]
    diff_type: DiffType

    @property
    def text(self) -> str:
        return " ".join(self.words)


@dataclass(frozen=True)
class DiffResult:
    """Word-level diff between an original and a rewritten clause."""
    spans: Tuple[DiffSpan, ...] = ()

    @property
    def insertions(self) -> int:
        """Number of inserted words."""
        return sum(len(s.words) for s in self.spans if s.diff_type == DiffType.INSERT)

    @property
    def deletions(self) -> int:
        """Number of deleted words."""
        return sum(len(s.words) for s in self.spans if s.diff_type == DiffType.DELETE)

    def original_text(self) -> str:
        """Rebuild the original from EQUAL and DELETE spans."""
        return self._join((DiffType.EQUAL, DiffType.DELETE))

    def rewritten_text(self) -> str:
        """Rebuild the rewrite from EQUAL and INSERT spans."""
        return self._join((DiffType.EQUAL, DiffType.INSERT))

    def _join(self, kinds: Tuple[DiffType, ...]) -> str:
        words: List[str] = []
        for span in self.spans:
            if span.diff_type in kinds:
                words.extend(span.words)
        return " ".join(words)

    def to_html(self) -> str:
        """Render with ``<del>``/``<ins>`` markup and escaped words."""
        parts = []
        for span in self.spans:
            escaped = html.escape(span.text)
            if span.diff_type == DiffType.DELETE:
                parts.append(f"<del>{escaped}</del>")
            elif span.diff_type == DiffType.INSERT:
                parts.append(f"<ins>{escaped}</ins>")
            else:
                parts.append(escaped)
        return " ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "spans": [
                {"type": s.diff_type.value, "text": s.text} for s in self.spans
            ],
            "insertions": self.insertions,
            "deletions": self.deletions,
        }
