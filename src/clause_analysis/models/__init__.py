"""Data models for the clause analysis engine."""

from .analysis import AnalysisResult
from .enums import DiffType, DocumentType, SegmentType, TokenTag, TransformationCategory
from .extraction import AgentActionPatient, EntitySet
from .logic import LogicFormula, Relation, Segment
from .rewrite import CategoryMetrics, DiffResult, DiffSpan, RewriteResult, Transformation
from .scoring import ModalProfile, RuliadState, ScoreResult, VaguenessResult, clamp
from .token import Token, TokenStats

__all__ = [
    "AgentActionPatient",
    "AnalysisResult",
    "CategoryMetrics",
    "DiffResult",
    "DiffSpan",
    "DiffType",
    "DocumentType",
    "EntitySet",
    "LogicFormula",
    "ModalProfile",
    "Relation",
    "RewriteResult",
    "RuliadState",
    "ScoreResult",
    "Segment",
    "SegmentType",
    "Token",
    "TokenStats",
    "TokenTag",
    "Transformation",
    "TransformationCategory",
    "VaguenessResult",
    "clamp",
]
