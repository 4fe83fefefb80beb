"""
Clause Analysis Engine

Heuristic analysis of single legal clauses: scoring, entity extraction,
document-type classification, logic compilation and rule-based rewriting.
"""

__version__ = "0.1.0"

# Export main components
from .config import (
    AnalysisSettings,
    ConfigurationError,
    ConfigurationManager,
    RewriteRule,
    ValidationResult,
)
from .exceptions import (
    AnalysisError,
    CacheUnavailable,
    ClauseValidationError,
    MalformedSegmentError,
)
from .models import (
    AnalysisResult,
    DocumentType,
    EntitySet,
    LogicFormula,
    RewriteResult,
    RuliadState,
    ScoreResult,
    TokenTag,
)
from .performance import AnalysisCache, CacheStats
from .pipeline import (
    ClauseAnalysisPipeline,
    PipelineConfig,
    analyze,
    cache_stats,
    get_default_pipeline,
)

__all__ = [
    "AnalysisCache",
    "AnalysisError",
    "AnalysisResult",
    "AnalysisSettings",
    "CacheStats",
    "CacheUnavailable",
    "ClauseAnalysisPipeline",
    "ClauseValidationError",
    "ConfigurationError",
    "ConfigurationManager",
    "DocumentType",
    "EntitySet",
    "LogicFormula",
    "MalformedSegmentError",
    "PipelineConfig",
    "RewriteResult",
    "RewriteRule",
    "RuliadState",
    "ScoreResult",
    "TokenTag",
    "ValidationResult",
    "analyze",
    "cache_stats",
    "get_default_pipeline",
]
