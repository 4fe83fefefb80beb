"""Abstract interfaces for the clause analysis engine."""

from .extractor import IEntityExtractor
from .rewriter import IDiffEngine, IRewriter
from .scorer import IScorer

__all__ = [
    "IDiffEngine",
    "IEntityExtractor",
    "IRewriter",
    "IScorer",
]
