"""Tokenization, classification and serialization of clause text."""

from .classifier import TokenClassifier, tag_for
from .serialization import AnalysisSerializer
from .tokenizer import TokenStream, normalize_clause, tokenize

__all__ = [
    "AnalysisSerializer",
    "TokenClassifier",
    "TokenStream",
    "normalize_clause",
    "tag_for",
    "tokenize",
]
