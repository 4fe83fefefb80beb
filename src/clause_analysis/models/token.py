"""Token models produced by the tokenizer and classifier."""

from dataclasses import dataclass
from typing import Optional

from .enums import TokenTag


@dataclass(frozen=True)
class Token:
    """
    A single whitespace-delimited token of a normalized clause.

    Attributes:
        raw: Token text as it appears in the clause, punctuation included.
        clean: Token with leading and trailing non-alphanumerics stripped.
        lower: Lowercase form of ``clean``.
        index: Zero-based position in the clause.
        tag: Lexical class, set by the classifier.
    """
    raw: str
    clean: str
    lower: str
    index: int
    tag: Optional[TokenTag] = None

    @property
    def is_garbage(self) -> bool:
        """A token with nothing left after stripping punctuation."""
        return self.clean == ""


@dataclass(frozen=True)
class TokenStats:
    """Per-class token counts gathered during classification."""
    verb_count: int = 0
    prep_count: int = 0
    quant_count: int = 0
    neg_count: int = 0
    modal_count: int = 0
    binding_modal_count: int = 0
    garbage_count: int = 0
    total_count: int = 0
