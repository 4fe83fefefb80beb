"""Whitespace tokenizer for legal clauses."""

import re
from typing import Iterator

from ..models.token import Token


_WHITESPACE_RE = re.compile(r"\s+")
# Leading/trailing characters that are neither letters nor digits
_EDGE_PUNCT_RE = re.compile(r"^[\W_]+|[\W_]+$", re.UNICODE)


def normalize_clause(text: str) -> str:
    """Collapse whitespace runs to a single space and trim both ends."""
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", text).strip()


def make_token(raw: str, index: int) -> Token:
    """Build an untagged token from its raw text."""
    clean = _EDGE_PUNCT_RE.sub("", raw)
    return Token(raw=raw, clean=clean, lower=clean.lower(), index=index)


class TokenStream:
    """
    Lazy, restartable sequence of tokens over a normalized clause.

    Each iteration splits the normalized text afresh, so the stream can be
    consumed any number of times and always yields the same tokens.
    """

    def __init__(self, text: str):
        self._text = normalize_clause(text)

    @property
    def text(self) -> str:
        """The normalized clause text."""
        return self._text

    def __iter__(self) -> Iterator[Token]:
        if not self._text:
            return
        for index, raw in enumerate(self._text.split(" ")):
            yield make_token(raw, index)

    def __len__(self) -> int:
        return len(self._text.split(" ")) if self._text else 0

    def __repr__(self) -> str:
        return f"TokenStream({self._text!r})"


def tokenize(text: str) -> TokenStream:
    """
    Tokenize a clause.

    Args:
        text: Raw or normalized clause text.

    Returns:
        A TokenStream; empty for empty or whitespace-only input.
    """
    return TokenStream(text)
