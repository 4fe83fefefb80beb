"""Rewriter interface for the clause analysis engine."""

from abc import ABC, abstractmethod

from ..models.rewrite import DiffResult, RewriteResult


class IRewriter(ABC):
    """Abstract interface for rule-based clause rewriting."""

    @abstractmethod
    def rewrite(self, text: str) -> RewriteResult:
        """
        Rewrite a normalized clause.

        Args:
            text: Normalized clause text.

        Returns:
            RewriteResult; the text is unchanged when no rule applies.
        """
        pass


class IDiffEngine(ABC):
    """Abstract interface for word-level diffing."""

    @abstractmethod
    def diff(self, original: str, rewritten: str) -> DiffResult:
        """
        Compute a word-level diff.

        Args:
            original: Original normalized text.
            rewritten: Rewritten normalized text.

        Returns:
            DiffResult whose spans rebuild both texts.
        """
        pass
