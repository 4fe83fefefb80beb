"""Scorer interface for the clause analysis engine."""

from abc import ABC, abstractmethod
from typing import Sequence

from ..models.scoring import ScoreResult
from ..models.token import Token, TokenStats


class IScorer(ABC):
    """
    Abstract interface for one scoring dimension.

    Implementations must be pure: the result depends only on the
    arguments, and no shared state is modified.
    """

    name: str = ""

    @abstractmethod
    def score(self, stats: TokenStats, tokens: Sequence[Token]) -> ScoreResult:
        """
        Score a classified clause.

        Args:
            stats: Token statistics from the classifier.
            tokens: The tagged tokens.

        Returns:
            ScoreResult with a score in [0, 1].
        """
        pass
