"""Entity extractor interface for the clause analysis engine."""

from abc import ABC, abstractmethod
from typing import Sequence

from ..models.extraction import AgentActionPatient, EntitySet
from ..models.token import Token


class IEntityExtractor(ABC):
    """Abstract interface for extracting entities from a clause."""

    @abstractmethod
    def extract(self, tokens: Sequence[Token]) -> EntitySet:
        """
        Extract parties, dates, amounts and obligations.

        Args:
            tokens: The tagged tokens of the clause.

        Returns:
            EntitySet with each family deduplicated in first-occurrence order.
        """
        pass

    @abstractmethod
    def extract_aap(self, tokens: Sequence[Token]) -> AgentActionPatient:
        """Split the clause into agent, action and patient at its first verb."""
        pass
