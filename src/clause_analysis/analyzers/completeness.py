"""Completeness scoring."""

from typing import Sequence

from .. import lexicon
from ..models.scoring import ScoreResult
from ..models.token import Token, TokenStats
from .base import BandedScorer, find_terms


ELEMENT_NAMES = {
    "parties": "parties",
    "obligation": "an obligation",
    "consideration_or_term": "consideration or term",
    "termination": "termination",
    "governing_law": "governing law",
}


class CompletenessScorer(BandedScorer):
    """Fraction of the essential contract elements present in the clause."""

    name = "completeness"
    labels = ("Complete", "Partial", "Incomplete")

    def score(self, stats: TokenStats, tokens: Sequence[Token]) -> ScoreResult:
        if stats.total_count == 0:
            return self.empty()

        notes = []
        breakdown = {}
        for element, terms in lexicon.COMPLETENESS_CHECKLIST.items():
            present = bool(find_terms(tokens, terms))
            breakdown[element] = 1.0 if present else 0.0
            if not present:
                notes.append(f"Missing {ELEMENT_NAMES[element]}")

        total = sum(breakdown.values()) / len(lexicon.COMPLETENESS_CHECKLIST)
        return self.build(total, notes, breakdown)
