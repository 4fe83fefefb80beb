"""Clarity scoring."""

import re
from typing import Sequence

from .. import lexicon
from ..models.scoring import ScoreResult, clamp
from ..models.token import Token, TokenStats
from .base import BandedScorer, find_terms


_ENUMERATION_RE = re.compile(r"^(\([a-z0-9]+\)|\d+\.)$", re.IGNORECASE)
_CAPITALIZED_RE = re.compile(r"^[A-Z][a-z]+$")

READABILITY_WEIGHT = 0.4
PRECISION_WEIGHT = 0.4
STRUCTURE_WEIGHT = 0.2

VAGUE_PENALTY = 0.1
VAGUE_PENALTY_CAP = 0.5


class ClarityScorer(BandedScorer):
    """
    Scores how clearly a clause is drafted.

    Combines readability (length against an ideal band), precision
    (binding versus permissive modals, less a penalty for vague words)
    and structure (definitions, enumerations, capitalised terms).
    """

    name = "clarity"
    labels = ("Clear", "Moderate", "Unclear")

    def score(self, stats: TokenStats, tokens: Sequence[Token]) -> ScoreResult:
        if stats.total_count == 0:
            return self.empty()

        notes = []
        readability = self._readability(stats.total_count)
        if readability < 1.0:
            notes.append(
                f"Length of {stats.total_count} tokens is outside the "
                f"{self.settings.readability_min_tokens}-{self.settings.readability_max_tokens} token range"
            )

        vague = find_terms(tokens, lexicon.VAGUE_TERMS)
        if stats.modal_count:
            precision = stats.binding_modal_count / stats.modal_count
        else:
            precision = 0.0
            notes.append("No modal verbs: obligations are not stated")
        if vague:
            notes.append(f"Vague terms: {', '.join(sorted(set(vague)))}")
        precision = clamp(precision - min(VAGUE_PENALTY_CAP, VAGUE_PENALTY * len(vague)))

        structure = 0.0
        if any(t.lower in lexicon.DEFINITION_MARKERS for t in tokens):
            structure += 0.4
            notes.append("Contains a definition")
        if any(_ENUMERATION_RE.match(t.raw) for t in tokens):
            structure += 0.3
            notes.append("Contains an enumeration")
        capitalized = sum(1 for t in tokens if _CAPITALIZED_RE.match(t.clean))
        structure += min(0.3, 1.5 * capitalized / stats.total_count)

        total = (
            READABILITY_WEIGHT * readability
            + PRECISION_WEIGHT * precision
            + STRUCTURE_WEIGHT * structure
        )
        return self.build(total, notes, {
            "readability": round(readability, 4),
            "precision": round(precision, 4),
            "structure": round(structure, 4),
        })

    def _readability(self, n: int) -> float:
        low = self.settings.readability_min_tokens
        high = self.settings.readability_max_tokens
        if n < low:
            return n / low
        if n > high:
            return max(0.0, 1.0 - (n - high) / high)
        return 1.0
