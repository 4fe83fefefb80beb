"""Shared helpers for the scorers."""

from collections import Counter
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..config.models import AnalysisSettings
from ..interfaces.scorer import IScorer
from ..models.scoring import ScoreResult, clamp
from ..models.token import Token


def find_terms(tokens: Sequence[Token], terms: Iterable[str]) -> List[str]:
    """
    Find every occurrence of the given terms in a clause.

    Single words are compared against each token's lowercase clean form.
    Multi-word terms are matched as whole-word phrases over the clean
    tokens, so punctuation between words does not prevent a match.

    Args:
        tokens: Clause tokens.
        terms: Lowercase words or phrases.

    Returns:
        One entry per occurrence, grouped by term in sorted order.
    """
    words = [t.lower for t in tokens if t.lower]
    counts = Counter(words)
    text = f" {' '.join(words)} "

    hits: List[str] = []
    for term in sorted(terms):
        if " " in term:
            occurrences = text.count(f" {term} ")
        else:
            occurrences = counts.get(term, 0)
        hits.extend([term] * occurrences)
    return hits


def distinct(hits: Iterable[str]) -> List[str]:
    """Drop repeats while keeping order."""
    return list(dict.fromkeys(hits))


class BandedScorer(IScorer):
    """
    Base class for scorers that label their score by band.

    Subclasses set ``labels`` to (high, mid, low) and implement ``score``.
    """

    labels: Tuple[str, str, str] = ("High", "Moderate", "Low")

    def __init__(self, settings: Optional[AnalysisSettings] = None):
        self.settings = settings or AnalysisSettings()

    def label_for(self, score: float) -> str:
        """Map a score to its band label."""
        if score >= self.settings.high_band:
            return self.labels[0]
        if score <= self.settings.low_band:
            return self.labels[2]
        return self.labels[1]

    def build(self, score: float, notes: List[str], breakdown: Dict[str, float]) -> ScoreResult:
        """Assemble a ScoreResult, clamping and labelling the score."""
        score = round(clamp(score), 4)
        return ScoreResult(
            score=score,
            label=self.label_for(score),
            notes=tuple(notes),
            breakdown=breakdown,
        )

    def empty(self) -> ScoreResult:
        """Result for a clause with no tokens."""
        return self.build(0.0, ["Empty clause: nothing to score"], {})
