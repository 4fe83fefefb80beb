"""Risk scoring."""

from typing import Sequence

from .. import lexicon
from ..models.scoring import ScoreResult
from ..models.token import Token, TokenStats
from .base import BandedScorer, find_terms


AMBIGUITY_PENALTY = 0.12
AMBIGUITY_CAP = 0.36
ONE_SIDED_PENALTY = 0.15
ONE_SIDED_CAP = 0.30
ILLEGAL_PENALTY = 0.20
ILLEGAL_CAP = 0.40
INDETERMINACY_PENALTY = 0.35
PROTECTIVE_CREDIT = 0.05
PROTECTIVE_CAP = 0.10


class RiskScorer(BandedScorer):
    """
    Scores the legal risk a clause carries; higher is riskier.

    Penalties accrue per ambiguity marker, one-sided term and
    illegal or unconscionable term, each family capped. A clause with no
    binding language at all is penalised as indeterminate. Protective
    qualifiers earn back a small, capped credit.
    """

    name = "risk"
    labels = ("High Risk", "Moderate Risk", "Low Risk")

    def score(self, stats: TokenStats, tokens: Sequence[Token]) -> ScoreResult:
        if stats.total_count == 0:
            return self.empty()

        notes = []
        ambiguity_hits = find_terms(tokens, lexicon.AMBIGUITY_MARKERS)
        one_sided_hits = find_terms(tokens, lexicon.ONE_SIDED_TERMS)
        illegal_hits = find_terms(tokens, lexicon.ILLEGAL_TERMS)
        protective_hits = find_terms(tokens, lexicon.PROTECTIVE_TERMS)
        binding_hits = find_terms(tokens, lexicon.BINDING_TERMS)

        ambiguity = min(AMBIGUITY_CAP, AMBIGUITY_PENALTY * len(ambiguity_hits))
        one_sided = min(ONE_SIDED_CAP, ONE_SIDED_PENALTY * len(one_sided_hits))
        illegal = min(ILLEGAL_CAP, ILLEGAL_PENALTY * len(illegal_hits))
        indeterminacy = 0.0 if binding_hits else INDETERMINACY_PENALTY
        mitigation = min(PROTECTIVE_CAP, PROTECTIVE_CREDIT * len(protective_hits))

        if ambiguity_hits:
            notes.append(f"Ambiguous wording: {', '.join(sorted(set(ambiguity_hits)))}")
        if one_sided_hits:
            notes.append(f"One-sided terms: {', '.join(sorted(set(one_sided_hits)))}")
        if illegal_hits:
            notes.append(
                f"Potentially unenforceable terms: {', '.join(sorted(set(illegal_hits)))}"
            )
        if indeterminacy:
            notes.append("No binding language: obligations are indeterminate")
        if protective_hits:
            notes.append(f"Protective qualifiers: {', '.join(sorted(set(protective_hits)))}")

        total = ambiguity + one_sided + illegal + indeterminacy - mitigation
        return self.build(total, notes, {
            "ambiguity": round(ambiguity, 4),
            "one_sided": round(one_sided, 4),
            "illegal": round(illegal, 4),
            "indeterminacy": indeterminacy,
            "mitigation": -round(mitigation, 4) if mitigation else 0.0,
        })
