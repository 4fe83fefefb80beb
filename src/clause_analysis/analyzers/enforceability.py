"""Enforceability scoring."""

from typing import Sequence

from .. import lexicon
from ..models.scoring import ScoreResult
from ..models.token import Token, TokenStats
from .base import BandedScorer, distinct, find_terms


# (component, weight, description)
COMPONENTS = (
    ("binding_language", 0.30, "binding language"),
    ("consideration", 0.25, "consideration or payment"),
    ("identified_party", 0.25, "an identified party"),
    ("legal_formality", 0.20, "legal formality"),
)


def has_currency(tokens: Sequence[Token]) -> bool:
    """True if any token carries a currency symbol."""
    return any(
        symbol in token.raw for token in tokens for symbol in lexicon.CURRENCY_SYMBOLS
    )


class EnforceabilityScorer(BandedScorer):
    """
    Scores how likely a clause is to bind the parties.

    Starts from zero and adds a fixed weight for each element present:
    binding language, consideration, an identified party and legal
    formality. Each element counts once however often it appears.
    """

    name = "enforceability"
    labels = ("Enforceable", "Questionable", "Weak")

    def score(self, stats: TokenStats, tokens: Sequence[Token]) -> ScoreResult:
        if stats.total_count == 0:
            return self.empty()

        found = {
            "binding_language": distinct(find_terms(tokens, lexicon.BINDING_TERMS)),
            "consideration": distinct(find_terms(tokens, lexicon.CONSIDERATION_TERMS)),
            "identified_party": distinct(find_terms(tokens, lexicon.PARTY_ROLES)),
            "legal_formality": distinct(find_terms(tokens, lexicon.FORMALITY_TERMS)),
        }
        if has_currency(tokens):
            found["consideration"].append("currency amount")

        notes = []
        breakdown = {}
        for component, weight, description in COMPONENTS:
            if found[component]:
                breakdown[component] = weight
                notes.append(f"Has {description}: {', '.join(found[component])}")
            else:
                breakdown[component] = 0.0
                notes.append(f"Missing {description}")

        return self.build(sum(breakdown.values()), notes, breakdown)
