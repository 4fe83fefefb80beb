"""Modal profile: how a clause obliges, permits or recommends."""

from typing import Sequence

from .. import lexicon
from ..models.scoring import ModalProfile
from ..models.token import Token
from .base import find_terms


def modal_profile(tokens: Sequence[Token]) -> ModalProfile:
    """
    Count the modal verbs of a clause by family.

    Obligation covers "must", "shall" and the phrase "have to"; permission
    covers "may", "can" and "could"; recommendation covers "should" and
    "ought". Every occurrence counts.
    """
    return ModalProfile(
        obligation=len(find_terms(tokens, lexicon.OBLIGATION_MODALS)),
        permission=len(find_terms(tokens, lexicon.PERMISSION_MODALS)),
        recommendation=len(find_terms(tokens, lexicon.RECOMMENDATION_MODALS)),
    )
