"""Single-pass token classifier."""

import logging
from dataclasses import replace
from typing import Iterable, Tuple

from .. import lexicon
from ..models.enums import TokenTag
from ..models.token import Token, TokenStats


logger = logging.getLogger(__name__)

# Checked in this order; the first set containing the token wins
_TAG_PRECEDENCE = (
    (TokenTag.NEG, lexicon.NEGATIONS),
    (TokenTag.MODAL, lexicon.MODALS),
    (TokenTag.VERB, lexicon.VERBS),
    (TokenTag.PREP, lexicon.PREPOSITIONS),
    (TokenTag.QUANT, lexicon.QUANTIFIERS),
)


def tag_for(token: Token) -> TokenTag:
    """Return the lexical class of a token."""
    for tag, words in _TAG_PRECEDENCE:
        if token.lower in words:
            return tag
    if token.is_garbage:
        return TokenTag.GARBAGE
    return TokenTag.OTHER


class TokenClassifier:
    """
    Tags tokens and gathers their statistics in one traversal.

    Precedence is NEG, MODAL, VERB, PREP, QUANT, then GARBAGE for tokens
    with no alphanumeric content, and OTHER for everything else.
    """

    def classify(self, tokens: Iterable[Token]) -> Tuple[Tuple[Token, ...], TokenStats]:
        """
        Classify a token sequence.

        Args:
            tokens: Untagged tokens, typically a TokenStream.

        Returns:
            Tuple of (tagged tokens, statistics).
        """
        counts = {tag: 0 for tag in TokenTag}
        binding = 0
        tagged = []

        for token in tokens:
            tag = tag_for(token)
            counts[tag] += 1
            if tag == TokenTag.MODAL and token.lower in lexicon.BINDING_MODALS:
                binding += 1
            tagged.append(replace(token, tag=tag))

        stats = TokenStats(
            verb_count=counts[TokenTag.VERB],
            prep_count=counts[TokenTag.PREP],
            quant_count=counts[TokenTag.QUANT],
            neg_count=counts[TokenTag.NEG],
            modal_count=counts[TokenTag.MODAL],
            binding_modal_count=binding,
            garbage_count=counts[TokenTag.GARBAGE],
            total_count=len(tagged),
        )
        logger.debug(f"Classified {stats.total_count} tokens ({stats.modal_count} modals)")
        return tuple(tagged), stats
