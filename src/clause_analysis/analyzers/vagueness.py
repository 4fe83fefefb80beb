"""Lexical vagueness, scored on its own."""

import logging
from typing import Sequence

from .. import lexicon
from ..models.scoring import VaguenessResult
from ..models.token import Token


logger = logging.getLogger(__name__)

VAGUENESS_PENALTY = 0.08
MAX_PENALIZED_TERMS = 10


class VaguenessAnalyzer:
    """
    Scores a clause by how free it is of vague, open-textured words.

    Each vague word costs ``VAGUENESS_PENALTY``; beyond
    ``MAX_PENALIZED_TERMS`` words the score stops falling. Unlike the
    clarity precision penalty, this looks at vocabulary alone.
    """

    def analyze(self, tokens: Sequence[Token]) -> VaguenessResult:
        """
        Score the vagueness of a clause.

        Args:
            tokens: Clause tokens.

        Returns:
            VaguenessResult; an empty clause scores 0.0 and is labelled Unknown.
        """
        if not tokens:
            return VaguenessResult(
                score=0.0,
                label="Unknown",
                notes="No content to assess for vagueness.",
            )

        hits = [t.clean for t in tokens if t.lower in lexicon.VAGUE_TERMS]
        if not hits:
            return VaguenessResult(
                score=1.0,
                label="Low linguistic vagueness",
                notes="No obvious vague or open-textured terms detected.",
            )

        logger.debug(f"Found {len(hits)} vague terms")
        return VaguenessResult(
            score=1.0 - min(len(hits), MAX_PENALIZED_TERMS) * VAGUENESS_PENALTY,
            label="Contains vague / open-textured terms",
            notes=f"Vague terms: {', '.join(hits)}.",
            hits=tuple(hits),
        )
