"""Compilation of a clause into a relational, first-order style formula.

The clause is cut into segments: maximal runs of non-preposition tokens
(phrases) and single prepositions (relators). Each phrase becomes an
entity named by its head word, and each relator between two phrases
becomes a binary relation, e.g. ``Of(fee, services)``.
"""

import logging
import re
from collections import Counter
from typing import List, Optional, Sequence, Tuple

from .. import lexicon
from ..exceptions import MalformedSegmentError
from ..models.enums import SegmentType, TokenTag
from ..models.logic import LogicFormula, Relation, Segment
from ..models.token import Token


logger = logging.getLogger(__name__)

_IDENTIFIER_STRIP_RE = re.compile(r"[^a-z0-9_]")


def segment_tokens(tokens: Sequence[Token]) -> Tuple[Segment, ...]:
    """Split tagged tokens into phrase and relator segments."""
    segments: List[Segment] = []
    phrase: List[Token] = []
    for token in tokens:
        if token.tag == TokenTag.PREP:
            if phrase:
                segments.append(Segment(SegmentType.PHRASE, tuple(phrase)))
                phrase = []
            segments.append(Segment(SegmentType.RELATOR, (token,)))
        else:
            phrase.append(token)
    if phrase:
        segments.append(Segment(SegmentType.PHRASE, tuple(phrase)))
    return tuple(segments)


def tone_summary(tokens: Sequence[Token]) -> str:
    """
    Summarize which relators a clause uses, most frequent first.

    Ties keep first-occurrence order, e.g. ``Preposition wiring: of×2, to×1``.
    """
    counts = Counter(t.lower for t in tokens if t.tag == TokenTag.PREP)
    if not counts:
        return "No preposition wiring detected."
    parts = [f"{word}×{count}" for word, count in counts.most_common()]
    return f"Preposition wiring: {', '.join(parts)}"


def phrase_to_entity(tokens: Sequence[Token], fallback_index: int) -> str:
    """
    Name the entity a phrase denotes.

    Determiners, conjunctions and garbage tokens are dropped and the last
    remaining word is taken as the head. The head is lowercased and
    reduced to ``[a-z0-9_]``; a leading digit gets an ``n`` prefix.

    Args:
        tokens: Tokens of one phrase.
        fallback_index: Used as ``x{fallback_index}`` when no name remains.

    Returns:
        A non-empty identifier.
    """
    content = [
        t for t in tokens
        if not t.is_garbage
        and t.lower not in lexicon.DETERMINERS
        and t.lower not in lexicon.CONJUNCTIONS
    ]
    name = _IDENTIFIER_STRIP_RE.sub("", content[-1].lower) if content else ""
    if not name:
        return f"x{fallback_index}"
    if name[0].isdigit():
        return f"n{name}"
    return name


class LogicCompiler:
    """
    Compiles tagged tokens into a LogicFormula.

    Walks the segments with an explicit index. A phrase is consumed alone.
    A relator followed by a phrase consumes both and yields a relation
    from the previous entity to the new one. A relator with no following
    phrase is consumed alone. A relator with no previous entity is
    malformed; it is skipped and recorded as a warning.
    """

    def compile(self, tokens: Sequence[Token]) -> LogicFormula:
        """
        Compile a clause.

        Args:
            tokens: Tagged tokens of the clause.

        Returns:
            LogicFormula; empty for an empty clause.
        """
        segments = segment_tokens(tokens)
        entities: List[str] = []
        relations: List[Relation] = []
        warnings: List[str] = []
        previous: Optional[str] = None

        i = 0
        while i < len(segments):
            segment = segments[i]

            if segment.type == SegmentType.PHRASE:
                previous = phrase_to_entity(segment.tokens, i)
                entities.append(previous)
                i += 1
                continue

            has_phrase = (
                i + 1 < len(segments)
                and segments[i + 1].type == SegmentType.PHRASE
            )
            try:
                left = self._require_entity(previous, segment, i)
            except MalformedSegmentError as e:
                logger.warning(f"Skipping malformed segment: {e}")
                warnings.append(str(e))
                i += 1
                continue

            if not has_phrase:
                i += 1
                continue

            right = phrase_to_entity(segments[i + 1].tokens, i + 1)
            relations.append(Relation(self._relator_name(segment), left, right))
            entities.append(right)
            previous = right
            i += 2

        unique_entities = tuple(dict.fromkeys(entities))
        if relations:
            formula = " ∧ ".join(str(r) for r in relations)
        else:
            formula = " ∧ ".join(unique_entities)

        negations = tuple(dict.fromkeys(t.lower for t in tokens if t.tag == TokenTag.NEG))
        return LogicFormula(
            entities=unique_entities,
            relations=tuple(relations),
            formula=formula,
            negations=negations,
            warnings=tuple(warnings),
            tone=tone_summary(tokens),
        )

    @staticmethod
    def _require_entity(previous: Optional[str], segment: Segment, index: int) -> str:
        if previous is None:
            raise MalformedSegmentError(
                "Relator has no preceding entity",
                segment_index=index,
                relator=segment.text,
            )
        return previous

    @staticmethod
    def _relator_name(segment: Segment) -> str:
        return segment.tokens[0].lower.capitalize()
