"""Extraction of parties, dates, amounts and obligations from a clause."""

import logging
from typing import List, Optional, Sequence, Tuple

from .. import lexicon
from ..interfaces.extractor import IEntityExtractor
from ..models.enums import TokenTag
from ..models.extraction import AgentActionPatient, EntitySet
from ..models.token import Token
from .entity_patterns import (
    AMOUNT_PATTERN,
    CAPITALIZED_WORD_PATTERN,
    DATE_PATTERN,
    LEADING_ARTICLE_PATTERN,
    MAX_OBLIGATION_TAIL,
    PARTY_PATTERNS,
    SENTENCE_END,
)


logger = logging.getLogger(__name__)


def _dedupe(items: List[str]) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(item for item in items if item))


def _clean_phrase(tokens: Sequence[Token]) -> Optional[str]:
    words = [t.clean for t in tokens if t.clean]
    return " ".join(words) if words else None


class EntityExtractor(IEntityExtractor):
    """
    Pattern-based entity extractor.

    Runs four independent passes over a clause. Parties come from
    defined-term constructions and capitalised party-role nouns, dates and
    amounts from regular expressions, and obligations from binding modals
    followed by a verb phrase.
    """

    def extract(self, tokens: Sequence[Token]) -> EntitySet:
        """
        Extract entities from tagged tokens.

        Args:
            tokens: Tagged tokens of a normalized clause.

        Returns:
            EntitySet in first-occurrence order.
        """
        text = " ".join(t.raw for t in tokens)
        entities = EntitySet(
            parties=self.extract_parties(text),
            dates=_dedupe([m.group(0) for m in DATE_PATTERN.finditer(text)]),
            amounts=_dedupe([m.group(0) for m in AMOUNT_PATTERN.finditer(text)]),
            obligations=self.extract_obligations(tokens),
        )
        logger.debug(f"Extracted {entities.total_count} entities")
        return entities

    def extract_parties(self, text: str) -> Tuple[str, ...]:
        """Find named parties and their defined aliases, then role nouns."""
        found: List[Tuple[int, str]] = []
        claimed: List[Tuple[int, int]] = []

        for party_pattern in PARTY_PATTERNS:
            for match in party_pattern.pattern.finditer(text):
                if self._overlaps(match.start(), match.end(), claimed):
                    continue
                claimed.append((match.start(), match.end()))
                name = LEADING_ARTICLE_PATTERN.sub("", match.group(1)).rstrip(",")
                found.append((match.start(1), name))
                found.append((match.start(2), match.group(2).strip()))

        for match in CAPITALIZED_WORD_PATTERN.finditer(text):
            if match.group(0).lower() not in lexicon.PARTY_ROLES:
                continue
            if self._overlaps(match.start(), match.end(), claimed):
                continue
            found.append((match.start(), match.group(0)))

        found.sort(key=lambda item: item[0])
        return _dedupe([name for _, name in found])

    def extract_aap(self, tokens: Sequence[Token]) -> AgentActionPatient:
        """
        Split a clause into agent, action and patient.

        The first VERB token is the action. The clean words before it form
        the agent and the clean words after it the patient.

        Args:
            tokens: Tagged tokens of a normalized clause.

        Returns:
            AgentActionPatient; all parts are None when there is no verb.
        """
        verb_index = next(
            (i for i, t in enumerate(tokens) if t.tag == TokenTag.VERB), None
        )
        if verb_index is None:
            return AgentActionPatient()

        return AgentActionPatient(
            agent=_clean_phrase(tokens[:verb_index]),
            action=tokens[verb_index].lower,
            patient=_clean_phrase(tokens[verb_index + 1:]),
        )

    def extract_obligations(self, tokens: Sequence[Token]) -> Tuple[str, ...]:
        """
        Find obligation phrases.

        An obligation is a binding modal, an optional negation, a verb and
        at most four further tokens. The phrase ends early at a preposition
        or after sentence-final punctuation.
        """
        obligations: List[str] = []
        i = 0
        n = len(tokens)
        while i < n:
            token = tokens[i]
            if token.tag != TokenTag.MODAL or token.lower not in lexicon.BINDING_MODALS:
                i += 1
                continue
            if token.raw.endswith(SENTENCE_END):
                i += 1
                continue

            j = i + 1
            if j < n and tokens[j].tag == TokenTag.NEG and not tokens[j].raw.endswith(SENTENCE_END):
                j += 1
            if j >= n or tokens[j].tag not in (TokenTag.VERB, TokenTag.OTHER):
                i += 1
                continue

            end = j + 1
            if not tokens[j].raw.endswith(SENTENCE_END):
                while end < n and end - j <= MAX_OBLIGATION_TAIL:
                    if tokens[end].tag == TokenTag.PREP:
                        break
                    end += 1
                    if tokens[end - 1].raw.endswith(SENTENCE_END):
                        break

            phrase = " ".join(t.raw for t in tokens[i:end]).rstrip(".;:!?,")
            obligations.append(phrase)
            i = end

        return _dedupe(obligations)

    @staticmethod
    def _overlaps(start: int, end: int, spans: List[Tuple[int, int]]) -> bool:
        return any(start < s_end and s_start < end for s_start, s_end in spans)
