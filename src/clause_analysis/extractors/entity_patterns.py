"""Regular expression patterns for entity extraction.

Each pattern family is applied as an independent pass over the clause
text; within a family, matches never overlap.
"""

import re
from dataclasses import dataclass
from typing import List, Pattern


_MONTH = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|June?|July?|"
    r"Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)\.?"
)
_NUMBER = r"\d+(?:,\d{3})*(?:\.\d+)?"
_CAP_WORD = r"[A-Z][\w&.\-]*"
_ALIAS = r"[\"“]([A-Z][\w\s\-]*?)[\"”]"

DATE_PATTERN = re.compile(
    r"\b\d{4}-\d{2}-\d{2}\b"
    r"|\b\d{1,2}[/\-]\d{1,2}[/\-]\d{2,4}\b"
    rf"|\b{_MONTH}\s+\d{{1,2}}(?:st|nd|rd|th)?,?\s+\d{{4}}\b"
    rf"|\b\d{{1,2}}(?:st|nd|rd|th)?\s+{_MONTH}\s+\d{{4}}\b"
)

# "May 1", "March 3rd": a month name followed by a day, with or without a year
MONTH_DAY_PATTERN = re.compile(rf"\b{_MONTH}\s+\d{{1,2}}(?:st|nd|rd|th)?\b")

AMOUNT_PATTERN = re.compile(
    rf"(?:\bUS\$|\bUSD\b|\bEUR\b|\bGBP\b|[$€£¥])\s*{_NUMBER}(?:\s+(?:thousand|million|billion)\b)?"
    rf"|\b{_NUMBER}\s+(?:dollars?|euros?|pounds?|USD|EUR|GBP)\b",
    re.IGNORECASE,
)

# "Acme Corp. ("Supplier")", "Acme Corp. (the "Supplier")"
DEFINED_TERM_PATTERN = re.compile(
    rf"\b((?:{_CAP_WORD}\s+){{0,5}}{_CAP_WORD}),?\s+\((?:the\s+)?{_ALIAS}\)"
)

# "Beta LLC, hereinafter "Buyer"", "Beta LLC (hereinafter referred to as the "Buyer")"
HEREINAFTER_PATTERN = re.compile(
    rf"\b((?:{_CAP_WORD}\s+){{0,5}}{_CAP_WORD}),?\s+\(?hereinafter"
    rf"(?:\s+(?:referred\s+to\s+as|called))?\s+(?:the\s+)?{_ALIAS}\)?",
)

CAPITALIZED_WORD_PATTERN = re.compile(r"\b[A-Z][a-z]+\b")

LEADING_ARTICLE_PATTERN = re.compile(r"^(?:The|This|That)\s+")

SENTENCE_END = (".", ";", "!", "?", ":")

MAX_OBLIGATION_TAIL = 4


@dataclass(frozen=True)
class PartyPattern:
    """A defined-term pattern: group 1 is the party, group 2 its alias."""
    name: str
    pattern: Pattern[str]


PARTY_PATTERNS: List[PartyPattern] = [
    PartyPattern("defined_term", DEFINED_TERM_PATTERN),
    PartyPattern("hereinafter", HEREINAFTER_PATTERN),
]
