"""Input validation applied before a clause reaches the engine."""

import re

from ..exceptions import ClauseValidationError


# Control characters other than tab, newline and carriage return
_CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")

DEFAULT_MAX_CLAUSE_LENGTH = 10000


def validate_clause(clause: object, max_length: int = DEFAULT_MAX_CLAUSE_LENGTH) -> str:
    """
    Validate and sanitise a submitted clause.

    Args:
        clause: Submitted value.
        max_length: Longest accepted clause, in characters.

    Returns:
        The clause with control characters removed.

    Raises:
        ClauseValidationError: If the clause is not a string, is empty or
            blank, or is longer than ``max_length``.
    """
    if not isinstance(clause, str):
        raise ClauseValidationError(
            "Clause must be a string",
            details={"type": type(clause).__name__},
        )

    cleaned = _CONTROL_CHARS_RE.sub("", clause)
    if not cleaned.strip():
        raise ClauseValidationError("Clause must not be empty")

    if len(cleaned) > max_length:
        raise ClauseValidationError(
            f"Clause exceeds maximum length of {max_length} characters",
            details={"length": len(cleaned), "max_length": max_length},
        )

    return cleaned
