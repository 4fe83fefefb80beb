"""Serialization utilities for analysis results."""

import json
from typing import Any, Dict

from ..models.analysis import AnalysisResult


class AnalysisSerializer:
    """
    Converts AnalysisResult objects to plain dictionaries and JSON.

    Results are one-way: they are rebuilt by re-analysing the clause, not
    by deserializing.
    """

    @staticmethod
    def to_dict(result: AnalysisResult) -> Dict[str, Any]:
        """Convert a result to a JSON-friendly dictionary."""
        return result.to_dict()

    @staticmethod
    def serialize(result: AnalysisResult, indent: int = 2) -> str:
        """
        Serialize a result to a JSON string.

        Args:
            result: The analysis result.
            indent: JSON indentation.

        Returns:
            JSON string; non-ASCII text such as the logic symbols is kept.
        """
        return json.dumps(result.to_dict(), indent=indent, ensure_ascii=False)
