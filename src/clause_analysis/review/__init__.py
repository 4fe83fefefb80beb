"""Diffing and history of clause analyses."""

from .diff_engine import DiffEngine, lcs_table
from .history import AnalysisHistory, HistoryEntry

__all__ = ["AnalysisHistory", "DiffEngine", "HistoryEntry", "lcs_table"]
