"""Bounded, caller-owned history of analysed clauses."""

import json
import logging
import threading
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Deque, Dict, List

from ..models.analysis import AnalysisResult


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistoryEntry:
    """One recorded analysis."""
    result: AnalysisResult
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "clause": self.result.text,
            "overall_quality": self.result.overall_quality,
            "state": self.result.state.label,
            "document_type": self.result.document_type.value,
            "result": self.result.to_dict(),
        }


class AnalysisHistory:
    """
    Thread-safe ring buffer of recent analyses.

    Holds at most ``max_items`` entries; adding to a full buffer drops the
    oldest entry.
    """

    def __init__(self, max_items: int = 50):
        if max_items < 1:
            raise ValueError("max_items must be at least 1")
        self._entries: Deque[HistoryEntry] = deque(maxlen=max_items)
        self._lock = threading.Lock()

    @property
    def max_items(self) -> int:
        return self._entries.maxlen

    def add(self, result: AnalysisResult) -> HistoryEntry:
        """Record an analysis result."""
        entry = HistoryEntry(result=result)
        with self._lock:
            self._entries.append(entry)
        return entry

    def entries(self) -> List[HistoryEntry]:
        """All entries, newest first."""
        with self._lock:
            return list(reversed(self._entries))

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
        logger.info("Analysis history cleared")

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def export_json(self) -> str:
        """Export the history, newest first, as a JSON document."""
        entries = self.entries()
        payload = {
            "exported_at": datetime.now(timezone.utc).isoformat(),
            "count": len(entries),
            "entries": [entry.to_dict() for entry in entries],
        }
        return json.dumps(payload, indent=2, ensure_ascii=False)
