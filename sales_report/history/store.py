from __future__ import annotations

import json
import logging
from pathlib import Path

from ..models.analysis_result import UNKNOWN_DATE
from ..models.report_record import ReportRecord
from ..services.labels import ReportLabels, get_labels

"""Report history: append-only JSON file of ReportRecord entries.

File format is a JSON array (indent=2, UTF-8, non-ASCII kept):

    [
      {"date": "01.05.2024", "text": "...", "total_sum": 75.0, "timestamp": "2024-05-01T10:00:00Z"}
    ]

A missing file is an empty history. Entries are never removed or rewritten;
append() rewrites the whole file with the new record at the end.
"""

logger = logging.getLogger(__name__)

__all__ = [
    "HistoryError",
    "ReportHistory",
]


class HistoryError(Exception):
    """Raised when the history file cannot be read or written."""


class ReportHistory:
    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._records: list[ReportRecord] | None = None

    def _load(self) -> list[ReportRecord]:
        if self._records is not None:
            return self._records
        if not self.path.exists():
            self._records = []
            return self._records
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "[]")
        except (OSError, json.JSONDecodeError) as e:
            raise HistoryError(f"cannot read history {self.path}: {e}") from e
        if not isinstance(data, list):
            raise HistoryError(f"history {self.path} is not a JSON array")
        try:
            self._records = [ReportRecord.from_dict(obj) for obj in data]
        except (KeyError, TypeError, ValueError) as e:
            raise HistoryError(f"invalid history entry in {self.path}: {e}") from e
        return self._records

    def entries(self) -> list[ReportRecord]:
        """Return a copy of all entries, oldest first.

        Returns:
            List of ReportRecord (empty when the file does not exist)
        """
        return list(self._load())

    def __len__(self) -> int:
        return len(self._load())

    def get(self, index: int) -> ReportRecord:
        """Return the entry with 1-based index.

        Raises:
            IndexError: index outside 1..len
        """
        records = self._load()
        if index < 1 or index > len(records):
            raise IndexError(f"no report #{index} (history has {len(records)})")
        return records[index - 1]

    def append(self, record: ReportRecord) -> None:
        """Add a record at the end of the history and rewrite the file.

        Args:
            record: Entry built from a successful analysis

        Raises:
            HistoryError: the existing file is unreadable or the write fails;
                the in-memory list is left as it was
        """
        records = self._load()
        records.append(record)
        payload = json.dumps([r.to_dict() for r in records], indent=2, ensure_ascii=False)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(payload, encoding="utf-8")
        except OSError as e:
            records.pop()
            raise HistoryError(f"cannot write history {self.path}: {e}") from e
        logger.debug(f"history: appended report #{len(records)} to {self.path}")

    @staticmethod
    def format_entry(index: int, record: ReportRecord, labels: ReportLabels | None = None) -> str:
        """List label of one entry, e.g. ``1. 01.05.2024 - 75.00 lei``."""
        labels = labels or get_labels()
        date = labels.unknown_date if record.date == UNKNOWN_DATE else record.date
        return f"{index}. {date} - {record.total_sum:.2f} {labels.currency}"
