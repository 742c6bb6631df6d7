from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

from .item import Item
from .report_record import ReportRecord

"""AnalysisResult model: the complete output of one analysis run."""

__all__ = [
    "AnalysisResult",
    "UNKNOWN_DATE",
]

# Sentinel report date when no date cell could be found
UNKNOWN_DATE = "unknown"


@dataclass(frozen=True)
class AnalysisResult:
    """Output of one run over one sheet.

    ``items`` holds the whole ranked list while ``total_sum`` only covers the
    items that made it into ``text`` (the display cap applies to both).
    """
    report_date: str
    items: list[Item] = field(default_factory=list)  # Ranked, priority first
    text: str = ""  # Rendered report (bounded)
    total_sum: float = 0.0  # Sum over rendered items only
    rendered_count: int = 0  # Number of items shown in text
    source: str | None = None  # File name the sheet came from, if any

    @property
    def hidden_count(self) -> int:
        return len(self.items) - self.rendered_count

    def to_record(self, timestamp: datetime | None = None) -> ReportRecord:
        """Build the history record for this run (timestamp defaults to now, UTC)."""
        ts = timestamp or datetime.now(UTC)
        return ReportRecord(
            date=self.report_date,
            text=self.text,
            total_sum=self.total_sum,
            timestamp=ts.isoformat().replace("+00:00", "Z"),
        )
