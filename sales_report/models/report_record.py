from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

"""ReportRecord model: one entry of the report history file.

The history file is a JSON array of these records with a fixed key set
(date, text, total_sum, timestamp).
"""

__all__ = [
    "ReportRecord",
]


@dataclass(frozen=True)
class ReportRecord:
    """Stored summary of one successful analysis run.

    Attributes:
        date: Report date as found in the sheet (or the unknown sentinel)
        text: Rendered report text
        total_sum: Grand total of the rendered items
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
    """
    date: str
    text: str
    total_sum: float
    timestamp: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(data: dict[str, Any]) -> ReportRecord:
        """Build a record from a decoded JSON object.

        Raises:
            KeyError: a required key is missing
            ValueError: total_sum is not numeric
        """
        return ReportRecord(
            date=str(data["date"]),
            text=str(data["text"]),
            total_sum=float(data["total_sum"]),
            timestamp=str(data["timestamp"]),
        )
