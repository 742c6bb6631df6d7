"""Report history persistence."""

from .store import HistoryError, ReportHistory

__all__ = [
    "HistoryError",
    "ReportHistory",
]
