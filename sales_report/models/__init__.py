"""Domain models for the sales report tool.

Configuration models, the per-run processing models (RawRow -> Item ->
AnalysisResult) and the persisted records (report history, error log).
"""

from .analysis_result import UNKNOWN_DATE, AnalysisResult
from .config_models import ColumnLabels, ReportConfig
from .error_record import ErrorRecord
from .item import Item
from .raw_row import RawRow
from .report_record import ReportRecord

__all__ = [
    # Configuration models
    "ColumnLabels",
    "ReportConfig",
    # Processing models
    "RawRow",
    "Item",
    "AnalysisResult",
    "UNKNOWN_DATE",
    # Persistence / logging records
    "ReportRecord",
    "ErrorRecord",
]
