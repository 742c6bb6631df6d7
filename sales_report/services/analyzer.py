from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from ..excel.extractor import extract_rows
from ..excel.reader import read_sheet_rows
from ..models.analysis_result import AnalysisResult
from ..models.config_models import ReportConfig
from .aggregation import aggregate, rank_items
from .labels import get_labels
from .priority import PriorityTable
from .report import render_report

"""Analysis run orchestration: sheet rows -> AnalysisResult.

One run = extract -> aggregate -> rank -> render. A run either returns a
complete AnalysisResult or raises exactly one error (SourceOpenError from the
reader, SchemaError from the extractor); there is no partial result.

Runs keep no module level state, so several files may be analysed in
parallel threads sharing one Analyzer.
"""

logger = logging.getLogger(__name__)

__all__ = [
    "Analyzer",
    "analyze_file",
    "analyze_rows",
]


class Analyzer:
    """Bundle of the immutable inputs of a run (config + priority table)."""

    def __init__(self, config: ReportConfig | None = None, priority_table: PriorityTable | None = None) -> None:
        self.config = config or ReportConfig()
        if priority_table is None:
            if self.config.priority_items is not None:
                priority_table = PriorityTable.from_names(self.config.priority_items)
            else:
                priority_table = PriorityTable.default()
        self.priority_table = priority_table
        self.labels = get_labels(self.config.locale)

    def analyze_rows(self, rows: Sequence[Sequence[str]], source: str | None = None) -> AnalysisResult:
        """Analyse an already decoded sheet.

        Raises:
            HeaderNotFoundError / MissingColumnsError: sheet layout not recognised
        """
        sheet = extract_rows(rows, self.config.columns)
        logger.debug(
            f"header_row={sheet.header_row_index} columns={sheet.columns} date={sheet.report_date!r}"
        )

        ranked = rank_items(aggregate(sheet.rows, self.priority_table))
        rendered = render_report(
            ranked,
            sheet.report_date,
            display_limit=self.config.display_limit,
            labels=self.labels,
        )
        logger.info(
            f"analysed {source or '<rows>'}: rows={len(sheet.rows)} skipped={sheet.skipped_rows} "
            f"items={len(ranked)} shown={rendered.rendered_count} total={rendered.total_sum:.2f}"
        )
        return AnalysisResult(
            report_date=sheet.report_date,
            items=ranked,
            text=rendered.text,
            total_sum=rendered.total_sum,
            rendered_count=rendered.rendered_count,
            source=source,
        )

    def analyze_file(self, path: Path, sheet: str | None = None) -> AnalysisResult:
        """Read the workbook and analyse its first (or named) sheet.

        Raises:
            SourceOpenError: workbook cannot be opened
            HeaderNotFoundError / MissingColumnsError: sheet layout not recognised
        """
        path = Path(path)
        logger.debug(f"reading {path}")
        rows = read_sheet_rows(path, sheet=sheet)
        return self.analyze_rows(rows, source=path.name)


def analyze_rows(rows: Sequence[Sequence[str]], config: ReportConfig | None = None) -> AnalysisResult:
    return Analyzer(config).analyze_rows(rows)


def analyze_file(path: Path, config: ReportConfig | None = None) -> AnalysisResult:
    return Analyzer(config).analyze_file(path)
