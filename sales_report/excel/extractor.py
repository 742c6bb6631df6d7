from __future__ import annotations

import math
import re
from collections.abc import Sequence
from dataclasses import dataclass, field

from ..models.analysis_result import UNKNOWN_DATE
from ..models.config_models import ColumnLabels
from ..models.raw_row import RawRow

"""Row extractor for POS export sheets.

Input is an already decoded sheet (rows of cell text, possibly ragged). Steps:
1. Header row: first row with a cell containing the header marker
2. Columns: exact label match inside the header row (name / quantity / amount
   mandatory, date optional)
3. Report date: first non-empty date cell strictly below the header
4. Data rows: every row below the header with a non-empty name that does not
   contain the exclusion marker

Missing cells in short rows are treated as empty, never as an error.
"""

__all__ = [
    "ColumnIndexes",
    "ExtractedSheet",
    "HeaderNotFoundError",
    "MissingColumnsError",
    "SchemaError",
    "extract_rows",
    "find_columns",
    "find_header_row",
    "parse_lenient",
    "resolve_report_date",
]

_SPACES = re.compile(r"[\s']")
# "1.234.567" or "1,234,567": one separator kind, repeated, in groups of three
_GROUPED = re.compile(r"-?\d{1,3}(?:(?:\.\d{3}){2,}|(?:,\d{3}){2,})")


class SchemaError(Exception):
    """Raised when the sheet does not have the expected layout."""


class HeaderNotFoundError(SchemaError):
    """Raised when no row contains the header marker."""


class MissingColumnsError(SchemaError):
    """Raised when a mandatory column label is missing from the header row."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(f"required columns missing: {missing}")


@dataclass(frozen=True)
class ColumnIndexes:
    name: int
    quantity: int
    amount: int
    date: int | None = None  # None: sheet has no date column


@dataclass(frozen=True)
class ExtractedSheet:
    """Result of extraction: report date plus the surviving data rows."""
    report_date: str
    header_row_index: int
    columns: ColumnIndexes
    rows: list[RawRow] = field(default_factory=list)
    skipped_rows: int = 0  # Empty-name / excluded rows below the header


def parse_lenient(text: str | None) -> float:
    """Parse locale formatted decimal text, returning 0.0 when it cannot.

    Accepts "12.5", "12,5", "1 234,50", "1.234,50", "1,234.50" and "1.234.567".
    When both separators occur the last one is the decimal separator; a single
    separator repeated in groups of three is a thousands separator. Empty,
    garbage and non-finite text all yield 0.0; bad numbers are never an error.
    """
    if text is None:
        return 0.0
    cleaned = _SPACES.sub("", str(text))
    if not cleaned:
        return 0.0
    if "," in cleaned and "." in cleaned:
        if cleaned.rfind(",") > cleaned.rfind("."):
            cleaned = cleaned.replace(".", "").replace(",", ".")
        else:
            cleaned = cleaned.replace(",", "")
    elif _GROUPED.fullmatch(cleaned):
        cleaned = cleaned.replace(",", "").replace(".", "")
    elif cleaned.count(",") == 1:
        cleaned = cleaned.replace(",", ".")
    try:
        value = float(cleaned)
    except ValueError:
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return value


def _cell(row: Sequence[str], index: int | None) -> str:
    if index is None or index >= len(row):
        return ""
    return row[index]


def find_header_row(rows: Sequence[Sequence[str]], marker: str) -> int:
    """Return the index of the first row having a cell that contains marker.

    Raises:
        HeaderNotFoundError: no such row in the whole sheet
    """
    for i, row in enumerate(rows):
        if any(marker in cell for cell in row):
            return i
    raise HeaderNotFoundError(f"header row not found (no cell contains '{marker}')")


def find_columns(header: Sequence[str], labels: ColumnLabels) -> ColumnIndexes:
    """Locate the column indexes by exact header label match.

    The first matching cell wins for each label.

    Raises:
        MissingColumnsError: name, quantity or amount label absent
    """
    found: dict[str, int] = {}
    wanted = {
        "name": labels.name,
        "quantity": labels.quantity,
        "amount": labels.amount,
        "date": labels.date,
    }
    for i, cell in enumerate(header):
        for key, label in wanted.items():
            if key not in found and cell == label:
                found[key] = i
                break

    missing = [wanted[k] for k in ("name", "quantity", "amount") if k not in found]
    if missing:
        raise MissingColumnsError(missing)
    return ColumnIndexes(
        name=found["name"],
        quantity=found["quantity"],
        amount=found["amount"],
        date=found.get("date"),
    )


def resolve_report_date(rows: Sequence[Sequence[str]], header_row: int, date_index: int | None) -> str:
    """First non-empty date cell strictly below the header, else UNKNOWN_DATE."""
    if date_index is None:
        return UNKNOWN_DATE
    for row in rows[header_row + 1:]:
        value = _cell(row, date_index)
        if value != "":
            return value
    return UNKNOWN_DATE


def extract_rows(rows: Sequence[Sequence[str]], labels: ColumnLabels | None = None) -> ExtractedSheet:
    """Run header/column discovery and collect the data rows below the header.

    Raises:
        HeaderNotFoundError: header marker not found anywhere
        MissingColumnsError: a mandatory column is missing
    """
    labels = labels or ColumnLabels()
    header_row = find_header_row(rows, labels.header_marker)
    columns = find_columns(rows[header_row], labels)
    report_date = resolve_report_date(rows, header_row, columns.date)

    raw_rows: list[RawRow] = []
    skipped = 0
    for offset, row in enumerate(rows[header_row + 1:], start=header_row + 1):
        if len(row) <= columns.name or row[columns.name] == "":
            skipped += 1
            continue
        name = row[columns.name]
        # 袋・包装料金行 (Punga ...) は商品ではない
        if labels.exclusion_marker and labels.exclusion_marker in name:
            skipped += 1
            continue
        raw_rows.append(
            RawRow(
                name=name,
                quantity=_cell(row, columns.quantity),
                amount=_cell(row, columns.amount),
                date=_cell(row, columns.date) if columns.date is not None else None,
                row_number=offset,
            )
        )

    return ExtractedSheet(
        report_date=report_date,
        header_row_index=header_row,
        columns=columns,
        rows=raw_rows,
        skipped_rows=skipped,
    )
