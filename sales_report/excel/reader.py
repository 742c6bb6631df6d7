from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from typing import Any

import pandas as pd

"""Excel reader: decode a POS export workbook into rows of cell text.

The sheet is read without header inference; header discovery happens later in
sales_report.excel.extractor because the header row can sit anywhere in the
export (title lines, shop name, filters ... come first).

Cells are decoded to the text a spreadsheet user sees, and trailing empty cells
are dropped so rows are ragged like the sheet itself.
"""

__all__ = [
    "SourceOpenError",
    "cell_text",
    "read_sheet_rows",
]

DATE_FMT = "%d.%m.%Y"
DATETIME_FMT = "%d.%m.%Y %H:%M:%S"


class SourceOpenError(Exception):
    """Raised when the workbook cannot be opened or decoded."""


def cell_text(value: Any) -> str:
    """Decode one raw pandas cell value to display text.

    - None / NaN / NaT -> ""
    - integral floats -> integer text (2.0 -> "2")
    - datetimes -> dd.mm.yyyy (time appended when present)
    - strings are returned verbatim (no trimming)
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (datetime, pd.Timestamp)):
        if pd.isna(value):
            return ""
        if (value.hour, value.minute, value.second) == (0, 0, 0):
            return value.strftime(DATE_FMT)
        return value.strftime(DATETIME_FMT)
    if isinstance(value, date):
        return value.strftime(DATE_FMT)
    if isinstance(value, bool):
        return str(value).upper()
    if isinstance(value, float):
        if pd.isna(value):
            return ""
        if value.is_integer():
            return str(int(value))
        return repr(value)
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        pass
    return str(value)


def _trim_trailing_empty(cells: list[str]) -> list[str]:
    end = len(cells)
    while end > 0 and cells[end - 1] == "":
        end -= 1
    return cells[:end]


def read_sheet_rows(path: Path, sheet: str | None = None) -> list[list[str]]:
    """Read one sheet of an Excel file as a list of ragged text rows.

    Parameters
    ----------
    path: Excel ファイルパス
    sheet: シート名 (None なら先頭シート)

    Raises
    ------
    SourceOpenError: file missing, not a workbook, or sheet not found
    """
    try:
        xls = pd.ExcelFile(path)
    except Exception as e:
        raise SourceOpenError(f"cannot open workbook {Path(path).name}: {e}") from e

    with xls:
        if not xls.sheet_names:
            raise SourceOpenError(f"workbook {Path(path).name} has no sheets")
        if sheet is None:
            sheet_name = xls.sheet_names[0]
        elif sheet in xls.sheet_names:
            sheet_name = sheet
        else:
            raise SourceOpenError(f"sheet '{sheet}' not found in {Path(path).name}")
        try:
            # keep_default_na=False: "NA" / "null" 等の文字列はそのまま残す
            df = xls.parse(sheet_name, header=None, dtype=object, keep_default_na=False)
        except Exception as e:
            raise SourceOpenError(f"cannot read sheet '{sheet_name}': {e}") from e

    rows: list[list[str]] = []
    for raw in df.itertuples(index=False, name=None):
        rows.append(_trim_trailing_empty([cell_text(v) for v in raw]))
    return rows
