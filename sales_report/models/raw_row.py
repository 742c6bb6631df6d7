from __future__ import annotations

from dataclasses import dataclass

"""RawRow model for the sales report tool.

RawRow is one data row taken from below the header of a POS export. Quantity and
amount stay as the raw cell text; they are parsed only when the row is folded
into an Item.
"""

__all__ = [
    "RawRow",
]


@dataclass(frozen=True)
class RawRow:
    """One spreadsheet data row after column discovery.

    The row_number refers to the 0-based index of the row in the decoded sheet.
    """
    name: str  # Item name exactly as written in the sheet
    quantity: str  # Locale formatted decimal text (may be empty / garbage)
    amount: str  # Locale formatted decimal text (may be empty / garbage)
    date: str | None = None  # Date cell text, None when the sheet has no date column
    row_number: int = -1  # 不明な場合 -1
