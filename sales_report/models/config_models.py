from __future__ import annotations

from dataclasses import dataclass, field

"""Config dataclasses for the sales report tool.

These are the typed form of config/report.yml after loading and validation in
sales_report/config/loader.py. Every key is optional in YAML; the defaults
below reproduce the POS export layout the tool was written for.
"""

__all__ = [
    "ColumnLabels",
    "ReportConfig",
    "SUPPORTED_LOCALES",
]

SUPPORTED_LOCALES = ("en", "ru")


@dataclass(frozen=True)
class ColumnLabels:
    """Header labels and markers of the POS export sheet.

    name / quantity / amount / date are matched exactly against header cells.
    header_marker is matched as a substring to find the header row.
    exclusion_marker is matched as a substring of item names (packaging fee lines).
    """
    name: str = "Denumire marfa"
    quantity: str = "Cantitate"
    amount: str = "Suma cu TVA fără reducere"
    date: str = "Data"
    header_marker: str = "Denumire marfa"
    exclusion_marker: str = "Punga"


@dataclass(frozen=True)
class ReportConfig:
    """Root configuration object for analysis and delivery."""
    display_limit: int = 30  # Max items rendered in the report text
    delivery_char_limit: int = 4000  # Longer texts are replaced by a notice
    history_path: str = "reports.json"  # Report history JSON file
    locale: str = "en"  # Label language for rendered text
    priority_items: tuple[str, ...] | None = None  # None -> built-in drinks list
    columns: ColumnLabels = field(default_factory=ColumnLabels)
