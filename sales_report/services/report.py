from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..models.analysis_result import UNKNOWN_DATE
from ..models.item import Item
from .labels import ReportLabels, get_labels

"""Report text rendering for ranked sales items.

Layout:

    📅 Report date: 01.05.2024
    📊 Sales report:

    Latte                                          2.00      50.00
    ...

    ... and 3 more items. Full report is in the file.

Only the first ``display_limit`` items are rendered and the returned total
covers exactly those items, not the whole ranked list.
"""

__all__ = [
    "DEFAULT_DISPLAY_LIMIT",
    "NAME_WIDTH",
    "RenderedReport",
    "format_item_line",
    "render_report",
]

DEFAULT_DISPLAY_LIMIT = 30
NAME_WIDTH = 40


@dataclass(frozen=True)
class RenderedReport:
    text: str
    total_sum: float  # Sum over rendered items only
    rendered_count: int
    hidden_count: int


def format_item_line(item: Item) -> str:
    """Fixed width line: name (40, left aligned, truncated), quantity, sum."""
    return f"{item.name:<{NAME_WIDTH}.{NAME_WIDTH}} {item.quantity:10.2f} {item.sum:10.2f}"


def render_report(
    ranked: Sequence[Item],
    report_date: str,
    *,
    display_limit: int = DEFAULT_DISPLAY_LIMIT,
    labels: ReportLabels | None = None,
) -> RenderedReport:
    """Render the bounded report text and its grand total.

    Never fails: an empty ranked list renders the header block only.
    """
    labels = labels or get_labels()
    shown_date = labels.unknown_date if report_date == UNKNOWN_DATE else report_date

    lines = [labels.report_date.format(date=shown_date), labels.title, ""]
    total = 0.0
    shown = ranked[:max(display_limit, 0)]
    for item in shown:
        total += item.sum
        lines.append(format_item_line(item))
    text = "\n".join(lines) + "\n"

    hidden = len(ranked) - len(shown)
    if hidden > 0:
        text += "\n" + labels.overflow.format(count=hidden)

    return RenderedReport(
        text=text,
        total_sum=total,
        rendered_count=len(shown),
        hidden_count=hidden,
    )
