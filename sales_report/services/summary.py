from __future__ import annotations

from dataclasses import dataclass

"""SUMMARY line rendering for the analyze command.

Format:
SUMMARY files={files} success={success} failed={failed} items={items} total={total}

``items`` counts distinct items over all successful files and ``total`` is the
sum of their reports' grand totals (rendered items only), two decimals.
"""

__all__ = [
    "RunStats",
    "render_summary_line",
]


@dataclass
class RunStats:
    """Counters accumulated over one CLI analyze call."""
    files: int = 0
    success: int = 0
    failed: int = 0
    items: int = 0
    total: float = 0.0


def render_summary_line(stats: RunStats) -> str:
    """Render the SUMMARY line.

    Examples:
        >>> render_summary_line(RunStats(files=2, success=1, failed=1, items=3, total=75.0))
        'SUMMARY files=2 success=1 failed=1 items=3 total=75.00'
    """
    return (
        f"SUMMARY files={stats.files} "
        f"success={stats.success} "
        f"failed={stats.failed} "
        f"items={stats.items} "
        f"total={stats.total:.2f}"
    )
