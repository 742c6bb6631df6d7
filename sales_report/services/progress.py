from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from tqdm import tqdm
from tqdm.std import tqdm as TqdmType

"""Progress display with tqdm (TTY only).

Shown while several workbooks are analysed in one CLI call. The bar ticks once
per workbook and its postfix carries the running ok / failed counts. In
non-TTY environments (CI, pipes) the bar is disabled so no control sequences
end up in captured output.
"""

__all__ = [
    "ProgressTracker",
    "is_tty_enabled",
]


def is_tty_enabled() -> bool:
    return sys.stdout.isatty()


class ProgressTracker:
    """Workbook level progress bar with ok / failed counters.

    The counters are kept even when the bar is disabled.
    """

    def __init__(self, total_files: int, *, description: str = "Analysing files") -> None:
        """Create the tracker.

        Args:
            total_files: Number of workbooks the run will analyse
            description: Base text shown left of the bar
        """
        self.total_files = total_files
        self.description = description
        self.current_file = 0
        self.ok = 0
        self.failed = 0

        self.enabled = is_tty_enabled()
        self.pbar: TqdmType[Any] | None = None
        if self.enabled:
            self.pbar = tqdm(
                total=total_files,
                desc=description,
                unit="file",
                leave=True,
                ncols=80,
                ascii=True,
            )

    def start_file(self, file_path: Path) -> None:
        """Show the workbook being analysed next to the base description.

        Args:
            file_path: Workbook about to be analysed (only its name is shown)
        """
        self.current_file += 1
        if self.pbar is not None:
            self.pbar.set_description(f"{self.description} ({file_path.name})")

    def finish_file(self, success: bool) -> None:
        """Count the workbook as ok or failed and advance the bar by one.

        Args:
            success: False when the workbook produced no report
        """
        if success:
            self.ok += 1
        else:
            self.failed += 1
        if self.pbar is not None:
            self.pbar.set_postfix(ok=self.ok, failed=self.failed)
            self.pbar.update(1)
            self.pbar.set_description(self.description)

    def close(self) -> None:
        if self.pbar is not None:
            self.pbar.close()
            self.pbar = None

    def __enter__(self) -> ProgressTracker:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
