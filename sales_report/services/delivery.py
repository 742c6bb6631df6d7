from __future__ import annotations

from dataclasses import dataclass

from .labels import ReportLabels, get_labels

"""Delivery policy for rendered reports.

Chat messages have a size limit, so a report text is delivered as is only
when it is shorter than ``limit`` characters; otherwise a "too long" notice
is delivered in its place.
"""

__all__ = [
    "DEFAULT_CHAR_LIMIT",
    "DeliveryMessage",
    "prepare_message",
]

DEFAULT_CHAR_LIMIT = 4000


@dataclass(frozen=True)
class DeliveryMessage:
    text: str
    truncated: bool = False


def prepare_message(text: str, *, limit: int = DEFAULT_CHAR_LIMIT, labels: ReportLabels | None = None) -> DeliveryMessage:
    """Choose what is actually sent for a rendered report.

    Args:
        text: Rendered report text
        limit: Texts of this length or longer are replaced by a notice
        labels: Locale labels for the notice (default locale when None)

    Returns:
        DeliveryMessage with the text unchanged, or the notice and
        truncated=True
    """
    if len(text) < limit:
        return DeliveryMessage(text=text)
    labels = labels or get_labels()
    return DeliveryMessage(text=labels.too_long, truncated=True)
