from __future__ import annotations

from dataclasses import dataclass

"""Localized labels for rendered reports, delivery notices and history lists.

"ru" keeps the Russian wording used by the chat bot; "en" is the default.
"""

__all__ = [
    "LABELS",
    "ReportLabels",
    "get_labels",
]


@dataclass(frozen=True)
class ReportLabels:
    report_date: str  # "{date}" placeholder
    title: str
    unknown_date: str
    overflow: str  # "{count}" placeholder
    too_long: str
    currency: str
    no_history: str


LABELS: dict[str, ReportLabels] = {
    "en": ReportLabels(
        report_date="📅 Report date: {date}",
        title="📊 Sales report:",
        unknown_date="unknown",
        overflow="... and {count} more items. Full report is in the file.",
        too_long="Report is too long. Sending it as a file.",
        currency="lei",
        no_history="No saved reports.",
    ),
    "ru": ReportLabels(
        report_date="📅 Дата отчёта: {date}",
        title="📊 Отчёт по продажам:",
        unknown_date="неизвестна",
        overflow="... и ещё {count} позиций. Полный отчёт — в файле.",
        too_long="Отчёт слишком длинный. Отправляю файл.",
        currency="лей",
        no_history="Нет сохранённых отчётов.",
    ),
}


def get_labels(locale: str = "en") -> ReportLabels:
    """Return labels for locale.

    Raises:
        KeyError: unsupported locale
    """
    try:
        return LABELS[locale]
    except KeyError:
        raise KeyError(f"unsupported locale: {locale!r} (supported: {sorted(LABELS)})") from None
