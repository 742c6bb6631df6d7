from __future__ import annotations

import pytest

from sales_report.excel.extractor import parse_lenient

"""Bad numeric text becomes 0.0 on purpose: POS exports contain notes and
placeholders in numeric columns and a report must still be produced."""


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2", 2.0),
        ("12.5", 12.5),
        ("12,5", 12.5),
        (" 7 ", 7.0),
        ("1 234,50", 1234.5),
        ("1.234,50", 1234.5),
        ("1,234.50", 1234.5),
        ("-3", -3.0),
        ("1.234.567", 1234567.0),
        ("1,234,567", 1234567.0),
        ("-1.234.567", -1234567.0),
        ("1 000", 1000.0),
    ],
)
def test_parse_lenient_accepts_locale_formats(text, expected):
    assert parse_lenient(text) == pytest.approx(expected)


@pytest.mark.parametrize("text", ["", "   ", "abc", "12abc", "1,2,3", "1.23.456", "1,234.567.8", "nan", "inf", "-", None])
def test_parse_lenient_coerces_garbage_to_zero(text):
    assert parse_lenient(text) == 0.0
