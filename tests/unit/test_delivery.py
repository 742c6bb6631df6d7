from __future__ import annotations

from sales_report.services.delivery import DEFAULT_CHAR_LIMIT, prepare_message
from sales_report.services.labels import get_labels


def test_short_text_delivered_unchanged():
    msg = prepare_message("hello")
    assert msg.text == "hello"
    assert msg.truncated is False


def test_text_at_limit_replaced_by_notice():
    msg = prepare_message("x" * DEFAULT_CHAR_LIMIT)
    assert msg.truncated is True
    assert msg.text == get_labels("en").too_long


def test_text_just_under_limit_is_kept():
    text = "x" * (DEFAULT_CHAR_LIMIT - 1)
    assert prepare_message(text).text == text


def test_custom_limit_and_locale():
    msg = prepare_message("abcdef", limit=5, labels=get_labels("ru"))
    assert msg.truncated is True
    assert msg.text == "Отчёт слишком длинный. Отправляю файл."
