from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path

import pytest

from sales_report.history.store import HistoryError, ReportHistory
from sales_report.models.analysis_result import UNKNOWN_DATE, AnalysisResult
from sales_report.models.report_record import ReportRecord
from sales_report.services.labels import get_labels


def _record(date: str = "01.05.2024", total: float = 75.0) -> ReportRecord:
    return ReportRecord(date=date, text=f"report {date}", total_sum=total, timestamp="2024-05-01T10:00:00Z")


def test_missing_file_is_empty_history(tmp_path: Path):
    history = ReportHistory(tmp_path / "reports.json")
    assert history.entries() == []
    assert len(history) == 0


def test_append_persists_json_array(tmp_path: Path):
    path = tmp_path / "reports.json"
    history = ReportHistory(path)
    history.append(_record("01.05.2024", 75.0))
    history.append(_record("02.05.2024", 12.5))

    data = json.loads(path.read_text(encoding="utf-8"))
    assert [d["date"] for d in data] == ["01.05.2024", "02.05.2024"]
    assert set(data[0].keys()) == {"date", "text", "total_sum", "timestamp"}

    reloaded = ReportHistory(path)
    assert reloaded.entries() == history.entries()
    assert reloaded.get(2).total_sum == 12.5


def test_append_creates_parent_directory(tmp_path: Path):
    path = tmp_path / "var" / "history" / "reports.json"
    ReportHistory(path).append(_record())
    assert path.exists()


def test_get_is_one_based(tmp_path: Path):
    history = ReportHistory(tmp_path / "reports.json")
    history.append(_record("a"))
    assert history.get(1).date == "a"
    with pytest.raises(IndexError):
        history.get(0)
    with pytest.raises(IndexError):
        history.get(2)


def test_corrupt_file_raises_history_error(tmp_path: Path):
    path = tmp_path / "reports.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(HistoryError):
        ReportHistory(path).entries()


def test_non_array_and_bad_entries_raise_history_error(tmp_path: Path):
    path = tmp_path / "reports.json"
    path.write_text('{"date": "x"}', encoding="utf-8")
    with pytest.raises(HistoryError):
        ReportHistory(path).entries()
    path.write_text('[{"date": "x"}]', encoding="utf-8")
    with pytest.raises(HistoryError):
        ReportHistory(path).entries()


def test_format_entry():
    assert ReportHistory.format_entry(1, _record("01.05.2024", 75.0)) == "1. 01.05.2024 - 75.00 lei"
    ru = ReportHistory.format_entry(3, _record(UNKNOWN_DATE, 2.5), get_labels("ru"))
    assert ru == "3. неизвестна - 2.50 лей"


def test_analysis_result_to_record():
    result = AnalysisResult(report_date="01.05.2024", text="t", total_sum=75.0)
    rec = result.to_record(datetime(2024, 5, 1, 10, 0, tzinfo=UTC))
    assert rec == ReportRecord(date="01.05.2024", text="t", total_sum=75.0, timestamp="2024-05-01T10:00:00Z")
    assert result.to_record().timestamp.endswith("Z")
