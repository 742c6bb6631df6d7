# Shared pytest fixtures
from __future__ import annotations

import tempfile
from collections.abc import Callable
from pathlib import Path

import pandas as pd
import pytest

from sales_report.logging.init import reset_logging

HEADER = ["Nr.", "Data", "Denumire marfa", "Cantitate", "Pret", "Suma cu TVA fără reducere"]


@pytest.fixture(autouse=True)
def _fresh_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        monkeypatch.delenv("SALES_REPORT_CONFIG", raising=False)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """display_limit: 30
delivery_char_limit: 4000
history_path: reports.json
locale: en
columns:
  name: Denumire marfa
  quantity: Cantitate
  amount: Suma cu TVA fără reducere
  date: Data
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "report.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def pos_rows() -> list[list[str]]:
    """A small decoded POS export: title lines, header, data, fee line, footer."""
    return [
        ["Raport vanzari"],
        ["Cafenea Centru", "", "Perioada: 01.05.2024"],
        [],
        HEADER,
        ["1", "01.05.2024", "Latte", "2", "25", "50"],
        ["2", "01.05.2024", "Croissant", "3", "20", "60"],
        ["3", "01.05.2024", "latte", "1", "25", "25"],
        ["4", "01.05.2024", "Punga cadou", "1", "2", "2"],
        ["5", "01.05.2024", "Americano", "1,5", "20", "30,50"],
        ["6", "01.05.2024", "Croissant", "1", "20", "20"],
        ["", "", "", "", "", ""],
        ["Total", "", "", "", "", "187,50"],
    ]


def _write_workbook(path: Path, rows: list[list[object]], sheet: str = "Sheet1") -> Path:
    with pd.ExcelWriter(path) as writer:
        pd.DataFrame(rows).to_excel(writer, sheet_name=sheet, header=False, index=False)
    return path


@pytest.fixture()
def make_workbook(temp_workdir: Path) -> Callable[..., Path]:
    def _make(name: str, rows: list[list[object]], sheet: str = "Sheet1") -> Path:
        return _write_workbook(temp_workdir / "data" / name, rows, sheet)
    return _make
