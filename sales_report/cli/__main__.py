from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from sales_report.config.loader import DEFAULT_CONFIG_PATH, ConfigError, load_config
from sales_report.excel.extractor import HeaderNotFoundError, MissingColumnsError, SchemaError
from sales_report.excel.reader import SourceOpenError
from sales_report.history.store import HistoryError, ReportHistory
from sales_report.logging.error_log import ErrorLogBuffer, ErrorRecord
from sales_report.logging.init import log_summary, set_debug, setup_logging
from sales_report.models.config_models import ReportConfig
from sales_report.services.analyzer import Analyzer
from sales_report.services.delivery import prepare_message
from sales_report.services.labels import get_labels
from sales_report.services.progress import ProgressTracker
from sales_report.services.summary import RunStats, render_summary_line

"""CLI entrypoint.

    sales-report [--debug] [--config PATH] analyze FILE [FILE ...] [--no-save]
    sales-report [--debug] [--config PATH] history
    sales-report [--debug] [--config PATH] show N

Report texts go to stdout as plain text (the delivery sink); everything else
is a labeled log line. This is the only layer that turns errors into
user-visible messages.
"""

EXIT_SUCCESS_ALL = 0
EXIT_PARTIAL_FAILURE = 2
EXIT_FATAL = 1

CONFIG_ENV = "SALES_REPORT_CONFIG"
SUPPORTED_SUFFIXES = (".xlsx", ".xlsm")


def _load_env_file(path: Path, override: bool = False) -> None:
    """Load .env using python-dotenv (existing environment wins by default)."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="sales-report", description="POS spreadsheet sales report")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--config", type=Path, default=None, help=f"Config YAML (default: {DEFAULT_CONFIG_PATH})")
    sub = p.add_subparsers(dest="command", required=True)

    analyze = sub.add_parser("analyze", help="Analyse one or more .xlsx exports")
    analyze.add_argument("files", nargs="+", type=Path)
    analyze.add_argument("--no-save", action="store_true", help="Do not append results to the report history")

    sub.add_parser("history", help="List saved reports")

    show = sub.add_parser("show", help="Print a saved report")
    show.add_argument("index", type=int, help="1-based report number from 'history'")
    return p.parse_args(argv)


def _resolve_config(explicit: Path | None) -> ReportConfig:
    """Explicit --config, then $SALES_REPORT_CONFIG, then config/report.yml, then defaults.

    Raises:
        ConfigError: an explicitly named file is missing or invalid
    """
    if explicit is not None:
        return load_config(explicit)
    env_path = os.getenv(CONFIG_ENV)
    if env_path:
        return load_config(Path(env_path))
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(DEFAULT_CONFIG_PATH)
    return ReportConfig()


def _error_type(exc: Exception) -> str:
    if isinstance(exc, SourceOpenError):
        return "SOURCE_OPEN_ERROR"
    if isinstance(exc, HeaderNotFoundError):
        return "HEADER_NOT_FOUND"
    if isinstance(exc, MissingColumnsError):
        return "MISSING_COLUMNS"
    return "SCHEMA_ERROR"


def _analyze(cfg: ReportConfig, files: list[Path], save: bool) -> int:
    """Analyse each workbook, print its report and record it in the history.

    A failing workbook is logged and counted; the remaining ones still run.
    A history write failure stops the loop. SUMMARY is logged in every case.

    Returns:
        EXIT_SUCCESS_ALL, EXIT_PARTIAL_FAILURE, or EXIT_FATAL on a history error
    """
    logger = setup_logging()
    analyzer = Analyzer(cfg)
    history = ReportHistory(Path(cfg.history_path)) if save else None
    error_log = ErrorLogBuffer()
    stats = RunStats(files=len(files))
    history_failed = False

    try:
        with ProgressTracker(len(files)) as progress:
            for path in files:
                progress.start_file(path)
                if path.suffix.lower() not in SUPPORTED_SUFFIXES:
                    logger.error(f"{path.name}: unsupported file type (expected .xlsx)")
                    error_log.append(ErrorRecord.create(path.name, "UNSUPPORTED_FILE_TYPE", path.suffix))
                    stats.failed += 1
                    progress.finish_file(success=False)
                    continue
                try:
                    result = analyzer.analyze_file(path)
                except (SourceOpenError, SchemaError) as e:
                    logger.error(f"{path.name}: {e}")
                    error_log.append(ErrorRecord.create(path.name, _error_type(e), str(e)))
                    stats.failed += 1
                    progress.finish_file(success=False)
                    continue

                message = prepare_message(result.text, limit=cfg.delivery_char_limit, labels=analyzer.labels)
                if message.truncated:
                    logger.warning(f"{path.name}: report text has {len(result.text)} chars, notice sent instead")
                print(message.text)

                stats.success += 1
                stats.items += len(result.items)
                stats.total += result.total_sum
                progress.finish_file(success=True)

                if history is not None:
                    try:
                        history.append(result.to_record())
                    except HistoryError as e:
                        logger.error(f"history: {e}")
                        history_failed = True
                        break
    finally:
        flushed = error_log.flush()
        if flushed is not None:
            logger.info(f"error log written: {flushed}")

    log_summary(render_summary_line(stats)[len("SUMMARY "):])
    if history_failed:
        return EXIT_FATAL
    return EXIT_PARTIAL_FAILURE if stats.failed else EXIT_SUCCESS_ALL


def _history(cfg: ReportConfig) -> int:
    labels = get_labels(cfg.locale)
    history = ReportHistory(Path(cfg.history_path))
    records = history.entries()
    if not records:
        print(labels.no_history)
        return EXIT_SUCCESS_ALL
    for i, record in enumerate(records, start=1):
        print(ReportHistory.format_entry(i, record, labels))
    return EXIT_SUCCESS_ALL


def _show(cfg: ReportConfig, index: int) -> int:
    logger = setup_logging()
    try:
        record = ReportHistory(Path(cfg.history_path)).get(index)
    except IndexError as e:
        logger.error(f"history: {e}")
        return EXIT_FATAL
    print(record.text)
    return EXIT_SUCCESS_ALL


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # None のときのみシステム引数を読む (空リストはそのまま渡す)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"))

    if args.debug:
        set_debug(logger)
        logger.debug("debug mode enabled")

    try:
        cfg = _resolve_config(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    try:
        if args.command == "analyze":
            return _analyze(cfg, args.files, save=not args.no_save)
        if args.command == "history":
            return _history(cfg)
        return _show(cfg, args.index)
    except HistoryError as e:
        logger.error(f"history: {e}")
        return EXIT_FATAL


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
