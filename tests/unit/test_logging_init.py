from __future__ import annotations

import logging
from io import StringIO

from linesheet.logging.init import LabeledFormatter, SUMMARY_LEVEL, log_summary, reset_logging, setup_logging


def test_setup_logging_creates_logger_with_labeled_formatter():
    logger = setup_logging()
    assert logger.name == "linesheet"
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, LabeledFormatter)
    assert logger.propagate is False


def test_setup_logging_is_idempotent():
    first = setup_logging()
    second = setup_logging()
    assert first is second
    assert len(second.handlers) == 1


def test_setup_logging_debug_lowers_level():
    logger = setup_logging()
    setup_logging(debug=True)
    assert logger.level == logging.DEBUG
    assert logger.handlers[0].level == logging.DEBUG


def test_labeled_prefixes():
    captured = StringIO()
    logger = logging.getLogger("test_linesheet_labels")
    logger.setLevel(logging.INFO)
    for h in logger.handlers[:]:
        logger.removeHandler(h)
    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")
    handler = logging.StreamHandler(captured)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)
    logger.propagate = False

    logger.info("Test info message")
    logger.warning("Test warning message")
    logger.error("Test error message")
    logger.log(SUMMARY_LEVEL, "Test summary message")

    lines = captured.getvalue().strip().split("\n")
    assert lines == [
        "INFO Test info message",
        "WARN Test warning message",
        "ERROR Test error message",
        "SUMMARY Test summary message",
    ]


def test_log_summary_configures_logging_on_first_use(capsys):
    log_summary("variant=internal")
    assert capsys.readouterr().out == "SUMMARY variant=internal\n"


def test_reset_logging_drops_handler():
    logger = setup_logging()
    reset_logging()
    assert logger.handlers == []
    assert setup_logging() is logger
    assert len(logger.handlers) == 1


def test_child_module_logs_reach_linesheet_handler(capsys):
    setup_logging()
    logging.getLogger("linesheet.services.view_model").info("loaded 3 client line sheet items")
    log_summary("variant=client")
    out = capsys.readouterr().out
    assert "INFO loaded 3 client line sheet items" in out
    assert "SUMMARY variant=client" in out
