from __future__ import annotations

import logging
from io import StringIO
from unittest.mock import patch

from roster_csv.logging.init import (
    APP_LOGGER_NAME,
    SUMMARY_LEVEL,
    LabeledFormatter,
    get_logger,
    log_summary,
    setup_logging,
)


def test_setup_logging_creates_logger_with_labeled_formatter(fresh_logging):
    logger = setup_logging()
    assert logger.name == APP_LOGGER_NAME
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, LabeledFormatter)
    assert logger.propagate is False


def test_logging_labeled_prefixes():
    captured_output = StringIO()
    logger = logging.getLogger("test_roster_csv_labels")
    logger.setLevel(logging.INFO)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")
    handler = logging.StreamHandler(captured_output)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)
    logger.propagate = False

    logger.info("Test info message")
    logger.warning("Test warning message")
    logger.error("Test error message")
    logger.log(SUMMARY_LEVEL, "Test summary message")

    lines = captured_output.getvalue().strip().split("\n")
    assert lines == [
        "INFO Test info message",
        "WARN Test warning message",
        "ERROR Test error message",
        "SUMMARY Test summary message",
    ]


def test_setup_logging_idempotent(fresh_logging):
    logger1 = setup_logging()
    logger2 = setup_logging()
    assert logger1 is logger2
    assert len(logger1.handlers) == 1
    assert get_logger() is logger1


def test_debug_flag_lowers_level_on_existing_logger(fresh_logging):
    logger = setup_logging()
    setup_logging(debug=True)
    assert logger.level == logging.DEBUG
    assert all(h.level == logging.DEBUG for h in logger.handlers)
    logger.setLevel(logging.INFO)


def test_module_loggers_reach_app_handler(fresh_logging, capsys):
    setup_logging()
    logging.getLogger("roster_csv.services.importer").info("from module")
    assert "INFO from module" in capsys.readouterr().out


def test_summary_level_logging(fresh_logging):
    logger = setup_logging()
    assert logging.getLevelName(SUMMARY_LEVEL) == "SUMMARY"
    with patch.object(logger, "_log") as mock_log:
        log_summary("accepted=1 added=1 duplicates=0 diagnostics=0")
    mock_log.assert_called_once()
    assert mock_log.call_args.args[0] == SUMMARY_LEVEL
