"""
------------------------------------------------------------------------------
Project:        EstateBook
File:           tests/unit/test_logger.py
Version:        1.0.0
Description:    Unit tests for the centralized logging system.
------------------------------------------------------------------------------
"""

import logging
from core.logger import setup_logging, get_logger, set_component_level, log_command


def flush_handlers():
    for handler in logging.getLogger("estatebook").handlers:
        handler.flush()


def test_logger_namespace():
    """Verify that get_logger returns a child of the estatebook root."""
    logger = get_logger("storage")
    assert logger.name == "estatebook.storage"
    assert isinstance(logger, logging.Logger)
    assert get_logger("estatebook.model") is logging.getLogger("estatebook.model")


def test_logging_to_file(tmp_path):
    """Verify that logs are correctly written to a file."""
    log_file = tmp_path / "logs" / "app.log"
    setup_logging(level="DEBUG", log_file=str(log_file))

    get_logger("test").debug("Logging to file test message")
    flush_handlers()

    assert log_file.exists()
    assert "Logging to file test message" in log_file.read_text(encoding="utf-8")


def test_setup_replaces_handlers(tmp_path):
    setup_logging(level="INFO", log_file=str(tmp_path / "a.log"))
    setup_logging(level="INFO", log_file=str(tmp_path / "b.log"))
    assert len(logging.getLogger("estatebook").handlers) == 2


def test_component_level_overrides(tmp_path):
    """Verify that specific components can have different log levels."""
    log_file = tmp_path / "component.log"
    setup_logging(level="INFO", log_file=str(log_file),
                  component_levels={"test_parser": "DEBUG"})

    get_logger("test_parser").debug("PARSER DEBUG MESSAGE")
    get_logger("test_storage").debug("STORAGE DEBUG MESSAGE")
    flush_handlers()

    content = log_file.read_text(encoding="utf-8")
    assert "PARSER DEBUG MESSAGE" in content
    assert "STORAGE DEBUG MESSAGE" not in content

    set_component_level("test_parser", "NOTSET")


def test_quiet_default_mode(tmp_path):
    """Verify that the system is quiet at WARNING level."""
    log_file = tmp_path / "quiet.log"
    setup_logging(level="WARNING", log_file=str(log_file))

    get_logger("core").info("THIS SHOULD NOT APPEAR")
    flush_handlers()

    assert "THIS SHOULD NOT APPEAR" not in log_file.read_text(encoding="utf-8")


def test_log_command_records_outcome(tmp_path):
    log_file = tmp_path / "commands.log"
    setup_logging(level="DEBUG", log_file=str(log_file))

    log_command("list", feedback="Listed all buyers and sellers")
    log_command("foo", error="Unknown command")
    flush_handlers()

    content = log_file.read_text(encoding="utf-8")
    assert "CMD: 'list' | OK: Listed all buyers and sellers" in content
    assert "CMD: 'foo' | ERROR: Unknown command" in content

    setup_logging(level="WARNING")
