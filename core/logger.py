"""
------------------------------------------------------------------------------
Project:        EstateBook
File:           core/logger.py
Version:        1.0.0
Description:    Logging setup for the 'estatebook' logger tree. Components log
                to 'estatebook.<component>' and can be tuned individually,
                e.g. {'logic.parser': 'DEBUG'}.
------------------------------------------------------------------------------
"""

import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

APP_LOGGER_NAME = "estatebook"

LOG_FORMAT = "%(asctime)s [%(levelname).4s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _parse_level(level: str, default: Optional[int] = None) -> Optional[int]:
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else default


def _build_handlers(log_file: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(str(path), encoding="utf-8"))
    return handlers


def setup_logging(
    level: str = "WARNING",
    log_file: Optional[str] = None,
    component_levels: Optional[Dict[str, str]] = None
) -> None:
    """
    (Re)configures the application logger. Calling it again replaces the
    previous handlers.

    Args:
        level: Level of the 'estatebook' root (DEBUG, INFO, WARNING, ERROR).
        log_file: Optional file receiving the same records as stdout.
        component_levels: Per component overrides, keyed without the
            'estatebook.' prefix.
    """
    root = logging.getLogger(APP_LOGGER_NAME)
    for old in list(root.handlers):
        root.removeHandler(old)
        old.close()

    root.setLevel(_parse_level(level, logging.WARNING))
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    for handler in _build_handlers(log_file):
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for component, component_level in (component_levels or {}).items():
        set_component_level(component, component_level)


def get_logger(name: str) -> logging.Logger:
    """Logger for a component, namespaced below 'estatebook'."""
    prefix = APP_LOGGER_NAME + "."
    return logging.getLogger(name if name.startswith(prefix) else prefix + name)


def set_component_level(component: str, level: str) -> None:
    """Changes the level of one component at runtime. Unknown levels are ignored."""
    numeric = _parse_level(level)
    if numeric is not None:
        get_logger(component).setLevel(numeric)


def log_command(command_text: str, feedback: Optional[str] = None, error: Optional[str] = None) -> None:
    """
    Records a user command and its outcome at DEBUG level on
    'estatebook.logic.commands'.
    """
    logger = get_logger("logic.commands")
    if not logger.isEnabledFor(logging.DEBUG):
        return
    parts = [f"CMD: {command_text!r}"]
    if feedback is not None:
        parts.append(f"OK: {feedback}")
    if error is not None:
        parts.append(f"ERROR: {error}")
    logger.debug(" | ".join(parts))
