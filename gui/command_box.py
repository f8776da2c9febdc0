"""
------------------------------------------------------------------------------
Project:        EstateBook
File:           gui/command_box.py
Version:        1.0.0
Description:    Single-line input where the user types commands. Failed
                commands keep their text and switch the box to error style.
------------------------------------------------------------------------------
"""

from typing import Callable

from PyQt6.QtWidgets import QWidget, QHBoxLayout, QLineEdit
from PyQt6.QtCore import pyqtSignal

from core.commands import CommandResult
from core.exceptions import EstateBookError, ParseError
from core.logger import get_logger

logger = get_logger("gui.command_box")

ERROR_STYLE = "QLineEdit { border: 1px solid #d32f2f; color: #d32f2f; }"


class CommandBox(QWidget):
    """
    Emits command_succeeded(CommandResult) or command_failed(str) after each
    submitted line.
    """
    command_succeeded = pyqtSignal(object)
    command_failed = pyqtSignal(str)

    def __init__(self, executor: Callable[[str], CommandResult], parent=None):
        super().__init__(parent)
        self.executor = executor

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.line_edit = QLineEdit()
        self.line_edit.setPlaceholderText(self.tr("Enter command here..."))
        self.line_edit.returnPressed.connect(self.handle_command_entered)
        self.line_edit.textChanged.connect(self.set_style_to_default)
        layout.addWidget(self.line_edit)

    def handle_command_entered(self):
        command_text = self.line_edit.text()
        if not command_text.strip():
            return

        try:
            result = self.executor(command_text)
        except EstateBookError as e:
            message = str(e)
            if isinstance(e, ParseError) and e.detail:
                message += f"\n\nReason: {e.detail}"
            logger.info(f"Command failed: {e}")
            self.set_style_to_indicate_failure()
            self.command_failed.emit(message)
            return

        self.line_edit.clear()
        self.command_succeeded.emit(result)

    def set_style_to_default(self):
        self.line_edit.setStyleSheet("")

    def set_style_to_indicate_failure(self):
        self.line_edit.setStyleSheet(ERROR_STYLE)

    def has_error_style(self) -> bool:
        return self.line_edit.styleSheet() == ERROR_STYLE
