"""
------------------------------------------------------------------------------
Project:        EstateBook
File:           gui/main_window.py
Version:        1.0.0
Description:    Main application window: command box, result display and the
                buyer/seller lists side by side.
------------------------------------------------------------------------------
"""

from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QSplitter, QLabel, QStatusBar
)
from PyQt6.QtGui import QAction, QCloseEvent, QKeySequence
from PyQt6.QtCore import Qt

from core.commands import CommandResult
from core.logger import get_logger
from core.logic import LogicManager
from core.user_prefs import GuiSettings
from gui.command_box import CommandBox
from gui.displayable_list import DisplayableListPanel
from gui.help_window import HelpWindow
from gui.result_display import ResultDisplay

logger = get_logger("gui.main_window")


class MainWindow(QMainWindow):
    """
    Main application window for EstateBook.
    """
    def __init__(self, logic: LogicManager) -> None:
        super().__init__()
        self.logic = logic
        self.help_window = None

        self.setWindowTitle(self.tr("EstateBook"))
        self.init_ui()
        self.create_menu_bar()
        self.restore_gui_settings()

    def init_ui(self):
        central = QWidget()
        layout = QVBoxLayout(central)

        self.command_box = CommandBox(self.logic.execute)
        self.command_box.command_succeeded.connect(self.on_command_succeeded)
        self.command_box.command_failed.connect(self.on_command_failed)
        layout.addWidget(self.command_box)

        self.result_display = ResultDisplay()
        layout.addWidget(self.result_display)

        self.list_splitter = QSplitter(Qt.Orientation.Horizontal)
        self.buyer_panel = DisplayableListPanel(self.tr("Buyers"), self.logic.filtered_buyer_list)
        self.seller_panel = DisplayableListPanel(self.tr("Sellers"), self.logic.filtered_seller_list)
        self.list_splitter.addWidget(self.buyer_panel)
        self.list_splitter.addWidget(self.seller_panel)
        layout.addWidget(self.list_splitter, 1)

        self.setCentralWidget(central)

        self.setStatusBar(QStatusBar())
        self.file_path_label = QLabel(str(self.logic.address_book_file_path))
        self.statusBar().addPermanentWidget(self.file_path_label)

        self.command_box.line_edit.setFocus()

    def create_menu_bar(self):
        menubar = self.menuBar()

        file_menu = menubar.addMenu(self.tr("&File"))
        self.exit_action = QAction(self.tr("E&xit"), self)
        self.exit_action.setShortcut(QKeySequence("Ctrl+Q"))
        self.exit_action.triggered.connect(self.close)
        file_menu.addAction(self.exit_action)

        help_menu = menubar.addMenu(self.tr("&Help"))
        self.help_action = QAction(self.tr("&Help"), self)
        self.help_action.setShortcut(QKeySequence("F1"))
        self.help_action.triggered.connect(self.handle_help)
        help_menu.addAction(self.help_action)

    def restore_gui_settings(self):
        settings = self.logic.gui_settings
        self.resize(settings.window_width, settings.window_height)
        if settings.window_x is not None and settings.window_y is not None:
            self.move(settings.window_x, settings.window_y)

    def current_gui_settings(self) -> GuiSettings:
        return GuiSettings(
            window_width=self.width(),
            window_height=self.height(),
            window_x=self.x(),
            window_y=self.y(),
        )

    def on_command_succeeded(self, result: CommandResult):
        self.result_display.set_feedback_to_user(result.feedback_to_user)
        if result.show_help:
            self.handle_help()
        if result.exit:
            self.close()

    def on_command_failed(self, message: str):
        self.result_display.set_feedback_to_user(message)

    def handle_help(self):
        if self.help_window is None:
            self.help_window = HelpWindow(self)
        self.help_window.show_help()

    def closeEvent(self, event: QCloseEvent):
        """Store the window geometry in the user prefs before closing."""
        self.logic.gui_settings = self.current_gui_settings()
        if self.help_window is not None:
            self.help_window.close()
        self.buyer_panel.detach()
        self.seller_panel.detach()
        logger.debug("Main window closed")
        super().closeEvent(event)
