from PyQt6.QtWidgets import QDialog, QVBoxLayout, QPlainTextEdit, QDialogButtonBox

from core.commands import (
    AddBuyerCommand, AddSellerCommand, ClearCommand, DeleteBuyerCommand, DeleteSellerCommand,
    EditBuyerCommand, EditSellerCommand, ExitCommand, FindBuyerCommand, FindSellerCommand,
    HelpCommand, ListCommand, SortBuyerCommand, SortSellerCommand
)

HELP_COMMANDS = (
    AddBuyerCommand, AddSellerCommand, EditBuyerCommand, EditSellerCommand,
    DeleteBuyerCommand, DeleteSellerCommand, FindBuyerCommand, FindSellerCommand,
    SortBuyerCommand, SortSellerCommand, ListCommand, ClearCommand, HelpCommand, ExitCommand,
)


def build_help_text() -> str:
    return "\n\n".join(command.MESSAGE_USAGE for command in HELP_COMMANDS)


class HelpWindow(QDialog):
    """Non-modal dialog listing the usage of every command."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle(self.tr("EstateBook Help"))
        self.resize(640, 480)

        layout = QVBoxLayout(self)
        self.text = QPlainTextEdit(build_help_text())
        self.text.setReadOnly(True)
        layout.addWidget(self.text)

        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Close)
        buttons.rejected.connect(self.close)
        layout.addWidget(buttons)

    def show_help(self):
        if self.isVisible():
            self.raise_()
            self.activateWindow()
        else:
            self.show()
