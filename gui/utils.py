from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QMessageBox


def show_data_warning(parent, title: str, text: str) -> int:
    """
    Warns about a data problem (e.g. an unreadable address book file).
    The text stays selectable so paths and reasons can be copied.
    """
    box = QMessageBox(parent)
    box.setWindowTitle(title)
    box.setIcon(QMessageBox.Icon.Warning)
    box.setText(text)
    box.setStandardButtons(QMessageBox.StandardButton.Ok)
    box.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
    return box.exec()
