"""
------------------------------------------------------------------------------
Project:        EstateBook
File:           gui/displayable_list.py
Version:        1.0.0
Description:    List panel showing buyers or sellers. Subscribes to an
                observable model view and re-renders on every change.
------------------------------------------------------------------------------
"""

from PyQt6.QtWidgets import QWidget, QVBoxLayout, QLabel, QListWidget, QListWidgetItem, QAbstractItemView
from PyQt6.QtCore import Qt

from core.messages import format_tags
from core.models.person import Person, Seller
from core.observable import ObservableSequence


def format_card(index: int, record: Person) -> str:
    """Multi-line card text for one list row."""
    lines = [f"{index}. {record.name}", f"Phone: {record.phone}", f"Email: {record.email}",
             f"Home: {record.address}"]
    if isinstance(record, Seller):
        lines.append(f"Selling: {record.selling_address}")
    lines.append(f"House: {record.house_info}")
    if record.tags:
        lines.append(format_tags(record.tags))
    return "\n".join(lines)


class DisplayableListPanel(QWidget):
    """
    Titled list bound to an ObservableSequence of buyers or sellers.
    Call detach() before dropping the panel to stop receiving updates.
    """

    def __init__(self, title: str, source: ObservableSequence, parent=None):
        super().__init__(parent)
        self.source = source

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.title_label = QLabel(title)
        self.title_label.setStyleSheet("font-weight: bold;")
        layout.addWidget(self.title_label)

        self.list_widget = QListWidget()
        self.list_widget.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.list_widget.setAlternatingRowColors(True)
        layout.addWidget(self.list_widget)

        self.source.changed.connect(self.refresh)
        self._attached = True
        self.refresh()

    def refresh(self):
        self.list_widget.clear()
        for index, record in enumerate(self.source, start=1):
            item = QListWidgetItem(format_card(index, record))
            item.setData(Qt.ItemDataRole.UserRole, record)
            self.list_widget.addItem(item)

    def count(self) -> int:
        return self.list_widget.count()

    def detach(self):
        if self._attached:
            self.source.changed.disconnect(self.refresh)
            self._attached = False
