from PyQt6.QtCore import Qt

from core.observable import ObservableList
from gui.displayable_list import DisplayableListPanel, format_card
from gui.help_window import HelpWindow, build_help_text


def test_format_card_buyer(alice):
    card = format_card(1, alice)
    assert card.splitlines()[0] == "1. Alice Pauline"
    assert "House: 4 room flat" in card
    assert "[friends]" in card
    assert "Selling:" not in card


def test_format_card_seller(carl):
    card = format_card(2, carl)
    assert card.splitlines()[0] == "2. Carl Kurz"
    assert "Selling: 10th street" in card
    assert "[" not in card


def test_panel_follows_source(qtbot, alice, bob):
    source = ObservableList([alice])
    panel = DisplayableListPanel("Buyers", source)
    qtbot.addWidget(panel)

    assert panel.count() == 1
    assert panel.list_widget.item(0).data(Qt.ItemDataRole.UserRole) == alice

    source.append(bob)
    assert panel.count() == 2
    assert panel.list_widget.item(1).text().startswith("2. Bob Choo")

    panel.detach()
    source.remove(alice)
    assert panel.count() == 2


def test_help_window_lists_every_command(qtbot):
    window = HelpWindow()
    qtbot.addWidget(window)
    window.show_help()

    assert window.isVisible()
    text = window.text.toPlainText()
    assert text == build_help_text()
    for word in ("addseller", "editbuyer", "sortseller", "clear", "exit"):
        assert word in text
