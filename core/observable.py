"""
------------------------------------------------------------------------------
Project:        EstateBook
File:           core/observable.py
Version:        1.0.0
Description:    Observable sequences for the model views. Every sequence is a
                QObject emitting 'changed' after its content changed; the GUI
                list panels connect to it to refresh.
------------------------------------------------------------------------------
"""

from typing import Any, Callable, Iterable, List, Optional

from PyQt6.QtCore import QObject, pyqtSignal

from core.logger import get_logger

logger = get_logger("model.observable")

Predicate = Callable[[Any], bool]
SortKey = Callable[[Any], Any]


class ObservableSequence(QObject):
    """
    Read-only sequence protocol (len, index, iteration, ==) plus a
    'changed' signal. Subclasses provide _snapshot() and emit changed.
    """
    changed = pyqtSignal()

    def _snapshot(self) -> List[Any]:
        raise NotImplementedError

    def __getitem__(self, index):
        return self._snapshot()[index]

    def __len__(self) -> int:
        return len(self._snapshot())

    def __iter__(self):
        return iter(list(self._snapshot()))

    def __contains__(self, item: Any) -> bool:
        return item in self._snapshot()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ObservableSequence):
            return list(self) == list(other)
        if isinstance(other, list):
            return list(self) == other
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    # Identity hash, value equality
    __hash__ = object.__hash__

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class ObservableList(ObservableSequence):
    """Mutable backing list. Every mutation emits changed once."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        super().__init__()
        self._items: List[Any] = list(items or [])

    def _snapshot(self) -> List[Any]:
        return self._items

    def append(self, item: Any) -> None:
        self._items.append(item)
        self.changed.emit()

    def remove(self, item: Any) -> None:
        self._items.remove(item)
        self.changed.emit()

    def replace_at(self, index: int, item: Any) -> None:
        self._items[index] = item
        self.changed.emit()

    def set_all(self, items: Iterable[Any]) -> None:
        self._items = list(items)
        self.changed.emit()

    def index(self, item: Any, *args) -> int:
        return self._items.index(item, *args)


class ReadOnlyView(ObservableSequence):
    """Unmodifiable view of another observable sequence; relays its changed signal."""

    def __init__(self, source: ObservableSequence) -> None:
        super().__init__()
        self._source = source
        source.changed.connect(self.changed)

    def _snapshot(self) -> List[Any]:
        return list(self._source)


class FilteredSortedList(ObservableSequence):
    """
    Two stage pipeline over a source sequence: a predicate filter followed by
    an optional sort key. Recomputed whenever the source, the predicate or
    the sort key changes.

    A sort key may carry a boolean 'reverse' attribute for descending order.
    """

    def __init__(self, source: ObservableSequence, predicate: Predicate,
                 sort_key: Optional[SortKey] = None) -> None:
        super().__init__()
        self._source = source
        self._predicate = predicate
        self._sort_key = sort_key
        self._items: List[Any] = []
        self._recompute()
        source.changed.connect(self._on_source_changed)

    @property
    def predicate(self) -> Predicate:
        return self._predicate

    @property
    def sort_key(self) -> Optional[SortKey]:
        return self._sort_key

    def _snapshot(self) -> List[Any]:
        return self._items

    def set_predicate(self, predicate: Predicate) -> None:
        self._predicate = predicate
        self._recompute()
        self.changed.emit()

    def set_sort_key(self, sort_key: Optional[SortKey]) -> None:
        self._sort_key = sort_key
        self._recompute()
        self.changed.emit()

    def _on_source_changed(self) -> None:
        self._recompute()
        self.changed.emit()

    def _recompute(self) -> None:
        items = [item for item in self._source if self._predicate(item)]
        if self._sort_key is not None:
            # sorted() is stable, ties keep insertion order
            items = sorted(items, key=self._sort_key,
                           reverse=bool(getattr(self._sort_key, "reverse", False)))
        self._items = items
        logger.debug(f"Recomputed view: {len(self._items)} of {len(self._source)} visible")
