from core.observable import FilteredSortedList, ObservableList, ReadOnlyView
from core.predicates import PREDICATE_SHOW_ALL


class Negate:
    reverse = True

    def __call__(self, item):
        return item


def record_changes(sequence):
    calls = []
    sequence.changed.connect(lambda: calls.append(len(sequence)))
    return calls


def test_observable_list_emits_on_each_mutation():
    source = ObservableList([1, 2])
    calls = record_changes(source)

    source.append(3)
    source.replace_at(0, 10)
    source.remove(2)
    source.set_all([7])

    assert calls == [3, 3, 2, 1]
    assert list(source) == [7]
    assert 7 in source


def test_disconnect_stops_notifications():
    source = ObservableList()
    calls = []

    def listener():
        calls.append(1)

    source.changed.connect(listener)
    source.changed.disconnect(listener)
    source.append(1)
    assert calls == []


def test_read_only_view_relays_changes(qtbot):
    source = ObservableList([1])
    view = ReadOnlyView(source)

    with qtbot.waitSignal(view.changed, timeout=1000):
        source.append(2)

    assert list(view) == [1, 2]
    assert view == [1, 2]
    assert not hasattr(view, "append")


def test_filtered_sorted_list_tracks_source_predicate_and_key():
    source = ObservableList([5, 1, 4, 2])
    view = FilteredSortedList(source, PREDICATE_SHOW_ALL)
    assert list(view) == [5, 1, 4, 2]

    view.set_predicate(lambda n: n % 2 == 0)
    assert list(view) == [4, 2]

    view.set_sort_key(lambda n: n)
    assert list(view) == [2, 4]

    source.append(0)
    assert list(view) == [0, 2, 4]

    view.set_sort_key(Negate())
    assert list(view) == [4, 2, 0]

    view.set_sort_key(None)
    assert list(view) == [4, 2, 0]
    assert view == [4, 2, 0]
    assert view != [0]


def test_filtered_sorted_list_emits_changed():
    source = ObservableList([1, 2])
    view = FilteredSortedList(source, PREDICATE_SHOW_ALL)
    calls = record_changes(view)

    source.append(3)
    view.set_predicate(lambda n: n > 1)
    view.set_sort_key(lambda n: -n)

    assert calls == [3, 2, 2]
    assert list(view) == [3, 2]
