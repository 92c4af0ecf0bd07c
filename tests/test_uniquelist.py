from iats.uniquelist import UniqueList


def test_add_keeps_order():
    a, b, c = object(), object(), object()
    items = UniqueList()
    for obj in (a, b, c):
        items.add(obj)
    assert list(items) == [a, b, c]
    assert len(items) == 3


def test_add_duplicate_is_ignored():
    a = object()
    items = UniqueList()
    items.add(a)
    items.add(a)
    assert len(items) == 1


def test_remove_middle():
    a, b, c = object(), object(), object()
    items = UniqueList()
    for obj in (a, b, c):
        items.add(obj)
    items.remove(b)
    assert list(items) == [a, c]
    assert b not in items


def test_remove_missing_leaves_list_unchanged():
    a, b = object(), object()
    items = UniqueList()
    items.add(a)
    items.remove(b)
    assert list(items) == [a]


def test_remove_from_empty():
    items = UniqueList()
    items.remove(object())
    assert len(items) == 0


def test_identity_not_equality():
    first, second = [1], [1]
    items = UniqueList()
    items.add(first)
    items.add(second)
    assert len(items) == 2
    assert first in items