import pytest

from ftkit.lists import LinkedList, Node


def test_build_from_items_keeps_order():
    lst = LinkedList(["1", "2", "3"])
    assert list(lst) == ["1", "2", "3"]
    assert len(lst) == 3


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    assert lst.head is None


def test_add_front_prepends():
    lst = LinkedList([1, 2, 3])
    node = lst.add_front(0)
    assert isinstance(node, Node)
    assert lst.head is node
    assert list(lst) == [0, 1, 2, 3]


def test_add_front_and_back_mix():
    lst = LinkedList()
    for item in ("1", "2", "3"):
        lst.add_front(item)
    for item in ("1", "2", "3"):
        lst.add_back(item)
    assert list(lst) == ["3", "2", "1", "1", "2", "3"]
    assert len(lst) == 6


def test_add_back_on_empty_sets_head():
    lst = LinkedList()
    node = lst.add_back("x")
    assert lst.head is node
    assert lst.last() is node


def test_last_returns_final_node():
    lst = LinkedList()
    lst.add_front("3")
    lst.add_front("2")
    lst.add_front("1")
    tail = lst.last()
    assert tail.content == "3"
    assert tail.next is None


def test_clear_deletes_in_order_and_empties():
    deleted = []
    lst = LinkedList(["1", "2", "3"])
    lst.clear(deleted.append)
    assert deleted == ["1", "2", "3"]
    assert lst.head is None
    assert len(lst) == 0


def test_clear_without_delete_raises():
    lst = LinkedList([1])
    with pytest.raises(TypeError):
        lst.clear(None)
    assert list(lst) == [1]


def test_for_each_visits_every_content():
    seen = []
    lst = LinkedList(["a", "b", "c"])
    lst.for_each(seen.append)
    assert seen == ["a", "b", "c"]


def test_for_each_can_mutate_contents():
    lst = LinkedList([[1], [2]])
    lst.for_each(lambda c: c.append(0))
    assert list(lst) == [[1, 0], [2, 0]]


def test_map_builds_new_list():
    lst = LinkedList(["c", "b", "a"])
    mapped = lst.map(str.upper, lambda c: None)
    assert list(mapped) == ["C", "B", "A"]
    assert list(lst) == ["c", "b", "a"]
    assert mapped.head is not lst.head


def test_map_of_empty_list_is_empty():
    mapped = LinkedList().map(str.upper, lambda c: None)
    assert len(mapped) == 0


def test_map_failure_deletes_partial_results():
    deleted = []

    def func(value):
        if value == 3:
            raise RuntimeError("boom")
        return value * 10

    lst = LinkedList([1, 2, 3, 4])
    with pytest.raises(RuntimeError):
        lst.map(func, deleted.append)
    assert deleted == [10, 20]


def test_map_requires_callables():
    lst = LinkedList([1])
    with pytest.raises(TypeError):
        lst.map(None, lambda c: None)
    with pytest.raises(TypeError):
        lst.map(lambda c: c, None)