from dataclasses import dataclass

import pytest

from nomina.linkedlist import LinkedList, Node

NAMES = ["Za", "Zb", "Xd", "Xb", "Ya", "Yc"]
SECTORS = [1, 1, 2, 3, 4, 6]
SALARIES = [1000, 1000, 2000, 3000, 4000, 8000]
IDS = [11, 20, 3, 4, 9, 99]
LENGTH = 5


@dataclass(eq=False)
class Employee:
    id: int
    name: str
    last_name: str
    salary: float
    sector: int


def compare_employee(first, second):
    if first.salary > second.salary:
        return 1
    if first.salary < second.salary:
        return -1
    return 0


def make_employees(salaries=SALARIES, count=LENGTH):
    return [
        Employee(IDS[i], NAMES[i], NAMES[i], salaries[i], SECTORS[i])
        for i in range(count)
    ]


def juan():
    return Employee(10, "JUAN", "PEREZ", 1, 1)


def test_new_list_is_empty():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.is_empty() is True


def test_init_from_iterable_keeps_order():
    items = make_employees()
    lst = LinkedList(items)
    assert list(lst) == items


def test_len_counts_elements():
    lst = LinkedList(make_employees())
    assert len(lst) == LENGTH


def test_get_node_first_and_last():
    items = make_employees(count=2)
    lst = LinkedList(items)
    first = lst.get_node(0)
    last = lst.get_node(1)
    assert isinstance(first, Node)
    assert first.element is items[0]
    assert first.next is last
    assert last.element is items[1]
    assert last.next is None


def test_get_node_out_of_range():
    lst = LinkedList([None])
    with pytest.raises(IndexError):
        lst.get_node(-1)
    with pytest.raises(IndexError):
        lst.get_node(1)


def test_push_increments_size():
    lst = LinkedList()
    lst.push(0, None)
    assert len(lst) == 1


def test_push_at_end_keeps_elements_in_order():
    items = make_employees()
    lst = LinkedList()
    for item in items:
        lst.push(len(lst), item)
    for i, item in enumerate(items):
        assert lst.get_node(i).element is item
        assert lst.get(i) is item


def test_push_at_front_of_filled_list():
    items = make_employees()
    lst = LinkedList(items)
    other = Employee(99, "99", "99", 99, 99)
    lst.push(0, other)
    assert lst.get_node(0).element is other
    for i, item in enumerate(items):
        assert lst.get_node(i + 1).element is item


def test_push_in_the_middle():
    items = make_employees(count=3)
    lst = LinkedList(items)
    extra = juan()
    lst.push(1, extra)
    assert list(lst) == [items[0], extra, items[1], items[2]]


def test_push_out_of_range():
    lst = LinkedList()
    lst.add(None)
    with pytest.raises(IndexError):
        lst.push(-1, None)
    with pytest.raises(IndexError):
        lst.push(2, None)
    assert len(lst) == 1


def test_add_increments_size():
    lst = LinkedList()
    lst.add(None)
    assert len(lst) == 1


def test_add_keeps_elements_in_order():
    items = make_employees()
    lst = LinkedList()
    for item in items:
        lst.add(item)
    for i, item in enumerate(items):
        assert lst.get_node(i).element is item


def test_get_first_element():
    element = juan()
    lst = LinkedList()
    lst.add(element)
    assert lst.get(0) is element


def test_get_last_element():
    element = juan()
    lst = LinkedList()
    lst.add(None)
    lst.add(element)
    assert lst.get(1) is element


def test_get_out_of_range():
    lst = LinkedList([None, juan()])
    with pytest.raises(IndexError):
        lst.get(-1)
    with pytest.raises(IndexError):
        lst.get(2)


def test_set_replaces_element():
    element = juan()
    lst = LinkedList()
    lst.add(None)
    lst.set(0, element)
    assert lst.get(0) is element
    assert len(lst) == 1


def test_set_out_of_range():
    lst = LinkedList([None])
    with pytest.raises(IndexError):
        lst.set(-1, None)
    with pytest.raises(IndexError):
        lst.set(1, None)


def test_remove_only_element_empties_list():
    lst = LinkedList()
    lst.add(None)
    lst.remove(0)
    assert len(lst) == 0
    assert lst.is_empty() is True


def test_remove_middle_element():
    element = juan()
    lst = LinkedList()
    lst.add(None)
    lst.add(None)
    lst.add(element)
    lst.remove(1)
    assert lst.get(1) is element
    assert len(lst) == 2


def test_remove_last_element_of_longer_list():
    items = make_employees(count=3)
    lst = LinkedList(items)
    lst.remove(2)
    assert list(lst) == items[:2]


def test_remove_out_of_range():
    lst = LinkedList([None])
    with pytest.raises(IndexError):
        lst.remove(-1)
    with pytest.raises(IndexError):
        lst.remove(1)
    assert len(lst) == 1


def test_clear_then_reuse():
    element = juan()
    lst = LinkedList()
    lst.add(None)
    lst.clear()
    assert len(lst) == 0
    lst.add(None)
    lst.add(element)
    assert lst.get(1) is element


def test_index_of():
    lst = LinkedList()
    lst.add(None)
    assert lst.index_of(None) == 0
    with pytest.raises(ValueError):
        lst.index_of(1)


def test_index_of_uses_identity():
    first = juan()
    twin = juan()
    lst = LinkedList([first])
    with pytest.raises(ValueError):
        lst.index_of(twin)
    assert lst.index_of(first) == 0


def test_is_empty_after_add():
    lst = LinkedList()
    assert lst.is_empty() is True
    lst.add(None)
    assert lst.is_empty() is False


def test_pop_returns_first_element():
    element = juan()
    lst = LinkedList()
    lst.add(element)
    assert lst.pop(0) is element
    assert len(lst) == 0


def test_pop_returns_last_element():
    element = juan()
    lst = LinkedList()
    lst.add(None)
    lst.add(element)
    assert lst.pop(1) is element
    assert len(lst) == 1


def test_pop_out_of_range():
    lst = LinkedList([None, juan()])
    with pytest.raises(IndexError):
        lst.pop(-1)
    with pytest.raises(IndexError):
        lst.pop(2)
    assert len(lst) == 2


def test_contains_on_empty_list():
    assert LinkedList().contains(None) is False


def test_contains_elements():
    items = make_employees()
    lst = LinkedList(items)
    assert lst.contains(None) is False
    for item in items:
        assert lst.contains(item) is True
        assert item in lst


def test_contains_all_of_itself_when_empty():
    lst = LinkedList()
    assert lst.contains_all(lst) is True


def test_contains_all_missing_element():
    items = make_employees()
    lst = LinkedList(items)
    other = LinkedList(items)
    lst.remove(0)
    assert lst.contains_all(other) is False


def test_contains_all_same_elements():
    items = make_employees()
    assert LinkedList(items).contains_all(LinkedList(items)) is True


def test_contains_all_of_shorter_list():
    items = make_employees()
    assert LinkedList(items).contains_all(LinkedList(items[1:3])) is True


def test_sub_list_single_element():
    lst = LinkedList([None])
    sub = lst.sub_list(0, 1)
    assert len(sub) == 1
    assert sub.get(0) is None


def test_sub_list_elements():
    lst = LinkedList(make_employees())
    sub = lst.sub_list(0, 2)
    assert len(sub) == 2
    for i in range(2):
        assert sub.get(i) is lst.get(i)


def test_sub_list_out_of_range():
    lst = LinkedList(make_employees())
    with pytest.raises(IndexError):
        lst.sub_list(-1, 2)
    with pytest.raises(IndexError):
        lst.sub_list(0, 6)


def test_clone_has_same_elements():
    lst = LinkedList(make_employees())
    copy = lst.clone()
    assert len(copy) == LENGTH
    for i in range(LENGTH):
        assert copy.get(i) is lst.get(i)


def test_clone_of_list_with_one_element():
    lst = LinkedList([None])
    assert len(lst.clone()) == 1


def test_sort_descending_by_salary():
    salaries = [1001, 2000, 1002, 3000, 4000, 8000]
    lst = LinkedList(make_employees(salaries, count=6))
    lst.sort(compare_employee, 0)
    assert [e.salary for e in lst] == [8000, 4000, 3000, 2000, 1002, 1001]


def test_sort_ascending_by_salary():
    salaries = [1001, 2000, 1002, 3000, 4000, 8000]
    lst = LinkedList(make_employees(salaries, count=6))
    lst.sort(compare_employee, 1)
    assert [e.salary for e in lst] == [1001, 1002, 2000, 3000, 4000, 8000]


def test_sort_keeps_equal_elements_in_order():
    items = make_employees()
    lst = LinkedList(items)
    lst.sort(compare_employee, 1)
    assert lst.get(0) is items[0]
    assert lst.get(1) is items[1]


def test_sort_without_compare_function():
    lst = LinkedList(make_employees(count=6))
    with pytest.raises(TypeError):
        lst.sort(None, 1)


def test_sort_with_invalid_order():
    items = make_employees(count=6)
    lst = LinkedList(items)
    with pytest.raises(ValueError):
        lst.sort(compare_employee, -1)
    assert list(lst) == items