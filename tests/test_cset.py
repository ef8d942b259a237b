from cnfsolve.cset import CSet


def test_append_keeps_order():
    items = CSet()
    for value in (4, -2, 9):
        items.append(value)
    assert list(items) == [4, -2, 9]
    assert len(items) == 3


def test_growth_beyond_initial_capacity():
    items = CSet()
    values = list(range(25))
    for value in values:
        items.append(value)
    assert list(items) == values


def test_extend_with_other_set():
    first = CSet([1, 2])
    second = CSet([3, 4])
    first.extend(second)
    assert list(first) == [1, 2, 3, 4]
    assert list(second) == [3, 4]


def test_extend_with_itself_doubles():
    items = CSet([5, 6])
    items.extend(items)
    assert list(items) == [5, 6, 5, 6]


def test_reverse_round_trip():
    values = [3, 1, 4, 1, 5]
    items = CSet(values)
    items.reverse()
    assert list(items) == values[::-1]
    items.reverse()
    assert list(items) == values


def test_str_format():
    assert str(CSet([1, 2, 3])) == "[1, 2, 3]"
    assert str(CSet()) == "[]"