import random

import pytest

from pfckit.sort import (
    SortCallback,
    SortStabilizer,
    reorder,
    reorder_partial,
    reorder_with,
    sort,
    sort_get_permutation,
    sort_list,
    sort_list_stable,
    sort_stable,
    sort_stable_get_permutation,
)


def by_key(a, b):
    return (a[0] > b[0]) - (a[0] < b[0])


class ListSorter(SortCallback):
    def __init__(self, data):
        self.data = data
        self.swaps = 0

    def compare(self, index1, index2):
        a, b = self.data[index1], self.data[index2]
        return (a > b) - (a < b)

    def swap(self, index1, index2):
        self.swaps += 1
        self.data[index1], self.data[index2] = self.data[index2], self.data[index1]


@pytest.mark.parametrize("size", [0, 1, 2, 3, 4, 5, 17, 200])
def test_sort_list_matches_sorted(size):
    rng = random.Random(size)
    data = [rng.randint(-50, 50) for _ in range(size)]
    expected = sorted(data)
    sort_list(data)
    assert data == expected


def test_sort_list_with_comparator_descending():
    data = list(range(30))
    random.Random(1).shuffle(data)
    sort_list(data, lambda a, b: (b > a) - (b < a))
    assert data == list(range(29, -1, -1))


def test_sort_list_stable_keeps_order_of_equals():
    rng = random.Random(7)
    data = [(rng.randint(0, 5), i) for i in range(100)]
    expected = sorted(data, key=lambda item: item[0])
    sort_list_stable(data, by_key)
    assert data == expected


def test_sort_with_callback():
    data = [5, 3, 9, 1, 1, 8, 2, 7]
    sorter = ListSorter(data)
    sort(sorter, len(data))
    assert data == sorted([5, 3, 9, 1, 1, 8, 2, 7])


def test_sort_stable_with_callback():
    rng = random.Random(3)
    data = [(rng.randint(0, 3), i) for i in range(40)]
    expected = sorted(data, key=lambda item: item[0])

    class KeySorter(ListSorter):
        def compare(self, index1, index2):
            return by_key(self.data[index1], self.data[index2])

    sort_stable(KeySorter(data), len(data))
    assert data == expected


def test_swap_check_swaps_only_when_out_of_order():
    sorter = ListSorter([2, 1])
    SortCallback.swap_check(sorter, 0, 1)
    SortCallback.swap_check(sorter, 0, 1)
    assert sorter.data == [1, 2]
    assert sorter.swaps == 1


def test_stabilizer_breaks_ties_by_original_position():
    data = [(1, "a"), (1, "b")]

    class KeySorter(ListSorter):
        def compare(self, index1, index2):
            return by_key(self.data[index1], self.data[index2])

    stabilizer = SortStabilizer(KeySorter(data), 2)
    assert stabilizer.compare(0, 1) < 0
    stabilizer.swap(0, 1)
    assert stabilizer.compare(0, 1) > 0
    assert data[0][1] == "b"


def test_sort_get_permutation_leaves_data_alone():
    data = [4, 2, 8, 6, 0, 2, 9]
    original = list(data)
    perm = sort_get_permutation(data)
    assert data == original
    assert sorted(perm) == list(range(len(data)))
    assert [data[i] for i in perm] == sorted(data)


def test_sort_stable_get_permutation_orders_ties_by_index():
    data = [(1, "x"), (0, "y"), (1, "z"), (0, "w")]
    perm = sort_stable_get_permutation(data, by_key)
    assert [data[i] for i in perm] == sorted(data, key=lambda item: item[0])


def test_reorder_moves_items_to_order_positions():
    original = ["a", "b", "c", "d", "e"]
    order = [3, 0, 4, 1, 2]
    data = list(original)
    reorder(data, order)
    assert data == [original[i] for i in order]


def test_reorder_identity_makes_no_swaps():
    calls = []
    reorder_with(lambda a, b: calls.append((a, b)), [0, 1, 2])
    assert calls == []


def test_reorder_partial_only_touches_slice():
    data = [10, 11, 12, 13, 14]
    reorder_partial(data, 2, [2, 0, 1])
    assert data[:2] == [10, 11]
    assert sorted(data[2:]) == [12, 13, 14]
    assert data[2] == 14


def test_reorder_rejects_non_permutation():
    with pytest.raises(ValueError):
        reorder([1, 2, 3], [0, 0, 1])