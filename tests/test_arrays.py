import pytest

from pfckit.arrays import Array2D, array_equals, compare_arrays, insert_multi, set_size_fill


def test_compare_arrays_equal():
    assert compare_arrays([1, 2, 3], [1, 2, 3]) == 0


def test_compare_arrays_shorter_prefix_first():
    assert compare_arrays([1, 2], [1, 2, 3]) == -1
    assert compare_arrays([1, 2, 3], [1, 2]) == 1


def test_compare_arrays_first_difference_decides():
    assert compare_arrays([2], [1, 5]) > 0
    assert compare_arrays([1, 4], [1, 5]) < 0


def test_compare_arrays_custom_comparator():
    reverse = lambda a, b: (b > a) - (b < a)
    assert compare_arrays([2], [1], reverse) < 0
    assert compare_arrays([], []) == 0


def test_array_equals():
    assert array_equals([1, 2], (1, 2))
    assert not array_equals([1, 2], [1, 2, 3])
    assert not array_equals([1, 3], [1, 2])


def test_set_size_fill_grows_and_shrinks():
    items = [1, 2]
    set_size_fill(items, 4, 9)
    assert items == [1, 2, 9, 9]
    set_size_fill(items, 1, 9)
    assert items == [1]


def test_set_size_fill_negative():
    with pytest.raises(ValueError):
        set_size_fill([], -1, 0)


def test_insert_multi_middle():
    items = [1, 2, 3]
    insert_multi(items, 0, 1, 2)
    assert items == [1, 0, 0, 2, 3]


def test_insert_multi_clamps_base():
    items = [1, 2]
    insert_multi(items, 7, 100, 3)
    assert items == [1, 2, 7, 7, 7]


def test_array2d_set_and_get():
    grid = Array2D(2, 3, fill=0)
    assert (grid.dim1, grid.dim2) == (2, 3)
    grid[1, 2] = 5
    assert grid[1, 2] == 5
    assert grid.row(1) == [0, 0, 5]
    assert grid[0] == [0, 0, 0]


def test_array2d_out_of_range():
    grid = Array2D(2, 2)
    with pytest.raises(IndexError):
        grid[2, 0]
    with pytest.raises(IndexError):
        grid[0, 2]
    with pytest.raises(IndexError):
        grid.row(-1)


def test_array2d_fill_and_rows():
    grid = Array2D(2, 2)
    grid.fill("x")
    assert list(grid) == [["x", "x"], ["x", "x"]]


def test_array2d_set_row():
    grid = Array2D(2, 2, fill=0)
    grid[0] = [1, 2]
    assert grid.row(0) == [1, 2]
    with pytest.raises(ValueError):
        grid[1] = [1, 2, 3]


def test_array2d_set_size_keeps_flat_prefix():
    grid = Array2D(2, 2, fill=0)
    grid[0, 0] = 1
    grid[0, 1] = 2
    grid.set_size(1, 4)
    assert grid.row(0) == [1, 2, 0, 0]
    with pytest.raises(ValueError):
        grid.set_size(-1, 2)