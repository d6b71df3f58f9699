import pytest

from slicekit.modify import delete, delete_pred, delete_range, fill, insert


@pytest.mark.parametrize(
    "seq, values, index, want",
    [
        (None, [], 0, None),
        (None, [1], 0, [1]),
        ([], [], 0, []),
        ([], [1], 0, [1]),
        ([0, 1, 2, 3], [], 0, [0, 1, 2, 3]),
        ([0, 1], [4], 0, [4, 0, 1]),
        ([0, 1], [4], 1, [0, 4, 1]),
        ([0, 1], [4], 2, [0, 1, 4]),
        ([0, 1], [4, 5], 1, [0, 4, 5, 1]),
        ([0, 1], [4, 5, 6], 0, [4, 5, 6, 0, 1]),
        ([0, 1], [4, 5, 6], 1, [0, 4, 5, 6, 1]),
        ([0, 1], [4, 5, 6], 2, [0, 1, 4, 5, 6]),
    ],
)
def test_insert(seq, values, index, want):
    data = None if seq is None else list(seq)
    assert insert(data, index, *values) == want


def test_insert_modifies_in_place():
    data = [1, 2]
    result = insert(data, 1, 9)
    assert result is data
    assert data == [1, 9, 2]


@pytest.mark.parametrize("seq, index", [([1, 2], 3), ([1, 2], -1), (None, 1)])
def test_insert_index_out_of_range(seq, index):
    with pytest.raises(IndexError):
        insert(seq, index, 5)


@pytest.mark.parametrize(
    "seq, indexes, want",
    [
        (None, [], None),
        ([], [], []),
        ([1], [], [1]),
        ([1], [0], []),
        ([1, 2, 3], [], [1, 2, 3]),
        ([1, 2, 3], [0], [2, 3]),
        ([1, 2, 3], [1], [1, 3]),
        ([1, 2, 3], [2], [1, 2]),
        ([1, 2, 3], [0, 1], [3]),
        ([1, 2, 3], [1, 2], [1]),
        ([1, 2, 3], [0, 2], [2]),
        ([1, 2, 3], [0, 1, 2], []),
    ],
)
def test_delete(seq, indexes, want):
    data = None if seq is None else list(seq)
    assert delete(data, *indexes) == want


def test_delete_repeated_index_counts_once():
    assert delete([1, 2, 3], 1, 1) == [1, 3]


def test_delete_out_of_range_leaves_list_unchanged():
    data = [1, 2, 3]
    with pytest.raises(IndexError):
        delete(data, 0, 3)
    assert data == [1, 2, 3]


@pytest.mark.parametrize(
    "start, length, want",
    [
        (0, 1, [2, 3]),
        (0, 2, [3]),
        (0, 3, []),
        (0, 4, []),
        (1, 1, [1, 3]),
        (1, 2, [1]),
    ],
)
def test_delete_range(start, length, want):
    assert delete_range([1, 2, 3], start, length) == want


def test_delete_pred():
    assert delete_pred([1, 2, 3, 4], lambda v: v % 2 == 0) == [1, 3]


def test_delete_pred_none():
    assert delete_pred(None, lambda v: True) is None


@pytest.mark.parametrize(
    "seq, value, want",
    [([], 0, []), ([1], 0, [0]), ([1, 2], 0, [0, 0]), ([1, 2, 3, 4], 0, [0, 0, 0, 0])],
)
def test_fill(seq, value, want):
    data = list(seq)
    fill(data, value)
    assert data == want