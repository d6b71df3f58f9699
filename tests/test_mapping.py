import pytest

from slicekit.mapping import map2, map3, map_values


@pytest.mark.parametrize(
    "seq, want",
    [(None, None), ([], []), ([1], [1]), ([1, 2], [1, 4])],
)
def test_map_values(seq, want):
    assert map_values(seq, lambda x: x * x) == want


def test_map_values_changes_type():
    assert map_values([1, 22], str) == ["1", "22"]


@pytest.mark.parametrize(
    "seq1, seq2, want",
    [
        (None, None, None),
        (None, [], None),
        ([], None, None),
        ([], [1], []),
        ([1], [1], [2]),
        ([1, 2], [3, 4], [4, 6]),
    ],
)
def test_map2(seq1, seq2, want):
    assert map2(seq1, seq2, lambda x, y: x + y) == want


@pytest.mark.parametrize(
    "seq1, seq2, seq3, want",
    [
        (None, None, None, None),
        (None, [], [], None),
        ([], None, [], None),
        ([], [1], [], []),
        ([1], [1], [1], [3]),
        ([1, 2], [3, 4], [5, 6], [9, 12]),
    ],
)
def test_map3(seq1, seq2, seq3, want):
    assert map3(seq1, seq2, seq3, lambda x, y, z: x + y + z) == want


def test_map3_stops_at_shortest():
    assert map3([1, 2, 3], [1, 2], [1, 2, 3], lambda x, y, z: x * y * z) == [1, 8]