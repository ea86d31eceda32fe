"""Tests for CyclicIndex."""

import pytest

from typeahead.domain.cyclic_index import CyclicIndex


def test_advance_wraps_forward():
    cursor = CyclicIndex()
    assert [cursor.advance(1, 3) for _ in range(3)] == [1, 2, 0]


def test_advance_wraps_backward():
    cursor = CyclicIndex()
    assert cursor.advance(-1, 3) == 2
    assert cursor.advance(-1, 3) == 1


@pytest.mark.parametrize("size", [1, 2, 5, 10])
@pytest.mark.parametrize("start_offset", [0, 1, 4])
def test_full_cycle_returns_to_start(size, start_offset):
    start = start_offset % size
    cursor = CyclicIndex(start)
    for _ in range(size):
        cursor.advance(1, size)
    assert cursor.index == start


@pytest.mark.parametrize("size", [1, 3, 7])
def test_next_then_previous_is_identity(size):
    cursor = CyclicIndex(size - 1)
    cursor.advance(1, size)
    cursor.advance(-1, size)
    assert cursor.index == size - 1


def test_empty_range_is_a_no_op():
    cursor = CyclicIndex(2)
    assert cursor.advance(1, 0) == 2
    assert cursor.advance(-1, 0) == 2


def test_reset():
    cursor = CyclicIndex(4)
    cursor.reset()
    assert cursor.index == 0
    cursor.reset(3)
    assert cursor.index == 3


@pytest.mark.parametrize("direction", [0, 2, -2])
def test_invalid_direction_raises(direction):
    with pytest.raises(ValueError, match="direction"):
        CyclicIndex().advance(direction, 3)


def test_negative_size_raises():
    with pytest.raises(ValueError, match="size"):
        CyclicIndex().advance(1, -1)
