import pytest

from jointtrack.direct_storage import DirectDataStorage
from jointtrack.geometry import Direction, HyperBox6D, Point6D

UNIT_CENTER = Point6D(0.5, 0.5, 0.5, 0.5, 0.5, 0.5)
UNIT_SIDES = Point6D(1, 1, 1, 1, 1, 1)


def _unit_box(value):
    return HyperBox6D(value=value, center=UNIT_CENTER, sides=UNIT_SIDES)


def _small_box(value):
    box = _unit_box(value)
    box.trisect_side(Direction.X)
    return box


def test_initial_storage_holds_unit_box():
    storage = DirectDataStorage()
    assert storage.column_count() == 1
    assert storage.minimum_value(0) == -1
    box = storage.minimum_box(0)
    assert box.center == UNIT_CENTER
    assert box.sides == UNIT_SIDES
    assert storage.column_size(0) == pytest.approx(box.size)


def test_initial_value_is_used():
    storage = DirectDataStorage(3.5)
    assert storage.minimum_value(0) == 3.5


def test_smaller_box_gets_first_column():
    storage = DirectDataStorage(0.0)
    small = _small_box(7.0)
    storage.add_box(small)
    assert storage.column_count() == 2
    assert storage.column_size(0) < storage.column_size(1)
    assert storage.minimum_value(0) == small.value
    assert storage.minimum_value(1) == 0.0


def test_same_size_boxes_share_column_with_minimum_last():
    storage = DirectDataStorage(0.0)
    for value in (5.0, -7.0, 2.0):
        storage.add_box(_unit_box(value))
    assert storage.column_count() == 1
    assert storage.minimum_value(0) == -7.0


def test_delete_removes_best_box_then_empty_column():
    storage = DirectDataStorage(0.0)
    storage.add_box(_unit_box(-4.0))
    storage.delete_boxes([0])
    assert storage.column_count() == 1
    assert storage.minimum_value(0) == 0.0
    storage.delete_boxes([0])
    assert storage.column_count() == 0


def test_delete_shifts_later_columns():
    storage = DirectDataStorage(0.0)
    storage.add_box(_small_box(9.0))
    storage.add_box(_unit_box(-2.0))
    storage.delete_boxes([0, 1])
    assert storage.column_count() == 1
    assert storage.minimum_value(0) == 0.0
    assert storage.column_size(0) == pytest.approx(_unit_box(0.0).size)


def test_returned_box_is_a_copy():
    storage = DirectDataStorage()
    box = storage.minimum_box(0)
    box.trisect_side(Direction.Y)
    assert storage.minimum_box(0).sides == UNIT_SIDES


def test_clear_removes_everything():
    storage = DirectDataStorage()
    storage.add_box(_small_box(1.0))
    storage.clear()
    assert storage.column_count() == 0


def test_bad_column_ids_raise():
    storage = DirectDataStorage()
    with pytest.raises(IndexError):
        storage.minimum_box(5)
    with pytest.raises(IndexError):
        storage.minimum_value(1)
    with pytest.raises(IndexError):
        storage.column_size(-1)
    with pytest.raises(IndexError):
        storage.delete_boxes([3])
    assert storage.column_count() == 1