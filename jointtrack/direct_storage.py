"""Hyperbox storage for the DIRECT optimizer, grouped into columns by box size."""

from __future__ import annotations

import math
from bisect import bisect_left, insort
from dataclasses import dataclass, field, replace
from typing import Iterable

from jointtrack.geometry import HyperBox6D, Point6D


@dataclass
class _Column:
    size: float
    boxes: list[HyperBox6D] = field(default_factory=list)


def _box_key(box: HyperBox6D) -> float:
    return -box.value


class DirectDataStorage:
    """Columns of hyperboxes of equal size.

    Columns are kept in increasing order of size; within a column boxes are
    kept in decreasing order of value, so the best box is the last one.
    Storage starts with a unit box centred at 0.5 in every direction.
    """

    def __init__(self, initial_value: float = -1.0) -> None:
        self._columns: list[_Column] = []
        self.add_box(
            HyperBox6D(
                value=float(initial_value),
                center=Point6D(0.5, 0.5, 0.5, 0.5, 0.5, 0.5),
                sides=Point6D(1.0, 1.0, 1.0, 1.0, 1.0, 1.0),
            )
        )

    def add_box(self, box: HyperBox6D) -> None:
        """Store a copy of ``box`` in the column of its size."""
        box = replace(box)
        size = box.size
        sizes = [column.size for column in self._columns]
        position = bisect_left(sizes, size)
        for candidate in (position, position - 1):
            if 0 <= candidate < len(sizes) and math.isclose(sizes[candidate], size, rel_tol=1e-9):
                insort(self._columns[candidate].boxes, box, key=_box_key)
                return
        self._columns.insert(position, _Column(size, [box]))

    def _column(self, column_id: int) -> _Column:
        if not 0 <= column_id < len(self._columns):
            raise IndexError(f"column {column_id} out of range (0..{len(self._columns) - 1})")
        return self._columns[column_id]

    def delete_boxes(self, column_ids: Iterable[int]) -> None:
        """Remove the best box of each listed column, then drop empty columns."""
        ids = sorted(set(column_ids))
        for column_id in ids:
            self._column(column_id)
        for column_id in ids:
            self._columns[column_id].boxes.pop()
        self._columns = [column for column in self._columns if column.boxes]

    def column_count(self) -> int:
        return len(self._columns)

    def minimum_box(self, column_id: int) -> HyperBox6D:
        """Copy of the box with the smallest value in the column."""
        return replace(self._column(column_id).boxes[-1])

    def minimum_value(self, column_id: int) -> float:
        return self._column(column_id).boxes[-1].value

    def column_size(self, column_id: int) -> float:
        return self._column(column_id).size

    def clear(self) -> None:
        """Remove every stored box."""
        self._columns.clear()