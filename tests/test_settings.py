from jointtrack.geometry import Direction
from jointtrack.settings import (
    BRANCH_RANGE,
    TRUNK_RANGE,
    VER_FIRST_NUM,
    VER_LAST_NUM,
    VER_MIDDLE_NUM,
    Z_SEARCH_RANGE,
    version_string,
)


def test_version_string():
    assert version_string() == "3.4.0"


def test_version_string_matches_components():
    parts = tuple(int(part) for part in version_string().split("."))
    assert parts == (VER_FIRST_NUM, VER_MIDDLE_NUM, VER_LAST_NUM)


def test_default_ranges_largest_directions():
    assert Z_SEARCH_RANGE.largest_direction() is Direction.Z
    assert BRANCH_RANGE.largest_direction() is Direction.Z
    assert TRUNK_RANGE.largest_direction() is Direction.X