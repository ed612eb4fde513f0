"""Default optimizer settings, image constants and window layout spacings."""

from __future__ import annotations

from types import MappingProxyType

from jointtrack.geometry import Point6D

VER_FIRST_NUM = 3
VER_MIDDLE_NUM = 4
VER_LAST_NUM = 0

TRUNK_RANGE = Point6D(35, 35, 35, 35, 35, 35)
TRUNK_BUDGET = 20000
TRUNK_DILATION = 6

BRANCH_RANGE = Point6D(15, 15, 25, 25, 25, 25)
BRANCH_BUDGET = 5000
NUMBER_BRANCHES = 2
BRANCH_DILATION_DECREASE = 2

Z_SEARCH_RANGE = Point6D(3, 3, 15, 3, 3, 3)
Z_SEARCH_BUDGET = 5000
Z_SEARCH_DILATION = 1

DISPLAY_CURRENT_OPTIMUM = True

ENABLE_BRANCH = True
ENABLE_Z = True
SCALE_TRUNK = False
SCALE_TRUNK_VALUE = 0.5

APERTURE = 3
LOW_THRESH = 40
HIGH_THRESH = 120

BLACK_SILHOUETTE = True

INTENSITY_WEIGHT = 1.0
EDGE_WEIGHT = 1.0

WHITE_PIXEL = 255
BLACK_PIXEL = 0
EDGE_PIXEL = 100
DILATED_PIXEL = 99

THREADS_PER_BLOCK = 256
MAXIMUM_STRIDE_SIZE = 10_000_000

MINIMUM_WIDTH = 1600
MINIMUM_HEIGHT = 918
MINIMUM_LIST_WIDGET_SIZE = 100
MINIMUM_QVTK_WIDGET_WIDTH = 831
FONT_SIZE = 8

MAIN_SCREEN_PADDING = MappingProxyType(
    {
        "group_box_to_button_padding_x": 25,
        "button_to_button_padding_x": 11,
        "inside_button_padding_x": 30,
        "inside_radio_button_padding_x": 40,
        "application_border_to_group_box_padding_x": 55,
        "inside_spin_box_padding_x": 25,
        "label_to_spin_box_padding_x": 15,
        "spin_box_to_group_box_padding_x": 60,
        "inside_button_padding_right_column_x": 50,
        "group_box_to_qvtk_padding_x": 65,
        "group_box_to_group_box_y": 30,
        "group_box_to_button_padding_y": 30,
        "button_to_button_padding_y": 11,
        "spin_box_to_spin_box_padding_y": 15,
        "inside_button_padding_y": 30,
        "inside_radio_button_padding_y": 10,
        "application_border_to_group_box_padding_y": 40,
        "radio_button_to_list_widget_padding_y": 25,
        "inside_spin_box_padding_y": 15,
    }
)

SETTINGS_WINDOW_PADDING = MappingProxyType(
    {
        "button_to_button_padding_x": 35,
        "inside_button_padding_x": 60,
        "inside_radio_button_padding_x": 35,
        "application_border_to_group_box_padding_x": 55,
        "inside_spin_box_padding_x": 25,
        "label_to_spin_box_padding_x": 15,
        "spin_box_to_label_padding_x": 25,
        "small_group_box_padding_x": 30,
        "group_box_to_small_group_box_x": 30,
        "group_box_to_group_box_x": 30,
        "group_box_to_radio_button_x": 40,
        "big_group_box_to_spin_box_x": 115,
        "small_group_box_padding_y": 30,
        "group_box_to_small_group_box_y": 30,
        "checkbox_to_label_y": 30,
        "label_to_label_padding_y": 25,
        "group_box_to_group_box_y": 35,
        "small_group_box_to_group_box_y": 30,
        "group_box_to_label_padding_y": 30,
        "group_box_to_radio_button_padding_y": 30,
        "spin_box_to_spin_box_padding_y": 15,
        "inside_button_padding_y": 30,
        "inside_radio_button_padding_y": 10,
        "application_border_to_group_box_padding_y": 30,
        "inside_spin_box_padding_y": 15,
    }
)


def version_string() -> str:
    """Application version as "major.minor.patch"."""
    return f"{VER_FIRST_NUM}.{VER_MIDDLE_NUM}.{VER_LAST_NUM}"