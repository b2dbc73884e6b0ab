"""Pane geometry derived from the terminal size."""

from typing import Tuple

from .model import LayoutDimensions

# Rows/columns reserved for borders, titles and the hint line.
VERTICAL_PADDING = 5
HORIZONTAL_PADDING = 10

CONTAINER_COLUMN_COUNT = 5
IMAGE_COLUMN_COUNT = 4

DEFAULT_SIZE = (80, 24)


def column_widths(total_width: int, count: int) -> Tuple[int, ...]:
    # Remainder is dropped, so the widths never add up past total_width.
    width = max(0, total_width) // count
    return (width,) * count


def compute_layout(width: int, height: int) -> LayoutDimensions:
    """
    Split the terminal into a list column (containers over images) on the
    left and the detail viewport on the right.
    """
    list_width = max(0, (width - HORIZONTAL_PADDING) // 2)
    list_height = max(0, (height - VERTICAL_PADDING) // 2)
    return LayoutDimensions(
        list_width=list_width,
        list_height=list_height,
        detail_width=list_width,
        detail_height=max(0, height - VERTICAL_PADDING),
        container_columns=column_widths(list_width, CONTAINER_COLUMN_COUNT),
        image_columns=column_widths(list_width, IMAGE_COLUMN_COUNT),
    )
