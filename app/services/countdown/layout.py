"""
Canvas sizing and box placement for countdown frames.
"""

from typing import Tuple

BOX_SIZE = 80
GAP = 16
PADDING = 24
LABEL_HEIGHT = 20
BOTTOM_MARGIN = 8


def canvas_size(unit_count: int) -> Tuple[int, int]:
    """
    Compute the canvas size for a number of unit boxes.

    The canvas is sized to its content: boxes sit in a single row with
    uniform gaps, surrounded by padding, with a label band below the row.

    Args:
        unit_count: Number of unit boxes, at least 1

    Returns:
        (width, height) in pixels
    """
    if unit_count < 1:
        raise ValueError(f"unit_count must be at least 1, got {unit_count}")
    width = PADDING * 2 + unit_count * BOX_SIZE + (unit_count - 1) * GAP
    height = PADDING * 2 + BOX_SIZE + LABEL_HEIGHT + BOTTOM_MARGIN
    return width, height


def box_origin(index: int) -> Tuple[int, int]:
    """Return the top-left corner of the box at a position in the row."""
    return PADDING + index * (BOX_SIZE + GAP), PADDING


def box_center(index: int) -> Tuple[float, float]:
    x, y = box_origin(index)
    return x + BOX_SIZE / 2, y + BOX_SIZE / 2
