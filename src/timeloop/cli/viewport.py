"""Scroll offset tracking for option lists taller than the screen."""
from __future__ import annotations


def visible_item_rows(num_items: int, capacity: int, offset: int) -> tuple[int, bool]:
    """Item rows shown at *offset*, and whether the last row is a ``⋯`` marker.

    When the window stops short of the end of the list, its last row is
    given to the marker instead of an item.
    """
    ellipsis = num_items > capacity and offset + capacity < num_items
    if ellipsis:
        return capacity - 1, True
    return min(num_items - offset, capacity), False


def compute_scroll_offset(num_items: int, capacity: int, selected: int, previous: int) -> int:
    """New scroll offset for a list of *num_items* shown in *capacity* rows.

    Pure function of its arguments; call it every frame with the offset it
    returned last time. The result always keeps *selected* on screen.
    """
    if not 0 <= selected < num_items:
        raise ValueError(f"selected index {selected} out of range for {num_items} items")
    if num_items <= capacity:
        return 0
    if capacity < 2:
        raise ValueError(f"capacity {capacity} cannot fit an item and the overflow marker")

    max_offset = num_items - capacity
    # The screen may have grown since the last frame
    offset = max(0, min(previous, max_offset))

    if selected < offset:
        offset = selected

    rows, _ = visible_item_rows(num_items, capacity, offset)
    if selected >= offset + rows:
        offset = selected - rows + 1

    return min(offset, max_offset)
