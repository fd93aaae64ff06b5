"""Selection and scrolling state of a list shown through a fixed-height viewport."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


def _check_delta(delta: int) -> None:
    if delta < 0:
        raise ValueError(f"delta must not be negative, got {delta}")


@dataclass
class App:
    """A list of ``items_count`` items with one selected and a scroll offset."""

    items_count: int
    selected: int = 0
    offset: int = 0
    page_size: int = 0

    def select_up(self, delta: int) -> None:
        """Move the selection up by ``delta``, stopping at the first item."""
        _check_delta(delta)
        self.selected = max(self.selected - delta, 0)

    def select_down(self, delta: int) -> None:
        """Move the selection down by ``delta``, stopping at the last item."""
        _check_delta(delta)
        if self.items_count > 0:
            self.selected = min(self.selected + delta, self.items_count - 1)

    def select_first(self) -> None:
        self.selected = 0

    def select_last(self) -> None:
        """Select the last item; raises IndexError when the list is empty."""
        if self.items_count == 0:
            raise IndexError("cannot select the last item of an empty list")
        self.selected = self.items_count - 1

    def scroll_into_view(self, viewport_len: int) -> int:
        """Record the viewport length and shift the offset so the selection is visible.

        Returns the new offset. An empty list or viewport leaves the offset as it is.
        """
        self.page_size = viewport_len
        if self.items_count == 0 or viewport_len < 1:
            return self.offset

        offset = min(self.offset, self.items_count - 1)
        selected = min(self.selected, self.items_count - 1)
        if selected >= offset + viewport_len:
            offset = selected - viewport_len + 1
        elif selected < offset:
            offset = selected
        self.offset = offset
        return offset


def scrollbar_position_from_offset(
    content_length: int, viewport_content_length: int, offset: int
) -> Optional[int]:
    """Map a scroll offset onto a scrollbar position in ``0..content_length``.

    Returns None when the whole content fits in the viewport.
    """
    max_offset = max(content_length - viewport_content_length, 0)
    if max_offset == 0:
        return None
    return offset * (content_length - 1) // max_offset