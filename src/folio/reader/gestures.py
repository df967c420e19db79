"""Swipe direction to page turn mapping."""

from __future__ import annotations

from enum import Enum

from folio.reader.models import ReadingMode


class SwipeDirection(Enum):
    LEFT = "left"
    RIGHT = "right"


def swipe_step(direction: SwipeDirection, mode: ReadingMode) -> int:
    """Return +1 to turn forward or -1 to turn back.

    Right-to-left books turn forward with a right swipe, like paging through
    a physical book bound on the right.
    """
    forward = direction is SwipeDirection.LEFT
    if mode is ReadingMode.TWO_PAGE_RTL:
        forward = not forward
    return 1 if forward else -1
