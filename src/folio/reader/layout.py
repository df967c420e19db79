"""Spread grouping for single and two-up layouts."""

from __future__ import annotations

from folio.reader.models import LayoutFlags


def spread_groups(count: int, flags: LayoutFlags) -> list[list[int]]:
    """Group display indices into the spreads a surface shows together."""
    if count <= 0:
        return []
    if not flags.is_dual:
        return [[i] for i in range(count)]

    groups: list[list[int]] = []
    start = 0
    if flags.book:
        groups.append([0])  # cover
        start = 1
    for i in range(start, count, 2):
        groups.append(list(range(i, min(i + 2, count))))
    return groups


def group_of(index: int, groups: list[list[int]]) -> int:
    """Return the position of the group containing a display index."""
    for pos, group in enumerate(groups):
        if index in group:
            return pos
    return 0


def visible_columns(group: list[int], flags: LayoutFlags) -> list[int]:
    """Left-to-right column order for a spread."""
    if flags.native_rtl:
        return list(reversed(group))
    return list(group)
