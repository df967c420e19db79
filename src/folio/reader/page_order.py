"""Page ordering for simulated right-to-left book spreads.

A left-to-right two-up surface shows spreads as ``[1] [2 3] [4 5] ...`` with
the cover alone. Swapping each pair after the cover makes the surface show
``[1] [3 2] [5 4] ...``, which reads right to left without the surface
knowing anything about RTL layout.
"""

from __future__ import annotations

import copy as _copy
from typing import Callable, Sequence, TypeVar

T = TypeVar("T")


def rtl_order(count: int) -> list[int]:
    """Return the source index shown at each output position."""
    if count <= 0:
        return []

    order = [0]  # cover page stands alone
    i = 1
    while i < count:
        if i + 1 < count:
            order.extend((i + 1, i))
        else:
            order.append(i)  # last, unpaired page
        i += 2
    return order


def inverse_order(order: Sequence[int]) -> list[int]:
    """Return the output position of each source index."""
    positions = [0] * len(order)
    for position, source in enumerate(order):
        positions[source] = position
    return positions


def reorder(
    pages: Sequence[T], copy: Callable[[T], T] = _copy.copy
) -> list[T]:
    """Reorder pages for simulated RTL reading.

    The input is left untouched; each output element is a fresh copy so the
    rendering surface can take ownership of it.
    """
    return [copy(pages[i]) for i in rtl_order(len(pages))]
