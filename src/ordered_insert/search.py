from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Sequence

from .ordering import Comparator, Direction, directed, partial_compare

logger = logging.getLogger(__name__)


def mid_point(a: int, b: int) -> int:
    return (a + b) // 2


def insertion_index(
    item: Any,
    values: Sequence[Any],
    direction: Direction = "ascending",
    *,
    cmp: Comparator = partial_compare,
    key: Optional[Callable[[Any], Any]] = None,
) -> Optional[int]:
    """
    Index at which `item` goes into `values` (sorted in `direction`) so that
    the order is kept.

    Ties with the first element go to the front, ties with the last element
    go to the end, and a tie met while bisecting is placed right before the
    equal element that was probed. Returns None as soon as a probed pair
    turns out to be incomparable. `values` is assumed sorted; this is not
    checked. Nothing is locked: the caller must not let another thread
    modify `values` while a search or insert on it is running.
    """
    compare = directed(cmp, direction)
    if not values:
        return 0
    probe = item if key is None else key(item)

    def order_at(idx: int) -> Optional[int]:
        other = values[idx]
        return compare(probe, other if key is None else key(other))

    start = 0
    end = len(values) - 1

    first = order_at(start)
    if first is None:
        logger.debug("item incomparable with first element")
        return None
    if first <= 0:
        return start

    last = order_at(end)
    if last is None:
        logger.debug("item incomparable with last element")
        return None
    if last >= 0:
        return end + 1

    idx = mid_point(start, end)
    while True:
        order = order_at(idx)
        if order is None:
            logger.debug("item incomparable with element at %s", idx)
            return None
        if order == 0:
            return idx
        if order < 0:
            end = idx
        else:
            start = idx
        idx = mid_point(start, end)
        if end - start <= 1:
            return end
