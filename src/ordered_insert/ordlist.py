from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import Any, Callable, Generic, Iterable, Optional, TypeVar

from .insert import InsertionError, insert_in_order
from .ordering import Comparator, Direction, check_direction, partial_compare
from .search import insertion_index

logger = logging.getLogger(__name__)

T = TypeVar("T")


class OrdList(list, Generic[T]):
    """
    A plain list that knows the direction it is kept sorted in.

    Indexing, slicing and removal are the ones of `list`; nothing stops a
    caller from breaking the order with `append` or item assignment, after
    which the `push_in_order*` results are unspecified. There is no locking:
    an OrdList must not be pushed to from several threads at once.
    """

    def __init__(
        self,
        iterable: Iterable[T] = (),
        direction: Direction = "ascending",
        *,
        key: Optional[Callable[[T], Any]] = None,
        cmp: Comparator = partial_compare,
        presorted: bool = False,
    ):
        self.direction = check_direction(direction)
        self.key = key
        self.cmp = cmp
        if presorted:
            super().__init__(iterable)
        else:
            super().__init__(sorted(iterable, key=self._sort_key(), reverse=self.direction == "descending"))

    def _sort_key(self):
        # same order the pushes will assume; an incomparable pair fails like a push
        cmp, key = self.cmp, self.key

        def order(one: T, other: T) -> int:
            if key is not None:
                one, other = key(one), key(other)
            res = cmp(one, other)
            if res is None:
                raise InsertionError()
            return res

        return cmp_to_key(order)

    def insertion_index(self, item: T) -> Optional[int]:
        return insertion_index(item, self, self.direction, cmp=self.cmp, key=self.key)

    def _push(self, item: T, direction: Direction) -> int:
        return insert_in_order(self, item, direction, cmp=self.cmp, key=self.key)

    def push_in_order(self, item: T) -> int:
        return self._push(item, self.direction)

    def push_in_order_ascending(self, item: T) -> int:
        return self._push(item, "ascending")

    def push_in_order_descending(self, item: T) -> int:
        return self._push(item, "descending")

    def extend_in_order(self, items: Iterable[T]) -> list[int]:
        out = []
        for item in items:
            out.append(self.push_in_order(item))
        logger.debug("pushed %s items, length now %s", len(out), len(self))
        return out

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list.__repr__(self)}, direction={self.direction!r})"
