from __future__ import annotations

import logging
from typing import Any, Callable, MutableSequence, Optional

from .ordering import Comparator, Direction, partial_compare
from .search import insertion_index

logger = logging.getLogger(__name__)


class InsertionError(ValueError):
    """An item could not be placed because a comparison had no defined order."""

    message = "failed to insert item in order"

    def __init__(self) -> None:
        super().__init__(self.message)

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def insert_in_order(
    values: MutableSequence[Any],
    item: Any,
    direction: Direction = "ascending",
    *,
    cmp: Comparator = partial_compare,
    key: Optional[Callable[[Any], Any]] = None,
) -> int:
    idx = insertion_index(item, values, direction, cmp=cmp, key=key)
    if idx is None:
        logger.debug("no %s position for %r among %s values", direction, item, len(values))
        raise InsertionError()
    values.insert(idx, item)
    return idx


def insert_ascending(values: MutableSequence[Any], item: Any, **kwargs: Any) -> int:
    return insert_in_order(values, item, "ascending", **kwargs)


def insert_descending(values: MutableSequence[Any], item: Any, **kwargs: Any) -> int:
    return insert_in_order(values, item, "descending", **kwargs)
