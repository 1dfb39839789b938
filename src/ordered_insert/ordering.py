from __future__ import annotations

from typing import Any, Callable, Literal, Optional

Direction = Literal["ascending", "descending"]
Comparator = Callable[[Any, Any], Optional[int]]

DIRECTIONS: tuple[str, ...] = ("ascending", "descending")


def check_direction(direction: str) -> Direction:
    if direction not in DIRECTIONS:
        raise ValueError('direction must be one of: "ascending","descending"')
    return direction  # type: ignore[return-value]


def partial_compare(one: Any, other: Any) -> Optional[int]:
    # -1 / 0 / 1 like a cmp function; None when the pair has no defined order
    # (nan against anything, two sets where neither contains the other)
    if one < other:
        return -1
    if one > other:
        return 1
    if one == other:
        return 0
    return None


def directed(cmp: Comparator, direction: Direction) -> Comparator:
    """Wrap `cmp` so that the search can always probe as if ascending.

    For "descending" the sign of the result is flipped; an undefined
    comparison stays undefined.
    """
    if check_direction(direction) == "ascending":
        return cmp

    def inverted(one: Any, other: Any) -> Optional[int]:
        order = cmp(one, other)
        if order is None:
            return None
        return -order

    return inverted
