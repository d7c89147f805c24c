"""Singly linked lists of unsigned 64-bit integers built from cons cells."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

_UINT64_LIMIT = 1 << 64


@dataclass(eq=False, repr=False)
class Cons:
    """A mutable cons cell holding an unsigned 64-bit value and the next cell."""

    car: int
    cdr: Optional["Cons"] = None

    def __post_init__(self) -> None:
        if not 0 <= self.car < _UINT64_LIMIT:
            raise ValueError(f"value out of unsigned 64-bit range: {self.car}")

    def __iter__(self) -> Iterator[int]:
        cell: Optional[Cons] = self
        while cell is not None:
            yield cell.car
            cell = cell.cdr

    def __repr__(self) -> str:
        return f"Cons<{format_list(self)}>"


ConsList = Optional[Cons]


def _require(lst: ConsList) -> Cons:
    if lst is None:
        raise ValueError("list is empty")
    return lst


def cons(car: int, cdr: ConsList) -> Cons:
    """Return a new cell with the given value in front of ``cdr``."""
    return Cons(car, cdr)


def first(lst: ConsList) -> int:
    """Return the value of the first cell."""
    return _require(lst).car


def rest(lst: ConsList) -> ConsList:
    """Return the list following the first cell."""
    return _require(lst).cdr


def find(lst: ConsList, query: int) -> ConsList:
    """Return the first cell holding ``query``, or None if there is none."""
    cell: ConsList = _require(lst)
    while cell is not None:
        if cell.car == query:
            return cell
        cell = cell.cdr
    return None


def insert_sorted(lst: ConsList, n: int) -> Cons:
    """Insert ``n`` in place into a non-decreasing list and return the head."""
    if lst is None or n < lst.car:
        return cons(n, lst)
    cell = lst
    while cell.cdr is not None and cell.cdr.car < n:
        cell = cell.cdr
    cell.cdr = cons(n, cell.cdr)
    return lst


def reverse(lst: ConsList) -> ConsList:
    """Reverse the list in place and return the new head."""
    prev: ConsList = None
    cell = lst
    while cell is not None:
        following = cell.cdr
        cell.cdr = prev
        prev = cell
        cell = following
    return prev


def from_iterable(values: Iterable[int]) -> ConsList:
    """Build a list holding ``values`` in order."""
    head: ConsList = None
    for value in reversed(list(values)):
        head = cons(value, head)
    return head


def format_list(lst: ConsList) -> str:
    """Render the list as ``[a, b, c]``."""
    return "[" + ", ".join(str(value) for value in _require(lst)) + "]"