"""A cons list: each cell holds a value and the rest of the list."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Nil:
    """The empty list."""

    def __iter__(self) -> Iterator[int]:
        return iter(())


@dataclass(frozen=True)
class Cons:
    """A value followed by the rest of the list."""

    value: int
    next: Cons | Nil

    def __iter__(self) -> Iterator[int]:
        cell: Cons | Nil = self
        while isinstance(cell, Cons):
            yield cell.value
            cell = cell.next


def create_empty_list() -> Nil:
    """An empty cons list."""
    return Nil()


def create_non_empty_list() -> Cons:
    """A cons list holding a single value."""
    return Cons(1, Nil())