"""Basics: strings, options, conditionals, functions and vectors."""

from __future__ import annotations

from collections.abc import Iterable

_COLOR_WORDS = ("green", "blue", "red")


def is_a_color_word(attempt: str) -> bool:
    """Whether attempt is one of the known colour words."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """Remove whitespace from both ends."""
    return text.strip()


def compose_me(text: str) -> str:
    """Add " world!" to the end."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """Replace "cars" with "balloons"."""
    return text.replace("cars", "balloons")


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at an hour of a 24-hour day; None for invalid hours.

    There are 5 pieces before 22:00 and none from then on.
    """
    if time_of_day < 0:
        raise ValueError("time of day must not be negative")
    if time_of_day > 23:
        return None
    return 5 if time_of_day < 22 else 0


def bigger(a: int, b: int) -> int:
    """The larger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """"foo" for "fizz", "bar" for "fuzz", otherwise "baz"."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def is_even(num: int) -> bool:
    """Whether num is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """num multiplied by itself."""
    return num * num


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed-size tuple and a list holding the same elements."""
    array = (10, 20, 30, 40)
    return array, list(array)


def vec_loop(values: Iterable[int]) -> list[int]:
    """Double every value."""
    return [value * 2 for value in values]


def vec_map(values: Iterable[int]) -> list[int]:
    """Double every value with map."""
    return list(map(lambda value: value * 2, values))