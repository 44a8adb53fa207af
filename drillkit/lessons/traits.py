"""Traits: appending "Bar", shared licensing information and combined behaviour."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch
from typing import Any


@singledispatch
def append_bar(value: Any) -> Any:
    """Append "Bar" to a string, or the string "Bar" to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register(str)
def _append_bar_str(value: str) -> str:
    return value + "Bar"


@append_bar.register(list)
def _append_bar_list(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Gives every subclass the same licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software versioned by a number."""

    version_number: int


@dataclass
class OtherSoftware(Licensed):
    """Software versioned by a string."""

    version_number: str


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether two licensed items carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


class SomeStruct:
    """An item that provides both functions."""

    def some_function(self) -> bool:
        return True

    def other_function(self) -> bool:
        return True


def some_func(item: Any) -> bool:
    """True when both of the item's functions report True."""
    return item.some_function() and item.other_function()