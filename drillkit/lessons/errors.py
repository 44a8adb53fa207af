"""Error handling: name tags, token costs and positive non-zero integers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_SIGNED = re.compile(r"[+-]?[0-9]+")

PROCESSING_FEE = 1
COST_PER_ITEM = 5


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width, strictly."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _SIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > 2 ** (bits - 1) - 1:
        raise ValueError("number too large to fit in target type")
    if value < -(2 ** (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; raise ValueError when the name is empty."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Token cost of buying the typed quantity of items, fee included."""
    qty = _parse_int(item_quantity, 32)
    return qty * COST_PER_ITEM + PROCESSING_FEE


def purchase(tokens: int, item_quantity: str) -> int:
    """Spend tokens on the typed quantity of items and return what is left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        raise ValueError("You can't afford that many!")
    return tokens - cost


class CreationErrorKind(Enum):
    """Why a positive non-zero integer could not be created."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """Raised when a value is not a positive non-zero integer."""

    def __init__(self, kind: CreationErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer strictly greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationErrorKind.ZERO)


class ParsePosNonzeroError(ValueError):
    """Raised when text does not hold a positive non-zero integer."""

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause
        self.creation: CreationError | None = (
            cause if isinstance(cause, CreationError) else None
        )
        self.parse_int: ValueError | None = (
            None if isinstance(cause, CreationError) else cause
        )

    @classmethod
    def from_creation(cls, error: CreationError) -> ParsePosNonzeroError:
        return cls(error)

    @classmethod
    def from_parse_int(cls, error: ValueError) -> ParsePosNonzeroError:
        return cls(error)


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a positive non-zero integer."""
    try:
        value = _parse_int(text, 64)
    except ValueError as error:
        raise ParsePosNonzeroError.from_parse_int(error) from error
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as error:
        raise ParsePosNonzeroError.from_creation(error) from error