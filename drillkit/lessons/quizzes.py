"""Quiz solutions: apple prices, a string transformer and report cards."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


def calculate_price_of_apples(amount: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    return amount if amount > 40 else amount * 2


class _Action(Enum):
    UPPERCASE = "uppercase"
    TRIM = "trim"
    APPEND = "append"


@dataclass(frozen=True)
class Command:
    """A transformation applied to a string."""

    action: _Action
    times: int = 0

    @classmethod
    def uppercase(cls) -> Command:
        return cls(_Action.UPPERCASE)

    @classmethod
    def trim(cls) -> Command:
        return cls(_Action.TRIM)

    @classmethod
    def append(cls, times: int) -> Command:
        if times < 0:
            raise ValueError("times must not be negative")
        return cls(_Action.APPEND, times)

    def apply(self, text: str) -> str:
        """Return text transformed by this command."""
        if self.action is _Action.UPPERCASE:
            return text.upper()
        if self.action is _Action.TRIM:
            return text.strip()
        return text + "bar" * self.times


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string, in order."""
    return [command.apply(text) for text, command in items]


@dataclass
class ReportCard:
    """A student's report card with a numeric or alphabetical grade."""

    grade: float | str
    student_name: str
    student_age: int

    def render(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )