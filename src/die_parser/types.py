# types.py

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class RollError(Enum):
    """The reasons a piece of dice notation can be rejected."""

    DIE_TYPE_INVALID = "die_type_invalid"
    DICE_EXCEED_LIMIT = "dice_exceed_limit"
    NO_DICE_TO_ROLL = "no_dice_to_roll"
    PARSING_ERROR = "parsing_error"

    @property
    def message(self) -> str:
        return _MESSAGES[self]

    def __str__(self) -> str:
        return self.message


_MESSAGES = {
    RollError.DIE_TYPE_INVALID: "The requested type of die is invalid.",
    RollError.DICE_EXCEED_LIMIT: "Amount of dice exceeds the specified limit.",
    RollError.NO_DICE_TO_ROLL: "Can't roll less than 1 die.",
    RollError.PARSING_ERROR: "Failed to parse the input string.",
}


class RollParseError(ValueError):
    """Raised by the exception-based helpers when notation is rejected."""

    def __init__(self, error: RollError):
        super().__init__(error.message)
        self.error = error


@dataclass(frozen=True)
class Roll:
    """A validated roll request, e.g. ``4d20-5``.

    Constructing a Roll directly performs no validation; use
    :func:`die_parser.parse` to turn user input into a checked Roll.
    """

    number_of_sides: int
    number_of_dice: int
    modifier: int = 0

    @classmethod
    def new(cls, number_of_sides: int, number_of_dice: int, modifier: int) -> Roll:
        return cls(number_of_sides, number_of_dice, modifier)

    @classmethod
    def from_notation(cls, text: str, max_dice: int | None = None) -> Roll:
        """Parse and validate ``text``, raising RollParseError on failure.

        ``max_dice`` defaults to the standard ceiling of 100 dice; pass 0 to
        lift the ceiling entirely.
        """
        from die_parser.parser import DEFAULT_MAX_DICE, parse_with_limit

        limit = DEFAULT_MAX_DICE if max_dice is None else max_dice
        return parse_with_limit(text, limit).unwrap()

    def notation(self) -> str:
        base = f"{self.number_of_dice}d{self.number_of_sides}"
        if self.modifier > 0:
            return f"{base}+{self.modifier}"
        if self.modifier < 0:
            return f"{base}-{-self.modifier}"
        return base

    def as_dict(self) -> dict[str, Any]:
        return {
            "number_of_sides": self.number_of_sides,
            "number_of_dice": self.number_of_dice,
            "modifier": self.modifier,
        }

    def __str__(self) -> str:
        return self.notation()


@dataclass(frozen=True)
class ParseResult:
    """Outcome of a parse: exactly one of ``roll`` or ``error`` is set."""

    roll: Roll | None = None
    error: RollError | None = None

    def __post_init__(self) -> None:
        if (self.roll is None) == (self.error is None):
            raise ValueError("ParseResult needs exactly one of roll or error")

    @classmethod
    def success(cls, roll: Roll) -> ParseResult:
        return cls(roll=roll)

    @classmethod
    def failure(cls, error: RollError) -> ParseResult:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Roll:
        if self.roll is not None:
            return self.roll
        raise RollParseError(self.error)  # type: ignore[arg-type]
