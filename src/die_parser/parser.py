# parser.py
"""Public entry points: text in, ParseResult out.

    >>> parse("3d10 - 5").roll
    Roll(number_of_sides=10, number_of_dice=3, modifier=-5)
    >>> parse("101d20").error
    <RollError.DICE_EXCEED_LIMIT: 'dice_exceed_limit'>
"""

from __future__ import annotations

import logging

import structlog

from die_parser.grammar import GrammarError, parse_structure
from die_parser.types import ParseResult, Roll, RollError
from die_parser.validation import check_roll_validity

# Routed through stdlib logging so nothing is emitted until setup_logging runs
_log = structlog.wrap_logger(logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger)

DEFAULT_MAX_DICE = 100
_MAX_DICE_CEILING = 0xFFFF


def parse(text: str) -> ParseResult:
    """Parse ``text`` as dice notation, allowing at most 100 dice."""
    return parse_with_limit(text, DEFAULT_MAX_DICE)


def parse_with_limit(text: str, max_dice: int) -> ParseResult:
    """Parse ``text`` as dice notation with a custom dice ceiling.

    Whitespace is ignored and trailing text after the notation is discarded.
    The exception is a roll written without a modifier whose trailing text
    still holds a signed number: ``"4d2abc+5"`` and ``"2d6 vs DC-5"`` are
    PARSING_ERROR, because the number reads as a modifier cut off from the
    die spec. ``max_dice=0`` disables the ceiling.
    """
    if not 0 <= max_dice <= _MAX_DICE_CEILING:
        raise ValueError(f"max_dice must be between 0 and {_MAX_DICE_CEILING}, got {max_dice}")

    _log.debug("die_parser.parse.start", text=text, max_dice=max_dice)
    try:
        raw = parse_structure(text)
    except GrammarError:
        _log.debug("die_parser.parse.rejected", text=text, reason=RollError.PARSING_ERROR.value)
        return ParseResult.failure(RollError.PARSING_ERROR)

    error = check_roll_validity(raw, max_dice)
    if error is not None:
        _log.debug("die_parser.parse.rejected", text=text, reason=error.value)
        return ParseResult.failure(error)

    roll = Roll(
        number_of_sides=raw.number_of_sides,
        number_of_dice=raw.number_of_dice,
        modifier=raw.modifier,
    )
    _log.debug("die_parser.parse.accepted", text=text, roll=roll.as_dict())
    return ParseResult.success(roll)
