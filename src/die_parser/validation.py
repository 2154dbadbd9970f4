# validation.py

from __future__ import annotations

import logging

import structlog

from die_parser.grammar import RawRoll
from die_parser.types import RollError

_log = structlog.wrap_logger(logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger)

ALLOWED_SIDES: frozenset[int] = frozenset({2, 4, 6, 8, 10, 12, 20, 100})


def check_roll_validity(raw: RawRoll, max_dice: int) -> RollError | None:
    """Return the first rule ``raw`` breaks, or None if it is a valid roll.

    Rules are checked in order: die type, then the ceiling, then the lower
    bound. A ``max_dice`` of 0 means there is no ceiling, not a ceiling of 0.
    """
    if raw.number_of_sides not in ALLOWED_SIDES:
        error = RollError.DIE_TYPE_INVALID
    elif max_dice != 0 and raw.number_of_dice > max_dice:
        error = RollError.DICE_EXCEED_LIMIT
    elif raw.number_of_dice < 1:
        error = RollError.NO_DICE_TO_ROLL
    else:
        return None

    _log.debug(
        "die_parser.validation.failed",
        reason=error.value,
        number_of_dice=raw.number_of_dice,
        number_of_sides=raw.number_of_sides,
        max_dice=max_dice,
    )
    return error
