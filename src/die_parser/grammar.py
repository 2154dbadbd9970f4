# grammar.py
"""Structural parsing of dice notation.

Turns text such as ``"4 d 20 - 5"`` into an unvalidated triple. Nothing here
knows which die types or dice counts are acceptable; see
:mod:`die_parser.validation` for that.
"""

from __future__ import annotations

import logging
import re
from typing import NamedTuple

import structlog

_log = structlog.wrap_logger(logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger)

_U16_MAX = 0xFFFF

_DICE_SPEC_RE = re.compile(r"(?P<count>[0-9]+)d(?P<sides>[0-9]+)")
_DIGITS_RE = re.compile(r"[0-9]+")
# A signed number left behind in the remainder of an unmodified roll.
_DETACHED_MODIFIER_RE = re.compile(r"[+\-][0-9]")


class GrammarError(ValueError):
    """Raised when input does not match ``<count>d<sides>[<sign><digits>]``."""

    pass


class RawRoll(NamedTuple):
    """Dice count, face count and modifier as written, before validation."""

    number_of_dice: int
    number_of_sides: int
    modifier: int


def strip_whitespace(text: str) -> str:
    return "".join(text.split())


def _to_u16(digits: str) -> int:
    # int() refuses digit strings past sys.get_int_max_str_digits()
    significant = digits.lstrip("0") or "0"
    if len(significant) > 5 or int(significant) > _U16_MAX:
        raise GrammarError(f"Number out of range: {digits[:12]}")
    return int(significant)


def parse_number(text: str) -> tuple[str, int]:
    """Parse an unsigned 16-bit integer from the start of ``text``."""
    m = _DIGITS_RE.match(text)
    if not m:
        raise GrammarError(f"Expected digits at {text!r}")
    return text[m.end():], _to_u16(m.group())


def parse_dice_spec(text: str) -> tuple[str, tuple[int, int]]:
    """Parse ``<count>d<sides>`` from the start of ``text``.

    Returns the unconsumed remainder and ``(number_of_dice, number_of_sides)``.
    """
    m = _DICE_SPEC_RE.match(text)
    if not m:
        raise GrammarError(f"Expected <count>d<sides> at {text!r}")
    count = _to_u16(m.group("count"))
    sides = _to_u16(m.group("sides"))
    return text[m.end():], (count, sides)


def parse_modifier(text: str) -> tuple[str, int]:
    """Parse an optional ``+N``/``-N`` from the start of ``text``.

    Without a leading sign nothing is consumed and the modifier is 0. A sign
    that is not directly followed by digits is a GrammarError.
    """
    if not text or text[0] not in "+-":
        return text, 0
    sign, rest = text[0], text[1:]
    remainder, magnitude = parse_number(rest)
    return remainder, -magnitude if sign == "-" else magnitude


def parse_structure(text: str) -> RawRoll:
    """Strip whitespace and parse the full notation into a RawRoll.

    Trailing text after a complete match is ignored, so notation can be
    embedded in a sentence (``"2d6+1 for damage"``). A signed number that got
    separated from an unmodified die spec by other text (``"4d2abc+5"``) is
    rejected rather than silently dropped.
    """
    compact = strip_whitespace(text)
    try:
        remainder, (count, sides) = parse_dice_spec(compact)
        signed = remainder.startswith(("+", "-"))
        remainder, modifier = parse_modifier(remainder)
        if not signed and _DETACHED_MODIFIER_RE.search(remainder):
            raise GrammarError(f"Modifier detached from die spec in {remainder!r}")
    except GrammarError as exc:
        _log.debug("die_parser.grammar.failed", text=text, reason=str(exc))
        raise
    return RawRoll(count, sides, modifier)
