"""Parse tabletop dice notation such as ``2d6`` or ``4d20 - 5``.

Try :func:`parse`.
"""

from die_parser.parser import DEFAULT_MAX_DICE, parse, parse_with_limit
from die_parser.types import ParseResult, Roll, RollError, RollParseError

__all__ = [
    "DEFAULT_MAX_DICE",
    "ParseResult",
    "Roll",
    "RollError",
    "RollParseError",
    "parse",
    "parse_with_limit",
]
