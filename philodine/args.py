"""Command-line argument checking and the rules of a simulation."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

_WHITESPACE = " \t\n\v\f\r"
_LEADING_DIGITS = re.compile(r"[0-9]*")
_NUMBER = re.compile(r"\+?[0-9]*")
_INT_BITS = 32


class ArgumentError(ValueError):
    """Raised when command-line arguments do not describe a simulation."""


@dataclass(frozen=True)
class Rules:
    """Parameters of one dinner; times are in milliseconds."""

    number_of_philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    must_eat: int | None = None


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping on overflow."""
    modulus = 1 << _INT_BITS
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def parse_leading_int(text: str) -> int:
    """Read the integer at the start of ``text``, like C's atoi.

    Leading whitespace and one sign are accepted; reading stops at the
    first non-digit.  Text without digits yields 0, and values outside
    the signed 32-bit range wrap around.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = _LEADING_DIGITS.match(rest).group()
    return _wrap_int(sign * int(digits)) if digits else 0


def is_valid_number(text: str) -> bool:
    """Tell whether ``text`` is a non-empty run of digits with an optional '+'."""
    return bool(text) and _NUMBER.fullmatch(text) is not None


def check_arguments(args: Sequence[str]) -> bool:
    """Tell whether every argument is a number and there is at least one philosopher."""
    if not args:
        return False
    if not all(is_valid_number(arg) for arg in args):
        return False
    return parse_leading_int(args[0]) >= 1


def parse_rules(args: Sequence[str]) -> Rules:
    """Build the rules from the arguments that follow the program name."""
    args = list(args)
    if len(args) not in (4, 5):
        raise ArgumentError(f"expected 4 or 5 arguments, got {len(args)}")
    if not check_arguments(args):
        raise ArgumentError(
            "arguments must be unsigned integers and there must be "
            "at least one philosopher"
        )
    values = [parse_leading_int(arg) for arg in args]
    must_eat = values[4] if len(values) == 5 else None
    return Rules(
        number_of_philosophers=values[0],
        time_to_die=values[1],
        time_to_eat=values[2],
        time_to_sleep=values[3],
        must_eat=must_eat,
    )