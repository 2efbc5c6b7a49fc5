"""Rule predicates — compare a numeric field value against configured bounds.

Rules only ever see numbers. The engine gates them on the "numeric" type and
converts the raw string with to_number() first; the payload value itself is
left untouched.
"""

import math
import re
from collections.abc import Callable, Sequence
from decimal import Decimal
from typing import Optional

from formvalidator.validators.models import Number, RuleName

_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INTEGER = re.compile(r"[+-]?[0-9]+")
_INFINITY = re.compile(r"([+-]?)Infinity")
_PREFIXED = {
    "0x": (re.compile(r"0[xX][0-9a-fA-F]+"), 16),
    "0o": (re.compile(r"0[oO][0-7]+"), 8),
    "0b": (re.compile(r"0[bB][01]+"), 2),
}


def to_number(text: str) -> Optional[Number]:
    """Convert a string the way a unary plus does in form handling code.

    Surrounding whitespace is ignored and a blank string is 0. Decimal
    literals (with optional exponent), unsigned 0x/0o/0b literals and
    "Infinity" are accepted. Returns None when the text is not a
    well-formed number, e.g. "12abc".
    """
    text = text.strip()
    if not text:
        return 0

    if _INTEGER.fullmatch(text):
        return int(text)
    if _DECIMAL.fullmatch(text):
        return float(text)

    prefixed = _PREFIXED.get(text[:2].lower())
    if prefixed is not None:
        pattern, base = prefixed
        if pattern.fullmatch(text):
            return int(text[2:], base)
        return None

    match = _INFINITY.fullmatch(text)
    if match:
        return -math.inf if match.group(1) == "-" else math.inf

    return None


def format_number(value: Number) -> str:
    """Render a rule argument for an error message: 5.0 → "5", 1.5 → "1.5".

    Floats from 1e-6 upward are written positionally ("0.00001", not "1e-05");
    smaller ones keep exponent notation.
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, float) and math.isfinite(value) and abs(value) >= 1e-6:
        return format(Decimal(repr(value)), "f")
    return str(value)


RULE_CHECKS: dict[RuleName, Callable[[Number, Sequence[Number]], bool]] = {
    RuleName.NO_RULE: lambda val, args: True,
    RuleName.GREATER_THAN: lambda val, args: val > args[0],
    RuleName.LESS_THAN: lambda val, args: val < args[0],
    RuleName.BETWEEN: lambda val, args: args[0] <= val <= args[1],
    RuleName.EQUAL_TO: lambda val, args: val == args[0],
}


def check_rule(rule_name: RuleName, value: Number, args: Sequence[Number]) -> bool:
    """Evaluate a named rule predicate against a number."""
    return RULE_CHECKS[RuleName(rule_name)](value, args)


def rule_error_message(rule_name: RuleName, args: Sequence[Number]) -> str:
    """Message recorded when a rule fails, e.g. "value has to be between 1 and 10"."""
    joined = " and ".join(format_number(arg) for arg in args)
    return f"value has to be {RuleName(rule_name).label} {joined}"
