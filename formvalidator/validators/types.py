"""Type predicates — classify the shape of a raw field value.

Each predicate is a pure function of the value. Form payloads usually arrive as
strings, so "number" (a real numeric value) and "numeric" (a string carrying an
integer) are distinct types.
"""

import re
from collections.abc import Callable, Mapping
from typing import Any

from formvalidator.validators.models import TypeName

# Leading whitespace, optional sign, then a decimal digit or a hex prefix + digit.
# Anything may follow: "12abc" still carries an integer.
_INTEGER_PREFIX = re.compile(r"^\s*[+-]?(?:0[xX][0-9a-fA-F]|(?!0[xX])[0-9])")

_DIGITS = re.compile(r"[0-9]+")


def _is_digits(value: Any) -> bool:
    return isinstance(value, str) and _DIGITS.fullmatch(value) is not None


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_numeric(value: Any) -> bool:
    return isinstance(value, str) and _INTEGER_PREFIX.match(value) is not None


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_object(value: Any) -> bool:
    """Non-array and either None or a key-value container."""
    if is_array(value):
        return False
    return value is None or isinstance(value, Mapping)


def is_positive_integer(value: Any) -> bool:
    if is_number(value):
        return True
    return _is_digits(value) and value != "0"


def is_current_year_or_number(value: Any) -> bool:
    if _is_digits(value):
        return True
    return isinstance(value, str) and value.strip().lower() == "now"


TYPE_CHECKS: dict[TypeName, Callable[[Any], bool]] = {
    TypeName.NUMBER: is_number,
    TypeName.NUMERIC: is_numeric,
    TypeName.STRING: is_string,
    TypeName.BOOLEAN: is_boolean,
    TypeName.ARRAY: is_array,
    TypeName.OBJECT: is_object,
    TypeName.POSITIVE_INTEGER: is_positive_integer,
    TypeName.CURRENT_YEAR_OR_NUMBER: is_current_year_or_number,
}


def check_type(type_name: TypeName, value: Any) -> bool:
    """Evaluate a named type predicate against a value."""
    return TYPE_CHECKS[TypeName(type_name)](value)
