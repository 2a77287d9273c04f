"""Runtime type tags and value capabilities used by Guard.

Guard speaks in terms of a fixed, closed set of type names rather than
Python classes, so checks read the same regardless of which concrete
numeric or callable type a caller passes in.
"""

from __future__ import annotations

import math
import numbers
from decimal import Decimal
from enum import Enum, StrEnum

# Largest integer magnitude that still counts as a plain "number".
MAX_SAFE_INTEGER = 2**53 - 1


class TypeName(StrEnum):
    """Closed set of runtime type tags accepted by ``Guard.is_type``."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    FUNCTION = "function"
    SYMBOL = "symbol"
    UNDEFINED = "undefined"
    BIGINT = "bigint"


def is_number(value: object) -> bool:
    """True for real numbers and decimals; ``bool`` is not a number."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (numbers.Real, Decimal))


def is_valid_number(value: object) -> bool:
    """True for numbers that are not NaN."""
    if not is_number(value):
        return False
    if isinstance(value, Decimal):
        return not value.is_nan()
    if isinstance(value, float):
        return not math.isnan(value)
    # Integers and fractions can't be NaN; other Real types may define one.
    return value == value


def type_name_of(value: object) -> TypeName:
    """Resolve the runtime type tag of *value*.

    Order matters: ``bool`` is an ``int`` subclass and enum members may
    also be strings or ints, so both are tested before the numeric and
    string branches.
    """
    if value is None:
        return TypeName.UNDEFINED
    if isinstance(value, bool):
        return TypeName.BOOLEAN
    if isinstance(value, Enum):
        return TypeName.SYMBOL
    if isinstance(value, str):
        return TypeName.STRING
    if isinstance(value, int) and abs(value) > MAX_SAFE_INTEGER:
        return TypeName.BIGINT
    if is_number(value):
        return TypeName.NUMBER
    if callable(value):
        return TypeName.FUNCTION
    return TypeName.OBJECT
