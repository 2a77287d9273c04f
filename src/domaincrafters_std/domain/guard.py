"""Guard — fluent precondition checks bound to a single value.

Usage::

    Guard.check(name, "name").against_null_or_undefined().against_whitespace()
    Guard.check(age, "age", DomainException).is_in_range(0, 150)

Every check returns the same guard on success and raises on failure,
aborting the chain. Failure messages have a fixed shape so they can be
asserted on directly::

    "<parameter_name> <reason>. Actual value: <value as JSON>."

INVARIANT: a guard never mutates or replaces the value it was built with.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sized
from dataclasses import dataclass
from typing import Generic, NoReturn, Self, TypeVar

from pydantic_core import PydanticSerializationError, to_json

from domaincrafters_std.domain.exceptions import IllegalArgumentException
from domaincrafters_std.domain.types import TypeName, is_valid_number, type_name_of

T = TypeVar("T")

ExceptionFactory = Callable[[str], BaseException]

DEFAULT_PARAMETER_NAME = "value"


def serialize_actual(value: object) -> str:
    """Compact JSON rendering of *value* for failure messages.

    NaN, infinities and values with no JSON form render as ``null``, as do
    values the encoder rejects outright (lone surrogates, non-UTF-8 bytes,
    circular containers).
    """
    try:
        return to_json(value, inf_nan_mode="null", fallback=lambda _: None).decode("utf-8")
    except (PydanticSerializationError, ValueError):
        return "null"


@dataclass(frozen=True, slots=True, eq=False)
class Guard(Generic[T]):
    """Validation session for one value and parameter name."""

    _value: T
    _parameter_name: str = DEFAULT_PARAMETER_NAME
    _exception_type: ExceptionFactory = IllegalArgumentException

    @classmethod
    def check(
        cls,
        value: T,
        parameter_name: str | None = DEFAULT_PARAMETER_NAME,
        exception_type: ExceptionFactory | None = None,
    ) -> Guard[T]:
        """Start a validation chain for *value*.

        Args:
            value: The value under test.
            parameter_name: Name used in failure messages.
            exception_type: Exception class (or any ``str -> exception``
                factory) raised on failure. Defaults to
                :class:`IllegalArgumentException`.
        """
        return cls(
            value,
            parameter_name or DEFAULT_PARAMETER_NAME,
            exception_type or IllegalArgumentException,
        )

    @property
    def value(self) -> T:
        return self._value

    @property
    def parameter_name(self) -> str:
        return self._parameter_name

    def _fail(self, message: str | None, reason: str) -> NoReturn:
        text = message or f"{self._parameter_name} {reason}."
        raise self._exception_type(f"{text} Actual value: {serialize_actual(self._value)}.")

    def _require_number(self, message: str | None) -> None:
        self.against_null_or_undefined(message)
        if not is_valid_number(self._value):
            self._fail(message, "must be a valid number")

    def _require_string(self, message: str | None) -> str:
        self.against_null_or_undefined(message)
        if not isinstance(self._value, str):
            self._fail(message, "must be a string")
        return self._value

    # --- Checks ---

    def against_null_or_undefined(self, message: str | None = None) -> Self:
        if self._value is None:
            self._fail(message, "cannot be null or undefined")
        return self

    def against_whitespace(self, message: str | None = None) -> Self:
        """Require a string with at least one non-whitespace character."""
        text = self._require_string(message)
        if not text.strip():
            self._fail(message, "cannot be empty or whitespace")
        return self

    def against_empty(self, message: str | None = None) -> Self:
        """Require a sized value (string, sequence, mapping, ...) with ``len() > 0``."""
        self.against_null_or_undefined(message)
        if not isinstance(self._value, Sized):
            self._fail(
                message,
                "must be a string, array, or have a length property to check for empty",
            )
        if len(self._value) == 0:
            self._fail(message, "cannot be empty")
        return self

    def against_negative(self, message: str | None = None) -> Self:
        self._require_number(message)
        if self._value < 0:  # type: ignore[operator]
            self._fail(message, "cannot be negative")
        return self

    def against_zero(self, message: str | None = None) -> Self:
        self._require_number(message)
        if self._value == 0:
            self._fail(message, "cannot be zero")
        return self

    def is_in_range(self, minimum: float, maximum: float, message: str | None = None) -> Self:
        """Require ``minimum <= value <= maximum`` (both bounds inclusive)."""
        self._require_number(message)
        if self._value < minimum or self._value > maximum:  # type: ignore[operator]
            self._fail(message, f"must be between {minimum} and {maximum}")
        return self

    def matches(self, pattern: str | re.Pattern[str], message: str | None = None) -> Self:
        """Require a string in which *pattern* finds a match.

        The pattern is searched, not anchored; use ``^...$`` for a full match.
        """
        text = self._require_string(message)
        if re.search(pattern, text) is None:
            self._fail(message, "does not match the required pattern")
        return self

    def is_type(self, type_name: TypeName | str, message: str | None = None) -> Self:
        """Require the runtime type tag of the value to equal *type_name*.

        Raises:
            ValueError: If *type_name* is not a :class:`TypeName`.
        """
        expected = TypeName(type_name)
        if type_name_of(self._value) is not expected:
            self._fail(message, f"must be of type {expected}")
        return self
