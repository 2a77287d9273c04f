"""Optional — an immutable container for zero or one value.

``None`` is the absence sentinel: an Optional is present exactly when it
holds something other than ``None``. Combinators propagate absence, so a
chain such as ``Optional.of_nullable(x).map(f).filter(p)`` never calls
``f`` or ``p`` on a missing value.

INVARIANT: presence and payload are fixed at construction.
"""

from __future__ import annotations

import numbers
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from domaincrafters_std.domain.exceptions import (
    IllegalArgumentException,
    IllegalStateException,
    NotFoundException,
)

T = TypeVar("T")
U = TypeVar("U")

# Payloads of these types compare by value; everything else by identity.
_SCALAR_TYPES: tuple[type, ...] = (str, bytes, numbers.Number, Enum)


def _same_value(left: object, right: object) -> bool:
    if left is right:
        return True
    return (
        isinstance(left, _SCALAR_TYPES)
        and isinstance(right, _SCALAR_TYPES)
        and left == right
    )


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Optional(Generic[T]):
    """Immutable wrapper around a value that may be absent."""

    _value: T | None = None

    # --- Construction ---

    @classmethod
    def of(cls, value: T) -> Optional[T]:
        """Wrap a value that is known to be present.

        Raises:
            IllegalArgumentException: If *value* is ``None``.
        """
        if value is None:
            raise IllegalArgumentException("Cannot create Optional.of with None")
        return cls(value)

    @classmethod
    def of_nullable(cls, value: T | None) -> Optional[T]:
        """Wrap *value*, yielding an empty Optional when it is ``None``."""
        return cls(value)

    @classmethod
    def empty(cls) -> Optional[T]:
        return cls()

    # --- Accessors ---

    @property
    def value(self) -> T:
        """The held value.

        Raises:
            IllegalStateException: If the Optional is empty.
        """
        if self._value is None:
            raise IllegalStateException("Value is not present")
        return self._value

    @property
    def is_present(self) -> bool:
        return self._value is not None

    def get_or_else(self, default: T) -> T:
        if self._value is None:
            return default
        return self._value

    # --- Combinators ---

    def map(self, mapper: Callable[[T], U | None]) -> Optional[U]:
        """Apply *mapper* to a present value; a ``None`` result becomes empty."""
        if self._value is None:
            return Optional()
        return Optional(mapper(self._value))

    def flat_map(self, mapper: Callable[[T], Optional[U] | None]) -> Optional[U]:
        """Apply an Optional-returning *mapper* without re-wrapping its result."""
        if self._value is None:
            return Optional()
        result = mapper(self._value)
        if result is None:
            return Optional()
        return result

    def filter(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Keep the value only when *predicate* holds for it."""
        if self._value is None:
            return self
        return self if predicate(self._value) else Optional()

    # --- Terminal operations ---

    def if_present(self, consumer: Callable[[T], object]) -> None:
        if self._value is not None:
            consumer(self._value)

    def or_else_raise(self, error_factory: Callable[[], BaseException]) -> T:
        """Return the value, or raise the exception built by *error_factory*."""
        if self._value is not None:
            return self._value
        raise error_factory()

    def get_or_raise(self, message: str) -> T:
        """Return the value, or raise :class:`NotFoundException` with *message*."""
        if self._value is not None:
            return self._value
        raise NotFoundException(message)

    # --- Equality and display ---

    def equals(self, other: Optional[Any]) -> bool:
        """Both empty, or both holding the same value.

        Scalars (strings, numbers, enum members) compare by value. Any other
        payload compares by identity: two Optionals wrapping equal but
        distinct lists are not equal.
        """
        if self._value is None or other._value is None:
            return self._value is None and other._value is None
        return _same_value(self._value, other._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Optional):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        if self._value is None:
            return hash(None)
        if isinstance(self._value, _SCALAR_TYPES):
            return hash(self._value)
        return id(self._value)

    def __str__(self) -> str:
        if self._value is None:
            return "Optional.empty"
        return f"Optional({self._value})"

    def __repr__(self) -> str:
        if self._value is None:
            return "Optional.empty"
        return f"Optional({self._value!r})"
