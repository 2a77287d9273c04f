"""UUID value type and version-4 validation.

Generation draws from the OS CSPRNG via :func:`uuid.uuid4`. Parsing only
accepts canonical RFC 4122 version-4 strings (8-4-4-4-12 hex, any case).

INVARIANT: a UUID's string form never changes after construction.
"""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass
from typing import ClassVar

from domaincrafters_std.domain.exceptions import IllegalArgumentException

UUID_V4_PATTERN: re.Pattern[str] = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)

NIL_UUID = "00000000-0000-0000-0000-000000000000"


def is_valid_uuid(text: object) -> bool:
    """Check whether *text* is a canonical version-4 UUID string."""
    if not isinstance(text, str):
        return False
    return UUID_V4_PATTERN.fullmatch(text) is not None


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class UUID:
    """Immutable UUID identifier.

    Build instances with :meth:`create` or :meth:`parse`; the constructor
    performs no validation and is reserved for trusted strings.
    """

    EMPTY: ClassVar[UUID]

    _value: str

    @classmethod
    def create(cls) -> UUID:
        return cls(str(uuid.uuid4()))

    @classmethod
    def parse(cls, text: str) -> UUID:
        """Parse a version-4 UUID string.

        Raises:
            IllegalArgumentException: If *text* is not a valid v4 UUID.
        """
        if not is_valid_uuid(text):
            raise IllegalArgumentException("Invalid UUID")
        return cls(text)

    @property
    def value(self) -> str:
        return self._value

    def equals(self, other: UUID | str | None) -> bool:
        """Case-insensitive comparison with another UUID or its string form.

        Anything else compares unequal.
        """
        if isinstance(other, UUID):
            other = other._value
        if not isinstance(other, str):
            return False
        return self._value.lower() == other.lower()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UUID):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self._value.lower())

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"UUID({self._value!r})"


UUID.EMPTY = UUID(NIL_UUID)
