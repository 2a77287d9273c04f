"""Exception taxonomy shared by every primitive in the library.

A closed, flat set of kinds. Catch sites may dispatch on the class
(``except NotFoundException``) or on the ``kind`` discriminant
(``match exc.kind``); both stay in sync because each class pins its kind.

INVARIANT: every exception carries a non-empty, human-readable message.
"""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar


class ExceptionKind(StrEnum):
    """Discriminant identifying which taxonomy member an error belongs to."""

    DOMAIN = "domain"
    ILLEGAL_STATE = "illegal_state"
    NOT_FOUND = "not_found"
    ILLEGAL_ARGUMENT = "illegal_argument"


class StdException(Exception):
    """Root of the taxonomy. Never raised directly; use a concrete kind."""

    kind: ClassVar[ExceptionKind]

    def __init__(self, message: str) -> None:
        if type(self) is StdException:
            raise TypeError("StdException is abstract; raise a concrete kind")
        if not message or not message.strip():
            raise ValueError(f"{type(self).__name__} requires a non-empty message")
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class DomainException(StdException):
    """A general domain rule was violated."""

    kind = ExceptionKind.DOMAIN


class IllegalStateException(StdException, RuntimeError):
    """An operation was invoked while the receiver's state forbids it."""

    kind = ExceptionKind.ILLEGAL_STATE


class NotFoundException(StdException, LookupError):
    """A requested lookup yielded no result."""

    kind = ExceptionKind.NOT_FOUND


class IllegalArgumentException(StdException, ValueError):
    """An argument failed validation. Default kind raised by Guard."""

    kind = ExceptionKind.ILLEGAL_ARGUMENT
