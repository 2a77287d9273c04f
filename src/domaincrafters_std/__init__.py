"""domaincrafters-std — Optional, Guard, an exception taxonomy and UUIDs."""

from domaincrafters_std.domain.exceptions import (
    DomainException,
    ExceptionKind,
    IllegalArgumentException,
    IllegalStateException,
    NotFoundException,
    StdException,
)
from domaincrafters_std.domain.guard import Guard
from domaincrafters_std.domain.ids import UUID, is_valid_uuid
from domaincrafters_std.domain.optional import Optional
from domaincrafters_std.domain.types import TypeName
from domaincrafters_std.testing.asserts import assert_uuid_is_valid

__version__ = "1.0.0"

__all__ = [
    "UUID",
    "DomainException",
    "ExceptionKind",
    "Guard",
    "IllegalArgumentException",
    "IllegalStateException",
    "NotFoundException",
    "Optional",
    "StdException",
    "TypeName",
    "__version__",
    "assert_uuid_is_valid",
    "is_valid_uuid",
]
