"""Assertion helpers for tests in projects that depend on this library."""

from domaincrafters_std.testing.asserts import assert_uuid_is_valid

__all__ = ["assert_uuid_is_valid"]
