"""IdService — UUID generation, parsing and validation."""

from __future__ import annotations

import logging

from domaincrafters_std.domain.exceptions import IllegalArgumentException
from domaincrafters_std.domain.guard import Guard
from domaincrafters_std.domain.ids import UUID, is_valid_uuid
from domaincrafters_std.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

DEFAULT_MAX_GENERATE = 1000


class IdService:
    """UUID operations exposed to the CLI.

    Args:
        max_generate: Largest batch :meth:`create` will produce.
    """

    def __init__(self, *, max_generate: int = DEFAULT_MAX_GENERATE) -> None:
        self._max_generate = max_generate

    def create(self, count: int = 1) -> ServiceResult:
        """Generate *count* random v4 UUIDs."""
        op = "create_uuid"
        try:
            Guard.check(count, "count").against_null_or_undefined().is_in_range(
                1, self._max_generate
            )
        except IllegalArgumentException as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError.from_exception(exc, code="INVALID_COUNT", count=count),
            )

        uuids = [str(UUID.create()) for _ in range(count)]
        logger.debug("Generated %d UUID(s)", count)
        return ServiceResult(ok=True, op=op, data={"uuids": uuids, "count": count})

    def parse(self, text: str) -> ServiceResult:
        """Parse *text* into its canonical lowercase form."""
        op = "parse_uuid"
        try:
            parsed = UUID.parse(text)
        except IllegalArgumentException as exc:
            logger.debug("Rejected UUID %r", text)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError.from_exception(exc, code="INVALID_UUID", value=text),
            )
        return ServiceResult(ok=True, op=op, data={"uuid": parsed.value.lower()})

    def validate(self, values: list[str]) -> ServiceResult:
        """Report v4 validity for each of *values*.

        Fails with ``INVALID_UUID`` when any value is invalid; the per-value
        report is included in the error detail either way. The report keeps
        one ``{"value", "valid"}`` record per input, in order, repeats included.
        """
        op = "validate_uuid"
        report = [{"value": value, "valid": is_valid_uuid(value)} for value in values]
        invalid = [entry["value"] for entry in report if not entry["valid"]]
        if invalid:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="INVALID_UUID",
                    message=f"{len(invalid)} of {len(report)} value(s) are not valid UUIDs",
                    detail={"results": report, "invalid": invalid},
                ),
            )
        return ServiceResult(ok=True, op=op, data={"results": report})

    def empty(self) -> ServiceResult:
        return ServiceResult(ok=True, op="empty_uuid", data={"uuid": UUID.EMPTY.value})
