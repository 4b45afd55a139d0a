"""Domain probe for record content reads."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class RecordRepositoryProbe(Protocol):
    """Domain probe for record repository operations."""

    def record_loaded(self, resource_id: int) -> None:
        """Record that a record's contents were read."""
        ...

    def record_not_found(self, resource_id: int) -> None:
        ...

    def read_failed(self, operation: str, error: Exception) -> None:
        ...

    def with_context(self, context: ObservationContext) -> RecordRepositoryProbe:
        ...


class DefaultRecordRepositoryProbe:
    """Default implementation of RecordRepositoryProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultRecordRepositoryProbe:
        return DefaultRecordRepositoryProbe(logger=self._logger, context=context)

    def record_loaded(self, resource_id: int) -> None:
        # Contents are never logged, only which record was read
        self._logger.info(
            "patient_record_read",
            resource_id=resource_id,
            **self._get_context_kwargs(),
        )

    def record_not_found(self, resource_id: int) -> None:
        self._logger.debug(
            "patient_record_not_found",
            resource_id=resource_id,
            **self._get_context_kwargs(),
        )

    def read_failed(self, operation: str, error: Exception) -> None:
        self._logger.error(
            "record_repository_read_failed",
            operation=operation,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )
