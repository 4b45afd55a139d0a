"""Domain probe for authorization store reads.

Following Domain-Oriented Observability patterns, this probe captures
store-level events: lookups that came back empty, request-scoped cache
hits, and read failures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class AuthorizationStoreProbe(Protocol):
    """Domain probe for authorization store operations."""

    def subject_loaded(self, subject_id: int, role_count: int) -> None:
        """Record that a subject was loaded with its roles."""
        ...

    def subject_not_found(self, subject_id: int) -> None:
        """Record that a subject was not found."""
        ...

    def resource_not_found(self, resource_id: int) -> None:
        """Record that a resource was not found."""
        ...

    def edge_checked(
        self,
        subject_id: int,
        object_id: int,
        relation_type: str,
        exists: bool,
    ) -> None:
        """Record the result of a relationship edge lookup."""
        ...

    def subject_cache_hit(self, subject_id: int) -> None:
        """Record that a subject was served from the request-scoped cache."""
        ...

    def read_failed(self, operation: str, error: Exception) -> None:
        """Record that a store read failed."""
        ...

    def with_context(self, context: ObservationContext) -> AuthorizationStoreProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultAuthorizationStoreProbe:
    """Default implementation of AuthorizationStoreProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(
        self, context: ObservationContext
    ) -> DefaultAuthorizationStoreProbe:
        """Create a new probe with observation context bound."""
        return DefaultAuthorizationStoreProbe(logger=self._logger, context=context)

    def subject_loaded(self, subject_id: int, role_count: int) -> None:
        self._logger.debug(
            "subject_loaded",
            subject_id=subject_id,
            role_count=role_count,
            **self._get_context_kwargs(),
        )

    def subject_not_found(self, subject_id: int) -> None:
        self._logger.debug(
            "subject_not_found",
            subject_id=subject_id,
            **self._get_context_kwargs(),
        )

    def resource_not_found(self, resource_id: int) -> None:
        self._logger.debug(
            "resource_not_found",
            resource_id=resource_id,
            **self._get_context_kwargs(),
        )

    def edge_checked(
        self,
        subject_id: int,
        object_id: int,
        relation_type: str,
        exists: bool,
    ) -> None:
        self._logger.debug(
            "relationship_edge_checked",
            subject_id=subject_id,
            object_id=object_id,
            relation_type=relation_type,
            exists=exists,
            **self._get_context_kwargs(),
        )

    def subject_cache_hit(self, subject_id: int) -> None:
        self._logger.debug(
            "subject_cache_hit",
            subject_id=subject_id,
            **self._get_context_kwargs(),
        )

    def read_failed(self, operation: str, error: Exception) -> None:
        self._logger.error(
            "authorization_store_read_failed",
            operation=operation,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )
