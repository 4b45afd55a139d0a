"""Domain probe for authorization decisions.

Following Domain-Oriented Observability patterns, this probe captures
every decision the engine makes, with enough metadata to explain it:
which subject asked, for what, and which path allowed or denied it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class DecisionProbe(Protocol):
    """Domain probe for authorization decisions."""

    def permission_granted(self, subject_id: int, permission: str) -> None:
        """Record that a role-based permission check allowed access."""
        ...

    def permission_denied(
        self,
        subject_id: int,
        permission: str,
        granted_permissions: frozenset[str],
    ) -> None:
        """Record that a role-based permission check denied access."""
        ...

    def relationship_granted(
        self,
        subject_id: int,
        resource_id: int,
        relation_type: str,
        via: str,
    ) -> None:
        """Record that a relationship check allowed access."""
        ...

    def relationship_denied(
        self,
        subject_id: int,
        resource_id: int,
        owner_id: int,
        relation_type: str,
    ) -> None:
        """Record that a relationship check denied access."""
        ...

    def resource_not_found(self, subject_id: int, resource_id: int) -> None:
        """Record that a relationship check referenced a missing resource."""
        ...

    def store_unavailable(
        self,
        operation: str,
        subject_id: int,
        error: Exception,
    ) -> None:
        """Record that a decision could not be made because the store failed."""
        ...

    def with_context(self, context: ObservationContext) -> DecisionProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultDecisionProbe:
    """Default implementation of DecisionProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultDecisionProbe:
        """Create a new probe with observation context bound."""
        return DefaultDecisionProbe(logger=self._logger, context=context)

    def permission_granted(self, subject_id: int, permission: str) -> None:
        """Record that a role-based permission check allowed access."""
        self._logger.debug(
            "rbac_check_passed",
            subject_id=subject_id,
            permission=permission,
            **self._get_context_kwargs(),
        )

    def permission_denied(
        self,
        subject_id: int,
        permission: str,
        granted_permissions: frozenset[str],
    ) -> None:
        """Record that a role-based permission check denied access."""
        self._logger.warning(
            "rbac_check_failed",
            subject_id=subject_id,
            required_permission=permission,
            subject_permissions=sorted(granted_permissions),
            **self._get_context_kwargs(),
        )

    def relationship_granted(
        self,
        subject_id: int,
        resource_id: int,
        relation_type: str,
        via: str,
    ) -> None:
        """Record that a relationship check allowed access."""
        self._logger.debug(
            "rebac_check_passed",
            subject_id=subject_id,
            resource_id=resource_id,
            relation_type=relation_type,
            via=via,
            **self._get_context_kwargs(),
        )

    def relationship_denied(
        self,
        subject_id: int,
        resource_id: int,
        owner_id: int,
        relation_type: str,
    ) -> None:
        """Record that a relationship check denied access."""
        self._logger.warning(
            "rebac_check_failed",
            subject_id=subject_id,
            resource_id=resource_id,
            resource_owner_id=owner_id,
            required_relationship=relation_type,
            **self._get_context_kwargs(),
        )

    def resource_not_found(self, subject_id: int, resource_id: int) -> None:
        """Record that a relationship check referenced a missing resource."""
        self._logger.info(
            "rebac_resource_not_found",
            subject_id=subject_id,
            resource_id=resource_id,
            **self._get_context_kwargs(),
        )

    def store_unavailable(
        self,
        operation: str,
        subject_id: int,
        error: Exception,
    ) -> None:
        """Record that a decision could not be made because the store failed."""
        self._logger.error(
            "authorization_store_unavailable",
            operation=operation,
            subject_id=subject_id,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )
