"""Domain probe for administrative operations on authorization data."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class AdministrationProbe(Protocol):
    """Domain probe for administration service operations."""

    def subject_created(self, subject_id: int, name: str) -> None:
        """Record that a subject was created."""
        ...

    def role_created(self, name: str) -> None:
        """Record that a role was created."""
        ...

    def permission_created(self, name: str) -> None:
        """Record that a permission was created."""
        ...

    def permission_granted(self, role_name: str, permission_name: str) -> None:
        """Record that a permission was assigned to a role."""
        ...

    def role_assigned(self, subject_id: int, role_name: str) -> None:
        """Record that a subject was made a member of a role."""
        ...

    def resource_created(self, resource_id: int, owner_id: int, kind: str) -> None:
        """Record that a resource was created."""
        ...

    def relationship_created(
        self, subject_id: int, object_id: int, relation_type: str
    ) -> None:
        """Record that a relationship edge was created."""
        ...

    def relationship_deleted(
        self, subject_id: int, object_id: int, relation_type: str
    ) -> None:
        """Record that a relationship edge was deleted."""
        ...

    def duplicate_relationship(
        self, subject_id: int, object_id: int, relation_type: str
    ) -> None:
        """Record that creating an already existing edge was rejected."""
        ...

    def data_reset(self) -> None:
        """Record that all authorization data was deleted."""
        ...

    def seed_completed(self, subject_count: int, resource_count: int) -> None:
        """Record that the reference dataset was seeded."""
        ...

    def operation_failed(self, operation: str, error: Exception) -> None:
        """Record that an administrative operation failed."""
        ...

    def with_context(self, context: ObservationContext) -> AdministrationProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultAdministrationProbe:
    """Default implementation of AdministrationProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultAdministrationProbe:
        """Create a new probe with observation context bound."""
        return DefaultAdministrationProbe(logger=self._logger, context=context)

    def subject_created(self, subject_id: int, name: str) -> None:
        self._logger.info(
            "subject_created",
            subject_id=subject_id,
            name=name,
            **self._get_context_kwargs(),
        )

    def role_created(self, name: str) -> None:
        self._logger.info("role_created", name=name, **self._get_context_kwargs())

    def permission_created(self, name: str) -> None:
        self._logger.info(
            "permission_created", name=name, **self._get_context_kwargs()
        )

    def permission_granted(self, role_name: str, permission_name: str) -> None:
        self._logger.info(
            "permission_granted_to_role",
            role=role_name,
            permission=permission_name,
            **self._get_context_kwargs(),
        )

    def role_assigned(self, subject_id: int, role_name: str) -> None:
        self._logger.info(
            "role_assigned",
            subject_id=subject_id,
            role=role_name,
            **self._get_context_kwargs(),
        )

    def resource_created(self, resource_id: int, owner_id: int, kind: str) -> None:
        self._logger.info(
            "resource_created",
            resource_id=resource_id,
            owner_id=owner_id,
            kind=kind,
            **self._get_context_kwargs(),
        )

    def relationship_created(
        self, subject_id: int, object_id: int, relation_type: str
    ) -> None:
        self._logger.info(
            "relationship_created",
            subject_id=subject_id,
            object_id=object_id,
            relation_type=relation_type,
            **self._get_context_kwargs(),
        )

    def relationship_deleted(
        self, subject_id: int, object_id: int, relation_type: str
    ) -> None:
        self._logger.info(
            "relationship_deleted",
            subject_id=subject_id,
            object_id=object_id,
            relation_type=relation_type,
            **self._get_context_kwargs(),
        )

    def duplicate_relationship(
        self, subject_id: int, object_id: int, relation_type: str
    ) -> None:
        self._logger.warning(
            "duplicate_relationship",
            subject_id=subject_id,
            object_id=object_id,
            relation_type=relation_type,
            **self._get_context_kwargs(),
        )

    def data_reset(self) -> None:
        self._logger.warning("authorization_data_reset", **self._get_context_kwargs())

    def seed_completed(self, subject_count: int, resource_count: int) -> None:
        self._logger.info(
            "seed_completed",
            subject_count=subject_count,
            resource_count=resource_count,
            **self._get_context_kwargs(),
        )

    def operation_failed(self, operation: str, error: Exception) -> None:
        self._logger.error(
            "administration_operation_failed",
            operation=operation,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )
