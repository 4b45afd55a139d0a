"""Repository protocols (ports) for the authorization context.

The decision core depends only on ``IAuthorizationStore``, a read-only
query surface. Guarded routes read record contents through
``IRecordRepository`` after a decision allows it. Mutations go through
``IAdministrationRepository`` and are never triggered by a decision.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from authorization.domain.aggregates import (
    PatientRecord,
    Relationship,
    Resource,
    Role,
    Subject,
)
from authorization.domain.value_objects import ResourceId, SubjectId


@runtime_checkable
class IAuthorizationStore(Protocol):
    """Read surface used to answer authorization decisions.

    Every method raises ``StoreUnavailableError`` when the backing store
    cannot be read. Implementations perform no retries.
    """

    async def find_subject_with_roles(self, subject_id: SubjectId) -> Subject | None:
        """Load a subject with its roles and the roles' permissions.

        Args:
            subject_id: The subject to load

        Returns:
            The Subject with roles hydrated, or None if it does not exist

        Raises:
            StoreUnavailableError: If the store cannot be read
        """
        ...

    async def find_resource_owner(self, resource_id: ResourceId) -> Resource | None:
        """Load a resource with its owner.

        Args:
            resource_id: The resource to load

        Returns:
            The Resource, or None if it does not exist

        Raises:
            StoreUnavailableError: If the store cannot be read
        """
        ...

    async def find_relationship_edge(
        self,
        subject_id: SubjectId,
        object_id: SubjectId,
        relation_type: str,
    ) -> bool:
        """Check whether the exact edge ``(subject_id, object_id, relation_type)`` exists.

        Raises:
            StoreUnavailableError: If the store cannot be read
        """
        ...


@runtime_checkable
class IRecordRepository(Protocol):
    """Read surface for record contents."""

    async def get_patient_record(self, resource_id: ResourceId) -> PatientRecord | None:
        """Load a record with its payload.

        Returns:
            The PatientRecord, or None if no record has this id

        Raises:
            StoreUnavailableError: If the store cannot be read
        """
        ...


@runtime_checkable
class IAdministrationRepository(Protocol):
    """Write surface for authorization data.

    Callers own the transaction; implementations only flush.
    """

    async def create_subject(self, name: str) -> Subject:
        """Create a subject with no roles."""
        ...

    async def create_role(self, name: str) -> Role:
        """Create a role with no permissions.

        Raises:
            DuplicateRoleError: If the role name already exists
        """
        ...

    async def create_permission(self, name: str) -> str:
        """Create a permission and return its name.

        Raises:
            DuplicatePermissionError: If the permission name already exists
        """
        ...

    async def grant_permission(self, role_name: str, permission_name: str) -> None:
        """Assign a permission to a role. Granting twice is a no-op.

        Raises:
            RoleNotFoundError: If the role does not exist
            PermissionNotFoundError: If the permission does not exist
        """
        ...

    async def assign_role(self, subject_id: SubjectId, role_name: str) -> None:
        """Make a subject a member of a role. Assigning twice is a no-op.

        Raises:
            SubjectNotFoundError: If the subject does not exist
            RoleNotFoundError: If the role does not exist
        """
        ...

    async def create_resource(self, owner_id: SubjectId, kind: str) -> Resource:
        """Create a resource owned by an existing subject.

        Raises:
            SubjectNotFoundError: If the owner does not exist
        """
        ...

    async def create_patient_record(
        self, owner_id: SubjectId, patient_name: str, data: str
    ) -> PatientRecord:
        """Create a ``patient_record`` resource and its contents.

        Raises:
            SubjectNotFoundError: If the owner does not exist
        """
        ...

    async def create_relationship(
        self,
        subject_id: SubjectId,
        object_id: SubjectId,
        relation_type: str,
    ) -> Relationship:
        """Create a directed relationship edge.

        Raises:
            DuplicateRelationshipError: If the exact triple already exists
            SubjectNotFoundError: If either endpoint does not exist
        """
        ...

    async def delete_relationship(
        self,
        subject_id: SubjectId,
        object_id: SubjectId,
        relation_type: str,
    ) -> bool:
        """Delete a relationship edge.

        Returns:
            True if deleted, False if the edge did not exist
        """
        ...

    async def reset(self) -> None:
        """Delete all authorization data."""
        ...
