"""Administration service for authorization data.

Creates subjects, roles, permissions, resources and relationship edges.
Decisions never go through this service; it exists for provisioning and
for seeding the reference dataset.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from authorization.application.observability import (
    AdministrationProbe,
    DefaultAdministrationProbe,
)
from authorization.domain.aggregates import (
    PatientRecord,
    Relationship,
    Resource,
    Role,
    Subject,
)
from authorization.domain.value_objects import ResourceId, SubjectId
from authorization.ports.exceptions import DuplicateRelationshipError
from authorization.ports.repositories import IAdministrationRepository
from shared_kernel.authorization import (
    Permission,
    RelationType,
    ResourceKind,
    RoleName,
)

# Reference role -> permission grants
SEED_ROLE_GRANTS: dict[str, tuple[str, ...]] = {
    RoleName.DOCTOR: (Permission.RECORD_READ, Permission.RECORD_WRITE),
    RoleName.NURSE: (Permission.RECORD_READ,),
    RoleName.ADMIN: (Permission.RECORD_READ, Permission.RECORD_WRITE),
}

# Reference record contents, all owned by the seeded patient
SEED_RECORD_DATA: tuple[str, ...] = ("Record A", "Record B")


@dataclass(frozen=True)
class SeedResult:
    """Identifiers created by ``AdministrationService.seed``."""

    doctor_id: SubjectId
    nurse_id: SubjectId
    patient_id: SubjectId
    record_ids: tuple[ResourceId, ...]


class AdministrationService:
    """Application service for managing authorization data.

    Each use case runs in its own transaction.
    """

    def __init__(
        self,
        repository: IAdministrationRepository,
        session: AsyncSession,
        probe: AdministrationProbe | None = None,
    ):
        """Initialize AdministrationService with dependencies.

        Args:
            repository: Write surface for authorization data
            session: Database session for transaction management
            probe: Optional domain probe for observability
        """
        self._repository = repository
        self._session = session
        self._probe = probe or DefaultAdministrationProbe()

    @asynccontextmanager
    async def _transaction(self, operation: str) -> AsyncIterator[None]:
        """Run a use case in a transaction, recording failures."""
        try:
            async with self._session.begin():
                yield
        except DuplicateRelationshipError:
            raise
        except Exception as e:
            self._probe.operation_failed(operation, e)
            raise

    async def create_subject(self, name: str) -> Subject:
        async with self._transaction("create_subject"):
            subject = await self._repository.create_subject(name)
        self._probe.subject_created(subject.id.value, name)
        return subject

    async def create_role(self, name: str, permissions: tuple[str, ...] = ()) -> Role:
        """Create a role and grant it the given existing permissions.

        Raises:
            DuplicateRoleError: If the role name already exists
            PermissionNotFoundError: If a permission does not exist
        """
        async with self._transaction("create_role"):
            await self._repository.create_role(name)
            for permission in permissions:
                await self._repository.grant_permission(name, permission)
        self._probe.role_created(name)
        return Role(name=name, permissions=frozenset(permissions))

    async def create_permission(self, name: str) -> str:
        async with self._transaction("create_permission"):
            await self._repository.create_permission(name)
        self._probe.permission_created(name)
        return name

    async def grant_permission(self, role_name: str, permission_name: str) -> None:
        async with self._transaction("grant_permission"):
            await self._repository.grant_permission(role_name, permission_name)
        self._probe.permission_granted(role_name, permission_name)

    async def assign_role(self, subject_id: SubjectId, role_name: str) -> None:
        async with self._transaction("assign_role"):
            await self._repository.assign_role(subject_id, role_name)
        self._probe.role_assigned(subject_id.value, role_name)

    async def create_resource(self, owner_id: SubjectId, kind: str) -> Resource:
        """Create a resource owned by an existing subject.

        Raises:
            SubjectNotFoundError: If the owner does not exist
        """
        async with self._transaction("create_resource"):
            resource = await self._repository.create_resource(owner_id, kind)
        self._probe.resource_created(resource.id.value, owner_id.value, kind)
        return resource

    async def create_patient_record(
        self, owner_id: SubjectId, patient_name: str, data: str
    ) -> PatientRecord:
        """Create a patient record owned by an existing subject.

        Raises:
            SubjectNotFoundError: If the owner does not exist
        """
        async with self._transaction("create_patient_record"):
            record = await self._repository.create_patient_record(
                owner_id, patient_name, data
            )
        self._probe.resource_created(
            record.id.value, owner_id.value, ResourceKind.PATIENT_RECORD
        )
        return record

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
        try:
            async with self._transaction("create_relationship"):
                relationship = await self._repository.create_relationship(
                    subject_id, object_id, relation_type
                )
        except DuplicateRelationshipError:
            self._probe.duplicate_relationship(
                subject_id.value, object_id.value, relation_type
            )
            raise

        self._probe.relationship_created(
            subject_id.value, object_id.value, relation_type
        )
        return relationship

    async def delete_relationship(
        self,
        subject_id: SubjectId,
        object_id: SubjectId,
        relation_type: str,
    ) -> bool:
        async with self._transaction("delete_relationship"):
            deleted = await self._repository.delete_relationship(
                subject_id, object_id, relation_type
            )
        if deleted:
            self._probe.relationship_deleted(
                subject_id.value, object_id.value, relation_type
            )
        return deleted

    async def seed(self, reset: bool = True) -> SeedResult:
        """Load the reference dataset.

        Permissions ``record:read`` and ``record:write``; roles doctor,
        nurse and admin; a doctor, a nurse and a patient with no roles; two
        patient records ("Record A", "Record B") owned by the patient; and
        an ``assigned_to`` edge from the doctor to the patient.

        Args:
            reset: Delete all existing authorization data first

        Returns:
            SeedResult with the created identifiers
        """
        async with self._transaction("seed"):
            if reset:
                await self._repository.reset()

            for permission in (Permission.RECORD_READ, Permission.RECORD_WRITE):
                await self._repository.create_permission(permission)

            for role_name, permissions in SEED_ROLE_GRANTS.items():
                await self._repository.create_role(role_name)
                for permission in permissions:
                    await self._repository.grant_permission(role_name, permission)

            doctor = await self._repository.create_subject("Dr Alice")
            nurse = await self._repository.create_subject("Nora Nurse")
            patient = await self._repository.create_subject("Patient Paul")

            await self._repository.assign_role(doctor.id, RoleName.DOCTOR)
            await self._repository.assign_role(nurse.id, RoleName.NURSE)

            records = [
                await self._repository.create_patient_record(
                    patient.id, patient.name, data
                )
                for data in SEED_RECORD_DATA
            ]

            await self._repository.create_relationship(
                doctor.id, patient.id, RelationType.ASSIGNED_TO
            )

        if reset:
            self._probe.data_reset()
        self._probe.seed_completed(subject_count=3, resource_count=len(records))

        return SeedResult(
            doctor_id=doctor.id,
            nurse_id=nurse.id,
            patient_id=patient.id,
            record_ids=tuple(record.id for record in records),
        )
