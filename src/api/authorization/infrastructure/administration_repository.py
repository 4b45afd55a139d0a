"""SQLAlchemy implementation of IAdministrationRepository.

Write surface for authorization data. The caller owns the transaction
(``async with session.begin()``); this repository only adds and flushes.
"""

from __future__ import annotations

from sqlalchemy import delete, exists, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from authorization.domain.aggregates import (
    PatientRecord,
    Relationship,
    Resource,
    Role,
    Subject,
)
from authorization.domain.value_objects import ResourceId, SubjectId
from authorization.infrastructure.models import (
    PatientRecordModel,
    PermissionModel,
    RelationshipModel,
    ResourceModel,
    RoleModel,
    SubjectModel,
    role_permissions,
    subject_roles,
)
from authorization.ports.exceptions import (
    DuplicatePermissionError,
    DuplicateRelationshipError,
    DuplicateRoleError,
    PermissionNotFoundError,
    RoleNotFoundError,
    SubjectNotFoundError,
)
from authorization.ports.repositories import IAdministrationRepository
from shared_kernel.authorization import ResourceKind


class AdministrationRepository(IAdministrationRepository):
    """Database-backed write surface for authorization data."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: AsyncSession whose transaction the caller manages
        """
        self._session = session

    async def _require_subject(self, subject_id: SubjectId) -> None:
        if await self._session.get(SubjectModel, subject_id.value) is None:
            raise SubjectNotFoundError(f"Subject {subject_id} does not exist")

    async def _role_id(self, role_name: str) -> int:
        stmt = select(RoleModel.id).where(RoleModel.name == role_name)
        role_id = (await self._session.execute(stmt)).scalar_one_or_none()
        if role_id is None:
            raise RoleNotFoundError(f"Role '{role_name}' does not exist")
        return role_id

    async def _permission_id(self, permission_name: str) -> int:
        stmt = select(PermissionModel.id).where(PermissionModel.name == permission_name)
        permission_id = (await self._session.execute(stmt)).scalar_one_or_none()
        if permission_id is None:
            raise PermissionNotFoundError(
                f"Permission '{permission_name}' does not exist"
            )
        return permission_id

    async def create_subject(self, name: str) -> Subject:
        model = SubjectModel(name=name)
        self._session.add(model)
        await self._session.flush()
        return Subject(id=SubjectId(value=model.id), name=model.name)

    async def create_role(self, name: str) -> Role:
        """Create a role with no permissions.

        Raises:
            DuplicateRoleError: If the role name already exists
        """
        stmt = select(exists().where(RoleModel.name == name))
        if (await self._session.execute(stmt)).scalar():
            raise DuplicateRoleError(f"Role '{name}' already exists")

        self._session.add(RoleModel(name=name))
        try:
            await self._session.flush()
        except IntegrityError as e:
            raise DuplicateRoleError(f"Role '{name}' already exists") from e
        return Role(name=name)

    async def create_permission(self, name: str) -> str:
        """Create a permission.

        Raises:
            DuplicatePermissionError: If the permission name already exists
        """
        stmt = select(exists().where(PermissionModel.name == name))
        if (await self._session.execute(stmt)).scalar():
            raise DuplicatePermissionError(f"Permission '{name}' already exists")

        self._session.add(PermissionModel(name=name))
        try:
            await self._session.flush()
        except IntegrityError as e:
            raise DuplicatePermissionError(f"Permission '{name}' already exists") from e
        return name

    async def grant_permission(self, role_name: str, permission_name: str) -> None:
        role_id = await self._role_id(role_name)
        permission_id = await self._permission_id(permission_name)

        already_granted = select(
            exists().where(
                role_permissions.c.role_id == role_id,
                role_permissions.c.permission_id == permission_id,
            )
        )
        if (await self._session.execute(already_granted)).scalar():
            return

        await self._session.execute(
            insert(role_permissions).values(role_id=role_id, permission_id=permission_id)
        )

    async def assign_role(self, subject_id: SubjectId, role_name: str) -> None:
        await self._require_subject(subject_id)
        role_id = await self._role_id(role_name)

        already_member = select(
            exists().where(
                subject_roles.c.subject_id == subject_id.value,
                subject_roles.c.role_id == role_id,
            )
        )
        if (await self._session.execute(already_member)).scalar():
            return

        await self._session.execute(
            insert(subject_roles).values(subject_id=subject_id.value, role_id=role_id)
        )

    async def create_resource(self, owner_id: SubjectId, kind: str) -> Resource:
        """Create a resource owned by an existing subject.

        Raises:
            SubjectNotFoundError: If the owner does not exist
        """
        await self._require_subject(owner_id)

        model = ResourceModel(owner_id=owner_id.value, kind=kind)
        self._session.add(model)
        await self._session.flush()
        return Resource(
            id=ResourceId(value=model.id),
            owner_id=owner_id,
            kind=kind,
        )

    async def create_patient_record(
        self, owner_id: SubjectId, patient_name: str, data: str
    ) -> PatientRecord:
        """Create a ``patient_record`` resource and its contents.

        Raises:
            SubjectNotFoundError: If the owner does not exist
        """
        resource = await self.create_resource(owner_id, ResourceKind.PATIENT_RECORD)
        self._session.add(
            PatientRecordModel(
                resource_id=resource.id.value,
                patient_name=patient_name,
                data=data,
            )
        )
        await self._session.flush()
        return PatientRecord(
            id=resource.id,
            owner_id=owner_id,
            patient_name=patient_name,
            data=data,
        )

    async def create_relationship(
        self,
        subject_id: SubjectId,
        object_id: SubjectId,
        relation_type: str,
    ) -> Relationship:
        """Create a directed relationship edge.

        The pre-check gives a clean error in the common case; the unique
        constraint catches a concurrent insert of the same triple.

        Raises:
            DuplicateRelationshipError: If the exact triple already exists
            SubjectNotFoundError: If either endpoint does not exist
        """
        await self._require_subject(subject_id)
        await self._require_subject(object_id)

        duplicate_message = (
            f"Relationship {relation_type}({subject_id} -> {object_id}) already exists"
        )
        stmt = select(
            exists().where(
                RelationshipModel.subject_id == subject_id.value,
                RelationshipModel.object_id == object_id.value,
                RelationshipModel.type == relation_type,
            )
        )
        if (await self._session.execute(stmt)).scalar():
            raise DuplicateRelationshipError(duplicate_message)

        self._session.add(
            RelationshipModel(
                subject_id=subject_id.value,
                object_id=object_id.value,
                type=relation_type,
            )
        )
        try:
            await self._session.flush()
        except IntegrityError as e:
            raise DuplicateRelationshipError(duplicate_message) from e

        return Relationship(
            subject_id=subject_id, object_id=object_id, type=relation_type
        )

    async def delete_relationship(
        self,
        subject_id: SubjectId,
        object_id: SubjectId,
        relation_type: str,
    ) -> bool:
        stmt = delete(RelationshipModel).where(
            RelationshipModel.subject_id == subject_id.value,
            RelationshipModel.object_id == object_id.value,
            RelationshipModel.type == relation_type,
        )
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    async def reset(self) -> None:
        # Children before parents so foreign keys never dangle mid-reset
        await self._session.execute(delete(PatientRecordModel))
        await self._session.execute(delete(RelationshipModel))
        await self._session.execute(delete(ResourceModel))
        await self._session.execute(delete(subject_roles))
        await self._session.execute(delete(role_permissions))
        await self._session.execute(delete(SubjectModel))
        await self._session.execute(delete(RoleModel))
        await self._session.execute(delete(PermissionModel))
