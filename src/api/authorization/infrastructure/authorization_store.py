"""SQLAlchemy implementation of IAuthorizationStore.

Answers the three read queries the decision core needs. Any database
failure is re-raised as StoreUnavailableError so that an outage can never
be mistaken for a denial.
"""

from __future__ import annotations

from sqlalchemy import exists, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from authorization.domain.aggregates import Resource, Role, Subject
from authorization.domain.value_objects import ResourceId, SubjectId
from authorization.infrastructure.models import (
    RelationshipModel,
    ResourceModel,
    RoleModel,
    SubjectModel,
)
from authorization.infrastructure.observability import (
    AuthorizationStoreProbe,
    DefaultAuthorizationStoreProbe,
)
from authorization.ports.exceptions import StoreUnavailableError
from authorization.ports.repositories import IAuthorizationStore


class AuthorizationStore(IAuthorizationStore):
    """Database-backed read surface for authorization decisions."""

    def __init__(
        self,
        session: AsyncSession,
        probe: AuthorizationStoreProbe | None = None,
    ) -> None:
        """Initialize store with database session and probe.

        Args:
            session: AsyncSession from FastAPI dependency injection
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultAuthorizationStoreProbe()

    def _unavailable(self, operation: str, error: Exception) -> StoreUnavailableError:
        self._probe.read_failed(operation, error)
        return StoreUnavailableError(
            f"Authorization store unavailable during {operation}", cause=error
        )

    async def find_subject_with_roles(self, subject_id: SubjectId) -> Subject | None:
        """Load a subject with roles and permissions in one round of queries.

        Raises:
            StoreUnavailableError: If the database cannot be read
        """
        stmt = (
            select(SubjectModel)
            .where(SubjectModel.id == subject_id.value)
            .options(
                selectinload(SubjectModel.roles).selectinload(RoleModel.permissions)
            )
        )
        try:
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()
        except (SQLAlchemyError, OSError) as e:
            raise self._unavailable("find_subject_with_roles", e) from e

        if model is None:
            self._probe.subject_not_found(subject_id.value)
            return None

        roles = frozenset(
            Role(
                name=role.name,
                permissions=frozenset(permission.name for permission in role.permissions),
            )
            for role in model.roles
        )
        self._probe.subject_loaded(subject_id.value, len(roles))
        return Subject(id=SubjectId(value=model.id), name=model.name, roles=roles)

    async def find_resource_owner(self, resource_id: ResourceId) -> Resource | None:
        """Load a resource and its owner.

        Raises:
            StoreUnavailableError: If the database cannot be read
        """
        stmt = select(ResourceModel).where(ResourceModel.id == resource_id.value)
        try:
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()
        except (SQLAlchemyError, OSError) as e:
            raise self._unavailable("find_resource_owner", e) from e

        if model is None:
            self._probe.resource_not_found(resource_id.value)
            return None

        return Resource(
            id=ResourceId(value=model.id),
            owner_id=SubjectId(value=model.owner_id),
            kind=model.kind,
        )

    async def find_relationship_edge(
        self,
        subject_id: SubjectId,
        object_id: SubjectId,
        relation_type: str,
    ) -> bool:
        """Check for the exact edge ``(subject_id, object_id, relation_type)``.

        Raises:
            StoreUnavailableError: If the database cannot be read
        """
        stmt = select(
            exists().where(
                RelationshipModel.subject_id == subject_id.value,
                RelationshipModel.object_id == object_id.value,
                RelationshipModel.type == relation_type,
            )
        )
        try:
            result = await self._session.execute(stmt)
            found = bool(result.scalar())
        except (SQLAlchemyError, OSError) as e:
            raise self._unavailable("find_relationship_edge", e) from e

        self._probe.edge_checked(
            subject_id.value, object_id.value, relation_type, found
        )
        return found
