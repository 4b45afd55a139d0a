"""Request-scoped memoization of subject lookups.

A request that runs several checks for the same subject (a role-based
check followed by a relationship check, say) loads the subject's roles
once. The wrapper lives for one request and is then discarded; nothing is
shared across requests, so a role change is visible to the next request.
"""

from __future__ import annotations

from authorization.domain.aggregates import Resource, Subject
from authorization.domain.value_objects import ResourceId, SubjectId
from authorization.infrastructure.observability import (
    AuthorizationStoreProbe,
    DefaultAuthorizationStoreProbe,
)
from authorization.ports.repositories import IAuthorizationStore


class RequestScopedAuthorizationStore(IAuthorizationStore):
    """IAuthorizationStore wrapper memoizing ``find_subject_with_roles``.

    Only successful lookups are memoized (including "not found"); a read
    failure propagates and the next call retries the underlying store.
    Resource and edge lookups always pass through.
    """

    def __init__(
        self,
        inner: IAuthorizationStore,
        probe: AuthorizationStoreProbe | None = None,
    ) -> None:
        self._inner = inner
        self._probe = probe or DefaultAuthorizationStoreProbe()
        self._subjects: dict[SubjectId, Subject | None] = {}

    async def find_subject_with_roles(self, subject_id: SubjectId) -> Subject | None:
        if subject_id in self._subjects:
            self._probe.subject_cache_hit(subject_id.value)
            return self._subjects[subject_id]

        subject = await self._inner.find_subject_with_roles(subject_id)
        self._subjects[subject_id] = subject
        return subject

    async def find_resource_owner(self, resource_id: ResourceId) -> Resource | None:
        return await self._inner.find_resource_owner(resource_id)

    async def find_relationship_edge(
        self,
        subject_id: SubjectId,
        object_id: SubjectId,
        relation_type: str,
    ) -> bool:
        return await self._inner.find_relationship_edge(
            subject_id, object_id, relation_type
        )
