"""Relationship-based access resolution."""

from __future__ import annotations

from enum import StrEnum

from authorization.domain.aggregates import Resource
from authorization.domain.value_objects import SubjectId
from authorization.ports.repositories import IAuthorizationStore


class RelationshipMatch(StrEnum):
    """How a subject relates to a resource for a relationship check."""

    OWNERSHIP = "ownership"
    EDGE = "edge"
    NONE = "none"


class RelationshipResolver:
    """Decides whether a subject holds a relationship to a resource's owner.

    Only one hop is followed: the check looks for a single edge from the
    subject to the resource owner. The owner of a resource satisfies every
    relation type on it.
    """

    def __init__(self, store: IAuthorizationStore):
        self._store = store

    async def match_relationship(
        self,
        subject_id: SubjectId,
        resource: Resource,
        relation_type: str,
    ) -> RelationshipMatch:
        """Determine which path, if any, connects the subject to the resource.

        Args:
            subject_id: The subject asking for access
            resource: The already loaded target resource
            relation_type: The required edge type, matched exactly

        Returns:
            OWNERSHIP when the subject owns the resource, EDGE when the
            ``(subject, owner, relation_type)`` edge exists, otherwise NONE

        Raises:
            StoreUnavailableError: If the store cannot be read
        """
        if resource.is_owned_by(subject_id):
            return RelationshipMatch.OWNERSHIP

        exists = await self._store.find_relationship_edge(
            subject_id, resource.owner_id, relation_type
        )
        return RelationshipMatch.EDGE if exists else RelationshipMatch.NONE

    async def has_relationship(
        self,
        subject_id: SubjectId,
        resource: Resource,
        relation_type: str,
    ) -> bool:
        """Check whether the subject may act on the resource under ``relation_type``.

        Raises:
            StoreUnavailableError: If the store cannot be read
        """
        match = await self.match_relationship(subject_id, resource, relation_type)
        return match is not RelationshipMatch.NONE
