"""Authorization engine: the decision contract callers invoke.

Two entry points, one per model. Role-based checks are resource-agnostic;
relationship checks are resource-scoped and must load the resource before
anything else, which is why only they can answer NotFound.
"""

from __future__ import annotations

from authorization.application.observability import (
    DecisionProbe,
    DefaultDecisionProbe,
)
from authorization.application.services.relationship_resolver import (
    RelationshipMatch,
    RelationshipResolver,
)
from authorization.application.services.role_resolver import RoleResolver
from authorization.domain.aggregates import Subject
from authorization.domain.decisions import (
    Allow,
    AllowReason,
    Deny,
    NotFound,
    PermissionDecision,
    RelationshipDecision,
    StoreUnavailable,
)
from authorization.domain.value_objects import ResourceId, SubjectId
from authorization.ports.exceptions import StoreUnavailableError
from authorization.ports.repositories import IAuthorizationStore


class AuthorizationEngine:
    """Answers role-based and relationship-based authorization questions.

    The engine holds no mutable state. Every call reads the store afresh
    (through whatever request-scoped wrapper the caller injected), so it is
    safe to call repeatedly and concurrently. Store failures become a
    StoreUnavailable outcome, never a denial.
    """

    def __init__(
        self,
        store: IAuthorizationStore,
        probe: DecisionProbe | None = None,
    ):
        """Initialize the engine.

        Args:
            store: Read surface for authorization data
            probe: Optional domain probe for observability
        """
        self._store = store
        self._roles = RoleResolver(store)
        self._relationships = RelationshipResolver(store)
        self._probe = probe or DefaultDecisionProbe()

    async def check_permission(
        self,
        subject: Subject | SubjectId,
        permission: str,
    ) -> PermissionDecision:
        """Decide whether a subject holds a permission through its roles.

        Args:
            subject: A loaded Subject (its roles are used as-is) or a
                SubjectId to load from the store
            permission: Permission name, compared by exact equality

        Returns:
            Allow, Deny or StoreUnavailable
        """
        subject_id = subject.id if isinstance(subject, Subject) else subject

        try:
            if not isinstance(subject, Subject):
                subject = await self._roles.load_subject(subject_id)
        except StoreUnavailableError as e:
            self._probe.store_unavailable("check_permission", subject_id.value, e)
            return StoreUnavailable(cause=e)

        if self._roles.has_permission(subject, permission):
            self._probe.permission_granted(subject_id.value, permission)
            return Allow(reason=AllowReason.PERMISSION)

        self._probe.permission_denied(
            subject_id.value, permission, self._roles.resolve_permissions(subject)
        )
        return Deny(
            reason=f"Insufficient permissions. Required: {permission}",
            permission=permission,
        )

    async def check_relationship(
        self,
        subject: Subject | SubjectId,
        resource_id: ResourceId,
        relation_type: str,
    ) -> RelationshipDecision:
        """Decide whether a subject holds a relationship to a resource's owner.

        The resource is resolved first; a missing resource is NotFound, not
        a denial. Owners are allowed for every relation type.

        Args:
            subject: The subject (or its id) asking for access
            resource_id: Target resource
            relation_type: Required edge type, matched exactly

        Returns:
            Allow, Deny, NotFound or StoreUnavailable
        """
        subject_id = subject.id if isinstance(subject, Subject) else subject

        try:
            resource = await self._store.find_resource_owner(resource_id)
            if resource is None:
                self._probe.resource_not_found(subject_id.value, resource_id.value)
                return NotFound(resource_id=resource_id)

            match = await self._relationships.match_relationship(
                subject_id, resource, relation_type
            )
        except StoreUnavailableError as e:
            self._probe.store_unavailable("check_relationship", subject_id.value, e)
            return StoreUnavailable(cause=e)

        if match is RelationshipMatch.OWNERSHIP:
            self._probe.relationship_granted(
                subject_id.value, resource_id.value, relation_type, via=match.value
            )
            return Allow(reason=AllowReason.OWNERSHIP)

        if match is RelationshipMatch.EDGE:
            self._probe.relationship_granted(
                subject_id.value, resource_id.value, relation_type, via=match.value
            )
            return Allow(reason=AllowReason.RELATIONSHIP)

        self._probe.relationship_denied(
            subject_id.value,
            resource_id.value,
            resource.owner_id.value,
            relation_type,
        )
        return Deny(
            reason=f"No {relation_type} relationship found with resource owner",
            relation_type=relation_type,
            resource_id=resource_id,
            owner_id=resource.owner_id,
        )
