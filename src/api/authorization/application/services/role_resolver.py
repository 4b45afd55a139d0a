"""Role-based permission resolution."""

from __future__ import annotations

from authorization.domain.aggregates import Subject
from authorization.domain.value_objects import SubjectId
from authorization.ports.repositories import IAuthorizationStore


class RoleResolver:
    """Computes the permissions a subject holds through its role memberships.

    Roles are flat, so the permission set is the union of the permissions
    of every role the subject is a member of. Permission names are compared
    by exact equality; there are no wildcards or implied permissions.
    """

    def __init__(self, store: IAuthorizationStore):
        self._store = store

    def resolve_permissions(self, subject: Subject) -> frozenset[str]:
        """Return the closed permission set of an already loaded subject.

        A subject with no roles resolves to the empty set.
        """
        return frozenset(
            permission for role in subject.roles for permission in role.permissions
        )

    def has_permission(self, subject: Subject, permission_name: str) -> bool:
        """Check whether any of the subject's roles grants ``permission_name``.

        Equivalent to membership in ``resolve_permissions(subject)``.
        """
        return any(role.grants(permission_name) for role in subject.roles)

    async def load_subject(self, subject_id: SubjectId) -> Subject:
        """Load a subject with its roles.

        An unknown subject comes back with no roles, so every check on it
        denies.

        Raises:
            StoreUnavailableError: If the store cannot be read
        """
        subject = await self._store.find_subject_with_roles(subject_id)
        if subject is None:
            return Subject(id=subject_id, name="")
        return subject

    async def load_permissions(self, subject_id: SubjectId) -> frozenset[str]:
        """Load a subject from the store and resolve its permissions.

        Raises:
            StoreUnavailableError: If the store cannot be read
        """
        return self.resolve_permissions(await self.load_subject(subject_id))
