"""Subject aggregate for the authorization context."""

from __future__ import annotations

from dataclasses import dataclass, field

from authorization.domain.aggregates.role import Role
from authorization.domain.value_objects import SubjectId


@dataclass(frozen=True)
class Subject:
    """An authenticated principal together with its role memberships.

    Subjects are loaded with their roles (and the roles' permissions)
    already resolved, so the permission set can be computed without
    further reads.
    """

    id: SubjectId
    name: str
    roles: frozenset[Role] = field(default_factory=frozenset)

    def __str__(self) -> str:
        """Return string representation."""
        return f"Subject({self.id})"

    def __eq__(self, other: object) -> bool:
        """Subjects are equal if they have the same ID (identity-based equality)."""
        if not isinstance(other, Subject):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on ID for use in sets and dicts."""
        return hash(self.id)

    @property
    def role_names(self) -> frozenset[str]:
        """Names of the roles this subject is a member of."""
        return frozenset(role.name for role in self.roles)
