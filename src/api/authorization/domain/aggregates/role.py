"""Role aggregate for the authorization context."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Role:
    """A named grouping of permissions.

    Roles are flat: a role never contains another role. Permission names
    are opaque capability strings such as ``record:read``.
    """

    name: str
    permissions: frozenset[str] = field(default_factory=frozenset)

    def __str__(self) -> str:
        """Return string representation."""
        return f"Role({self.name})"

    def grants(self, permission_name: str) -> bool:
        """Check whether this role grants a permission by exact name."""
        return permission_name in self.permissions
