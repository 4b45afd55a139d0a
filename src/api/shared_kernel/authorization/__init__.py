"""Authorization names shared across bounded contexts."""

from shared_kernel.authorization.types import (
    Permission,
    RelationType,
    ResourceKind,
    RoleName,
)

__all__ = [
    "Permission",
    "RelationType",
    "ResourceKind",
    "RoleName",
]
