"""Resource aggregate for the authorization context."""

from __future__ import annotations

from dataclasses import dataclass

from authorization.domain.value_objects import ResourceId, SubjectId


@dataclass(frozen=True)
class Resource:
    """An entity owned by exactly one Subject.

    Ownership is fixed for the lifetime of a decision; reassigning an
    owner is an administrative operation.
    """

    id: ResourceId
    owner_id: SubjectId
    kind: str = "resource"

    def __str__(self) -> str:
        """Return string representation."""
        return f"Resource({self.kind}#{self.id})"

    def is_owned_by(self, subject_id: SubjectId) -> bool:
        """Check whether the given subject owns this resource."""
        return self.owner_id == subject_id
