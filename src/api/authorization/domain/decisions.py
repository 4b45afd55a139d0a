"""Authorization decision outcomes.

A decision is an ordinary value, not an exception. Callers match on the
outcome type:

    match await engine.check_relationship(subject_id, resource_id, "assigned_to"):
        case Allow():
            ...
        case Deny(reason=reason):
            ...
        case NotFound(resource_id=missing):
            ...
        case StoreUnavailable(cause=cause):
            ...

The four outcomes must stay distinguishable end-to-end: lacking access,
a missing resource and an unreachable store are different answers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

from authorization.domain.value_objects import ResourceId, SubjectId


class Outcome(StrEnum):
    """Tag of a decision outcome."""

    ALLOW = "allow"
    DENY = "deny"
    NOT_FOUND = "not_found"
    STORE_UNAVAILABLE = "store_unavailable"


class AllowReason(StrEnum):
    """What granted an allowed decision."""

    PERMISSION = "permission"
    OWNERSHIP = "ownership"
    RELATIONSHIP = "relationship"


@dataclass(frozen=True)
class Allow:
    """Access is granted."""

    outcome: ClassVar[Outcome] = Outcome.ALLOW

    reason: AllowReason

    @property
    def allowed(self) -> bool:
        return True


@dataclass(frozen=True)
class Deny:
    """The subject lacks the required permission or relationship.

    ``relation_type`` and ``owner_id`` are only set for relationship checks.
    They are advisory details for logs and responses and never influence
    the decision itself.
    """

    outcome: ClassVar[Outcome] = Outcome.DENY

    reason: str
    permission: str | None = None
    relation_type: str | None = None
    resource_id: ResourceId | None = None
    owner_id: SubjectId | None = None

    @property
    def allowed(self) -> bool:
        return False


@dataclass(frozen=True)
class NotFound:
    """The resource referenced by a relationship check does not exist."""

    outcome: ClassVar[Outcome] = Outcome.NOT_FOUND

    resource_id: ResourceId

    @property
    def allowed(self) -> bool:
        return False


@dataclass(frozen=True)
class StoreUnavailable:
    """The backing store could not be read; no decision was made."""

    outcome: ClassVar[Outcome] = Outcome.STORE_UNAVAILABLE

    cause: Exception

    @property
    def allowed(self) -> bool:
        return False


PermissionDecision = Allow | Deny | StoreUnavailable
RelationshipDecision = Allow | Deny | NotFound | StoreUnavailable
Decision = Allow | Deny | NotFound | StoreUnavailable
