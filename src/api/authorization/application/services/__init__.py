"""Application services for the authorization context."""

from authorization.application.services.administration_service import (
    AdministrationService,
    SeedResult,
)
from authorization.application.services.authorization_engine import (
    AuthorizationEngine,
)
from authorization.application.services.relationship_resolver import (
    RelationshipMatch,
    RelationshipResolver,
)
from authorization.application.services.role_resolver import RoleResolver

__all__ = [
    "AdministrationService",
    "AuthorizationEngine",
    "RelationshipMatch",
    "RelationshipResolver",
    "RoleResolver",
    "SeedResult",
]
