"""Ports (interfaces) for the authorization bounded context.

Ports define the contracts for repositories without specifying
implementation details, so the decision core can run against the
SQLAlchemy store in production and against test doubles in tests.
"""

from authorization.ports.exceptions import (
    DuplicatePermissionError,
    DuplicateRelationshipError,
    DuplicateRoleError,
    PermissionNotFoundError,
    RoleNotFoundError,
    StoreUnavailableError,
    SubjectNotFoundError,
)
from authorization.ports.repositories import (
    IAdministrationRepository,
    IAuthorizationStore,
    IRecordRepository,
)

__all__ = [
    "IAdministrationRepository",
    "IAuthorizationStore",
    "IRecordRepository",
    "DuplicatePermissionError",
    "DuplicateRelationshipError",
    "DuplicateRoleError",
    "PermissionNotFoundError",
    "RoleNotFoundError",
    "StoreUnavailableError",
    "SubjectNotFoundError",
]
