"""SQLAlchemy ORM models for the authorization bounded context.

These models map to database tables and are used by repository implementations.
"""

from authorization.infrastructure.models.associations import (
    role_permissions,
    subject_roles,
)
from authorization.infrastructure.models.patient_record import PatientRecordModel
from authorization.infrastructure.models.relationship import RelationshipModel
from authorization.infrastructure.models.resource import ResourceModel
from authorization.infrastructure.models.role import PermissionModel, RoleModel
from authorization.infrastructure.models.subject import SubjectModel

__all__ = [
    "PatientRecordModel",
    "PermissionModel",
    "RelationshipModel",
    "ResourceModel",
    "RoleModel",
    "SubjectModel",
    "role_permissions",
    "subject_roles",
]
