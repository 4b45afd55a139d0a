"""Well-known authorization names.

The decision core treats permission and relation names as opaque strings
compared by equality. These enums only collect the names the application
itself uses, so routes and the seed data do not hardcode them.
"""

from enum import StrEnum


class Permission(StrEnum):
    """Permission names granted through role membership."""

    RECORD_READ = "record:read"
    RECORD_WRITE = "record:write"


class RelationType(StrEnum):
    """Relationship edge types between two subjects."""

    ASSIGNED_TO = "assigned_to"
    MANAGES = "manages"


class RoleName(StrEnum):
    """Role names used by the reference dataset."""

    DOCTOR = "doctor"
    NURSE = "nurse"
    ADMIN = "admin"


class ResourceKind(StrEnum):
    """Kinds of owned resources."""

    PATIENT_RECORD = "patient_record"
