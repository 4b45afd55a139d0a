"""Domain aggregates for the authorization context.

Aggregates are immutable snapshots of the authorization data a decision
reads. They carry no infrastructure dependencies.
"""

from authorization.domain.aggregates.patient_record import PatientRecord
from authorization.domain.aggregates.relationship import Relationship
from authorization.domain.aggregates.resource import Resource
from authorization.domain.aggregates.role import Role
from authorization.domain.aggregates.subject import Subject

__all__ = [
    "PatientRecord",
    "Relationship",
    "Resource",
    "Role",
    "Subject",
]
