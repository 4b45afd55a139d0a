"""Fixtures for authorization unit tests.

Provides an in-memory IAuthorizationStore (also serving record contents)
loaded with the clinic dataset:

    doctor  (id 1)  role doctor -> {record:read, record:write}
    nurse   (id 2)  role nurse  -> {record:read}
    patient (id 3)  no roles, owns records 1 ("Record A") and 2 ("Record B")
    edge    assigned_to(doctor -> patient)
"""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from authorization.domain.aggregates import PatientRecord, Resource, Role, Subject
from authorization.domain.value_objects import ResourceId, SubjectId
from authorization.ports.exceptions import StoreUnavailableError

DOCTOR_ID = SubjectId(value=1)
NURSE_ID = SubjectId(value=2)
PATIENT_ID = SubjectId(value=3)
RECORD_ID = ResourceId(value=1)
MISSING_RECORD_ID = ResourceId(value=999)

DOCTOR_ROLE = Role(name="doctor", permissions=frozenset({"record:read", "record:write"}))
NURSE_ROLE = Role(name="nurse", permissions=frozenset({"record:read"}))


class InMemoryAuthorizationStore:
    """Dict-backed authorization store that counts reads.

    Set ``fail_with`` to make every read raise StoreUnavailableError.
    """

    def __init__(self) -> None:
        self.subjects: dict[SubjectId, Subject] = {}
        self.resources: dict[ResourceId, Resource] = {}
        self.edges: set[tuple[SubjectId, SubjectId, str]] = set()
        self.records: dict[ResourceId, PatientRecord] = {}
        self.subject_reads = 0
        self.edge_reads = 0
        self.fail_with: Exception | None = None

    def _check_available(self) -> None:
        if self.fail_with is not None:
            raise StoreUnavailableError("store is down", cause=self.fail_with)

    async def find_subject_with_roles(self, subject_id: SubjectId) -> Subject | None:
        self._check_available()
        self.subject_reads += 1
        return self.subjects.get(subject_id)

    async def find_resource_owner(self, resource_id: ResourceId) -> Resource | None:
        self._check_available()
        return self.resources.get(resource_id)

    async def get_patient_record(self, resource_id: ResourceId) -> PatientRecord | None:
        self._check_available()
        return self.records.get(resource_id)

    async def find_relationship_edge(
        self,
        subject_id: SubjectId,
        object_id: SubjectId,
        relation_type: str,
    ) -> bool:
        self._check_available()
        self.edge_reads += 1
        return (subject_id, object_id, relation_type) in self.edges


@pytest.fixture
def store() -> InMemoryAuthorizationStore:
    """In-memory store holding the clinic dataset."""
    store = InMemoryAuthorizationStore()
    store.subjects[DOCTOR_ID] = Subject(
        id=DOCTOR_ID, name="Dr Alice", roles=frozenset({DOCTOR_ROLE})
    )
    store.subjects[NURSE_ID] = Subject(
        id=NURSE_ID, name="Nora Nurse", roles=frozenset({NURSE_ROLE})
    )
    store.subjects[PATIENT_ID] = Subject(id=PATIENT_ID, name="Patient Paul")
    for record_id, data in ((1, "Record A"), (2, "Record B")):
        store.resources[ResourceId(value=record_id)] = Resource(
            id=ResourceId(value=record_id),
            owner_id=PATIENT_ID,
            kind="patient_record",
        )
        store.records[ResourceId(value=record_id)] = PatientRecord(
            id=ResourceId(value=record_id),
            owner_id=PATIENT_ID,
            patient_name="Patient Paul",
            data=data,
        )
    store.edges.add((DOCTOR_ID, PATIENT_ID, "assigned_to"))
    return store


@pytest.fixture
def mock_decision_probe() -> Mock:
    """Mock DecisionProbe recording every call."""
    return Mock()
