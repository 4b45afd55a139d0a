"""Unit tests for AuthorizationEngine.

Covers the clinic scenarios end to end against the in-memory store, plus
the store-outage path.
"""

import pytest

from authorization.application.services import AuthorizationEngine
from authorization.domain.aggregates import Role, Subject
from authorization.domain.decisions import (
    Allow,
    AllowReason,
    Deny,
    NotFound,
    StoreUnavailable,
)
from authorization.domain.value_objects import ResourceId, SubjectId
from authorization.ports.exceptions import StoreUnavailableError

DOCTOR = SubjectId(value=1)
NURSE = SubjectId(value=2)
PATIENT = SubjectId(value=3)
RECORD = ResourceId(value=1)
MISSING_RECORD = ResourceId(value=999)


@pytest.fixture
def engine(store, mock_decision_probe) -> AuthorizationEngine:
    return AuthorizationEngine(store=store, probe=mock_decision_probe)


class TestCheckPermission:
    """Tests for role-based checks."""

    @pytest.mark.asyncio
    async def test_doctor_can_read_records(self, engine, mock_decision_probe):
        decision = await engine.check_permission(DOCTOR, "record:read")

        assert decision == Allow(reason=AllowReason.PERMISSION)
        mock_decision_probe.permission_granted.assert_called_once_with(
            1, "record:read"
        )

    @pytest.mark.asyncio
    async def test_patient_without_roles_is_denied(self, engine, mock_decision_probe):
        decision = await engine.check_permission(PATIENT, "record:read")

        assert isinstance(decision, Deny)
        assert decision.reason == "Insufficient permissions. Required: record:read"
        assert decision.permission == "record:read"
        mock_decision_probe.permission_denied.assert_called_once_with(
            3, "record:read", frozenset()
        )

    @pytest.mark.asyncio
    async def test_nurse_cannot_write(self, engine):
        decision = await engine.check_permission(NURSE, "record:write")
        assert isinstance(decision, Deny)

    @pytest.mark.asyncio
    async def test_unknown_subject_is_denied(self, engine):
        decision = await engine.check_permission(SubjectId(value=404), "record:read")
        assert isinstance(decision, Deny)

    @pytest.mark.asyncio
    async def test_loaded_subject_is_not_reloaded(self, engine, store):
        subject = Subject(
            id=SubjectId(value=50),
            name="Ad Hoc",
            roles=frozenset({Role(name="admin", permissions=frozenset({"record:read"}))}),
        )

        decision = await engine.check_permission(subject, "record:read")

        assert isinstance(decision, Allow)
        assert store.subject_reads == 0

    @pytest.mark.asyncio
    async def test_store_outage_is_not_a_denial(self, engine, store, mock_decision_probe):
        outage = ConnectionRefusedError("db down")
        store.fail_with = outage

        decision = await engine.check_permission(DOCTOR, "record:read")

        assert isinstance(decision, StoreUnavailable)
        assert isinstance(decision.cause, StoreUnavailableError)
        assert decision.cause.cause is outage
        assert decision.allowed is False
        mock_decision_probe.store_unavailable.assert_called_once()
        mock_decision_probe.permission_denied.assert_not_called()

    @pytest.mark.asyncio
    async def test_repeated_checks_give_the_same_answer(self, engine):
        first = await engine.check_permission(NURSE, "record:read")
        second = await engine.check_permission(NURSE, "record:read")
        assert first == second


class TestCheckRelationship:
    """Tests for relationship-based checks."""

    @pytest.mark.asyncio
    async def test_assigned_doctor_is_allowed(self, engine, mock_decision_probe):
        decision = await engine.check_relationship(DOCTOR, RECORD, "assigned_to")

        assert decision == Allow(reason=AllowReason.RELATIONSHIP)
        mock_decision_probe.relationship_granted.assert_called_once_with(
            1, 1, "assigned_to", via="edge"
        )

    @pytest.mark.asyncio
    async def test_edge_type_mismatch_is_denied(self, engine, mock_decision_probe):
        decision = await engine.check_relationship(DOCTOR, RECORD, "manages")

        assert isinstance(decision, Deny)
        assert decision.reason == "No manages relationship found with resource owner"
        assert decision.relation_type == "manages"
        assert decision.resource_id == RECORD
        assert decision.owner_id == PATIENT
        mock_decision_probe.relationship_denied.assert_called_once_with(
            1, 1, 3, "manages"
        )

    @pytest.mark.asyncio
    async def test_owner_is_allowed_for_any_relation(self, engine):
        for relation_type in ("assigned_to", "manages", "never-seen-before"):
            decision = await engine.check_relationship(PATIENT, RECORD, relation_type)
            assert decision == Allow(reason=AllowReason.OWNERSHIP)

    @pytest.mark.asyncio
    async def test_missing_resource_is_not_found(self, engine, mock_decision_probe):
        decision = await engine.check_relationship(DOCTOR, MISSING_RECORD, "assigned_to")

        assert decision == NotFound(resource_id=MISSING_RECORD)
        mock_decision_probe.resource_not_found.assert_called_once_with(1, 999)

    @pytest.mark.asyncio
    async def test_missing_resource_is_not_found_even_for_unrelated_subjects(
        self, engine
    ):
        decision = await engine.check_relationship(NURSE, MISSING_RECORD, "manages")
        assert isinstance(decision, NotFound)

    @pytest.mark.asyncio
    async def test_nurse_without_edge_is_denied(self, engine):
        decision = await engine.check_relationship(NURSE, RECORD, "assigned_to")
        assert isinstance(decision, Deny)

    @pytest.mark.asyncio
    async def test_store_outage_is_store_unavailable(self, engine, store):
        store.fail_with = OSError("network unreachable")

        decision = await engine.check_relationship(DOCTOR, RECORD, "assigned_to")

        assert isinstance(decision, StoreUnavailable)

    @pytest.mark.asyncio
    async def test_edge_lookup_failure_is_store_unavailable(
        self, engine, store, mock_decision_probe
    ):
        """An outage between the resource read and the edge read."""

        async def failing_edge_lookup(*args):
            raise StoreUnavailableError("edge read failed", cause=TimeoutError())

        store.find_relationship_edge = failing_edge_lookup

        decision = await engine.check_relationship(DOCTOR, RECORD, "assigned_to")

        assert isinstance(decision, StoreUnavailable)
        mock_decision_probe.relationship_denied.assert_not_called()

    @pytest.mark.asyncio
    async def test_accepts_loaded_subject(self, engine, store):
        doctor = store.subjects[DOCTOR]
        decision = await engine.check_relationship(doctor, RECORD, "assigned_to")
        assert isinstance(decision, Allow)
