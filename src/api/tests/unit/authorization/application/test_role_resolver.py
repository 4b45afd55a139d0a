"""Unit tests for RoleResolver."""

import pytest

from authorization.application.services import RoleResolver
from authorization.domain.aggregates import Role, Subject
from authorization.domain.value_objects import SubjectId
from authorization.ports.exceptions import StoreUnavailableError


def make_subject(*roles: Role) -> Subject:
    return Subject(id=SubjectId(value=10), name="Test", roles=frozenset(roles))


class TestResolvePermissions:
    """Tests for resolving a loaded subject's permission set."""

    def test_union_of_role_permissions(self, store):
        resolver = RoleResolver(store)
        subject = make_subject(
            Role(name="nurse", permissions=frozenset({"record:read"})),
            Role(name="billing", permissions=frozenset({"invoice:read"})),
        )

        assert resolver.resolve_permissions(subject) == frozenset(
            {"record:read", "invoice:read"}
        )

    def test_overlapping_roles_yield_a_set(self, store):
        """A permission granted by two roles appears exactly once."""
        resolver = RoleResolver(store)
        subject = make_subject(
            Role(name="doctor", permissions=frozenset({"record:read", "record:write"})),
            Role(name="nurse", permissions=frozenset({"record:read"})),
        )

        permissions = resolver.resolve_permissions(subject)

        assert permissions == frozenset({"record:read", "record:write"})
        assert resolver.has_permission(subject, "record:read") is True

    def test_no_roles_yields_empty_set(self, store):
        resolver = RoleResolver(store)
        assert resolver.resolve_permissions(make_subject()) == frozenset()

    def test_adding_a_role_never_removes_a_permission(self, store):
        resolver = RoleResolver(store)
        nurse = Role(name="nurse", permissions=frozenset({"record:read"}))
        doctor = Role(name="doctor", permissions=frozenset({"record:write"}))

        before = resolver.resolve_permissions(make_subject(nurse))
        after = resolver.resolve_permissions(make_subject(nurse, doctor))

        assert before <= after

    def test_has_permission_is_exact(self, store):
        resolver = RoleResolver(store)
        subject = make_subject(Role(name="nurse", permissions=frozenset({"record:read"})))

        assert resolver.has_permission(subject, "record:read") is True
        assert resolver.has_permission(subject, "Record:Read") is False
        assert resolver.has_permission(subject, "record:") is False


class TestLoadPermissions:
    """Tests for loading permissions through the store."""

    @pytest.mark.asyncio
    async def test_loads_subject_from_store(self, store):
        resolver = RoleResolver(store)

        permissions = await resolver.load_permissions(SubjectId(value=2))

        assert permissions == frozenset({"record:read"})
        assert store.subject_reads == 1

    @pytest.mark.asyncio
    async def test_unknown_subject_resolves_to_empty_set(self, store):
        resolver = RoleResolver(store)
        assert await resolver.load_permissions(SubjectId(value=404)) == frozenset()

    @pytest.mark.asyncio
    async def test_store_failure_propagates(self, store):
        store.fail_with = ConnectionError("refused")
        resolver = RoleResolver(store)

        with pytest.raises(StoreUnavailableError):
            await resolver.load_permissions(SubjectId(value=1))


class TestLoadSubject:
    """Tests for loading a subject for a permission check."""

    @pytest.mark.asyncio
    async def test_unknown_subject_has_no_roles(self, store):
        resolver = RoleResolver(store)

        subject = await resolver.load_subject(SubjectId(value=404))

        assert subject.id == SubjectId(value=404)
        assert subject.roles == frozenset()
        assert resolver.has_permission(subject, "record:read") is False

    @pytest.mark.asyncio
    async def test_known_subject_is_checked_role_by_role(self, store):
        resolver = RoleResolver(store)

        doctor = await resolver.load_subject(SubjectId(value=1))

        assert resolver.has_permission(doctor, "record:write") is True
        assert [role.grants("record:write") for role in doctor.roles] == [True]
