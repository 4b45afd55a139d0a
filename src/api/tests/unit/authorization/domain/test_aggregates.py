"""Unit tests for authorization aggregates."""

from authorization.domain.aggregates import Relationship, Resource, Role, Subject
from authorization.domain.value_objects import ResourceId, SubjectId


class TestRole:
    """Tests for Role aggregate."""

    def test_grants_exact_permission(self):
        role = Role(name="nurse", permissions=frozenset({"record:read"}))
        assert role.grants("record:read") is True

    def test_does_not_match_by_prefix_or_wildcard(self):
        """Permission names are opaque; no prefix or wildcard matching."""
        role = Role(name="nurse", permissions=frozenset({"record:read"}))
        assert role.grants("record") is False
        assert role.grants("record:*") is False
        assert role.grants("record:write") is False

    def test_defaults_to_no_permissions(self):
        assert Role(name="empty").permissions == frozenset()


class TestSubject:
    """Tests for Subject aggregate."""

    def test_equality_is_by_id(self):
        """Two snapshots of the same subject are equal regardless of roles."""
        first = Subject(id=SubjectId(value=1), name="Dr Alice")
        second = Subject(
            id=SubjectId(value=1),
            name="Dr Alice",
            roles=frozenset({Role(name="doctor")}),
        )
        assert first == second
        assert hash(first) == hash(second)

    def test_role_names(self):
        subject = Subject(
            id=SubjectId(value=1),
            name="Dr Alice",
            roles=frozenset({Role(name="doctor"), Role(name="admin")}),
        )
        assert subject.role_names == frozenset({"doctor", "admin"})

    def test_subject_without_roles(self):
        subject = Subject(id=SubjectId(value=3), name="Patient Paul")
        assert subject.roles == frozenset()
        assert subject.role_names == frozenset()


class TestResource:
    """Tests for Resource aggregate."""

    def test_is_owned_by_owner(self):
        resource = Resource(
            id=ResourceId(value=1), owner_id=SubjectId(value=3), kind="patient_record"
        )
        assert resource.is_owned_by(SubjectId(value=3)) is True
        assert resource.is_owned_by(SubjectId(value=1)) is False

    def test_str_includes_kind_and_id(self):
        resource = Resource(
            id=ResourceId(value=1), owner_id=SubjectId(value=3), kind="patient_record"
        )
        assert str(resource) == "Resource(patient_record#1)"


class TestRelationship:
    """Tests for Relationship aggregate."""

    def test_edges_are_directed(self):
        """assigned_to(A, B) is a different edge from assigned_to(B, A)."""
        forward = Relationship(
            subject_id=SubjectId(value=1), object_id=SubjectId(value=3), type="assigned_to"
        )
        backward = Relationship(
            subject_id=SubjectId(value=3), object_id=SubjectId(value=1), type="assigned_to"
        )
        assert forward != backward

    def test_identical_triples_collapse_in_a_set(self):
        edge = Relationship(
            subject_id=SubjectId(value=1), object_id=SubjectId(value=3), type="assigned_to"
        )
        same = Relationship(
            subject_id=SubjectId(value=1), object_id=SubjectId(value=3), type="assigned_to"
        )
        assert len({edge, same}) == 1

    def test_str(self):
        edge = Relationship(
            subject_id=SubjectId(value=1), object_id=SubjectId(value=3), type="manages"
        )
        assert str(edge) == "manages(1 -> 3)"
