"""Unit tests for authorization value objects."""

import pytest

from authorization.domain.value_objects import ResourceId, SubjectId


class TestSubjectId:
    """Tests for SubjectId value object."""

    def test_from_string_parses_decimal(self):
        """Should parse a decimal token subject into an integer id."""
        assert SubjectId.from_string("42") == SubjectId(value=42)

    def test_str_returns_value(self):
        """Should render as the bare integer."""
        assert str(SubjectId(value=7)) == "7"

    @pytest.mark.parametrize("raw", ["0", "-3", "abc", "", "1.5"])
    def test_from_string_rejects_non_positive_or_non_integer(self, raw):
        """Should reject anything that is not a positive integer."""
        with pytest.raises(ValueError, match="Invalid SubjectId"):
            SubjectId.from_string(raw)

    def test_is_hashable_and_immutable(self):
        """Should work as a dict key and reject mutation."""
        subject_id = SubjectId(value=1)
        assert {subject_id: "x"}[SubjectId(value=1)] == "x"
        with pytest.raises(AttributeError):
            subject_id.value = 2  # type: ignore[misc]


class TestResourceId:
    """Tests for ResourceId value object."""

    def test_renders_as_number(self):
        assert str(ResourceId(value=999)) == "999"

    def test_different_id_types_are_not_equal(self):
        """A subject id never equals a resource id with the same number."""
        assert SubjectId(value=1) != ResourceId(value=1)
