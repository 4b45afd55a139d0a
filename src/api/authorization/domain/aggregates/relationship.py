"""Relationship edge between two subjects."""

from __future__ import annotations

from dataclasses import dataclass

from authorization.domain.value_objects import SubjectId


@dataclass(frozen=True)
class Relationship:
    """A directed, typed edge ``(subject_id, object_id, type)``.

    Edges are neither transitive nor symmetric: ``assigned_to(A, B)`` says
    nothing about ``assigned_to(B, A)``. The triple is unique.
    """

    subject_id: SubjectId
    object_id: SubjectId
    type: str

    def __str__(self) -> str:
        """Return string representation."""
        return f"{self.type}({self.subject_id} -> {self.object_id})"
