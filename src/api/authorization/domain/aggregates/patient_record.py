"""Patient record: the payload behind a ``patient_record`` resource."""

from __future__ import annotations

from dataclasses import dataclass

from authorization.domain.value_objects import ResourceId, SubjectId


@dataclass(frozen=True)
class PatientRecord:
    """Contents of a record, returned once a guard has allowed the read.

    ``id`` is the id of the owning resource row; decisions never load this.
    """

    id: ResourceId
    owner_id: SubjectId
    patient_name: str
    data: str

    def __str__(self) -> str:
        """Return string representation."""
        return f"PatientRecord#{self.id}"
