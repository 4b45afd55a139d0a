"""Pydantic models for guarded record reads."""

from __future__ import annotations

from pydantic import BaseModel, Field

from authorization.domain.aggregates import PatientRecord


class RecordResponse(BaseModel):
    """Response model for a patient record."""

    id: int = Field(..., description="Record ID")
    owner_id: int = Field(..., description="ID of the owning subject")
    patient_name: str = Field(..., description="Name of the patient")
    data: str = Field(..., description="Record contents")

    @classmethod
    def from_domain(cls, record: PatientRecord) -> RecordResponse:
        return cls(
            id=record.id.value,
            owner_id=record.owner_id.value,
            patient_name=record.patient_name,
            data=record.data,
        )
