"""Guarded record reads.

Two ways to reach the same record: by role (``record:read``) or by a
relationship to the record's owner (``assigned_to``, or being the owner).
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status

from authorization.dependencies.guards import require_permission, require_relationship
from authorization.dependencies.records import get_record_repository
from authorization.domain.value_objects import ResourceId, SubjectId
from authorization.ports.exceptions import StoreUnavailableError
from authorization.ports.repositories import IRecordRepository
from authorization.presentation.records.models import RecordResponse
from shared_kernel.authorization import Permission, RelationType

router = APIRouter(
    prefix="/records",
    tags=["records"],
)


async def _load_record(
    records: IRecordRepository, resource_id: int
) -> RecordResponse:
    try:
        record = await records.get_patient_record(ResourceId(value=resource_id))
    except StoreUnavailableError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Record store is temporarily unavailable",
        ) from e

    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Record with ID {resource_id} not found",
        )
    return RecordResponse.from_domain(record)


@router.get(
    "/rbac/{resource_id}",
    summary="Read a record by role",
    responses={
        401: {"description": "Authentication required"},
        403: {"description": "Missing record:read permission"},
        404: {"description": "Record not found"},
        503: {"description": "Authorization store unavailable"},
    },
)
async def get_record_by_role(
    resource_id: Annotated[int, Path(gt=0)],
    _subject_id: Annotated[
        SubjectId, Depends(require_permission(Permission.RECORD_READ))
    ],
    records: Annotated[IRecordRepository, Depends(get_record_repository)],
) -> RecordResponse:
    """Return a record to any subject holding ``record:read``."""
    return await _load_record(records, resource_id)


@router.get(
    "/rebac/{resource_id}",
    summary="Read a record by relationship",
    responses={
        401: {"description": "Authentication required"},
        403: {"description": "No assigned_to relationship with the record owner"},
        404: {"description": "Record not found"},
        503: {"description": "Authorization store unavailable"},
    },
)
async def get_record_by_relationship(
    resource_id: Annotated[int, Path(gt=0)],
    _subject_id: Annotated[
        SubjectId, Depends(require_relationship(RelationType.ASSIGNED_TO))
    ],
    records: Annotated[IRecordRepository, Depends(get_record_repository)],
) -> RecordResponse:
    """Return a record to its owner or to a subject assigned to the owner."""
    return await _load_record(records, resource_id)
