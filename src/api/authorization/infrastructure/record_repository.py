"""SQLAlchemy implementation of IRecordRepository.

Reads record contents for routes whose guard has already allowed the
read. Database failures surface as StoreUnavailableError, the same as
the authorization store.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from authorization.domain.aggregates import PatientRecord
from authorization.domain.value_objects import ResourceId, SubjectId
from authorization.infrastructure.models import PatientRecordModel, ResourceModel
from authorization.infrastructure.observability import (
    DefaultRecordRepositoryProbe,
    RecordRepositoryProbe,
)
from authorization.ports.exceptions import StoreUnavailableError
from authorization.ports.repositories import IRecordRepository


class RecordRepository(IRecordRepository):
    """Database-backed reads of record contents."""

    def __init__(
        self,
        session: AsyncSession,
        probe: RecordRepositoryProbe | None = None,
    ) -> None:
        self._session = session
        self._probe = probe or DefaultRecordRepositoryProbe()

    async def get_patient_record(self, resource_id: ResourceId) -> PatientRecord | None:
        """Load a record's owner and payload in one query.

        Raises:
            StoreUnavailableError: If the database cannot be read
        """
        stmt = (
            select(
                ResourceModel.owner_id,
                PatientRecordModel.patient_name,
                PatientRecordModel.data,
            )
            .join(PatientRecordModel, PatientRecordModel.resource_id == ResourceModel.id)
            .where(ResourceModel.id == resource_id.value)
        )
        try:
            row = (await self._session.execute(stmt)).one_or_none()
        except (SQLAlchemyError, OSError) as e:
            self._probe.read_failed("get_patient_record", e)
            raise StoreUnavailableError(
                "Record store unavailable during get_patient_record", cause=e
            ) from e

        if row is None:
            self._probe.record_not_found(resource_id.value)
            return None

        self._probe.record_loaded(resource_id.value)
        return PatientRecord(
            id=resource_id,
            owner_id=SubjectId(value=row.owner_id),
            patient_name=row.patient_name,
            data=row.data,
        )
