"""Unit tests for RecordRepository with a mocked session."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, create_autospec

import pytest
from sqlalchemy.exc import OperationalError

from authorization.domain.aggregates import PatientRecord
from authorization.domain.value_objects import ResourceId, SubjectId
from authorization.infrastructure.observability import RecordRepositoryProbe
from authorization.infrastructure.record_repository import RecordRepository
from authorization.ports.exceptions import StoreUnavailableError
from authorization.ports.repositories import IRecordRepository


@pytest.fixture
def mock_session():
    return AsyncMock()


@pytest.fixture
def mock_probe():
    return create_autospec(RecordRepositoryProbe, instance=True)


@pytest.fixture
def repository(mock_session, mock_probe):
    return RecordRepository(session=mock_session, probe=mock_probe)


def returning_row(mock_session, row) -> None:
    mock_result = MagicMock()
    mock_result.one_or_none.return_value = row
    mock_session.execute.return_value = mock_result


class TestGetPatientRecord:
    """Tests for get_patient_record."""

    def test_implements_protocol(self, repository):
        assert isinstance(repository, IRecordRepository)

    @pytest.mark.asyncio
    async def test_maps_row_to_record(self, repository, mock_session, mock_probe):
        returning_row(
            mock_session,
            SimpleNamespace(owner_id=3, patient_name="Patient Paul", data="Record A"),
        )

        record = await repository.get_patient_record(ResourceId(value=1))

        assert record == PatientRecord(
            id=ResourceId(value=1),
            owner_id=SubjectId(value=3),
            patient_name="Patient Paul",
            data="Record A",
        )
        mock_probe.record_loaded.assert_called_once_with(1)

    @pytest.mark.asyncio
    async def test_missing_record_returns_none(
        self, repository, mock_session, mock_probe
    ):
        returning_row(mock_session, None)

        assert await repository.get_patient_record(ResourceId(value=9)) is None
        mock_probe.record_not_found.assert_called_once_with(9)

    @pytest.mark.asyncio
    async def test_database_error_raises_store_unavailable(
        self, repository, mock_session, mock_probe
    ):
        error = OperationalError("SELECT 1", {}, Exception("connection refused"))
        mock_session.execute.side_effect = error

        with pytest.raises(StoreUnavailableError) as exc_info:
            await repository.get_patient_record(ResourceId(value=1))

        assert exc_info.value.cause is error
        mock_probe.read_failed.assert_called_once_with("get_patient_record", error)
