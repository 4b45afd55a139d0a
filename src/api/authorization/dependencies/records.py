"""Dependency provider for record contents."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from authorization.infrastructure.record_repository import RecordRepository
from authorization.ports.repositories import IRecordRepository
from infrastructure.database.dependencies import get_read_session


def get_record_repository(
    session: Annotated[AsyncSession, Depends(get_read_session)],
) -> IRecordRepository:
    """Get a record repository sharing the request's read session."""
    return RecordRepository(session=session)
