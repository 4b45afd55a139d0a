"""SQLAlchemy ORM model for the patient_records table."""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class PatientRecordModel(Base, TimestampMixin):
    """ORM model for record contents.

    One row per ``patient_record`` resource, keyed by the resource id.
    Ownership stays on ``resources``; this table only holds the payload.
    """

    __tablename__ = "patient_records"

    resource_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("resources.id", ondelete="CASCADE"),
        primary_key=True,
    )
    patient_name: Mapped[str] = mapped_column(String(255), nullable=False)
    data: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<PatientRecordModel(resource_id={self.resource_id})>"
