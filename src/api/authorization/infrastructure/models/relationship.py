"""SQLAlchemy ORM model for the relationships table."""

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class RelationshipModel(Base, TimestampMixin):
    """ORM model for directed, typed edges between subjects.

    The unique constraint on ``(subject_id, object_id, type)`` backs the
    edge-uniqueness invariant and doubles as the index used by edge
    lookups.
    """

    __tablename__ = "relationships"
    __table_args__ = (
        UniqueConstraint(
            "subject_id",
            "object_id",
            "type",
            name="uq_relationships_subject_object_type",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    subject_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("subjects.id", ondelete="CASCADE"),
        nullable=False,
    )
    object_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("subjects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    type: Mapped[str] = mapped_column(String(64), nullable=False)

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<RelationshipModel(subject_id={self.subject_id}, "
            f"object_id={self.object_id}, type={self.type})>"
        )
