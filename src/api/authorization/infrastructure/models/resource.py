"""SQLAlchemy ORM model for the resources table."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class ResourceModel(Base, TimestampMixin):
    """ORM model for owned resources.

    Foreign Key Constraint:
    - owner_id references subjects.id with RESTRICT delete, so a resource
      can never point at a subject that no longer exists
    """

    __tablename__ = "resources"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    owner_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("subjects.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    kind: Mapped[str] = mapped_column(String(64), nullable=False)

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<ResourceModel(id={self.id}, owner_id={self.owner_id}, kind={self.kind})>"
        )
