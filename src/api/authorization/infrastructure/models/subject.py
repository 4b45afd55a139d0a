"""SQLAlchemy ORM model for the subjects table."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from authorization.infrastructure.models.associations import subject_roles
from infrastructure.database.models import Base, TimestampMixin

if TYPE_CHECKING:
    from authorization.infrastructure.models.role import RoleModel


class SubjectModel(Base, TimestampMixin):
    """ORM model for subjects (authenticated principals).

    Credentials live with the identity service; this table only stores
    what authorization needs.
    """

    __tablename__ = "subjects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    roles: Mapped[list[RoleModel]] = relationship(
        secondary=subject_roles,
        lazy="raise",
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<SubjectModel(id={self.id}, name={self.name})>"
