"""SQLAlchemy ORM models for the roles and permissions tables."""

from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from authorization.infrastructure.models.associations import role_permissions
from infrastructure.database.models import Base, TimestampMixin


class PermissionModel(Base, TimestampMixin):
    """ORM model for permissions. Names are globally unique."""

    __tablename__ = "permissions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<PermissionModel(id={self.id}, name={self.name})>"


class RoleModel(Base, TimestampMixin):
    """ORM model for roles. Names are globally unique; roles do not nest."""

    __tablename__ = "roles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    permissions: Mapped[list[PermissionModel]] = relationship(
        secondary=role_permissions,
        lazy="raise",
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<RoleModel(id={self.id}, name={self.name})>"
