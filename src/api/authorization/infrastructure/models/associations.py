"""Association tables for many-to-many authorization links.

Role membership and role-permission assignment carry no attributes of
their own, so they are plain tables with composite primary keys. The
primary key makes a second identical assignment impossible.
"""

from sqlalchemy import Column, ForeignKey, Integer, Table

from infrastructure.database.models import Base

subject_roles = Table(
    "subject_roles",
    Base.metadata,
    Column(
        "subject_id",
        Integer,
        ForeignKey("subjects.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "role_id",
        Integer,
        ForeignKey("roles.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)

role_permissions = Table(
    "role_permissions",
    Base.metadata,
    Column(
        "role_id",
        Integer,
        ForeignKey("roles.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "permission_id",
        Integer,
        ForeignKey("permissions.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)
