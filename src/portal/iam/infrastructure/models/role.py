"""SQLAlchemy ORM models for roles, permissions and their join tables.

Roles and permissions are two flat relations. ``role_permissions`` and
``user_roles`` carry no payload: the presence of a row is the grant.
"""

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from infrastructure.database.models import Base, TimestampMixin

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

user_roles = Table(
    "user_roles",
    Base.metadata,
    Column(
        "user_id",
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "role_id",
        Integer,
        ForeignKey("roles.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class PermissionModel(Base, TimestampMixin):
    """ORM model for permissions table.

    Note: Permission names are globally unique.
    """

    __tablename__ = "permissions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<PermissionModel(id={self.id}, name={self.name})>"


class RoleModel(Base, TimestampMixin):
    """ORM model for roles table.

    Permissions are always loaded with the role (selectin) since every
    read path flattens them into the role record.
    """

    __tablename__ = "roles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)

    permissions: Mapped[list[PermissionModel]] = relationship(
        secondary=role_permissions,
        lazy="selectin",
        order_by=PermissionModel.name,
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<RoleModel(id={self.id}, name={self.name})>"
