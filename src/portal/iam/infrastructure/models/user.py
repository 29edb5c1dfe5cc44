"""SQLAlchemy ORM model for the users table.

Users are provisioned from SSO on first login. The external object id is
the reconciliation key and is unique; that constraint is the only
protection against two concurrent first logins creating duplicates.
"""

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from iam.infrastructure.models.role import RoleModel, user_roles
from infrastructure.database.models import Base, TimestampMixin


class UserModel(Base, TimestampMixin):
    """ORM model for users table.

    Note: location_id is a soft reference. It has no foreign key because
    new users receive a placeholder location that may not exist, and
    locations can be deleted while users still point at them.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    external_id: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    is_admin: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    location_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    roles: Mapped[list[RoleModel]] = relationship(
        secondary=user_roles,
        lazy="selectin",
        order_by=RoleModel.name,
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<UserModel(id={self.id}, external_id={self.external_id}, name={self.name})>"
