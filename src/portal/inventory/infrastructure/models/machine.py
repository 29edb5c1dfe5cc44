"""SQLAlchemy ORM model for the machines table."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class MachineModel(Base, TimestampMixin):
    """ORM model for machines table.

    Note: location_id and app_user_id are soft references (indexed, no
    foreign key). Unassigned machines have a NULL app_user_id.
    """

    __tablename__ = "machines"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    location_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    app_user_id: Mapped[int | None] = mapped_column(
        Integer, nullable=True, index=True
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<MachineModel(id={self.id}, name={self.name}, location_id={self.location_id})>"
