"""SQLAlchemy ORM model for the locations table."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class LocationModel(Base, TimestampMixin):
    """ORM model for locations table.

    Users and machines reference locations by id without a foreign key,
    so a location can be deleted while still referenced.
    """

    __tablename__ = "locations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<LocationModel(id={self.id}, name={self.name})>"
