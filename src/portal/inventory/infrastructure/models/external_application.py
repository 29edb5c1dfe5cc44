"""SQLAlchemy ORM model for the external_applications table."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class ExternalApplicationModel(Base, TimestampMixin):
    """ORM model for external_applications table."""

    __tablename__ = "external_applications"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    app_name: Mapped[str] = mapped_column(String(100), nullable=False)
    app_url: Mapped[str] = mapped_column(String(2048), nullable=False)
    icon_name: Mapped[str] = mapped_column(String(100), nullable=False)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<ExternalApplicationModel(id={self.id}, app_name={self.app_name})>"
