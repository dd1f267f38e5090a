"""Organization ORM model. Root entity: users and orders belong to an organization."""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class Organization(CuidMixin, TimestampMixin, Base):
    """Organization (tenant). Table: organization."""

    __tablename__ = "organization"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    industry: Mapped[str | None] = mapped_column(String(255), nullable=True)
    date_founded: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
