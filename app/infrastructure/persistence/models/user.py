"""User ORM model (organization-scoped, email unique across the service)."""

from datetime import datetime

from sqlalchemy import DateTime, Index, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import (
    CuidMixin,
    OrganizationMixin,
    TimestampMixin,
)


class User(CuidMixin, OrganizationMixin, TimestampMixin, Base):
    """User model. Table: app_user. Unique email; list order is (last_name, first_name)."""

    __tablename__ = "app_user"

    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    date_created: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, server_default=func.now()
    )
    hashed_password: Mapped[str | None] = mapped_column(String, nullable=True)

    __table_args__ = (Index("ix_app_user_name", "last_name", "first_name"),)
