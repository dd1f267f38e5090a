"""Order ORM model. Belongs to a user and an organization."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import (
    CuidMixin,
    OrganizationMixin,
    TimestampMixin,
)
from app.infrastructure.persistence.models.organization import Organization
from app.infrastructure.persistence.models.user import User


class Order(CuidMixin, OrganizationMixin, TimestampMixin, Base):
    """Order model. Table: customer_order. Lists are newest order_date first."""

    __tablename__ = "customer_order"

    order_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True
    )
    total_amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    user_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("app_user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    user: Mapped[User] = relationship(lazy="raise")
    organization: Mapped[Organization] = relationship(lazy="raise")

    __table_args__ = (
        CheckConstraint("total_amount > 0", name="customer_order_total_amount_positive"),
    )
