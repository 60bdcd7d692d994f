import enum
import uuid
from datetime import datetime

from sqlalchemy import Enum, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.datetime_utils import utcnow
from app.db.session import Base


class ProductStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Product(Base):
    __tablename__ = "products"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4, index=True)
    name: Mapped[str] = mapped_column(String(255))
    description: Mapped[str | None] = mapped_column(Text, default=None)
    price: Mapped[float] = mapped_column(default=0.0)

    # Category, e.g. "Panel", "Battery", "Inverter"
    type: Mapped[str] = mapped_column(String(100), index=True)
    governorate: Mapped[str] = mapped_column(String(100), index=True)

    status: Mapped[ProductStatus] = mapped_column(
        Enum(ProductStatus, values_callable=lambda obj: [e.value for e in obj]),
        default=ProductStatus.PENDING,
        index=True,
    )

    # Submitting user
    user_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"), index=True, default=None
    )

    created_at: Mapped[datetime] = mapped_column(default=utcnow, index=True)
    # Approval/rejection moves this forward
    updated_at: Mapped[datetime] = mapped_column(default=utcnow, onupdate=utcnow, index=True)

    user = relationship("User", foreign_keys=[user_id])

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, type={self.type}, status={self.status.value})>"
