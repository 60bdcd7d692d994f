import uuid
from datetime import datetime

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.datetime_utils import utcnow
from app.db.session import Base


class User(Base):
    """
    Platform account. Read here for admin checks, registration counts and
    as the target of product/shop/engineer references.

    Attributes:
        id: Unique UUID primary key
        name: Display name
        email: Unique email address
        phone: Contact phone number (nullable)
        role: "admin" or "user"
        is_active: Whether the account is active
        created_at: Registration timestamp (naive UTC)
        updated_at: Last update timestamp (naive UTC)
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4, index=True)
    name: Mapped[str] = mapped_column(String(255))
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    phone: Mapped[str | None] = mapped_column(String(32), default=None)

    role: Mapped[str] = mapped_column(String(50), default="user")
    is_active: Mapped[bool] = mapped_column(default=True)

    created_at: Mapped[datetime] = mapped_column(default=utcnow, index=True)
    updated_at: Mapped[datetime] = mapped_column(default=utcnow, onupdate=utcnow)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"
