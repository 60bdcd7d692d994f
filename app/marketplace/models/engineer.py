import uuid
from datetime import datetime

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.datetime_utils import utcnow
from app.db.session import Base


class Engineer(Base):
    __tablename__ = "engineers"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4, index=True)
    name: Mapped[str] = mapped_column(String(255))
    phone: Mapped[str | None] = mapped_column(String(32), default=None)
    email: Mapped[str | None] = mapped_column(String(255), default=None)
    specialization: Mapped[str | None] = mapped_column(String(255), default=None)
    experience: Mapped[int] = mapped_column(default=0)  # Years
    governorate: Mapped[str | None] = mapped_column(String(100), default=None, index=True)

    is_verified: Mapped[bool] = mapped_column(default=False, index=True)
    # "Available" on the dashboard
    is_active: Mapped[bool] = mapped_column(default=True, index=True)

    notes: Mapped[str | None] = mapped_column(Text, default=None)

    added_by_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"), default=None
    )

    created_at: Mapped[datetime] = mapped_column(default=utcnow, index=True)
    updated_at: Mapped[datetime] = mapped_column(default=utcnow, onupdate=utcnow)

    added_by = relationship("User", foreign_keys=[added_by_id])

    def __repr__(self) -> str:
        return f"<Engineer(id={self.id}, name={self.name}, verified={self.is_verified})>"
