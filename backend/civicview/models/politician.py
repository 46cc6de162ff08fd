"""Politician model for elected officials."""

import uuid
from datetime import date, datetime, timezone
from sqlalchemy import String, Integer, Text, Date, DateTime, JSON, Index
from sqlalchemy.orm import Mapped, mapped_column

from civicview.database import Base


def _uuid() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Politician(Base):
    """Model representing an elected official tracked by the platform."""

    __tablename__ = "politicians"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    party: Mapped[str] = mapped_column(String(50), nullable=False)
    parish: Mapped[str] = mapped_column(String(100), nullable=False)
    number_of_votes: Mapped[int] = mapped_column(Integer, default=0)
    status: Mapped[str] = mapped_column(String(20), default="Current")  # 'Current' or 'New'
    bio: Mapped[str | None] = mapped_column(Text)
    first_elected: Mapped[date | None] = mapped_column(Date)
    profile_image_url: Mapped[str | None] = mapped_column(String(500))
    manifesto_points: Mapped[list[str]] = mapped_column(JSON, default=list)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow
    )

    __table_args__ = (
        Index("idx_politicians_party", "party"),
        Index("idx_politicians_parish", "parish"),
    )

    def __repr__(self) -> str:
        return f"<Politician {self.name} ({self.party}, {self.parish})>"
