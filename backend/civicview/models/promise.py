"""Promise model for campaign promises."""

from datetime import date, datetime
from sqlalchemy import String, Text, Date, DateTime, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column

from civicview.database import Base
from civicview.models.politician import _uuid, _utcnow


class Promise(Base):
    """Model representing a campaign promise made by a politician."""

    __tablename__ = "promises"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    politician_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("politicians.id", ondelete="CASCADE"), nullable=False
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), default="InProgress"
    )  # 'Fulfilled', 'InProgress', 'Unfulfilled'
    fulfillment_date: Mapped[date | None] = mapped_column(Date)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow
    )

    __table_args__ = (
        Index("idx_promises_politician", "politician_id"),
    )

    def __repr__(self) -> str:
        return f"<Promise {self.title[:50]} ({self.status})>"
