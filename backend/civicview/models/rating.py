"""Rating model for constituent ratings."""

from datetime import datetime
from sqlalchemy import String, Float, Text, DateTime, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from civicview.database import Base
from civicview.models.politician import _uuid, _utcnow


class Rating(Base):
    """Model representing a constituent's rating of a politician."""

    __tablename__ = "ratings"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    politician_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("politicians.id", ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[str] = mapped_column(String(100), nullable=False)
    rating: Mapped[float] = mapped_column(Float, nullable=False)
    comment: Mapped[str | None] = mapped_column(Text)
    status: Mapped[str] = mapped_column(
        String(20), default="Pending"
    )  # 'Pending', 'Approved', 'Rejected'
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    __table_args__ = (
        UniqueConstraint("user_id", "politician_id", name="uq_ratings_user_politician"),
        Index("idx_ratings_politician", "politician_id"),
        Index("idx_ratings_status", "status"),
    )

    def __repr__(self) -> str:
        return f"<Rating {self.rating} for {self.politician_id} ({self.status})>"
