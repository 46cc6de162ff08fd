"""Voting record model."""

from datetime import datetime
from sqlalchemy import String, DateTime, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column

from civicview.database import Base
from civicview.models.politician import _uuid, _utcnow


class VotingRecord(Base):
    """Model representing a politician's vote on a bill."""

    __tablename__ = "voting_records"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    politician_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("politicians.id", ondelete="CASCADE"), nullable=False
    )
    bill_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("bills.id", ondelete="CASCADE"), nullable=False
    )
    vote: Mapped[str] = mapped_column(
        String(20), nullable=False
    )  # 'For', 'Against', 'Abstained', 'Absent'
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    __table_args__ = (
        Index("idx_voting_records_politician", "politician_id"),
        Index("idx_voting_records_bill", "bill_id"),
    )

    def __repr__(self) -> str:
        return f"<VotingRecord {self.politician_id} on {self.bill_id}: {self.vote}>"
