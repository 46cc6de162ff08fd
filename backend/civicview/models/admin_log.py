"""Admin audit log model."""

from datetime import datetime
from typing import Any
from sqlalchemy import String, DateTime, JSON, Index
from sqlalchemy.orm import Mapped, mapped_column

from civicview.database import Base
from civicview.models.politician import _uuid, _utcnow


class AdminLog(Base):
    """Append-only record of an administrator action."""

    __tablename__ = "admin_logs"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    user_id: Mapped[str] = mapped_column(String(36), nullable=False)
    action: Mapped[str] = mapped_column(String(50), nullable=False)  # e.g. 'CREATE_POLITICIAN'
    details: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    __table_args__ = (
        Index("idx_admin_logs_created", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<AdminLog {self.action} by {self.user_id}>"
