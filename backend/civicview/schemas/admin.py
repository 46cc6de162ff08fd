"""Pydantic schemas for admin-only endpoints."""

from datetime import datetime
from typing import Any
from pydantic import BaseModel


class AdminLogResponse(BaseModel):
    """Schema for an audit log entry."""

    id: str
    user_id: str
    action: str
    details: dict[str, Any] = {}
    created_at: datetime | None = None


class AdminStatsResponse(BaseModel):
    """Dashboard counters."""

    total_politicians: int
    total_ratings: int
    pending_ratings: int
    party_distribution: dict[str, int]


class SessionUser(BaseModel):
    """The authenticated account."""

    id: str
    username: str
    is_admin: bool


class SessionResponse(BaseModel):
    user: SessionUser


class DeleteResponse(BaseModel):
    success: bool = True
