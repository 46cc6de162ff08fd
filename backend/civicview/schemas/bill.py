"""Pydantic schemas for bill endpoints."""

from datetime import date, datetime
from pydantic import BaseModel, Field


class BillBase(BaseModel):
    """Base schema for bill data."""

    title: str = Field(..., min_length=1)
    description: str
    date_voted: date


class BillCreate(BillBase):
    """Schema for creating a bill."""
    pass


class BillUpdate(BaseModel):
    """Schema for updating a bill (all fields optional)."""

    title: str | None = Field(None, min_length=1)
    description: str | None = None
    date_voted: date | None = None


class BillResponse(BillBase):
    """Schema for bill response."""

    id: str
    created_at: datetime | None = None
