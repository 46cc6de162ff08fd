"""Pydantic schemas for rating submission and moderation."""

from datetime import datetime
from typing import Literal
from pydantic import BaseModel, Field

from civicview.schemas.politician import PoliticianResponse


class RatingCreate(BaseModel):
    """
    Schema for submitting a rating.

    Any `status` sent by the client is ignored; new ratings start Pending.
    """

    politician_id: str
    user_id: str | None = Field(None, description="Omitted for anonymous visitors")
    rating: float = Field(..., ge=0, le=5)
    comment: str | None = None


class RatingModeration(BaseModel):
    """Schema for an administrator's moderation decision."""

    status: Literal["Approved", "Rejected"]


class RatingResponse(BaseModel):
    """Schema for rating response."""

    id: str
    politician_id: str
    user_id: str
    rating: float
    comment: str | None = None
    status: str
    created_at: datetime | None = None


class RatingSubmissionResponse(RatingResponse):
    """Rating response returned right after submission."""

    message: str


class RatingWithPolitician(RatingResponse):
    """Rating with its politician embedded, for the moderation queue."""

    politician: PoliticianResponse | None = None
