"""Pydantic schemas for politician endpoints."""

from datetime import date, datetime
from pydantic import BaseModel, ConfigDict, Field

from civicview.entities import Party, PoliticianStatus


class PoliticianBase(BaseModel):
    """Base schema for politician data."""

    model_config = ConfigDict(use_enum_values=True)

    name: str = Field(..., min_length=1, max_length=200)
    party: Party = Field(..., description="Democratic, Republican, or Independent")
    parish: str = Field(..., min_length=1, max_length=100)
    number_of_votes: int = Field(0, ge=0, description="Votes received in the last election")
    status: PoliticianStatus = PoliticianStatus.CURRENT
    bio: str | None = None
    first_elected: date | None = None
    profile_image_url: str | None = None
    manifesto_points: list[str] = Field(default_factory=list, max_length=5)


class PoliticianCreate(PoliticianBase):
    """Schema for creating a politician."""
    pass


class PoliticianUpdate(BaseModel):
    """Schema for updating a politician (all fields optional)."""

    model_config = ConfigDict(use_enum_values=True)

    name: str | None = Field(None, min_length=1, max_length=200)
    party: Party | None = None
    parish: str | None = Field(None, min_length=1, max_length=100)
    number_of_votes: int | None = Field(None, ge=0)
    status: PoliticianStatus | None = None
    bio: str | None = None
    first_elected: date | None = None
    profile_image_url: str | None = None
    manifesto_points: list[str] | None = Field(None, max_length=5)


class PoliticianResponse(PoliticianBase):
    """Schema for politician response."""

    id: str
    party: str
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PoliticianListItem(PoliticianResponse):
    """Directory entry with aggregate rating."""

    rating: float = 0
    rating_count: int = 0


class PoliticianListResponse(BaseModel):
    """Schema for paginated politician directory."""

    items: list[PoliticianListItem]
    total: int
    page: int
    page_size: int
    total_pages: int
