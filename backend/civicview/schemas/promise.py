"""Pydantic schemas for promise endpoints."""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from civicview.entities import PromiseStatus
from civicview.utils.db import patch_values


class PromiseBase(BaseModel):
    """Base schema for promise data."""

    model_config = ConfigDict(use_enum_values=True)

    title: str = Field(..., min_length=1, max_length=255)
    description: str
    status: PromiseStatus = PromiseStatus.IN_PROGRESS
    fulfillment_date: date | None = Field(
        None, description="Only meaningful when status is Fulfilled"
    )


class PromiseCreate(PromiseBase):
    """Schema for creating a promise."""

    politician_id: str


class PromiseUpdate(BaseModel):
    """Schema for updating a promise (all fields optional)."""

    model_config = ConfigDict(use_enum_values=True)

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    status: PromiseStatus | None = None
    fulfillment_date: date | None = None

    def changes(self) -> dict[str, Any]:
        """
        Values to write. Moving a promise away from Fulfilled also clears
        its fulfillment date.
        """
        values = patch_values(self)
        if values.get("status", PromiseStatus.FULFILLED.value) != PromiseStatus.FULFILLED.value:
            values["fulfillment_date"] = None
        return values


class PromiseResponse(PromiseBase):
    """Schema for promise response."""

    id: str
    politician_id: str
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
