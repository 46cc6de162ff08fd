"""Pydantic schemas for voting record endpoints."""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

from civicview.entities import VoteChoice
from civicview.schemas.bill import BillResponse


class VotingRecordCreate(BaseModel):
    """Schema for creating a voting record."""

    model_config = ConfigDict(use_enum_values=True)

    politician_id: str
    bill_id: str
    vote: VoteChoice = Field(..., description="'For', 'Against', 'Abstained', or 'Absent'")


class VotingRecordUpdate(BaseModel):
    """Schema for updating a voting record."""

    model_config = ConfigDict(use_enum_values=True)

    vote: VoteChoice | None = None


class VotingRecordResponse(BaseModel):
    """Schema for voting record response."""

    id: str
    politician_id: str
    bill_id: str
    vote: str
    created_at: datetime | None = None


class VotingRecordWithBill(VotingRecordResponse):
    """Voting record with its bill embedded."""

    bill: BillResponse | None = None


class BillDetailResponse(BillResponse):
    """Bill with every recorded vote on it."""

    voting_records: list[VotingRecordResponse] = []
