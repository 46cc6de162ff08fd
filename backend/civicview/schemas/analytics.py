"""Pydantic schemas for profile and comparison payloads."""

from typing import Literal
from pydantic import BaseModel, Field

from civicview.schemas.bill import BillResponse
from civicview.schemas.politician import PoliticianResponse
from civicview.schemas.promise import PromiseResponse
from civicview.schemas.rating import RatingResponse
from civicview.schemas.voting_record import VotingRecordWithBill


class RatingStatsResponse(BaseModel):
    """Average of approved ratings, one decimal place."""

    average: float
    count: int


class FulfillmentStatsResponse(BaseModel):
    """Promise counts by status."""

    fulfilled: int
    in_progress: int
    unfulfilled: int
    unrecognized: int = 0
    total: int


class VotingSummaryResponse(BaseModel):
    """Vote counts by choice and the share of votes actually attended."""

    voted_for: int
    voted_against: int
    abstained: int
    absent: int
    total: int
    participation_rate: int = Field(..., ge=0, le=100)


class StarShareResponse(BaseModel):
    stars: int = Field(..., ge=1, le=5)
    count: int
    percentage: int = Field(..., ge=0, le=100)


class ProfileResponse(BaseModel):
    """Public profile of a single politician."""

    politician: PoliticianResponse
    promises: list[PromiseResponse]
    voting_records: list[VotingRecordWithBill]
    rating_stats: RatingStatsResponse
    approved_ratings: list[RatingResponse]
    fulfillment_stats: FulfillmentStatsResponse
    fulfillment_rate: int = Field(..., ge=0, le=100)
    voting_summary: VotingSummaryResponse
    rating_distribution: list[StarShareResponse]


class ComparisonPoliticianData(BaseModel):
    """Aggregates for one politician in a comparison."""

    politician: PoliticianResponse
    promises: list[PromiseResponse]
    voting_records: list[VotingRecordWithBill]
    rating_stats: RatingStatsResponse
    fulfillment_stats: FulfillmentStatsResponse
    fulfillment_rate: int = Field(..., ge=0, le=100)
    voting_summary: VotingSummaryResponse


class BillVoteResponse(BaseModel):
    politician_id: str
    vote: str


class CommonBillResponse(BaseModel):
    """One bill in a comparison, with every compared politician's vote."""

    bill_id: str
    bill: BillResponse | None = None
    votes: list[BillVoteResponse]
    aligned: bool


class ComparisonResponse(BaseModel):
    """Side-by-side comparison of 2-3 politicians."""

    politicians: list[PoliticianResponse]
    per_politician_data: list[ComparisonPoliticianData]
    common_bills: list[CommonBillResponse]
    alignment_percentage: int | Literal["N/A"]
