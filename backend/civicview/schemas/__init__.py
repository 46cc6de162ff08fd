"""Pydantic schemas for API request/response validation."""

from civicview.schemas.politician import (
    PoliticianBase,
    PoliticianCreate,
    PoliticianUpdate,
    PoliticianResponse,
    PoliticianListItem,
    PoliticianListResponse,
)
from civicview.schemas.promise import (
    PromiseCreate,
    PromiseUpdate,
    PromiseResponse,
)
from civicview.schemas.bill import (
    BillBase,
    BillCreate,
    BillUpdate,
    BillResponse,
)
from civicview.schemas.voting_record import (
    VotingRecordCreate,
    VotingRecordUpdate,
    VotingRecordResponse,
    VotingRecordWithBill,
    BillDetailResponse,
)
from civicview.schemas.rating import (
    RatingCreate,
    RatingModeration,
    RatingResponse,
    RatingSubmissionResponse,
    RatingWithPolitician,
)
from civicview.schemas.admin import (
    AdminLogResponse,
    AdminStatsResponse,
    SessionResponse,
    SessionUser,
    DeleteResponse,
)
from civicview.schemas.analytics import (
    RatingStatsResponse,
    FulfillmentStatsResponse,
    VotingSummaryResponse,
    StarShareResponse,
    ProfileResponse,
    ComparisonPoliticianData,
    BillVoteResponse,
    CommonBillResponse,
    ComparisonResponse,
)

__all__ = [
    "PoliticianBase",
    "PoliticianCreate",
    "PoliticianUpdate",
    "PoliticianResponse",
    "PoliticianListItem",
    "PoliticianListResponse",
    "PromiseCreate",
    "PromiseUpdate",
    "PromiseResponse",
    "BillBase",
    "BillCreate",
    "BillUpdate",
    "BillResponse",
    "VotingRecordCreate",
    "VotingRecordUpdate",
    "VotingRecordResponse",
    "VotingRecordWithBill",
    "BillDetailResponse",
    "RatingCreate",
    "RatingModeration",
    "RatingResponse",
    "RatingSubmissionResponse",
    "RatingWithPolitician",
    "AdminLogResponse",
    "AdminStatsResponse",
    "SessionResponse",
    "SessionUser",
    "DeleteResponse",
    "RatingStatsResponse",
    "FulfillmentStatsResponse",
    "VotingSummaryResponse",
    "StarShareResponse",
    "ProfileResponse",
    "ComparisonPoliticianData",
    "BillVoteResponse",
    "CommonBillResponse",
    "ComparisonResponse",
]
