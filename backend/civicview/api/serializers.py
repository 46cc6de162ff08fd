"""Conversion from storage records and service results to response schemas."""

from civicview.entities import (
    AdminLogRecord,
    BillRecord,
    PoliticianRecord,
    PromiseRecord,
    RatingRecord,
    VoteRecord,
)
from civicview.schemas import (
    AdminLogResponse,
    BillDetailResponse,
    BillResponse,
    BillVoteResponse,
    CommonBillResponse,
    ComparisonPoliticianData,
    ComparisonResponse,
    FulfillmentStatsResponse,
    PoliticianListItem,
    PoliticianResponse,
    ProfileResponse,
    PromiseResponse,
    RatingResponse,
    RatingStatsResponse,
    RatingWithPolitician,
    StarShareResponse,
    VotingRecordResponse,
    VotingRecordWithBill,
    VotingSummaryResponse,
)
from civicview.services.comparison import Comparison, ComparisonEntry
from civicview.services.directory import DirectoryEntry
from civicview.services.profile import PoliticianProfile
from civicview.services.promise_fulfillment import FulfillmentStats
from civicview.services.rating_aggregator import RatingStats, StarShare
from civicview.services.voting_alignment import CommonBill, VoteWithBill, VotingSummary

NOT_AVAILABLE = "N/A"


def to_politician_response(politician: PoliticianRecord) -> PoliticianResponse:
    return PoliticianResponse(
        id=politician.id,
        name=politician.name,
        party=politician.party,
        parish=politician.parish,
        number_of_votes=politician.number_of_votes,
        status=politician.status,
        bio=politician.bio,
        first_elected=politician.first_elected,
        profile_image_url=politician.profile_image_url,
        manifesto_points=list(politician.manifesto_points),
        created_at=politician.created_at,
        updated_at=politician.updated_at,
    )


def to_politician_list_item(entry: DirectoryEntry) -> PoliticianListItem:
    return PoliticianListItem(
        **to_politician_response(entry.politician).model_dump(),
        rating=entry.rating_stats.average,
        rating_count=entry.rating_stats.count,
    )


def to_promise_response(promise: PromiseRecord) -> PromiseResponse:
    return PromiseResponse(
        id=promise.id,
        politician_id=promise.politician_id,
        title=promise.title,
        description=promise.description,
        status=promise.status,
        fulfillment_date=promise.fulfillment_date,
        created_at=promise.created_at,
        updated_at=promise.updated_at,
    )


def to_bill_response(bill: BillRecord) -> BillResponse:
    return BillResponse(
        id=bill.id,
        title=bill.title,
        description=bill.description,
        date_voted=bill.date_voted,
        created_at=bill.created_at,
    )


def to_bill_detail(bill: BillRecord, records: list[VoteRecord]) -> BillDetailResponse:
    return BillDetailResponse(
        **to_bill_response(bill).model_dump(),
        voting_records=[to_voting_record_response(r) for r in records],
    )


def to_voting_record_response(record: VoteRecord) -> VotingRecordResponse:
    return VotingRecordResponse(
        id=record.id,
        politician_id=record.politician_id,
        bill_id=record.bill_id,
        vote=record.vote,
        created_at=record.created_at,
    )


def to_voting_record_with_bill(entry: VoteWithBill) -> VotingRecordWithBill:
    return VotingRecordWithBill(
        **to_voting_record_response(entry.record).model_dump(),
        bill=to_bill_response(entry.bill) if entry.bill else None,
    )


def to_rating_response(rating: RatingRecord) -> RatingResponse:
    return RatingResponse(
        id=rating.id,
        politician_id=rating.politician_id,
        user_id=rating.user_id,
        rating=rating.rating,
        comment=rating.comment,
        status=rating.status,
        created_at=rating.created_at,
    )


def to_rating_with_politician(
    rating: RatingRecord, politician: PoliticianRecord | None
) -> RatingWithPolitician:
    return RatingWithPolitician(
        **to_rating_response(rating).model_dump(),
        politician=to_politician_response(politician) if politician else None,
    )


def to_admin_log_response(log: AdminLogRecord) -> AdminLogResponse:
    return AdminLogResponse(
        id=log.id,
        user_id=log.user_id,
        action=log.action,
        details=dict(log.details),
        created_at=log.created_at,
    )


def to_rating_stats(stats: RatingStats) -> RatingStatsResponse:
    return RatingStatsResponse(average=stats.average, count=stats.count)


def to_fulfillment_stats(stats: FulfillmentStats) -> FulfillmentStatsResponse:
    return FulfillmentStatsResponse(
        fulfilled=stats.fulfilled,
        in_progress=stats.in_progress,
        unfulfilled=stats.unfulfilled,
        unrecognized=stats.unrecognized,
        total=stats.total,
    )


def to_voting_summary(summary: VotingSummary) -> VotingSummaryResponse:
    return VotingSummaryResponse(
        voted_for=summary.voted_for,
        voted_against=summary.voted_against,
        abstained=summary.abstained,
        absent=summary.absent,
        total=summary.total,
        participation_rate=summary.participation_rate,
    )


def to_star_share(share: StarShare) -> StarShareResponse:
    return StarShareResponse(stars=share.stars, count=share.count, percentage=share.percentage)


def to_profile_response(profile: PoliticianProfile) -> ProfileResponse:
    return ProfileResponse(
        politician=to_politician_response(profile.politician),
        promises=[to_promise_response(p) for p in profile.promises],
        voting_records=[to_voting_record_with_bill(v) for v in profile.voting_records],
        rating_stats=to_rating_stats(profile.rating_stats),
        approved_ratings=[to_rating_response(r) for r in profile.approved_ratings],
        fulfillment_stats=to_fulfillment_stats(profile.fulfillment_stats),
        fulfillment_rate=profile.fulfillment_rate,
        voting_summary=to_voting_summary(profile.voting_summary),
        rating_distribution=[to_star_share(s) for s in profile.rating_distribution],
    )


def _to_comparison_data(entry: ComparisonEntry) -> ComparisonPoliticianData:
    return ComparisonPoliticianData(
        politician=to_politician_response(entry.politician),
        promises=[to_promise_response(p) for p in entry.promises],
        voting_records=[to_voting_record_with_bill(v) for v in entry.voting_records],
        rating_stats=to_rating_stats(entry.rating_stats),
        fulfillment_stats=to_fulfillment_stats(entry.fulfillment_stats),
        fulfillment_rate=entry.fulfillment_rate,
        voting_summary=to_voting_summary(entry.voting_summary),
    )


def _to_common_bill(bill: CommonBill) -> CommonBillResponse:
    return CommonBillResponse(
        bill_id=bill.bill_id,
        bill=to_bill_response(bill.bill) if bill.bill else None,
        votes=[BillVoteResponse(politician_id=v.politician_id, vote=v.vote) for v in bill.votes],
        aligned=bill.aligned,
    )


def to_comparison_response(comparison: Comparison) -> ComparisonResponse:
    pct = comparison.alignment.alignment_percentage
    return ComparisonResponse(
        politicians=[to_politician_response(p) for p in comparison.politicians],
        per_politician_data=[_to_comparison_data(e) for e in comparison.entries],
        common_bills=[_to_common_bill(b) for b in comparison.common_bills],
        alignment_percentage=NOT_AVAILABLE if pct is None else pct,
    )
