"""Assembles a politician's public profile."""

from dataclasses import dataclass

from civicview.entities import PoliticianRecord, PromiseRecord, RatingRecord
from civicview.exceptions import NotFoundError
from civicview.services.promise_fulfillment import FulfillmentStats, calculate_fulfillment
from civicview.services.rating_aggregator import (
    RatingStats,
    StarShare,
    aggregate_ratings,
    approved_only,
    rating_distribution,
)
from civicview.services.voting_alignment import (
    VoteWithBill,
    VotingSummary,
    load_votes_with_bills,
    summarize_votes,
)
from civicview.storage import Storage


@dataclass(frozen=True)
class PoliticianProfile:
    politician: PoliticianRecord
    promises: list[PromiseRecord]
    voting_records: list[VoteWithBill]
    rating_stats: RatingStats
    approved_ratings: list[RatingRecord]
    fulfillment_stats: FulfillmentStats
    voting_summary: VotingSummary
    rating_distribution: list[StarShare]

    @property
    def fulfillment_rate(self) -> int:
        return self.fulfillment_stats.rate


def get_politician_or_raise(storage: Storage, politician_id: str) -> PoliticianRecord:
    politician = storage.get_politician(politician_id)
    if politician is None:
        raise NotFoundError("Politician", politician_id)
    return politician


def build_profile(storage: Storage, politician_id: str) -> PoliticianProfile:
    """
    Collect everything shown on a politician's profile page.

    Raises NotFoundError if the politician does not exist. Missing promises,
    votes or ratings are simply empty. Only approved ratings are included.
    """
    politician = get_politician_or_raise(storage, politician_id)
    promises = storage.get_promises_by_politician_id(politician_id)
    ratings = storage.get_ratings_by_politician_id(politician_id)
    voting_records = load_votes_with_bills(storage, politician_id)

    return PoliticianProfile(
        politician=politician,
        promises=promises,
        voting_records=voting_records,
        rating_stats=aggregate_ratings(ratings),
        approved_ratings=approved_only(ratings),
        fulfillment_stats=calculate_fulfillment(promises),
        voting_summary=summarize_votes(v.record for v in voting_records),
        rating_distribution=rating_distribution(ratings),
    )
