"""Side-by-side comparison of 2-3 politicians."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from civicview.entities import PoliticianRecord, PromiseRecord
from civicview.exceptions import InsufficientComparisonTargetsError, InvalidDataError
from civicview.services.promise_fulfillment import FulfillmentStats, calculate_fulfillment
from civicview.services.rating_aggregator import RatingStats, get_rating_stats
from civicview.services.voting_alignment import (
    AlignmentResult,
    CommonBill,
    PoliticianVotes,
    VoteWithBill,
    VotingSummary,
    calculate_voting_alignment,
    load_votes_with_bills,
    summarize_votes,
)
from civicview.storage import Storage

logger = logging.getLogger(__name__)

MIN_COMPARISON_SIZE = 2
MAX_COMPARISON_SIZE = 3


@dataclass(frozen=True)
class ComparisonEntry:
    """Aggregates for one compared politician. No individual review text."""

    politician: PoliticianRecord
    promises: list[PromiseRecord]
    voting_records: list[VoteWithBill]
    rating_stats: RatingStats
    fulfillment_stats: FulfillmentStats
    voting_summary: VotingSummary

    @property
    def fulfillment_rate(self) -> int:
        return self.fulfillment_stats.rate


@dataclass(frozen=True)
class Comparison:
    entries: list[ComparisonEntry]
    alignment: AlignmentResult

    @property
    def politicians(self) -> list[PoliticianRecord]:
        return [e.politician for e in self.entries]

    @property
    def common_bills(self) -> list[CommonBill]:
        return self.alignment.common_bills


def normalize_ids(politician_ids: Sequence[str]) -> list[str]:
    """
    Strip blanks and drop repeated ids, keeping first occurrences in order.

    Raises InsufficientComparisonTargetsError for fewer than two distinct ids
    and InvalidDataError for more than three.
    """
    unique = list(dict.fromkeys(pid.strip() for pid in politician_ids if pid and pid.strip()))

    if len(unique) < MIN_COMPARISON_SIZE:
        raise InsufficientComparisonTargetsError(
            "At least two politician IDs are required for comparison"
        )
    if len(unique) > MAX_COMPARISON_SIZE:
        raise InvalidDataError(
            "At most three politicians can be compared",
            errors={"ids": [f"Expected 2-{MAX_COMPARISON_SIZE} ids, got {len(unique)}"]},
        )
    return unique


def build_comparison(storage: Storage, politician_ids: Sequence[str]) -> Comparison:
    """
    Compare 2-3 politicians on promises, ratings and votes.

    Ids that do not resolve are dropped. If fewer than two politicians
    remain the request fails with InsufficientComparisonTargetsError.
    """
    entries = []
    for pid in normalize_ids(politician_ids):
        politician = storage.get_politician(pid)
        if politician is None:
            logger.info("Dropping unknown politician %s from comparison", pid)
            continue

        promises = storage.get_promises_by_politician_id(pid)
        voting_records = load_votes_with_bills(storage, pid)
        entries.append(
            ComparisonEntry(
                politician=politician,
                promises=promises,
                voting_records=voting_records,
                rating_stats=get_rating_stats(storage, pid),
                fulfillment_stats=calculate_fulfillment(promises),
                voting_summary=summarize_votes(v.record for v in voting_records),
            )
        )

    if len(entries) < MIN_COMPARISON_SIZE:
        raise InsufficientComparisonTargetsError(
            "At least two valid politician IDs are required for comparison"
        )

    alignment = calculate_voting_alignment(
        [PoliticianVotes(politician_id=e.politician.id, votes=e.voting_records) for e in entries]
    )
    return Comparison(entries=entries, alignment=alignment)
