"""Voting alignment calculation service."""

import logging
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from civicview.entities import BillRecord, VoteChoice, VoteRecord
from civicview.storage import Storage
from civicview.utils.rounding import percentage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VoteWithBill:
    """A voting record joined with the bill it was cast on."""

    record: VoteRecord
    bill: BillRecord | None


@dataclass(frozen=True)
class PoliticianVotes:
    """Every vote one politician has cast."""

    politician_id: str
    votes: list[VoteWithBill] = field(default_factory=list)


@dataclass(frozen=True)
class BillVote:
    politician_id: str
    vote: str


@dataclass(frozen=True)
class CommonBill:
    """One bill with each compared politician's vote on it."""

    bill_id: str
    bill: BillRecord | None
    votes: list[BillVote]
    aligned: bool


@dataclass(frozen=True)
class AlignmentResult:
    """Result of voting alignment calculation."""

    common_bills: list[CommonBill]
    aligned_bills: int
    total_bills: int
    alignment_percentage: int | None  # None when there are no common bills


def load_votes_with_bills(storage: Storage, politician_id: str) -> list[VoteWithBill]:
    """Fetch a politician's voting records, each joined with its bill."""
    records = storage.get_voting_records_by_politician_id(politician_id)
    bills: dict[str, BillRecord | None] = {}
    joined = []
    for record in records:
        if record.bill_id not in bills:
            bills[record.bill_id] = storage.get_bill(record.bill_id)
        joined.append(VoteWithBill(record=record, bill=bills[record.bill_id]))
    return joined


def _latest_vote_per_bill(votes: Sequence[VoteWithBill]) -> dict[str, VoteWithBill]:
    """
    Collapse duplicate (politician, bill) records.

    The most recently created record wins; ties fall back to record id.
    """
    ordered = sorted(
        votes,
        key=lambda v: (v.record.created_at is not None, v.record.created_at, v.record.id),
    )
    return {v.record.bill_id: v for v in ordered}


def _bill_order(bill: CommonBill) -> tuple:
    # Newest vote first; bills missing from the store go last
    if bill.bill is None:
        return (1, 0, bill.bill_id)
    return (0, -bill.bill.date_voted.toordinal(), bill.bill_id)


def calculate_voting_alignment(politicians: Sequence[PoliticianVotes]) -> AlignmentResult:
    """
    Compare how a group of politicians voted on every bill any of them voted on.

    A politician without a record for a bill counts as "Absent" on it. A bill
    is aligned when every politician's vote on it is identical, synthesized
    "Absent" entries included. The overall percentage is None when no
    politician has any voting record, since zero would read as total
    disagreement.

    Args:
        politicians: Votes of the politicians being compared (2 or 3)

    Returns:
        AlignmentResult with per-bill votes and the overall percentage
    """
    latest = [(p.politician_id, _latest_vote_per_bill(p.votes)) for p in politicians]

    bill_details: dict[str, BillRecord | None] = {}
    for _, by_bill in latest:
        for bill_id, entry in by_bill.items():
            if bill_details.get(bill_id) is None:
                bill_details[bill_id] = entry.bill

    common_bills = []
    for bill_id, bill in bill_details.items():
        votes = [
            BillVote(
                politician_id=politician_id,
                vote=by_bill[bill_id].record.vote if bill_id in by_bill else VoteChoice.ABSENT.value,
            )
            for politician_id, by_bill in latest
        ]
        aligned = len({v.vote for v in votes}) == 1
        common_bills.append(CommonBill(bill_id=bill_id, bill=bill, votes=votes, aligned=aligned))

    common_bills.sort(key=_bill_order)

    total = len(common_bills)
    aligned_count = sum(1 for b in common_bills if b.aligned)
    alignment_pct = percentage(aligned_count, total) if total > 0 else None

    logger.debug(
        "Alignment across %d politicians: %d/%d bills aligned",
        len(politicians), aligned_count, total,
    )

    return AlignmentResult(
        common_bills=common_bills,
        aligned_bills=aligned_count,
        total_bills=total,
        alignment_percentage=alignment_pct,
    )


@dataclass(frozen=True)
class VotingSummary:
    """How one politician's votes break down, and how often they turned up."""

    voted_for: int
    voted_against: int
    abstained: int
    absent: int
    total: int
    participation_rate: int


def summarize_votes(records: Iterable[VoteRecord]) -> VotingSummary:
    """
    Count a politician's votes by choice.

    Participation is the share of records that are not "Absent", rounded
    half-up to a whole percentage; 0 when there are no records. A vote
    outside the known choices counts toward the total only.
    """
    counts = Counter(r.vote for r in records)
    total = sum(counts.values())
    absent = counts[VoteChoice.ABSENT.value]
    return VotingSummary(
        voted_for=counts[VoteChoice.FOR.value],
        voted_against=counts[VoteChoice.AGAINST.value],
        abstained=counts[VoteChoice.ABSTAINED.value],
        absent=absent,
        total=total,
        participation_rate=percentage(total - absent, total) if total > 0 else 0,
    )
