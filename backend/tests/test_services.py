"""Tests for the rating, promise and voting alignment calculators."""

import logging
from datetime import date, datetime, timedelta, timezone

import pytest

from civicview.entities import BillRecord, PromiseRecord, RatingRecord, VoteRecord
from civicview.services.promise_fulfillment import FulfillmentStats, calculate_fulfillment
from civicview.services.rating_aggregator import (
    RatingStats,
    aggregate_ratings,
    get_rating_stats,
    rating_distribution,
)
from civicview.services.voting_alignment import (
    PoliticianVotes,
    VoteWithBill,
    VotingSummary,
    calculate_voting_alignment,
    load_votes_with_bills,
    summarize_votes,
)

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _rating(value, status="Approved", user="u"):
    return RatingRecord(
        id=f"r-{user}-{value}", politician_id="p1", user_id=user, rating=value, status=status
    )


def _promise(status, n=0):
    return PromiseRecord(id=f"pr-{n}", politician_id="p1", title="t", description="d", status=status)


def _bill(bill_id, voted=date(2023, 6, 1)):
    return BillRecord(id=bill_id, title=f"Bill {bill_id}", description="", date_voted=voted)


def _vote(politician_id, bill, vote, created_at=T0, record_id=None):
    record = VoteRecord(
        id=record_id or f"{politician_id}-{bill.id}",
        politician_id=politician_id,
        bill_id=bill.id,
        vote=vote,
        created_at=created_at,
    )
    return VoteWithBill(record=record, bill=bill)


class TestRatingAggregator:
    """Tests for average rating calculation."""

    def test_averages_approved_ratings_to_one_decimal(self):
        ratings = [_rating(4.5, user="a"), _rating(4.0, user="b"), _rating(5.0, user="c"), _rating(3.5, user="d")]

        # mean 4.25 rounds half up
        assert aggregate_ratings(ratings) == RatingStats(average=4.3, count=4)

    def test_ignores_pending_and_rejected(self):
        ratings = [
            _rating(5.0, user="a"),
            _rating(1.0, status="Pending", user="b"),
            _rating(0.0, status="Rejected", user="c"),
        ]

        assert aggregate_ratings(ratings) == RatingStats(average=5.0, count=1)

    def test_no_approved_ratings_is_zero(self):
        assert aggregate_ratings([]) == RatingStats(average=0, count=0)
        assert aggregate_ratings([_rating(4.0, status="Pending")]) == RatingStats(0, 0)

    def test_average_stays_within_bounds(self):
        ratings = [_rating(v, user=str(i)) for i, v in enumerate([0, 0.5, 5, 5, 5])]

        stats = aggregate_ratings(ratings)
        assert 0 <= stats.average <= 5

    def test_reads_from_storage(self, storage, make_politician, approved_rating):
        politician = make_politician(storage)
        approved_rating(storage, politician.id, 4.0, user_id="a")
        approved_rating(storage, politician.id, 3.0, user_id="b")
        storage.create_rating(politician.id, "c", 1.0)

        assert get_rating_stats(storage, politician.id) == RatingStats(average=3.5, count=2)


class TestPromiseFulfillment:
    """Tests for promise fulfillment statistics."""

    def test_counts_each_status(self):
        promises = [
            _promise("Fulfilled", 1),
            _promise("Fulfilled", 2),
            _promise("InProgress", 3),
            _promise("InProgress", 4),
            _promise("Unfulfilled", 5),
        ]

        stats = calculate_fulfillment(promises)

        assert stats == FulfillmentStats(
            fulfilled=2, in_progress=2, unfulfilled=1, unrecognized=0, total=5
        )
        assert stats.rate == 40

    def test_no_promises_gives_zero_rate(self):
        stats = calculate_fulfillment([])

        assert stats.total == 0
        assert stats.rate == 0

    def test_rate_rounds_half_up(self):
        stats = calculate_fulfillment([_promise("Fulfilled", 1), _promise("Unfulfilled", 2), _promise("Fulfilled", 3)])

        assert stats.rate == 67

    def test_unrecognized_status_counts_toward_total_only(self, caplog):
        promises = [_promise("Fulfilled", 1), _promise("Abandoned", 2)]

        with caplog.at_level(logging.WARNING, logger="civicview.services.promise_fulfillment"):
            stats = calculate_fulfillment(promises)

        assert stats.fulfilled == 1
        assert stats.unrecognized == 1
        assert stats.total == 2
        assert stats.rate == 50
        assert "Abandoned" in caplog.text

    def test_buckets_never_exceed_total(self):
        statuses = ["Fulfilled", "InProgress", "Unfulfilled", "bogus", "Fulfilled"]
        stats = calculate_fulfillment([_promise(s, i) for i, s in enumerate(statuses)])

        assert stats.fulfilled + stats.in_progress + stats.unfulfilled <= stats.total
        assert 0 <= stats.rate <= 100


class TestVotingAlignment:
    """Tests for voting alignment calculation service."""

    def test_missing_vote_counts_as_absent(self):
        x, y = _bill("X", date(2023, 6, 2)), _bill("Y", date(2023, 6, 1))
        a = PoliticianVotes("A", [_vote("A", x, "For"), _vote("A", y, "Against")])
        b = PoliticianVotes("B", [_vote("B", x, "For")])

        result = calculate_voting_alignment([a, b])

        assert result.total_bills == 2
        assert result.aligned_bills == 1
        assert result.alignment_percentage == 50

        by_bill = {cb.bill_id: cb for cb in result.common_bills}
        assert by_bill["X"].aligned is True
        assert by_bill["Y"].aligned is False
        assert [(v.politician_id, v.vote) for v in by_bill["Y"].votes] == [("A", "Against"), ("B", "Absent")]

    def test_all_absent_is_aligned(self):
        x = _bill("X")
        a = PoliticianVotes("A", [_vote("A", x, "Absent")])
        b = PoliticianVotes("B", [])

        result = calculate_voting_alignment([a, b])

        assert result.common_bills[0].aligned is True
        assert result.alignment_percentage == 100

    def test_no_votes_at_all_has_no_percentage(self):
        result = calculate_voting_alignment([PoliticianVotes("A"), PoliticianVotes("B")])

        assert result.common_bills == []
        assert result.total_bills == 0
        assert result.alignment_percentage is None

    def test_three_way_alignment_requires_all_equal(self):
        x, y = _bill("X"), _bill("Y")
        a = PoliticianVotes("A", [_vote("A", x, "For"), _vote("A", y, "For")])
        b = PoliticianVotes("B", [_vote("B", x, "For"), _vote("B", y, "For")])
        c = PoliticianVotes("C", [_vote("C", x, "For"), _vote("C", y, "Abstained")])

        result = calculate_voting_alignment([a, b, c])

        assert result.aligned_bills == 1
        assert result.alignment_percentage == 50
        assert all(len(cb.votes) == 3 for cb in result.common_bills)

    def test_vote_order_follows_input_order(self):
        x = _bill("X")
        a = PoliticianVotes("A", [_vote("A", x, "For")])
        b = PoliticianVotes("B", [_vote("B", x, "Against")])

        result = calculate_voting_alignment([b, a])

        assert [v.politician_id for v in result.common_bills[0].votes] == ["B", "A"]

    def test_common_bills_newest_first(self):
        old, new = _bill("old", date(2022, 1, 1)), _bill("new", date(2023, 1, 1))
        a = PoliticianVotes("A", [_vote("A", old, "For"), _vote("A", new, "For")])
        b = PoliticianVotes("B", [])

        result = calculate_voting_alignment([a, b])

        assert [cb.bill_id for cb in result.common_bills] == ["new", "old"]

    def test_bill_missing_from_store_is_listed_last(self):
        known = _bill("known")
        orphan = VoteWithBill(
            record=VoteRecord(id="v9", politician_id="A", bill_id="gone", vote="For", created_at=T0),
            bill=None,
        )
        a = PoliticianVotes("A", [orphan, _vote("A", known, "For")])
        b = PoliticianVotes("B", [])

        result = calculate_voting_alignment([a, b])

        assert [cb.bill_id for cb in result.common_bills] == ["known", "gone"]
        assert result.common_bills[1].bill is None

    def test_latest_duplicate_vote_wins(self):
        x = _bill("X")
        a = PoliticianVotes(
            "A",
            [
                _vote("A", x, "Against", created_at=T0, record_id="v1"),
                _vote("A", x, "For", created_at=T0 + timedelta(days=1), record_id="v2"),
            ],
        )
        b = PoliticianVotes("B", [_vote("B", x, "For")])

        result = calculate_voting_alignment([a, b])

        assert result.total_bills == 1
        assert result.common_bills[0].aligned is True

    def test_percentage_bounds(self):
        bills = [_bill(str(i)) for i in range(3)]
        a = PoliticianVotes("A", [_vote("A", b, "For") for b in bills])
        b = PoliticianVotes("B", [_vote("B", b, "Against") for b in bills])

        result = calculate_voting_alignment([a, b])

        assert result.alignment_percentage == 0
        assert result.aligned_bills <= result.total_bills

    def test_load_votes_with_bills_joins_bill(self, storage, make_politician, make_bill, cast_vote):
        politician = make_politician(storage)
        bill = make_bill(storage)
        cast_vote(storage, politician.id, bill.id, "For")

        joined = load_votes_with_bills(storage, politician.id)

        assert len(joined) == 1
        assert joined[0].bill == bill
        assert joined[0].record.vote == "For"

    @pytest.mark.parametrize("vote", ["For", "Against", "Abstained", "Absent"])
    def test_identical_votes_align(self, vote):
        x = _bill("X")
        result = calculate_voting_alignment(
            [PoliticianVotes("A", [_vote("A", x, vote)]), PoliticianVotes("B", [_vote("B", x, vote)])]
        )

        assert result.alignment_percentage == 100


class TestVotingSummary:
    """Tests for per-politician vote breakdown."""

    def test_counts_and_participation(self):
        x = _bill("X")
        records = [
            _vote("A", x, vote, record_id=f"v{i}").record
            for i, vote in enumerate(["For", "For", "Against", "Abstained", "Absent", "Absent", "For"])
        ]

        summary = summarize_votes(records)

        assert summary == VotingSummary(
            voted_for=3, voted_against=1, abstained=1, absent=2, total=7, participation_rate=71
        )

    def test_no_votes_gives_zero_participation(self):
        assert summarize_votes([]).participation_rate == 0
        assert summarize_votes([]).total == 0

    def test_participation_rounds_half_up(self):
        x = _bill("X")
        records = [_vote("A", x, v, record_id=str(i)).record for i, v in enumerate(["For"] * 7 + ["Absent"])]

        # 7 of 8 attended: 87.5 rounds up
        assert summarize_votes(records).participation_rate == 88

    def test_unknown_choice_counts_toward_total_only(self):
        x = _bill("X")
        records = [_vote("A", x, "For", record_id="1").record, _vote("A", x, "Paired", record_id="2").record]

        summary = summarize_votes(records)

        assert summary.voted_for + summary.voted_against + summary.abstained + summary.absent == 1
        assert summary.total == 2
        assert summary.participation_rate == 100


class TestRatingDistribution:
    """Tests for the per-star breakdown of approved ratings."""

    def test_shares_per_star(self):
        ratings = [
            _rating(5.0, user="a"),
            _rating(5.0, user="b"),
            _rating(4.0, user="c"),
            _rating(1.0, status="Pending", user="d"),
        ]

        shares = rating_distribution(ratings)

        assert [(s.stars, s.count, s.percentage) for s in shares] == [
            (5, 2, 67), (4, 1, 33), (3, 0, 0), (2, 0, 0), (1, 0, 0),
        ]

    def test_half_stars_match_no_level(self):
        shares = rating_distribution([_rating(4.5, user="a"), _rating(4.0, user="b")])

        assert {s.stars: s.percentage for s in shares}[4] == 50
        assert sum(s.percentage for s in shares) == 50

    def test_no_approved_ratings(self):
        shares = rating_distribution([_rating(3.0, status="Rejected")])

        assert [s.stars for s in shares] == [5, 4, 3, 2, 1]
        assert all(s.count == 0 and s.percentage == 0 for s in shares)


class TestIdempotence:
    """Repeated calculations over unchanged data agree."""

    def test_rating_stats_and_fulfillment_repeat(
        self, any_storage, make_politician, make_promise, approved_rating
    ):
        politician = make_politician(any_storage)
        approved_rating(any_storage, politician.id, 4.5, user_id="a")
        approved_rating(any_storage, politician.id, 3.0, user_id="b")
        any_storage.create_rating(politician.id, "c", 1.0)
        make_promise(any_storage, politician.id, status="Fulfilled", title="One")
        make_promise(any_storage, politician.id, status="Unfulfilled", title="Two")
        make_promise(any_storage, politician.id, status="InProgress", title="Three")

        first_stats = get_rating_stats(any_storage, politician.id)
        second_stats = get_rating_stats(any_storage, politician.id)
        first_fulfillment = calculate_fulfillment(any_storage.get_promises_by_politician_id(politician.id))
        second_fulfillment = calculate_fulfillment(any_storage.get_promises_by_politician_id(politician.id))

        assert first_stats == second_stats == RatingStats(average=3.8, count=2)
        assert first_fulfillment == second_fulfillment
        assert first_fulfillment.rate == 33
