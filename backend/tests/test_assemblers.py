"""Tests for profile, comparison and directory assembly."""

from datetime import date

import pytest

from civicview.exceptions import InsufficientComparisonTargetsError, InvalidDataError, NotFoundError
from civicview.services.comparison import build_comparison, normalize_ids
from civicview.services.directory import list_politicians
from civicview.services.profile import build_profile


class TestBuildProfile:
    """Tests for politician profile assembly."""

    def test_missing_politician_raises(self, storage):
        with pytest.raises(NotFoundError):
            build_profile(storage, "does-not-exist")

    def test_empty_politician_has_empty_collections(self, storage, make_politician):
        politician = make_politician(storage)

        profile = build_profile(storage, politician.id)

        assert profile.politician == politician
        assert profile.promises == []
        assert profile.voting_records == []
        assert profile.approved_ratings == []
        assert profile.rating_stats.average == 0
        assert profile.rating_stats.count == 0
        assert profile.fulfillment_rate == 0

    def test_only_approved_ratings_are_exposed(self, storage, make_politician, approved_rating):
        politician = make_politician(storage)
        approved = approved_rating(storage, politician.id, 4.0, user_id="a")
        storage.create_rating(politician.id, "b", 1.0, comment="pending")
        rejected = storage.create_rating(politician.id, "c", 0.0)
        storage.update_rating_status(rejected.id, "Rejected")

        profile = build_profile(storage, politician.id)

        assert [r.id for r in profile.approved_ratings] == [approved.id]
        assert profile.rating_stats.count == 1
        assert profile.rating_stats.average == 4.0

    def test_collects_promises_and_votes(
        self, storage, make_politician, make_promise, make_bill, cast_vote
    ):
        politician = make_politician(storage)
        make_promise(storage, politician.id, status="Fulfilled", title="One")
        make_promise(storage, politician.id, status="InProgress", title="Two")
        bill = make_bill(storage)
        cast_vote(storage, politician.id, bill.id, "For")

        profile = build_profile(storage, politician.id)

        assert len(profile.promises) == 2
        assert profile.fulfillment_stats.fulfilled == 1
        assert profile.fulfillment_rate == 50
        assert profile.voting_records[0].bill.title == bill.title

    def test_does_not_include_other_politicians_data(self, storage, make_politician, make_promise):
        jane = make_politician(storage, name="Jane Smith")
        john = make_politician(storage, name="John Doe", party="Republican")
        make_promise(storage, john.id)

        assert build_profile(storage, jane.id).promises == []


class TestNormalizeIds:
    """Tests for comparison id handling."""

    def test_deduplicates_preserving_order(self):
        assert normalize_ids(["b", "a", "b", " a "]) == ["b", "a"]

    def test_blank_ids_are_ignored(self):
        assert normalize_ids(["a", "", "  ", "b"]) == ["a", "b"]

    @pytest.mark.parametrize("ids", [[], ["a"], ["a", "a"]])
    def test_fewer_than_two_distinct(self, ids):
        with pytest.raises(InsufficientComparisonTargetsError):
            normalize_ids(ids)

    def test_more_than_three(self):
        with pytest.raises(InvalidDataError):
            normalize_ids(["a", "b", "c", "d"])


class TestBuildComparison:
    """Tests for side-by-side comparison."""

    @pytest.fixture
    def two_politicians(self, storage, make_politician, make_bill, cast_vote):
        jane = make_politician(storage, name="Jane Smith")
        john = make_politician(storage, name="John Doe", party="Republican", parish="St. Sampson")
        x = make_bill(storage, title="X", date_voted=date(2023, 6, 1))
        y = make_bill(storage, title="Y", date_voted=date(2023, 5, 1))
        cast_vote(storage, jane.id, x.id, "For")
        cast_vote(storage, jane.id, y.id, "Against")
        cast_vote(storage, john.id, x.id, "For")
        return jane, john, x, y

    def test_compares_two_politicians(self, storage, two_politicians):
        jane, john, x, y = two_politicians

        comparison = build_comparison(storage, [jane.id, john.id])

        assert [p.id for p in comparison.politicians] == [jane.id, john.id]
        assert comparison.alignment.alignment_percentage == 50
        assert [cb.bill_id for cb in comparison.common_bills] == [x.id, y.id]
        assert comparison.common_bills[1].votes[1].vote == "Absent"

    def test_unknown_id_is_dropped(self, storage, two_politicians):
        jane, john, _, _ = two_politicians

        comparison = build_comparison(storage, [jane.id, john.id, "does-not-exist"])

        assert [p.id for p in comparison.politicians] == [jane.id, john.id]

    def test_one_valid_id_is_insufficient(self, storage, two_politicians):
        jane, _, _, _ = two_politicians

        with pytest.raises(InsufficientComparisonTargetsError):
            build_comparison(storage, [jane.id, "does-not-exist"])

    def test_duplicate_ids_collapse(self, storage, two_politicians):
        jane, _, _, _ = two_politicians

        with pytest.raises(InsufficientComparisonTargetsError):
            build_comparison(storage, [jane.id, jane.id])

    def test_no_votes_has_no_alignment(self, storage, make_politician):
        a = make_politician(storage, name="A")
        b = make_politician(storage, name="B")

        comparison = build_comparison(storage, [a.id, b.id])

        assert comparison.common_bills == []
        assert comparison.alignment.alignment_percentage is None

    def test_entries_carry_aggregates(self, storage, two_politicians, make_promise, approved_rating):
        jane, john, _, _ = two_politicians
        make_promise(storage, jane.id, status="Fulfilled")
        approved_rating(storage, john.id, 2.0, user_id="voter")

        comparison = build_comparison(storage, [jane.id, john.id])
        jane_entry, john_entry = comparison.entries

        assert jane_entry.fulfillment_rate == 100
        assert john_entry.rating_stats.average == 2.0
        assert len(jane_entry.voting_records) == 2


class TestDirectory:
    """Tests for politician directory filtering and sorting."""

    @pytest.fixture
    def directory(self, storage, make_politician, approved_rating):
        jane = make_politician(storage, name="Jane Smith", party="Democratic", parish="St. Peter Port")
        john = make_politician(storage, name="John Doe", party="Republican", parish="St. Sampson")
        maria = make_politician(storage, name="Maria Rodriguez", party="Independent", parish="Vale")
        approved_rating(storage, jane.id, 4.0, user_id="a")
        approved_rating(storage, john.id, 2.0, user_id="a")
        return jane, john, maria

    def _names(self, result):
        return [e.politician.name for e in result.items]

    def test_sorted_by_name_by_default(self, storage, directory):
        assert self._names(list_politicians(storage)) == ["Jane Smith", "John Doe", "Maria Rodriguez"]

    def test_sort_by_rating(self, storage, directory):
        assert self._names(list_politicians(storage, sort="rating_high")) == [
            "Jane Smith", "John Doe", "Maria Rodriguez",
        ]
        assert self._names(list_politicians(storage, sort="rating_low")) == [
            "Maria Rodriguez", "John Doe", "Jane Smith",
        ]

    def test_filter_by_party(self, storage, directory):
        result = list_politicians(storage, parties=["Republican", "Independent"])

        assert self._names(result) == ["John Doe", "Maria Rodriguez"]

    def test_filter_by_min_rating(self, storage, directory):
        assert self._names(list_politicians(storage, min_rating=3)) == ["Jane Smith"]

    def test_search_matches_name_parish_and_party(self, storage, directory):
        assert self._names(list_politicians(storage, search="doe")) == ["John Doe"]
        assert self._names(list_politicians(storage, search="vale")) == ["Maria Rodriguez"]
        assert self._names(list_politicians(storage, search="democratic")) == ["Jane Smith"]

    def test_pagination(self, storage, directory):
        result = list_politicians(storage, page=2, page_size=2)

        assert self._names(result) == ["Maria Rodriguez"]
        assert result.total == 3
        assert result.total_pages == 2

    def test_entries_carry_rating(self, storage, directory):
        jane_entry = list_politicians(storage, search="jane").items[0]

        assert jane_entry.rating_stats.average == 4.0
        assert jane_entry.rating_stats.count == 1
