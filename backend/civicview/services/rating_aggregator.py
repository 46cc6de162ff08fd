"""Average constituent rating for a politician."""

from collections.abc import Iterable
from dataclasses import dataclass

from civicview.entities import RatingRecord, RatingStatus
from civicview.storage import Storage
from civicview.utils.rounding import percentage, round_half_up


@dataclass(frozen=True)
class RatingStats:
    """Average of approved ratings (one decimal) and how many there are."""

    average: float
    count: int


def approved_only(ratings: Iterable[RatingRecord]) -> list[RatingRecord]:
    """Ratings that have passed moderation."""
    return [r for r in ratings if r.status == RatingStatus.APPROVED.value]


def aggregate_ratings(ratings: Iterable[RatingRecord]) -> RatingStats:
    """
    Compute rating stats from a politician's ratings.

    Pending and Rejected ratings are ignored. With no approved ratings the
    result is exactly RatingStats(0, 0).
    """
    approved = approved_only(ratings)
    if not approved:
        return RatingStats(average=0, count=0)

    mean = sum(r.rating for r in approved) / len(approved)
    return RatingStats(average=round_half_up(mean, 1), count=len(approved))


def get_rating_stats(storage: Storage, politician_id: str) -> RatingStats:
    """Fetch a politician's ratings and aggregate them."""
    return aggregate_ratings(storage.get_ratings_by_politician_id(politician_id))


STAR_LEVELS = (5, 4, 3, 2, 1)


@dataclass(frozen=True)
class StarShare:
    stars: int
    count: int
    percentage: int


def rating_distribution(ratings: Iterable[RatingRecord]) -> list[StarShare]:
    """
    Share of approved ratings at each whole star, five stars first.

    Each percentage is count / approved count, rounded half-up. Half-star
    ratings match no level, so the shares can sum to less than 100.
    """
    approved = approved_only(ratings)
    total = len(approved)
    shares = []
    for stars in STAR_LEVELS:
        count = sum(1 for r in approved if r.rating == stars)
        shares.append(
            StarShare(stars=stars, count=count, percentage=percentage(count, total) if total else 0)
        )
    return shares
