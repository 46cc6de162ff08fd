"""Politician directory listing with aggregate ratings."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from civicview.entities import PoliticianRecord
from civicview.services.rating_aggregator import RatingStats, get_rating_stats
from civicview.storage import Storage
from civicview.utils.pagination import PaginationResult, page_of

SortOrder = Literal["name", "rating_high", "rating_low"]


@dataclass(frozen=True)
class DirectoryEntry:
    politician: PoliticianRecord
    rating_stats: RatingStats


def list_politicians(
    storage: Storage,
    parties: Sequence[str] | None = None,
    parish: str | None = None,
    min_rating: float | None = None,
    search: str | None = None,
    sort: SortOrder = "name",
    page: int = 1,
    page_size: int = 50,
) -> PaginationResult[DirectoryEntry]:
    """
    Filter, sort and paginate the politician directory.

    `search` matches name, parish or party, case-insensitively.
    """
    entries = [
        DirectoryEntry(politician=p, rating_stats=get_rating_stats(storage, p.id))
        for p in storage.get_politicians()
    ]

    if parties:
        entries = [e for e in entries if e.politician.party in parties]
    if parish:
        entries = [e for e in entries if e.politician.parish == parish]
    if min_rating is not None:
        entries = [e for e in entries if e.rating_stats.average >= min_rating]
    if search:
        query = search.lower()
        entries = [
            e for e in entries
            if query in e.politician.name.lower()
            or query in e.politician.parish.lower()
            or query in e.politician.party.lower()
        ]

    # Name is always the secondary key so equal ratings list alphabetically
    entries.sort(key=lambda e: e.politician.name.lower())
    if sort == "rating_high":
        entries.sort(key=lambda e: e.rating_stats.average, reverse=True)
    elif sort == "rating_low":
        entries.sort(key=lambda e: e.rating_stats.average)

    return page_of(entries, page, page_size)
