"""Canonical entity records returned by every storage implementation."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any


class Party(str, Enum):
    DEMOCRATIC = "Democratic"
    REPUBLICAN = "Republican"
    INDEPENDENT = "Independent"


class PoliticianStatus(str, Enum):
    CURRENT = "Current"
    NEW = "New"


class PromiseStatus(str, Enum):
    FULFILLED = "Fulfilled"
    IN_PROGRESS = "InProgress"
    UNFULFILLED = "Unfulfilled"


class VoteChoice(str, Enum):
    FOR = "For"
    AGAINST = "Against"
    ABSTAINED = "Abstained"
    ABSENT = "Absent"


class RatingStatus(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


@dataclass(frozen=True)
class UserRecord:
    id: str
    username: str
    password_hash: str
    is_admin: bool
    created_at: datetime


@dataclass(frozen=True)
class PoliticianRecord:
    id: str
    name: str
    party: str
    parish: str
    number_of_votes: int = 0
    status: str = PoliticianStatus.CURRENT.value
    bio: str | None = None
    first_elected: date | None = None
    profile_image_url: str | None = None
    manifesto_points: list[str] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class PromiseRecord:
    id: str
    politician_id: str
    title: str
    description: str
    status: str = PromiseStatus.IN_PROGRESS.value
    fulfillment_date: date | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class BillRecord:
    id: str
    title: str
    description: str
    date_voted: date
    created_at: datetime | None = None


@dataclass(frozen=True)
class VoteRecord:
    """One politician's recorded vote on one bill."""

    id: str
    politician_id: str
    bill_id: str
    vote: str
    created_at: datetime | None = None


@dataclass(frozen=True)
class RatingRecord:
    id: str
    politician_id: str
    user_id: str
    rating: float
    comment: str | None = None
    status: str = RatingStatus.PENDING.value
    created_at: datetime | None = None


@dataclass(frozen=True)
class AdminLogRecord:
    id: str
    user_id: str
    action: str
    details: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
