"""In-process entity store backed by keyed dictionaries."""

import threading
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any

from civicview.entities import (
    AdminLogRecord,
    BillRecord,
    PoliticianRecord,
    PromiseRecord,
    RatingRecord,
    RatingStatus,
    UserRecord,
    VoteRecord,
)
from civicview.exceptions import DuplicateRatingError
from civicview.schemas import (
    BillCreate,
    BillUpdate,
    PoliticianCreate,
    PoliticianUpdate,
    PromiseCreate,
    PromiseUpdate,
    VotingRecordCreate,
    VotingRecordUpdate,
)
from civicview.storage.base import Storage
from civicview.utils.db import patch_values


def _new_id() -> str:
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)


class MemoryStorage(Storage):
    """
    Storage implementation holding every entity in memory.

    Dictionaries preserve insertion order, which doubles as creation order.
    Each instance is independent; nothing is shared between instances.
    """

    def __init__(self):
        self.users: dict[str, UserRecord] = {}
        self.politicians: dict[str, PoliticianRecord] = {}
        self.promises: dict[str, PromiseRecord] = {}
        self.bills: dict[str, BillRecord] = {}
        self.voting_records: dict[str, VoteRecord] = {}
        self.ratings: dict[str, RatingRecord] = {}
        self.admin_logs: dict[str, AdminLogRecord] = {}
        self._lock = threading.Lock()

    # Users

    def get_user(self, user_id: str) -> UserRecord | None:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> UserRecord | None:
        return next(
            (u for u in self.users.values() if u.username == username),
            None,
        )

    def create_user(self, username: str, password_hash: str, is_admin: bool = False) -> UserRecord:
        user = UserRecord(
            id=_new_id(),
            username=username,
            password_hash=password_hash,
            is_admin=is_admin,
            created_at=_now(),
        )
        self.users[user.id] = user
        return user

    # Politicians

    def get_politician(self, politician_id: str) -> PoliticianRecord | None:
        return self.politicians.get(politician_id)

    def get_politician_by_name(self, name: str) -> PoliticianRecord | None:
        return next(
            (p for p in self.politicians.values() if p.name.lower() == name.lower()),
            None,
        )

    def get_politicians(self) -> list[PoliticianRecord]:
        return list(self.politicians.values())

    def create_politician(self, data: PoliticianCreate) -> PoliticianRecord:
        now = _now()
        politician = PoliticianRecord(id=_new_id(), created_at=now, updated_at=now, **data.model_dump())
        self.politicians[politician.id] = politician
        return politician

    def update_politician(self, politician_id: str, patch: PoliticianUpdate) -> PoliticianRecord | None:
        existing = self.politicians.get(politician_id)
        if existing is None:
            return None
        updated = replace(existing, updated_at=_now(), **patch_values(patch))
        self.politicians[politician_id] = updated
        return updated

    def delete_politician(self, politician_id: str) -> bool:
        if self.politicians.pop(politician_id, None) is None:
            return False
        for table in (self.promises, self.voting_records, self.ratings):
            for key in [k for k, v in table.items() if v.politician_id == politician_id]:
                del table[key]
        return True

    # Promises

    def get_promise(self, promise_id: str) -> PromiseRecord | None:
        return self.promises.get(promise_id)

    def get_promises_by_politician_id(self, politician_id: str) -> list[PromiseRecord]:
        return [p for p in self.promises.values() if p.politician_id == politician_id]

    def create_promise(self, data: PromiseCreate) -> PromiseRecord:
        now = _now()
        promise = PromiseRecord(id=_new_id(), created_at=now, updated_at=now, **data.model_dump())
        self.promises[promise.id] = promise
        return promise

    def update_promise(self, promise_id: str, patch: PromiseUpdate) -> PromiseRecord | None:
        existing = self.promises.get(promise_id)
        if existing is None:
            return None
        updated = replace(existing, updated_at=_now(), **patch.changes())
        self.promises[promise_id] = updated
        return updated

    def delete_promise(self, promise_id: str) -> bool:
        return self.promises.pop(promise_id, None) is not None

    # Bills

    def get_bill(self, bill_id: str) -> BillRecord | None:
        return self.bills.get(bill_id)

    def get_bills(self) -> list[BillRecord]:
        return sorted(self.bills.values(), key=lambda b: b.date_voted, reverse=True)

    def create_bill(self, data: BillCreate) -> BillRecord:
        bill = BillRecord(id=_new_id(), created_at=_now(), **data.model_dump())
        self.bills[bill.id] = bill
        return bill

    def update_bill(self, bill_id: str, patch: BillUpdate) -> BillRecord | None:
        existing = self.bills.get(bill_id)
        if existing is None:
            return None
        updated = replace(existing, **patch_values(patch))
        self.bills[bill_id] = updated
        return updated

    def delete_bill(self, bill_id: str) -> bool:
        if self.bills.pop(bill_id, None) is None:
            return False
        for key in [k for k, v in self.voting_records.items() if v.bill_id == bill_id]:
            del self.voting_records[key]
        return True

    # Voting records

    def get_voting_record(self, record_id: str) -> VoteRecord | None:
        return self.voting_records.get(record_id)

    def get_voting_records_by_politician_id(self, politician_id: str) -> list[VoteRecord]:
        return [r for r in self.voting_records.values() if r.politician_id == politician_id]

    def get_voting_records_by_bill_id(self, bill_id: str) -> list[VoteRecord]:
        return [r for r in self.voting_records.values() if r.bill_id == bill_id]

    def create_voting_record(self, data: VotingRecordCreate) -> VoteRecord:
        record = VoteRecord(id=_new_id(), created_at=_now(), **data.model_dump())
        self.voting_records[record.id] = record
        return record

    def update_voting_record(self, record_id: str, patch: VotingRecordUpdate) -> VoteRecord | None:
        existing = self.voting_records.get(record_id)
        if existing is None:
            return None
        updated = replace(existing, **patch_values(patch))
        self.voting_records[record_id] = updated
        return updated

    def delete_voting_record(self, record_id: str) -> bool:
        return self.voting_records.pop(record_id, None) is not None

    # Ratings

    def get_rating(self, rating_id: str) -> RatingRecord | None:
        return self.ratings.get(rating_id)

    def get_ratings_by_politician_id(self, politician_id: str) -> list[RatingRecord]:
        # Newest first
        return [r for r in reversed(self.ratings.values()) if r.politician_id == politician_id]

    def get_user_rating_for_politician(self, user_id: str, politician_id: str) -> RatingRecord | None:
        return next(
            (
                r for r in self.ratings.values()
                if r.user_id == user_id and r.politician_id == politician_id
            ),
            None,
        )

    def get_ratings_by_status(self, status: str) -> list[RatingRecord]:
        return [r for r in self.ratings.values() if r.status == status]

    def create_rating(
        self, politician_id: str, user_id: str, rating: float, comment: str | None = None
    ) -> RatingRecord:
        # Same guarantee the SQL store gets from its unique index
        with self._lock:
            if self.get_user_rating_for_politician(user_id, politician_id) is not None:
                raise DuplicateRatingError(user_id, politician_id)
            record = RatingRecord(
                id=_new_id(),
                politician_id=politician_id,
                user_id=user_id,
                rating=rating,
                comment=comment,
                status=RatingStatus.PENDING.value,
                created_at=_now(),
            )
            self.ratings[record.id] = record
        return record

    def update_rating_status(
        self, rating_id: str, status: str, expected_status: str | None = None
    ) -> RatingRecord | None:
        with self._lock:
            existing = self.ratings.get(rating_id)
            if existing is None:
                return None
            if expected_status is not None and existing.status != expected_status:
                return None
            updated = replace(existing, status=status)
            self.ratings[rating_id] = updated
        return updated

    # Admin logs

    def create_admin_log(self, user_id: str, action: str, details: dict[str, Any] | None = None) -> AdminLogRecord:
        log = AdminLogRecord(
            id=_new_id(),
            user_id=user_id,
            action=action,
            details=dict(details or {}),
            created_at=_now(),
        )
        self.admin_logs[log.id] = log
        return log

    def get_admin_logs(self) -> list[AdminLogRecord]:
        return list(reversed(self.admin_logs.values()))
