"""Administrator mutations. Each successful change writes one audit log entry."""

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Any

from civicview.entities import BillRecord, PoliticianRecord, PromiseRecord, RatingStatus, VoteRecord
from civicview.exceptions import NotFoundError
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
from civicview.services.profile import get_politician_or_raise
from civicview.storage import Storage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdminStats:
    total_politicians: int
    total_ratings: int
    pending_ratings: int
    party_distribution: dict[str, int]


def _audit(storage: Storage, admin_id: str, action: str, **details: Any) -> None:
    storage.create_admin_log(admin_id, action, details)
    logger.info("Admin %s: %s %s", admin_id, action, details)


def _changed_fields(patch) -> list[str]:
    return sorted(k for k, v in patch.model_dump(exclude_unset=True).items() if v is not None)


# ============ Politicians ============

def create_politician(storage: Storage, admin_id: str, data: PoliticianCreate) -> PoliticianRecord:
    politician = storage.create_politician(data)
    _audit(storage, admin_id, "CREATE_POLITICIAN", politician_id=politician.id)
    return politician


def update_politician(
    storage: Storage, admin_id: str, politician_id: str, patch: PoliticianUpdate
) -> PoliticianRecord:
    politician = storage.update_politician(politician_id, patch)
    if politician is None:
        raise NotFoundError("Politician", politician_id)
    _audit(
        storage, admin_id, "UPDATE_POLITICIAN",
        politician_id=politician_id, fields=_changed_fields(patch),
    )
    return politician


def delete_politician(storage: Storage, admin_id: str, politician_id: str) -> None:
    """Delete a politician and everything it owns."""
    if not storage.delete_politician(politician_id):
        raise NotFoundError("Politician", politician_id)
    _audit(storage, admin_id, "DELETE_POLITICIAN", politician_id=politician_id)


# ============ Promises ============

def create_promise(storage: Storage, admin_id: str, data: PromiseCreate) -> PromiseRecord:
    get_politician_or_raise(storage, data.politician_id)
    promise = storage.create_promise(data)
    _audit(
        storage, admin_id, "CREATE_PROMISE",
        promise_id=promise.id, politician_id=promise.politician_id,
    )
    return promise


def update_promise(
    storage: Storage, admin_id: str, promise_id: str, patch: PromiseUpdate
) -> PromiseRecord:
    promise = storage.update_promise(promise_id, patch)
    if promise is None:
        raise NotFoundError("Promise", promise_id)
    _audit(
        storage, admin_id, "UPDATE_PROMISE",
        promise_id=promise_id, fields=_changed_fields(patch),
    )
    return promise


def delete_promise(storage: Storage, admin_id: str, promise_id: str) -> None:
    if not storage.delete_promise(promise_id):
        raise NotFoundError("Promise", promise_id)
    _audit(storage, admin_id, "DELETE_PROMISE", promise_id=promise_id)


# ============ Bills ============

def create_bill(storage: Storage, admin_id: str, data: BillCreate) -> BillRecord:
    bill = storage.create_bill(data)
    _audit(storage, admin_id, "CREATE_BILL", bill_id=bill.id)
    return bill


def update_bill(storage: Storage, admin_id: str, bill_id: str, patch: BillUpdate) -> BillRecord:
    bill = storage.update_bill(bill_id, patch)
    if bill is None:
        raise NotFoundError("Bill", bill_id)
    _audit(storage, admin_id, "UPDATE_BILL", bill_id=bill_id, fields=_changed_fields(patch))
    return bill


def delete_bill(storage: Storage, admin_id: str, bill_id: str) -> None:
    """Delete a bill and the voting records cast on it."""
    if not storage.delete_bill(bill_id):
        raise NotFoundError("Bill", bill_id)
    _audit(storage, admin_id, "DELETE_BILL", bill_id=bill_id)


# ============ Voting records ============

def create_voting_record(storage: Storage, admin_id: str, data: VotingRecordCreate) -> VoteRecord:
    get_politician_or_raise(storage, data.politician_id)
    if storage.get_bill(data.bill_id) is None:
        raise NotFoundError("Bill", data.bill_id)

    record = storage.create_voting_record(data)
    _audit(
        storage, admin_id, "CREATE_VOTING_RECORD",
        voting_record_id=record.id, politician_id=record.politician_id, bill_id=record.bill_id,
    )
    return record


def update_voting_record(
    storage: Storage, admin_id: str, record_id: str, patch: VotingRecordUpdate
) -> VoteRecord:
    record = storage.update_voting_record(record_id, patch)
    if record is None:
        raise NotFoundError("Voting record", record_id)
    _audit(
        storage, admin_id, "UPDATE_VOTING_RECORD",
        voting_record_id=record_id, fields=_changed_fields(patch),
    )
    return record


def delete_voting_record(storage: Storage, admin_id: str, record_id: str) -> None:
    if not storage.delete_voting_record(record_id):
        raise NotFoundError("Voting record", record_id)
    _audit(storage, admin_id, "DELETE_VOTING_RECORD", voting_record_id=record_id)


# ============ Dashboard ============

def get_admin_stats(storage: Storage) -> AdminStats:
    """Counters for the admin dashboard."""
    politicians = storage.get_politicians()
    counts = {status.value: len(storage.get_ratings_by_status(status.value)) for status in RatingStatus}

    return AdminStats(
        total_politicians=len(politicians),
        total_ratings=sum(counts.values()),
        pending_ratings=counts[RatingStatus.PENDING.value],
        party_distribution=dict(Counter(p.party for p in politicians)),
    )
