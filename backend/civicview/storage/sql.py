"""SQLAlchemy-backed entity store."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

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
from civicview.exceptions import DuplicateRatingError, StoreFailureError
from civicview.models import AdminLog, Bill, Politician, Promise, Rating, User, VotingRecord
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
from civicview.utils.db import patch_values, update_model

logger = logging.getLogger(__name__)

RATING_UNIQUE_CONSTRAINT = "uq_ratings_user_politician"


def _is_duplicate_rating(error: IntegrityError) -> bool:
    """True only when the violated constraint is the one-rating-per-user rule."""
    diag = getattr(error.orig, "diag", None)
    constraint = getattr(diag, "constraint_name", None)
    if constraint:
        return constraint == RATING_UNIQUE_CONSTRAINT
    # SQLite names the columns rather than the constraint
    message = str(error.orig)
    return (
        RATING_UNIQUE_CONSTRAINT in message
        or "UNIQUE constraint failed: ratings.user_id, ratings.politician_id" in message
    )


def _user_record(row: User) -> UserRecord:
    return UserRecord(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        is_admin=row.is_admin,
        created_at=row.created_at,
    )


def _politician_record(row: Politician) -> PoliticianRecord:
    return PoliticianRecord(
        id=row.id,
        name=row.name,
        party=row.party,
        parish=row.parish,
        number_of_votes=row.number_of_votes or 0,
        status=row.status,
        bio=row.bio,
        first_elected=row.first_elected,
        profile_image_url=row.profile_image_url,
        manifesto_points=list(row.manifesto_points or []),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _promise_record(row: Promise) -> PromiseRecord:
    return PromiseRecord(
        id=row.id,
        politician_id=row.politician_id,
        title=row.title,
        description=row.description,
        status=row.status,
        fulfillment_date=row.fulfillment_date,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _bill_record(row: Bill) -> BillRecord:
    return BillRecord(
        id=row.id,
        title=row.title,
        description=row.description,
        date_voted=row.date_voted,
        created_at=row.created_at,
    )


def _vote_record(row: VotingRecord) -> VoteRecord:
    return VoteRecord(
        id=row.id,
        politician_id=row.politician_id,
        bill_id=row.bill_id,
        vote=row.vote,
        created_at=row.created_at,
    )


def _rating_record(row: Rating) -> RatingRecord:
    return RatingRecord(
        id=row.id,
        politician_id=row.politician_id,
        user_id=row.user_id,
        rating=row.rating,
        comment=row.comment,
        status=row.status,
        created_at=row.created_at,
    )


def _admin_log_record(row: AdminLog) -> AdminLogRecord:
    return AdminLogRecord(
        id=row.id,
        user_id=row.user_id,
        action=row.action,
        details=dict(row.details or {}),
        created_at=row.created_at,
    )


class SqlStorage(Storage):
    """
    Storage implementation over one SQLAlchemy session.

    Every mutating call commits on success and rolls back on failure.
    Driver and connectivity errors surface as StoreFailureError.
    """

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _reading(self) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            logger.error("Store read failed: %s", e)
            raise StoreFailureError("Entity store is unavailable") from e

    @contextmanager
    def _writing(self) -> Iterator[None]:
        try:
            yield
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Store write failed: %s", e)
            raise StoreFailureError("Entity store rejected the operation") from e

    # Users

    def get_user(self, user_id: str) -> UserRecord | None:
        with self._reading():
            row = self.db.get(User, user_id)
        return _user_record(row) if row else None

    def get_user_by_username(self, username: str) -> UserRecord | None:
        with self._reading():
            row = self.db.execute(
                select(User).where(User.username == username)
            ).scalar_one_or_none()
        return _user_record(row) if row else None

    def create_user(self, username: str, password_hash: str, is_admin: bool = False) -> UserRecord:
        row = User(username=username, password_hash=password_hash, is_admin=is_admin)
        with self._writing():
            self.db.add(row)
        return _user_record(row)

    # Politicians

    def get_politician(self, politician_id: str) -> PoliticianRecord | None:
        with self._reading():
            row = self.db.get(Politician, politician_id)
        return _politician_record(row) if row else None

    def get_politician_by_name(self, name: str) -> PoliticianRecord | None:
        with self._reading():
            row = self.db.execute(
                select(Politician).where(func.lower(Politician.name) == name.lower())
            ).scalars().first()
        return _politician_record(row) if row else None

    def get_politicians(self) -> list[PoliticianRecord]:
        with self._reading():
            rows = self.db.execute(
                select(Politician).order_by(Politician.created_at)
            ).scalars().all()
        return [_politician_record(r) for r in rows]

    def create_politician(self, data: PoliticianCreate) -> PoliticianRecord:
        row = Politician(**data.model_dump())
        with self._writing():
            self.db.add(row)
        return _politician_record(row)

    def update_politician(self, politician_id: str, patch: PoliticianUpdate) -> PoliticianRecord | None:
        with self._writing():
            row = self.db.get(Politician, politician_id)
            if row is None:
                return None
            update_model(row, patch_values(patch))
        return _politician_record(row)

    def delete_politician(self, politician_id: str) -> bool:
        with self._writing():
            row = self.db.get(Politician, politician_id)
            if row is None:
                return False
            self.db.execute(delete(Promise).where(Promise.politician_id == politician_id))
            self.db.execute(delete(VotingRecord).where(VotingRecord.politician_id == politician_id))
            self.db.execute(delete(Rating).where(Rating.politician_id == politician_id))
            self.db.delete(row)
        return True

    # Promises

    def get_promise(self, promise_id: str) -> PromiseRecord | None:
        with self._reading():
            row = self.db.get(Promise, promise_id)
        return _promise_record(row) if row else None

    def get_promises_by_politician_id(self, politician_id: str) -> list[PromiseRecord]:
        with self._reading():
            rows = self.db.execute(
                select(Promise)
                .where(Promise.politician_id == politician_id)
                .order_by(Promise.created_at)
            ).scalars().all()
        return [_promise_record(r) for r in rows]

    def create_promise(self, data: PromiseCreate) -> PromiseRecord:
        row = Promise(**data.model_dump())
        with self._writing():
            self.db.add(row)
        return _promise_record(row)

    def update_promise(self, promise_id: str, patch: PromiseUpdate) -> PromiseRecord | None:
        with self._writing():
            row = self.db.get(Promise, promise_id)
            if row is None:
                return None
            for key, value in patch.changes().items():
                setattr(row, key, value)
        return _promise_record(row)

    def delete_promise(self, promise_id: str) -> bool:
        with self._writing():
            row = self.db.get(Promise, promise_id)
            if row is None:
                return False
            self.db.delete(row)
        return True

    # Bills

    def get_bill(self, bill_id: str) -> BillRecord | None:
        with self._reading():
            row = self.db.get(Bill, bill_id)
        return _bill_record(row) if row else None

    def get_bills(self) -> list[BillRecord]:
        with self._reading():
            rows = self.db.execute(
                select(Bill).order_by(Bill.date_voted.desc())
            ).scalars().all()
        return [_bill_record(r) for r in rows]

    def create_bill(self, data: BillCreate) -> BillRecord:
        row = Bill(**data.model_dump())
        with self._writing():
            self.db.add(row)
        return _bill_record(row)

    def update_bill(self, bill_id: str, patch: BillUpdate) -> BillRecord | None:
        with self._writing():
            row = self.db.get(Bill, bill_id)
            if row is None:
                return None
            update_model(row, patch_values(patch))
        return _bill_record(row)

    def delete_bill(self, bill_id: str) -> bool:
        with self._writing():
            row = self.db.get(Bill, bill_id)
            if row is None:
                return False
            self.db.execute(delete(VotingRecord).where(VotingRecord.bill_id == bill_id))
            self.db.delete(row)
        return True

    # Voting records

    def get_voting_record(self, record_id: str) -> VoteRecord | None:
        with self._reading():
            row = self.db.get(VotingRecord, record_id)
        return _vote_record(row) if row else None

    def get_voting_records_by_politician_id(self, politician_id: str) -> list[VoteRecord]:
        with self._reading():
            rows = self.db.execute(
                select(VotingRecord)
                .where(VotingRecord.politician_id == politician_id)
                .order_by(VotingRecord.created_at)
            ).scalars().all()
        return [_vote_record(r) for r in rows]

    def get_voting_records_by_bill_id(self, bill_id: str) -> list[VoteRecord]:
        with self._reading():
            rows = self.db.execute(
                select(VotingRecord)
                .where(VotingRecord.bill_id == bill_id)
                .order_by(VotingRecord.created_at)
            ).scalars().all()
        return [_vote_record(r) for r in rows]

    def create_voting_record(self, data: VotingRecordCreate) -> VoteRecord:
        row = VotingRecord(**data.model_dump())
        with self._writing():
            self.db.add(row)
        return _vote_record(row)

    def update_voting_record(self, record_id: str, patch: VotingRecordUpdate) -> VoteRecord | None:
        with self._writing():
            row = self.db.get(VotingRecord, record_id)
            if row is None:
                return None
            update_model(row, patch_values(patch))
        return _vote_record(row)

    def delete_voting_record(self, record_id: str) -> bool:
        with self._writing():
            row = self.db.get(VotingRecord, record_id)
            if row is None:
                return False
            self.db.delete(row)
        return True

    # Ratings

    def get_rating(self, rating_id: str) -> RatingRecord | None:
        with self._reading():
            row = self.db.get(Rating, rating_id)
        return _rating_record(row) if row else None

    def get_ratings_by_politician_id(self, politician_id: str) -> list[RatingRecord]:
        with self._reading():
            rows = self.db.execute(
                select(Rating)
                .where(Rating.politician_id == politician_id)
                .order_by(Rating.created_at.desc())
            ).scalars().all()
        return [_rating_record(r) for r in rows]

    def get_user_rating_for_politician(self, user_id: str, politician_id: str) -> RatingRecord | None:
        with self._reading():
            row = self.db.execute(
                select(Rating).where(
                    Rating.user_id == user_id,
                    Rating.politician_id == politician_id,
                )
            ).scalar_one_or_none()
        return _rating_record(row) if row else None

    def get_ratings_by_status(self, status: str) -> list[RatingRecord]:
        with self._reading():
            rows = self.db.execute(
                select(Rating).where(Rating.status == status).order_by(Rating.created_at)
            ).scalars().all()
        return [_rating_record(r) for r in rows]

    def create_rating(
        self, politician_id: str, user_id: str, rating: float, comment: str | None = None
    ) -> RatingRecord:
        row = Rating(
            politician_id=politician_id,
            user_id=user_id,
            rating=rating,
            comment=comment,
            status=RatingStatus.PENDING.value,
        )
        try:
            self.db.add(row)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if _is_duplicate_rating(e):
                # A concurrent submission won the race
                raise DuplicateRatingError(user_id, politician_id) from e
            logger.error("Store write failed: %s", e)
            raise StoreFailureError("Entity store rejected the operation") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Store write failed: %s", e)
            raise StoreFailureError("Entity store rejected the operation") from e
        return _rating_record(row)

    def update_rating_status(
        self, rating_id: str, status: str, expected_status: str | None = None
    ) -> RatingRecord | None:
        stmt = update(Rating).where(Rating.id == rating_id)
        if expected_status is not None:
            stmt = stmt.where(Rating.status == expected_status)
        with self._writing():
            # Single conditional UPDATE; a concurrent writer that got there first leaves rowcount 0
            result = self.db.execute(stmt.values(status=status))
        if result.rowcount == 0:
            return None
        with self._reading():
            row = self.db.get(Rating, rating_id, populate_existing=True)
        return _rating_record(row) if row else None

    # Admin logs

    def create_admin_log(self, user_id: str, action: str, details: dict[str, Any] | None = None) -> AdminLogRecord:
        row = AdminLog(user_id=user_id, action=action, details=dict(details or {}))
        with self._writing():
            self.db.add(row)
        return _admin_log_record(row)

    def get_admin_logs(self) -> list[AdminLogRecord]:
        with self._reading():
            rows = self.db.execute(
                select(AdminLog).order_by(AdminLog.created_at.desc())
            ).scalars().all()
        return [_admin_log_record(r) for r in rows]
