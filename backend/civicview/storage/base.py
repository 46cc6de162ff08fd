"""Storage port shared by the SQL and in-memory entity stores."""

from abc import ABC, abstractmethod
from typing import Any

from civicview.entities import (
    AdminLogRecord,
    BillRecord,
    PoliticianRecord,
    PromiseRecord,
    RatingRecord,
    UserRecord,
    VoteRecord,
)
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


class Storage(ABC):
    """
    Entity store operations used by the analytics core and the API.

    Getters return None for missing ids; collection getters return empty
    lists. Update and delete return None/False when the id is unknown.
    """

    # Users
    @abstractmethod
    def get_user(self, user_id: str) -> UserRecord | None: ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> UserRecord | None: ...

    @abstractmethod
    def create_user(self, username: str, password_hash: str, is_admin: bool = False) -> UserRecord: ...

    # Politicians
    @abstractmethod
    def get_politician(self, politician_id: str) -> PoliticianRecord | None: ...

    @abstractmethod
    def get_politician_by_name(self, name: str) -> PoliticianRecord | None: ...

    @abstractmethod
    def get_politicians(self) -> list[PoliticianRecord]: ...

    @abstractmethod
    def create_politician(self, data: PoliticianCreate) -> PoliticianRecord: ...

    @abstractmethod
    def update_politician(self, politician_id: str, patch: PoliticianUpdate) -> PoliticianRecord | None: ...

    @abstractmethod
    def delete_politician(self, politician_id: str) -> bool:
        """Delete a politician together with its promises, voting records and ratings."""

    # Promises
    @abstractmethod
    def get_promise(self, promise_id: str) -> PromiseRecord | None: ...

    @abstractmethod
    def get_promises_by_politician_id(self, politician_id: str) -> list[PromiseRecord]: ...

    @abstractmethod
    def create_promise(self, data: PromiseCreate) -> PromiseRecord: ...

    @abstractmethod
    def update_promise(self, promise_id: str, patch: PromiseUpdate) -> PromiseRecord | None: ...

    @abstractmethod
    def delete_promise(self, promise_id: str) -> bool: ...

    # Bills
    @abstractmethod
    def get_bill(self, bill_id: str) -> BillRecord | None: ...

    @abstractmethod
    def get_bills(self) -> list[BillRecord]: ...

    @abstractmethod
    def create_bill(self, data: BillCreate) -> BillRecord: ...

    @abstractmethod
    def update_bill(self, bill_id: str, patch: BillUpdate) -> BillRecord | None: ...

    @abstractmethod
    def delete_bill(self, bill_id: str) -> bool:
        """Delete a bill together with the voting records that reference it."""

    # Voting records
    @abstractmethod
    def get_voting_record(self, record_id: str) -> VoteRecord | None: ...

    @abstractmethod
    def get_voting_records_by_politician_id(self, politician_id: str) -> list[VoteRecord]: ...

    @abstractmethod
    def get_voting_records_by_bill_id(self, bill_id: str) -> list[VoteRecord]: ...

    @abstractmethod
    def create_voting_record(self, data: VotingRecordCreate) -> VoteRecord: ...

    @abstractmethod
    def update_voting_record(self, record_id: str, patch: VotingRecordUpdate) -> VoteRecord | None: ...

    @abstractmethod
    def delete_voting_record(self, record_id: str) -> bool: ...

    # Ratings
    @abstractmethod
    def get_rating(self, rating_id: str) -> RatingRecord | None: ...

    @abstractmethod
    def get_ratings_by_politician_id(self, politician_id: str) -> list[RatingRecord]: ...

    @abstractmethod
    def get_user_rating_for_politician(self, user_id: str, politician_id: str) -> RatingRecord | None: ...

    @abstractmethod
    def get_ratings_by_status(self, status: str) -> list[RatingRecord]: ...

    @abstractmethod
    def create_rating(
        self, politician_id: str, user_id: str, rating: float, comment: str | None = None
    ) -> RatingRecord:
        """
        Insert a Pending rating.

        Raises DuplicateRatingError when the (user_id, politician_id) pair
        already has a rating.
        """

    @abstractmethod
    def update_rating_status(
        self, rating_id: str, status: str, expected_status: str | None = None
    ) -> RatingRecord | None:
        """
        Set a rating's status.

        With expected_status the write is a compare-and-set: it only applies
        while the stored status still equals expected_status, and None is
        returned otherwise. Returns None for an unknown id.
        """

    # Admin logs
    @abstractmethod
    def create_admin_log(self, user_id: str, action: str, details: dict[str, Any] | None = None) -> AdminLogRecord: ...

    @abstractmethod
    def get_admin_logs(self) -> list[AdminLogRecord]:
        """All audit entries, newest first."""
