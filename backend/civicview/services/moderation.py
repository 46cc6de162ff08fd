"""Rating submission and moderation."""

import logging
import uuid

from civicview.entities import RatingRecord, RatingStatus
from civicview.exceptions import DuplicateRatingError, InvalidDataError, NotFoundError
from civicview.schemas import RatingCreate
from civicview.services.profile import get_politician_or_raise
from civicview.storage import Storage

logger = logging.getLogger(__name__)

ANONYMOUS_PREFIX = "anon-"

# Pending -> Approved | Rejected; both targets are terminal
MODERATION_OUTCOMES = {
    RatingStatus.APPROVED.value: "APPROVE_RATING",
    RatingStatus.REJECTED.value: "REJECT_RATING",
}


def generate_anonymous_user_id() -> str:
    """Opaque id for a visitor who is not signed in."""
    return f"{ANONYMOUS_PREFIX}{uuid.uuid4().hex[:13]}"


def submit_rating(storage: Storage, data: RatingCreate) -> RatingRecord:
    """
    Record a constituent rating, always as Pending.

    Raises:
        NotFoundError: the politician does not exist
        DuplicateRatingError: this user already rated this politician
    """
    get_politician_or_raise(storage, data.politician_id)
    user_id = data.user_id or generate_anonymous_user_id()

    if storage.get_user_rating_for_politician(user_id, data.politician_id) is not None:
        logger.info("Rejected duplicate rating from %s for %s", user_id, data.politician_id)
        raise DuplicateRatingError(user_id, data.politician_id)

    rating = storage.create_rating(
        politician_id=data.politician_id,
        user_id=user_id,
        rating=data.rating,
        comment=data.comment,
    )
    logger.info("Rating %s submitted for politician %s", rating.id, rating.politician_id)
    return rating


def list_ratings_by_status(storage: Storage, status: str) -> list[RatingRecord]:
    """Administrator-only view of ratings in any moderation state."""
    if status not in {s.value for s in RatingStatus}:
        raise InvalidDataError(
            "Invalid rating status",
            errors={"status": [f"Must be one of: {', '.join(s.value for s in RatingStatus)}"]},
        )
    return storage.get_ratings_by_status(status)


def moderate_rating(storage: Storage, rating_id: str, status: str, admin_id: str) -> RatingRecord:
    """
    Approve or reject a pending rating and record the decision in the audit log.

    Raises:
        InvalidDataError: status is not Approved/Rejected, or the rating was
            already moderated
        NotFoundError: no such rating
    """
    action = MODERATION_OUTCOMES.get(status)
    if action is None:
        raise InvalidDataError(
            "Invalid status",
            errors={"status": ["Must be 'Approved' or 'Rejected'"]},
        )

    rating = storage.get_rating(rating_id)
    if rating is None:
        raise NotFoundError("Rating", rating_id)
    if rating.status != RatingStatus.PENDING.value:
        raise InvalidDataError(
            "Rating has already been moderated",
            errors={"status": [f"Rating is already {rating.status}"]},
        )

    # Only the first of several concurrent decisions finds the rating still Pending
    updated = storage.update_rating_status(
        rating_id, status, expected_status=RatingStatus.PENDING.value
    )
    if updated is None:
        logger.info("Rating %s was moderated concurrently; %s discarded", rating_id, status)
        raise InvalidDataError(
            "Rating has already been moderated",
            errors={"status": ["Rating is no longer Pending"]},
        )

    storage.create_admin_log(
        admin_id,
        action,
        {"rating_id": rating_id, "politician_id": rating.politician_id},
    )
    logger.info("Rating %s %s by %s", rating_id, status.lower(), admin_id)
    return updated
