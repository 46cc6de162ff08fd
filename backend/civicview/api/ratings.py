"""Public rating submission."""

from fastapi import APIRouter, Depends

from civicview.api.dependencies import get_storage
from civicview.api.serializers import to_rating_response
from civicview.schemas import RatingCreate, RatingSubmissionResponse
from civicview.services.moderation import submit_rating
from civicview.storage import Storage

router = APIRouter()

SUBMITTED_MESSAGE = "Thank you for your rating. It will be visible after moderation."


@router.post("", response_model=RatingSubmissionResponse, status_code=201)
async def create_rating(
    data: RatingCreate,
    storage: Storage = Depends(get_storage),
):
    """Submit a rating. It stays hidden until an administrator approves it."""
    rating = submit_rating(storage, data)
    return RatingSubmissionResponse(
        **to_rating_response(rating).model_dump(),
        message=SUBMITTED_MESSAGE,
    )
