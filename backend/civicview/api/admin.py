"""Admin endpoints for content management and rating moderation.

Every route here requires HTTP Basic credentials of an administrator.
"""

from fastapi import APIRouter, Depends, Query

from civicview.api.dependencies import get_current_admin, get_storage
from civicview.api.serializers import (
    to_admin_log_response,
    to_bill_response,
    to_politician_response,
    to_promise_response,
    to_rating_response,
    to_rating_with_politician,
    to_voting_record_response,
)
from civicview.entities import RatingStatus, UserRecord
from civicview.schemas import (
    AdminLogResponse,
    AdminStatsResponse,
    BillCreate,
    BillResponse,
    BillUpdate,
    DeleteResponse,
    PoliticianCreate,
    PoliticianResponse,
    PoliticianUpdate,
    PromiseCreate,
    PromiseResponse,
    PromiseUpdate,
    RatingModeration,
    RatingResponse,
    RatingWithPolitician,
    VotingRecordCreate,
    VotingRecordResponse,
    VotingRecordUpdate,
)
from civicview.services import admin as admin_service
from civicview.services.moderation import list_ratings_by_status, moderate_rating
from civicview.storage import Storage

router = APIRouter(dependencies=[Depends(get_current_admin)])


# ============ Politicians ============

@router.post("/politicians", response_model=PoliticianResponse, status_code=201)
async def create_politician(
    data: PoliticianCreate,
    admin: UserRecord = Depends(get_current_admin),
    storage: Storage = Depends(get_storage),
):
    return to_politician_response(admin_service.create_politician(storage, admin.id, data))


@router.put("/politicians/{politician_id}", response_model=PoliticianResponse)
async def update_politician(
    politician_id: str,
    patch: PoliticianUpdate,
    admin: UserRecord = Depends(get_current_admin),
    storage: Storage = Depends(get_storage),
):
    return to_politician_response(
        admin_service.update_politician(storage, admin.id, politician_id, patch)
    )


@router.delete("/politicians/{politician_id}", response_model=DeleteResponse)
async def delete_politician(
    politician_id: str,
    admin: UserRecord = Depends(get_current_admin),
    storage: Storage = Depends(get_storage),
):
    """Delete a politician with its promises, voting records and ratings."""
    admin_service.delete_politician(storage, admin.id, politician_id)
    return DeleteResponse()


# ============ Promises ============

@router.post("/promises", response_model=PromiseResponse, status_code=201)
async def create_promise(
    data: PromiseCreate,
    admin: UserRecord = Depends(get_current_admin),
    storage: Storage = Depends(get_storage),
):
    return to_promise_response(admin_service.create_promise(storage, admin.id, data))


@router.put("/promises/{promise_id}", response_model=PromiseResponse)
async def update_promise(
    promise_id: str,
    patch: PromiseUpdate,
    admin: UserRecord = Depends(get_current_admin),
    storage: Storage = Depends(get_storage),
):
    return to_promise_response(admin_service.update_promise(storage, admin.id, promise_id, patch))


@router.delete("/promises/{promise_id}", response_model=DeleteResponse)
async def delete_promise(
    promise_id: str,
    admin: UserRecord = Depends(get_current_admin),
    storage: Storage = Depends(get_storage),
):
    admin_service.delete_promise(storage, admin.id, promise_id)
    return DeleteResponse()


# ============ Bills ============

@router.post("/bills", response_model=BillResponse, status_code=201)
async def create_bill(
    data: BillCreate,
    admin: UserRecord = Depends(get_current_admin),
    storage: Storage = Depends(get_storage),
):
    return to_bill_response(admin_service.create_bill(storage, admin.id, data))


@router.put("/bills/{bill_id}", response_model=BillResponse)
async def update_bill(
    bill_id: str,
    patch: BillUpdate,
    admin: UserRecord = Depends(get_current_admin),
    storage: Storage = Depends(get_storage),
):
    return to_bill_response(admin_service.update_bill(storage, admin.id, bill_id, patch))


@router.delete("/bills/{bill_id}", response_model=DeleteResponse)
async def delete_bill(
    bill_id: str,
    admin: UserRecord = Depends(get_current_admin),
    storage: Storage = Depends(get_storage),
):
    """Delete a bill and the votes cast on it."""
    admin_service.delete_bill(storage, admin.id, bill_id)
    return DeleteResponse()


# ============ Voting records ============

@router.post("/voting-records", response_model=VotingRecordResponse, status_code=201)
async def create_voting_record(
    data: VotingRecordCreate,
    admin: UserRecord = Depends(get_current_admin),
    storage: Storage = Depends(get_storage),
):
    return to_voting_record_response(admin_service.create_voting_record(storage, admin.id, data))


@router.put("/voting-records/{record_id}", response_model=VotingRecordResponse)
async def update_voting_record(
    record_id: str,
    patch: VotingRecordUpdate,
    admin: UserRecord = Depends(get_current_admin),
    storage: Storage = Depends(get_storage),
):
    return to_voting_record_response(
        admin_service.update_voting_record(storage, admin.id, record_id, patch)
    )


@router.delete("/voting-records/{record_id}", response_model=DeleteResponse)
async def delete_voting_record(
    record_id: str,
    admin: UserRecord = Depends(get_current_admin),
    storage: Storage = Depends(get_storage),
):
    admin_service.delete_voting_record(storage, admin.id, record_id)
    return DeleteResponse()


# ============ Moderation ============

@router.get("/ratings", response_model=list[RatingWithPolitician])
async def list_ratings(
    status: str = Query(RatingStatus.PENDING.value),
    storage: Storage = Depends(get_storage),
):
    """Ratings in the given moderation state, each with its politician."""
    ratings = list_ratings_by_status(storage, status)
    politicians = {}
    for rating in ratings:
        if rating.politician_id not in politicians:
            politicians[rating.politician_id] = storage.get_politician(rating.politician_id)
    return [to_rating_with_politician(r, politicians[r.politician_id]) for r in ratings]


@router.put("/ratings/{rating_id}", response_model=RatingResponse)
async def update_rating_status(
    rating_id: str,
    data: RatingModeration,
    admin: UserRecord = Depends(get_current_admin),
    storage: Storage = Depends(get_storage),
):
    """Approve or reject a pending rating."""
    return to_rating_response(moderate_rating(storage, rating_id, data.status, admin.id))


# ============ Dashboard ============

@router.get("/stats", response_model=AdminStatsResponse)
async def get_stats(storage: Storage = Depends(get_storage)):
    stats = admin_service.get_admin_stats(storage)
    return AdminStatsResponse(
        total_politicians=stats.total_politicians,
        total_ratings=stats.total_ratings,
        pending_ratings=stats.pending_ratings,
        party_distribution=stats.party_distribution,
    )


@router.get("/logs", response_model=list[AdminLogResponse])
async def get_logs(storage: Storage = Depends(get_storage)):
    """Audit trail, newest first."""
    return [to_admin_log_response(log) for log in storage.get_admin_logs()]
