"""Politicians API endpoints."""

from typing import Literal

from fastapi import APIRouter, Depends, Query

from civicview.api.dependencies import get_politician_or_404, get_storage
from civicview.api.serializers import (
    to_politician_list_item,
    to_profile_response,
    to_promise_response,
    to_voting_record_with_bill,
)
from civicview.entities import Party, PoliticianRecord
from civicview.schemas import (
    PoliticianListResponse,
    ProfileResponse,
    PromiseResponse,
    VotingRecordWithBill,
)
from civicview.services.directory import list_politicians as list_directory
from civicview.services.profile import build_profile
from civicview.services.voting_alignment import load_votes_with_bills
from civicview.storage import Storage

router = APIRouter()


@router.get("", response_model=PoliticianListResponse)
async def list_politicians(
    party: list[Party] | None = Query(None),
    parish: str | None = Query(None),
    min_rating: float | None = Query(None, ge=0, le=5),
    search: str | None = Query(None),
    sort: Literal["name", "rating_high", "rating_low"] = Query("name"),
    page: int = Query(1, ge=1),
    page_size: int = Query(50, ge=1, le=100),
    storage: Storage = Depends(get_storage),
):
    """List politicians with their average approved rating."""
    result = list_directory(
        storage,
        parties=[p.value for p in party] if party else None,
        parish=parish,
        min_rating=min_rating,
        search=search,
        sort=sort,
        page=page,
        page_size=page_size,
    )

    return PoliticianListResponse(
        items=[to_politician_list_item(e) for e in result.items],
        total=result.total,
        page=result.page,
        page_size=result.page_size,
        total_pages=result.total_pages,
    )


@router.get("/{politician_id}", response_model=ProfileResponse)
async def get_politician(
    politician_id: str,
    storage: Storage = Depends(get_storage),
):
    """Full profile: promises, votes, approved ratings and aggregates."""
    return to_profile_response(build_profile(storage, politician_id))


@router.get("/{politician_id}/promises", response_model=list[PromiseResponse])
async def get_politician_promises(
    politician: PoliticianRecord = Depends(get_politician_or_404),
    storage: Storage = Depends(get_storage),
):
    return [to_promise_response(p) for p in storage.get_promises_by_politician_id(politician.id)]


@router.get("/{politician_id}/voting-records", response_model=list[VotingRecordWithBill])
async def get_politician_voting_records(
    politician: PoliticianRecord = Depends(get_politician_or_404),
    storage: Storage = Depends(get_storage),
):
    """Every vote the politician cast, each with its bill."""
    return [to_voting_record_with_bill(v) for v in load_votes_with_bills(storage, politician.id)]
