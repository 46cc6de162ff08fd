"""Bills API endpoints."""

from fastapi import APIRouter, Depends

from civicview.api.dependencies import get_storage
from civicview.api.serializers import to_bill_detail, to_bill_response
from civicview.exceptions import NotFoundError
from civicview.schemas import BillDetailResponse, BillResponse
from civicview.storage import Storage

router = APIRouter()


@router.get("", response_model=list[BillResponse])
async def list_bills(storage: Storage = Depends(get_storage)):
    """All bills, most recently voted first."""
    return [to_bill_response(b) for b in storage.get_bills()]


@router.get("/{bill_id}", response_model=BillDetailResponse)
async def get_bill(
    bill_id: str,
    storage: Storage = Depends(get_storage),
):
    """Get a bill with every vote recorded on it."""
    bill = storage.get_bill(bill_id)
    if bill is None:
        raise NotFoundError("Bill", bill_id)
    return to_bill_detail(bill, storage.get_voting_records_by_bill_id(bill_id))
