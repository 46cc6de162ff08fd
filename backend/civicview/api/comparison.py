"""Politician comparison endpoint."""

import logging

from fastapi import APIRouter, Depends, Query

from civicview.api.dependencies import get_storage
from civicview.api.serializers import to_comparison_response
from civicview.schemas import ComparisonResponse
from civicview.services.comparison import build_comparison
from civicview.storage import Storage

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=ComparisonResponse)
async def compare_politicians(
    ids: str = Query("", description="Comma-separated politician IDs (2-3)"),
    storage: Storage = Depends(get_storage),
):
    """
    Compare 2-3 politicians side by side.

    Returns each politician's promises, votes and aggregates, plus every
    bill any of them voted on and the share of bills where they all agree.
    Unknown IDs are skipped as long as two valid politicians remain.
    """
    politician_ids = ids.split(",") if ids else []
    comparison = build_comparison(storage, politician_ids)
    logger.debug("Compared %s", [p.id for p in comparison.politicians])
    return to_comparison_response(comparison)
