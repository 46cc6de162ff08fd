"""Main API router that combines all endpoint routers."""

from fastapi import APIRouter

from civicview.api import admin, auth, bills, comparison, politicians, ratings

api_router = APIRouter()

# Public endpoints
api_router.include_router(politicians.router, prefix="/politicians", tags=["politicians"])
api_router.include_router(bills.router, prefix="/bills", tags=["bills"])
api_router.include_router(comparison.router, prefix="/comparison", tags=["comparison"])
api_router.include_router(ratings.router, prefix="/ratings", tags=["ratings"])

# Administrator endpoints
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
