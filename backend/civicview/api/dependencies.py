"""FastAPI dependencies for common operations."""

import logging
from collections.abc import Iterator

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from civicview.entities import PoliticianRecord, UserRecord
from civicview.security import verify_password
from civicview.services.profile import get_politician_or_raise
from civicview.storage import Storage

logger = logging.getLogger(__name__)

basic_auth = HTTPBasic(auto_error=False)


def get_storage(request: Request) -> Iterator[Storage]:
    """
    Yield the entity store for the current request.

    The provider lives on app state, so tests can swap in an in-memory store
    by handing one to `create_app`.
    """
    provider = request.app.state.storage_provider
    with provider.session() as storage:
        yield storage


def get_politician_or_404(
    politician_id: str,
    storage: Storage = Depends(get_storage),
) -> PoliticianRecord:
    """
    Fetch a politician by ID or raise NotFoundError (rendered as 404).

    Use as a FastAPI dependency to reduce boilerplate:
        @router.get("/{politician_id}/promises")
        def get_promises(politician: PoliticianRecord = Depends(get_politician_or_404)):
            # politician is guaranteed to exist
    """
    return get_politician_or_raise(storage, politician_id)


def get_current_user(
    credentials: HTTPBasicCredentials | None = Depends(basic_auth),
    storage: Storage = Depends(get_storage),
) -> UserRecord:
    """Resolve HTTP Basic credentials to a stored account."""
    unauthorized = HTTPException(
        status_code=401,
        detail="Authentication required",
        headers={"WWW-Authenticate": "Basic"},
    )
    if credentials is None:
        raise unauthorized

    user = storage.get_user_by_username(credentials.username)
    if user is None or not verify_password(credentials.password, user.password_hash):
        logger.info("Failed login for %r", credentials.username)
        raise unauthorized
    return user


def get_current_admin(user: UserRecord = Depends(get_current_user)) -> UserRecord:
    if not user.is_admin:
        raise HTTPException(status_code=403, detail="Administrator access required")
    return user
