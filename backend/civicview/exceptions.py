"""Domain exceptions raised by the storage layer and the analytics core.

None of these know about HTTP; `civicview.api.errors` maps them to responses.
"""


class CivicViewError(Exception):
    """Base class for all domain errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(CivicViewError):
    """A requested entity does not exist."""

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id


class InvalidDataError(CivicViewError):
    """Input failed validation. `errors` maps field names to messages."""

    def __init__(self, message: str, errors: dict[str, list[str]] | None = None):
        super().__init__(message)
        self.errors = errors or {}


class DuplicateRatingError(CivicViewError):
    """A rating already exists for this (user, politician) pair."""

    def __init__(self, user_id: str, politician_id: str):
        super().__init__("You have already submitted a rating for this politician.")
        self.user_id = user_id
        self.politician_id = politician_id


class InsufficientComparisonTargetsError(CivicViewError):
    """Fewer than two valid politicians are available to compare."""


class StoreFailureError(CivicViewError):
    """The entity store is unreachable or rejected an operation."""
