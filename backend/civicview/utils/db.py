"""Helpers for applying patch schemas to stored objects."""

from typing import Any

from pydantic import BaseModel


def patch_values(patch: BaseModel, exclude: set | None = None) -> dict[str, Any]:
    """
    Collect the fields a patch actually sets.

    Fields left unset or explicitly set to None mean "leave unchanged".
    """
    exclude = exclude or set()
    return {
        key: value
        for key, value in patch.model_dump(exclude_unset=True).items()
        if value is not None and key not in exclude
    }


def update_model(instance: Any, data: dict, exclude: set | None = None) -> Any:
    """
    Update model instance with non-None values from dict.

    Args:
        instance: SQLAlchemy model instance to update
        data: Dictionary of field names to values
        exclude: Set of field names to skip

    Returns:
        The updated model instance
    """
    exclude = exclude or set()
    for key, value in data.items():
        if value is not None and key not in exclude:
            setattr(instance, key, value)
    return instance
