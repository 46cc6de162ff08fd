"""Utility functions and helpers."""

from civicview.utils.db import patch_values, update_model
from civicview.utils.pagination import page_of, PaginationResult
from civicview.utils.rounding import round_half_up, percentage

__all__ = [
    "patch_values",
    "update_model",
    "page_of",
    "PaginationResult",
    "round_half_up",
    "percentage",
]
