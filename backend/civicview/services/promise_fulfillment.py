"""Promise fulfillment statistics."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from civicview.entities import PromiseRecord, PromiseStatus
from civicview.utils.rounding import percentage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FulfillmentStats:
    """Promise counts by status."""

    fulfilled: int
    in_progress: int
    unfulfilled: int
    unrecognized: int
    total: int

    @property
    def rate(self) -> int:
        """Fulfilled share of all promises as an integer percentage."""
        if self.total == 0:
            return 0
        return percentage(self.fulfilled, self.total)


def calculate_fulfillment(promises: Iterable[PromiseRecord]) -> FulfillmentStats:
    """
    Bucket promises by status.

    `total` counts every promise supplied. A promise whose status is not one
    of the three known values falls in no bucket; it is counted under
    `unrecognized` and logged so bad data gets noticed.
    """
    fulfilled = in_progress = unfulfilled = unrecognized = total = 0

    for promise in promises:
        total += 1
        if promise.status == PromiseStatus.FULFILLED.value:
            fulfilled += 1
        elif promise.status == PromiseStatus.IN_PROGRESS.value:
            in_progress += 1
        elif promise.status == PromiseStatus.UNFULFILLED.value:
            unfulfilled += 1
        else:
            unrecognized += 1
            logger.warning(
                "Promise %s has unrecognized status %r", promise.id, promise.status
            )

    return FulfillmentStats(
        fulfilled=fulfilled,
        in_progress=in_progress,
        unfulfilled=unfulfilled,
        unrecognized=unrecognized,
        total=total,
    )
