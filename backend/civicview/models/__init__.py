"""SQLAlchemy ORM models."""

from civicview.models.politician import Politician
from civicview.models.promise import Promise
from civicview.models.bill import Bill
from civicview.models.voting_record import VotingRecord
from civicview.models.rating import Rating
from civicview.models.user import User
from civicview.models.admin_log import AdminLog

__all__ = [
    "Politician",
    "Promise",
    "Bill",
    "VotingRecord",
    "Rating",
    "User",
    "AdminLog",
]
