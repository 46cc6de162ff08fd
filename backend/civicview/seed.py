"""Sample data for demos and local development.

Run with `python -m civicview.seed` to load it into the configured store.
"""

import logging
from datetime import date

from civicview.config import get_settings
from civicview.entities import UserRecord
from civicview.schemas import BillCreate, PoliticianCreate, PromiseCreate, VotingRecordCreate
from civicview.security import hash_password
from civicview.storage import Storage, build_storage_provider

logger = logging.getLogger(__name__)

SAMPLE_POLITICIANS = [
    {
        "name": "Jane Smith",
        "party": "Democratic",
        "parish": "St. Peter Port",
        "number_of_votes": 15420,
        "bio": (
            "Jane Smith is a Democratic member representing St. Peter Port parish. "
            "She was first elected in 2018 and has focused on environmental protection, "
            "healthcare reform and education."
        ),
        "first_elected": date(2018, 11, 6),
        "manifesto_points": [
            "Expand renewable energy investments by 25%",
            "Increase minimum wage to £12 per hour",
            "Expand healthcare coverage to all residents",
            "Reform education funding system",
            "Support local business development",
        ],
    },
    {
        "name": "John Doe",
        "party": "Republican",
        "parish": "St. Sampson",
        "number_of_votes": 12380,
        "bio": (
            "John Doe is a Republican member representing St. Sampson parish. "
            "He focuses on defense, economic growth and fiscal responsibility."
        ),
        "first_elected": date(2016, 11, 8),
        "manifesto_points": [
            "Strengthen border security measures",
            "Provide tax cuts for small businesses",
            "Increase defense spending by 15%",
            "Reduce government regulations",
            "Support traditional family values",
        ],
    },
    {
        "name": "Maria Rodriguez",
        "party": "Independent",
        "parish": "Vale",
        "number_of_votes": 9750,
        "bio": (
            "Maria Rodriguez is an Independent member representing Vale parish. "
            "She advocates for education reform, environmental policies and social justice."
        ),
        "first_elected": date(2020, 11, 3),
        "manifesto_points": [
            "Reform education system and teacher pay",
            "Implement comprehensive environmental policies",
            "Ensure social justice and equality",
            "Support community development programs",
            "Promote transparency in government",
        ],
    },
]

# (politician, title, description, status, fulfillment date)
SAMPLE_PROMISES = [
    ("Jane Smith", "Expand renewable energy investments",
     "Promised to increase government funding for renewable energy research by 25%.",
     "Fulfilled", date(2022, 3, 15)),
    ("Jane Smith", "Increase minimum wage",
     "Promised to support minimum wage increases and voted for the Fair Wage Act.",
     "Fulfilled", date(2021, 7, 20)),
    ("Jane Smith", "Expand healthcare coverage",
     "Promised to work on healthcare reform to cover more residents.",
     "InProgress", None),
    ("Jane Smith", "Reform education funding",
     "Promised to increase education funding by 20% and improve teacher salaries.",
     "InProgress", None),
    ("John Doe", "Strengthen border security",
     "Promised to increase funding for border patrol and security infrastructure.",
     "Fulfilled", date(2021, 6, 10)),
    ("John Doe", "Tax cuts for small businesses",
     "Promised tax relief for small businesses affected by economic challenges.",
     "InProgress", None),
    ("John Doe", "Increase defense spending",
     "Promised to increase the defense budget by 15%.",
     "Fulfilled", date(2022, 8, 20)),
    ("Maria Rodriguez", "Education system reform",
     "Promised comprehensive education reform including teacher pay increases.",
     "InProgress", None),
    ("Maria Rodriguez", "Environmental protection policies",
     "Promised strict environmental protection measures and carbon reduction targets.",
     "InProgress", None),
    ("Maria Rodriguez", "Social justice initiatives",
     "Promised to work on equality measures and social justice programs.",
     "Fulfilled", date(2023, 1, 15)),
]

SAMPLE_BILLS = [
    ("Climate Protection Act",
     "A bill to fund renewable energy research and limit carbon emissions.",
     date(2023, 6, 12)),
    ("Infrastructure Funding Bill",
     "A bill to fund infrastructure projects and road improvements across all parishes.",
     date(2023, 5, 28)),
    ("Defense Spending Increase",
     "A bill to increase the defense and security budget by 10%.",
     date(2023, 5, 15)),
    ("Education Funding Act",
     "A bill to increase funding for public education and teacher salaries by 20%.",
     date(2023, 4, 23)),
]

# Votes in SAMPLE_BILLS order
SAMPLE_VOTES = {
    "Jane Smith": ["For", "For", "Against", "For"],
    "John Doe": ["Against", "For", "For", "For"],
    "Maria Rodriguez": ["For", "For", "Against", "For"],
}


def ensure_admin_user(storage: Storage, username: str, password: str) -> UserRecord:
    """Create the bootstrap administrator unless an account with that name exists."""
    existing = storage.get_user_by_username(username)
    if existing is not None:
        return existing
    logger.info("Creating admin user %r", username)
    return storage.create_user(username, hash_password(password), is_admin=True)


def seed_sample_data(storage: Storage) -> bool:
    """
    Load the demo politicians, promises, bills and votes.

    Does nothing if the store already holds politicians. Returns whether
    anything was written.
    """
    if storage.get_politicians():
        logger.info("Store already has politicians, skipping sample data")
        return False

    politicians = {
        data["name"]: storage.create_politician(PoliticianCreate(**data))
        for data in SAMPLE_POLITICIANS
    }

    for name, title, description, status, fulfilled_on in SAMPLE_PROMISES:
        storage.create_promise(
            PromiseCreate(
                politician_id=politicians[name].id,
                title=title,
                description=description,
                status=status,
                fulfillment_date=fulfilled_on,
            )
        )

    bills = [
        storage.create_bill(BillCreate(title=title, description=description, date_voted=voted))
        for title, description, voted in SAMPLE_BILLS
    ]

    for name, votes in SAMPLE_VOTES.items():
        for bill, vote in zip(bills, votes):
            storage.create_voting_record(
                VotingRecordCreate(politician_id=politicians[name].id, bill_id=bill.id, vote=vote)
            )

    logger.info(
        "Seeded %d politicians, %d promises, %d bills",
        len(politicians), len(SAMPLE_PROMISES), len(bills),
    )
    return True


def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    provider = build_storage_provider(settings)
    try:
        with provider.session() as storage:
            ensure_admin_user(storage, settings.admin_username, settings.admin_password)
            seed_sample_data(storage)
    finally:
        provider.close()


if __name__ == "__main__":
    main()
