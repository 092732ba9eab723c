"""
Store initialization and bootstrapping.
Every process start begins from the same seed collection.
"""

from datetime import date
from typing import List

from clientdesk.core.logging import get_logger
from clientdesk.db.repositories.client_repository import ClientRepository
from clientdesk.models.client import ClientStatus
from clientdesk.schemas.client import ClientCreate

logger = get_logger(__name__)


def _client(name, email, phone, company, status, last_contact, value, notes=""):
    return ClientCreate(
        name=name,
        email=email,
        phone=phone,
        company=company,
        status=status,
        last_contact=date.fromisoformat(last_contact),
        value=value,
        notes=notes,
    )


SEED_CLIENTS: List[ClientCreate] = [
    _client("John Smith", "john.smith@techcorp.com", "+1 (555) 123-4567", "TechCorp Inc.",
            ClientStatus.ACTIVE, "2024-01-15", 50000, "Key decision maker for enterprise software purchases."),
    _client("Sarah Johnson", "sarah.j@innovate.io", "+1 (555) 234-5678", "Innovate Solutions",
            ClientStatus.PROSPECT, "2024-01-10", 25000, "Interested in our premium package."),
    _client("Michael Brown", "m.brown@globalent.com", "+1 (555) 345-6789", "Global Enterprises",
            ClientStatus.ACTIVE, "2024-01-12", 75000, "Long-term client, renewal due next quarter."),
    _client("Emily Davis", "emily.davis@startup.co", "+1 (555) 456-7890", "StartupCo",
            ClientStatus.INACTIVE, "2023-11-20", 10000, "Paused engagement due to budget constraints."),
    _client("David Wilson", "dwilson@financeplus.com", "+1 (555) 567-8901", "FinancePlus",
            ClientStatus.ACTIVE, "2024-01-18", 120000, "Expanding to three additional offices."),
    _client("Lisa Anderson", "lisa.a@healthfirst.org", "+1 (555) 678-9012", "HealthFirst",
            ClientStatus.PROSPECT, "2024-01-08", 40000, "Requested a compliance walkthrough."),
    _client("Robert Taylor", "rtaylor@buildright.com", "+1 (555) 789-0123", "BuildRight Construction",
            ClientStatus.ACTIVE, "2024-01-05", 60000),
    _client("Jennifer Martinez", "j.martinez@edulearn.edu", "+1 (555) 890-1234", "EduLearn",
            ClientStatus.INACTIVE, "2023-10-15", 15000, "Contract ended; open to re-engagement."),
    _client("William Thomas", "will.thomas@retailhub.com", "+1 (555) 901-2345", "RetailHub",
            ClientStatus.PROSPECT, "2024-01-20", 35000, "Demo scheduled for next week."),
    _client("Amanda White", "amanda@greenenergy.com", "+1 (555) 012-3456", "Green Energy Co.",
            ClientStatus.ACTIVE, "2024-01-16", 90000, "Sustainability reporting integration."),
    _client("Christopher Lee", "clee@logisticspro.com", "+1 (555) 111-2222", "LogisticsPro",
            ClientStatus.ACTIVE, "2024-01-11", 55000),
    _client("Jessica Harris", "jharris@mediagroup.tv", "+1 (555) 222-3333", "Media Group",
            ClientStatus.PROSPECT, "2024-01-09", 30000, "Referred by Amanda White."),
    _client("Daniel Clark", "dclark@autoworks.com", "+1 (555) 333-4444", "AutoWorks",
            ClientStatus.INACTIVE, "2023-12-01", 20000),
    _client("Michelle Lewis", "m.lewis@foodies.net", "+1 (555) 444-5555", "Foodies Network",
            ClientStatus.ACTIVE, "2024-01-14", 45000, "Quarterly business review in March."),
    _client("Kevin Walker", "kwalker@securenet.com", "+1 (555) 555-6666", "SecureNet",
            ClientStatus.PROSPECT, "2024-01-19", 80000, "Security audit proposal sent."),
    _client("Rachel Hall", "rachel.hall@designstudio.com", "+1 (555) 666-7777", "Design Studio",
            ClientStatus.ACTIVE, "2024-01-13", 28000),
    _client("Brian Allen", "ballen@cloudnine.io", "+1 (555) 777-8888", "CloudNine",
            ClientStatus.ACTIVE, "2024-01-17", 110000, "Migrating infrastructure in phases."),
    _client("Nicole Young", "nyoung@pharmaplus.com", "+1 (555) 888-9999", "PharmaPlus",
            ClientStatus.PROSPECT, "2024-01-07", 65000),
    _client("Steven King", "sking@realtypros.com", "+1 (555) 999-0000", "Realty Pros",
            ClientStatus.INACTIVE, "2023-09-28", 12000, "Moved to a competitor."),
    _client("Laura Scott", "lscott@travelwise.com", "+1 (555) 101-2020", "TravelWise",
            ClientStatus.ACTIVE, "2024-01-06", 38000),
    _client("Mark Green", "mgreen@agritech.com", "+1 (555) 202-3030", "AgriTech",
            ClientStatus.PROSPECT, "2024-01-04", 22000, "Pilot program under review."),
    _client("Stephanie Adams", "sadams@legalease.law", "+1 (555) 303-4040", "LegalEase",
            ClientStatus.ACTIVE, "2024-01-03", 70000),
    _client("Paul Baker", "pbaker@sportszone.com", "+1 (555) 404-5050", "SportsZone",
            ClientStatus.INACTIVE, "2023-12-15", 18000),
    _client("Karen Nelson", "knelson@biolab.science", "+1 (555) 505-6060", "BioLab Sciences",
            ClientStatus.PROSPECT, "2024-01-02", 95000, "Needs custom data retention terms."),
]


def seed_initial_data(repository: ClientRepository) -> None:
    """
    Load the seed collection into the repository, replacing anything stored.
    """
    repository.load(SEED_CLIENTS)
    logger.info(
        "Seeded client store",
        extra={"count": repository.count()},
    )
