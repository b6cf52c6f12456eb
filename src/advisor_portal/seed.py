"""Demo data loaded into the entity store at boot."""

from datetime import datetime, timezone

from loguru import logger

from .core.security import hash_password
from .store import EntityStore

DEMO_ADVISOR_USERNAME = "admin"
DEMO_ADVISOR_PASSWORD = "password123"


def _at(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def seed_demo_data(store: EntityStore) -> None:
    """Populate an empty store with a demo advisor, contacts, questions and replies."""
    advisor = store.users.create(
        username=DEMO_ADVISOR_USERNAME,
        password_hash=hash_password(DEMO_ADVISOR_PASSWORD),
        name="Demo Advisor",
        email="advisor@myadvisor.sg",
        created_at=_at(2023, 3, 1),
    )

    john = store.users.create(
        name="John Doe",
        salutation="Mr",
        mobile_number="+1 (555) 123-4567",
        email="john.doe@example.com",
        age_group="25-34",
        advisor_id=advisor.id,
        created_at=_at(2023, 3, 10),
    )
    store.users.create(
        name="Jane Smith",
        salutation="Ms",
        mobile_number="+1 (555) 987-6543",
        email="jane.smith@example.com",
        age_group="35-44",
        advisor_id=advisor.id,
        created_at=_at(2023, 4, 15),
    )
    store.users.create(
        name="Robert Johnson",
        salutation="Mr",
        mobile_number="+1 (555) 456-7890",
        email="robert.j@example.com",
        age_group="45-54",
        advisor_id=advisor.id,
        created_at=_at(2023, 5, 1),
    )

    welcome = store.messages.create(
        step=1,
        content="Hello! Welcome to our service. How can we assist you today?",
        trigger_keyword="hello",
        fixed_reply_required=True,
        fixed_reply="Thank you for reaching out. Our team will assist you shortly.",
        created_at=_at(2023, 5, 15),
    )
    store.messages.create(
        step=2,
        content="Thank you for your interest in our *premium* service package!",
        trigger_keyword="premium",
        created_at=_at(2023, 5, 20),
    )
    appointment = store.messages.create(
        step=3,
        content="Your appointment has been confirmed for tomorrow at 2:00 PM.",
        trigger_keyword="",
        fixed_reply_required=True,
        fixed_reply="I confirm I will attend the appointment at the scheduled time.",
        created_at=_at(2023, 5, 22),
    )

    store.create_reply(
        user_id=john.id,
        message_id=welcome.id,
        content="I'd like to get more information about your services, please.",
        reply_date=_at(2023, 5, 15, 14, 30),
    )
    store.create_reply(
        user_id=john.id,
        message_id=appointment.id,
        content="Thank you for confirming my appointment. I'll be there on time.",
        reply_date=_at(2023, 5, 22, 10, 15),
    )

    logger.info(f"Seeded demo data: {store!r}")
