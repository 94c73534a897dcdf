import logging

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.security import hash_password
from app.models.account import Account
from app.models.role import ROLE_ADMIN, ROLE_CUSTOMER, Role
from app.models.room_type import RoomType

logger = logging.getLogger("hotel.seed")

DEFAULT_ROOM_TYPES = [
    ("Single", 80.0),
    ("Double", 120.0),
    ("Suite", 250.0),
]


def seed_reference_data_if_empty(db: Session):
    if db.query(Role).count() == 0:
        db.add_all([Role(type=ROLE_ADMIN), Role(type=ROLE_CUSTOMER)])
        db.commit()
        logger.info("Seeded roles")

    if db.query(RoomType).count() == 0:
        db.add_all([RoomType(type=t, base_price=p) for t, p in DEFAULT_ROOM_TYPES])
        db.commit()
        logger.info("Seeded room types")

    if db.query(Account).count() > 0:
        return

    admin_role = db.query(Role).filter(Role.type == ROLE_ADMIN).first()
    admin = Account(
        username=settings.seed_admin_username,
        email=settings.seed_admin_email,
        first_name="Hotel",
        last_name="Admin",
        password_hash=hash_password(settings.seed_admin_password),
        roles=[admin_role],
    )
    db.add(admin)
    db.commit()
    logger.info("Seeded admin account %s", admin.username)
