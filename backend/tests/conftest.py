from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from app.core.database import Base, enable_sqlite_foreign_keys
from app.core.security import hash_password
from app.models.account import Account
from app.models.role import ROLE_ADMIN, ROLE_CUSTOMER, Role
from app.models.room import Room  # noqa: F401  registers rooms/bookings tables
from app.models.room_type import RoomType


@pytest.fixture()
def engine(tmp_path: Path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'hotel-tests.sqlite3'}",
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db(session_factory) -> Session:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def roles(db: Session) -> dict[str, Role]:
    admin = Role(type=ROLE_ADMIN)
    customer = Role(type=ROLE_CUSTOMER)
    db.add_all([admin, customer])
    db.commit()
    return {ROLE_ADMIN: admin, ROLE_CUSTOMER: customer}


@pytest.fixture()
def room_types(db: Session) -> dict[str, RoomType]:
    single = RoomType(type="Single", base_price=80.0)
    suite = RoomType(type="Suite", base_price=250.0)
    db.add_all([single, suite])
    db.commit()
    return {"Single": single, "Suite": suite}


@pytest.fixture()
def admin_account(db: Session, roles) -> Account:
    account = Account(
        username="frontdesk",
        email="frontdesk@hotel.test",
        first_name="Frida",
        last_name="Desk",
        password_hash=hash_password("frontdesk-pass"),
        roles=[roles[ROLE_ADMIN]],
    )
    db.add(account)
    db.commit()
    return account
