from sqlalchemy import Column, Integer, String
from app.core.database import Base

ROLE_ADMIN = "ADMIN"
ROLE_CUSTOMER = "CUSTOMER"


class Role(Base):
    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, index=True)

    # "ADMIN" | "CUSTOMER"
    type = Column(String, unique=True, nullable=False)
