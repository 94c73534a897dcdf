from datetime import datetime

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship

from app.core.database import Base
from app.models.account import Account


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)

    account_id = Column(Integer, ForeignKey("accounts.id", ondelete="SET NULL"), nullable=True, index=True)
    check_in = Column(Date, nullable=False)
    check_out = Column(Date, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)

    account = relationship(Account, lazy="joined")
