import enum

from sqlalchemy import (
    CheckConstraint,
    Column,
    Enum,
    Float,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from app.core.database import Base
from app.models.booking import Booking
from app.models.room_type import RoomType


class RoomStatus(str, enum.Enum):
    """Verification status of a room.

    Only ``UNVERIFIED -> VERIFIED`` exists. Rooms are constructed
    ``UNVERIFIED`` and forced to ``VERIFIED`` before their first insert.
    """

    UNVERIFIED = "UNVERIFIED"
    VERIFIED = "VERIFIED"


class Room(Base):
    __tablename__ = "rooms"

    __table_args__ = (
        UniqueConstraint("name", name="uq_rooms_name"),
        CheckConstraint("price >= 0", name="ck_rooms_price_non_negative"),
        CheckConstraint("capacity >= 0", name="ck_rooms_capacity_non_negative"),
    )

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String, nullable=False, index=True)
    description = Column(String, nullable=True)

    type_id = Column(Integer, ForeignKey("room_types.id"), nullable=False)

    price = Column(Float, nullable=False, default=0.0)
    capacity = Column(Integer, nullable=False, default=1)
    bath = Column(Integer, nullable=False, default=1)
    bed = Column(Integer, nullable=False, default=1)
    amenities = Column(String, nullable=True)

    status = Column(
        Enum(RoomStatus, name="room_status", native_enum=False),
        nullable=False,
        default=RoomStatus.UNVERIFIED,
    )

    # current booking, zero-or-one
    booking_id = Column(Integer, ForeignKey("bookings.id", ondelete="SET NULL"), nullable=True)

    type = relationship(RoomType, lazy="joined")
    booking = relationship(Booking, lazy="joined")

    def __repr__(self) -> str:
        return f"<Room {self.name} ({self.status})>"
