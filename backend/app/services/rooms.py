# backend/app/services/rooms.py

import logging
from typing import Literal, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.booking import Booking
from app.models.room import Room, RoomStatus
from app.models.room_type import RoomType
from app.schemas.room import RoomCreate, RoomUpdate
from app.services.results import (
    FieldError,
    Result,
    duplicate_room_name,
    room_not_found,
    unknown_booking,
    unknown_room_type,
    violated_constraint,
)

logger = logging.getLogger("hotel.rooms")

Availability = Literal["Available", "Not Available"]

# price, capacity, bath, bed, amenities and status survive every update
ROOM_MERGE_FIELDS = ("type_id", "booking_id", "description", "name")

_ROOM_CONSTRAINTS = {
    "name": ("uq_rooms_name", "rooms.name"),
}


def merge_room(target: Room, candidate: RoomUpdate) -> Room:
    changes = candidate.model_dump(include=set(ROOM_MERGE_FIELDS), exclude_unset=True)
    for k, v in changes.items():
        setattr(target, k, v)
    return target


class RoomManager:
    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, room_id: int) -> Optional[Room]:
        return self.db.get(Room, room_id)

    def find_by_name(self, name: str) -> Optional[Room]:
        return self.db.query(Room).filter(Room.name == name).first()

    def is_name_unique(self, exclude_id: Optional[int], name: str) -> bool:
        existing = self.find_by_name(name)
        return existing is None or (exclude_id is not None and existing.id == exclude_id)

    def check_availability(self, name: str) -> Availability:
        if self.is_name_unique(None, name):
            return "Available"
        return "Not Available"

    def create_room(self, candidate: RoomCreate) -> Result[Room]:
        if not self.is_name_unique(None, candidate.name):
            logger.info("Rejected new room %r: name taken", candidate.name)
            return Result.failure(duplicate_room_name(candidate.name))

        error = self._check_references(candidate.type_id, candidate.booking_id)
        if error:
            logger.info("Rejected new room %r: %s", candidate.name, error.message)
            return Result.failure(error)

        room = Room(**candidate.model_dump(exclude={"status"}))
        room.status = RoomStatus.VERIFIED
        self.db.add(room)

        error = self._commit(candidate.name)
        if error:
            return Result.failure(error)

        self.db.refresh(room)
        logger.info("Created room %s (id=%s)", room.name, room.id)
        return Result.success(room)

    def update_room(self, target_id: int, candidate: RoomUpdate) -> Result[Room]:
        room = self.find_by_id(target_id)
        if room is None:
            return Result.failure(room_not_found(target_id))

        name = candidate.name if candidate.name is not None else room.name
        if not self.is_name_unique(room.id, name):
            logger.info("Rejected update of room %s: name %r taken", target_id, name)
            return Result.failure(duplicate_room_name(name))

        # booking_id=None clears the booking and needs no lookup
        error = self._check_references(candidate.type_id, candidate.booking_id)
        if error:
            logger.info("Rejected update of room %s: %s", target_id, error.message)
            return Result.failure(error)

        merge_room(room, candidate)

        error = self._commit(name)
        if error:
            return Result.failure(error)

        self.db.refresh(room)
        logger.info("Updated room %s (id=%s)", room.name, room.id)
        return Result.success(room)

    def delete_room(self, room_id: int) -> Result[None]:
        room = self.find_by_id(room_id)
        if room is None:
            return Result.failure(room_not_found(room_id))

        name = room.name
        self.db.delete(room)
        self.db.commit()
        logger.info("Deleted room %s (id=%s)", name, room_id)
        return Result.success()

    def _check_references(self, type_id: Optional[int], booking_id: Optional[int]) -> Optional[FieldError]:
        if type_id is not None and self.db.get(RoomType, type_id) is None:
            return unknown_room_type(type_id)
        if booking_id is not None and self.db.get(Booking, booking_id) is None:
            return unknown_booking(booking_id)
        return None

    def _commit(self, name: str) -> Optional[FieldError]:
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            if violated_constraint(exc, _ROOM_CONSTRAINTS) is None:
                raise
            logger.warning("Unique constraint on rooms.name hit at commit time")
            return duplicate_room_name(name)
        return None
