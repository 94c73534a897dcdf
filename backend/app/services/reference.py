from sqlalchemy.orm import Session

from app.models.account import Account
from app.models.booking import Booking
from app.models.role import ROLE_ADMIN, ROLE_CUSTOMER, Role
from app.models.room import Room
from app.models.room_type import RoomType


class ReferenceData:
    """Read-only lookups for dropdowns and dashboard totals."""

    def __init__(self, db: Session):
        self.db = db

    def _accounts_with_role(self, role_type: str) -> list[Account]:
        return (
            self.db.query(Account)
            .join(Account.roles)
            .filter(Role.type == role_type)
            .order_by(Account.id)
            .all()
        )

    def list_customers(self) -> list[Account]:
        return self._accounts_with_role(ROLE_CUSTOMER)

    def list_admins(self) -> list[Account]:
        return self._accounts_with_role(ROLE_ADMIN)

    def list_rooms(self) -> list[Room]:
        return self.db.query(Room).order_by(Room.id).all()

    def list_bookings(self) -> list[Booking]:
        return self.db.query(Booking).order_by(Booking.id).all()

    def list_roles(self) -> list[Role]:
        return self.db.query(Role).order_by(Role.id).all()

    def list_room_types(self) -> list[RoomType]:
        return self.db.query(RoomType).order_by(RoomType.id).all()

    def summary(self, principal: str) -> dict:
        customers = self.list_customers()
        admins = self.list_admins()
        bookings = self.list_bookings()
        rooms = self.list_rooms()
        return {
            "username": principal,
            "total_customers": len(customers),
            "total_admins": len(admins),
            "total_bookings": len(bookings),
            "total_rooms": len(rooms),
        }
