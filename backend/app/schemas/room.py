from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.models.room import RoomStatus


class RoomTypeOut(BaseModel):
    id: int
    type: str
    base_price: float

    class Config:
        from_attributes = True


class BookingOut(BaseModel):
    id: int
    account_id: Optional[int] = None
    check_in: date
    check_out: date

    class Config:
        from_attributes = True


class RoomCreate(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    type_id: int
    price: float = Field(default=0.0, ge=0)
    capacity: int = Field(default=1, ge=0)
    bath: int = Field(default=1, ge=0)
    bed: int = Field(default=1, ge=0)
    amenities: Optional[str] = None
    booking_id: Optional[int] = None

    # ignored: new rooms are always VERIFIED
    status: Optional[RoomStatus] = None

    class Config:
        str_strip_whitespace = True


class RoomUpdate(BaseModel):
    """Edit-form payload.

    Only name, description, type and booking are copied onto the stored
    room; the remaining fields are accepted and ignored.
    """

    id: Optional[int] = None
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    type_id: Optional[int] = None
    booking_id: Optional[int] = None

    price: Optional[float] = None
    capacity: Optional[int] = None
    bath: Optional[int] = None
    bed: Optional[int] = None
    amenities: Optional[str] = None
    status: Optional[RoomStatus] = None

    class Config:
        str_strip_whitespace = True

    @field_validator("name", "type_id")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("must not be null")
        return v


class RoomOut(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    type_id: int
    type: Optional[RoomTypeOut] = None
    price: float
    capacity: int
    bath: int
    bed: int
    amenities: Optional[str] = None
    status: RoomStatus
    booking_id: Optional[int] = None

    class Config:
        from_attributes = True
