# backend/app/api/routes.py

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.api.deps_auth import CurrentUser, get_db, require_admin
from app.schemas.account import AccountCreate, AccountOut, AccountUpdate, RoleOut
from app.schemas.room import BookingOut, RoomCreate, RoomOut, RoomTypeOut, RoomUpdate
from app.services.accounts import AccountManager
from app.services.reference import ReferenceData
from app.services.results import ErrorCode, Result, account_not_found, room_not_found
from app.services.rooms import RoomManager

logger = logging.getLogger("hotel.api")

router = APIRouter()

# ---------- SCHEMAS ----------

class Summary(BaseModel):
    username: str
    total_customers: int
    total_admins: int
    total_bookings: int
    total_rooms: int


class Confirmation(BaseModel):
    message: str
    actor: str


class AccountConfirmation(Confirmation):
    user: AccountOut


class RoomConfirmation(Confirmation):
    room: RoomOut

# ---------- HELPERS ----------

def raise_for_failure(result: Result) -> None:
    """NotFound becomes 404 with its informational message; field errors 400."""
    if result.ok:
        return
    error = result.error
    if error.code == ErrorCode.NOT_FOUND:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=error.message)
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error.as_dict())

# ---------- DASHBOARD / REFERENCE DATA ----------

@router.get("/", response_model=Summary)
def admin_home(
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(require_admin),
):
    return ReferenceData(db).summary(user.name)


@router.get("/roles", response_model=List[RoleOut])
def list_roles(db: Session = Depends(get_db), _user: CurrentUser = Depends(require_admin)):
    return ReferenceData(db).list_roles()


@router.get("/room-types", response_model=List[RoomTypeOut])
def list_room_types(db: Session = Depends(get_db), _user: CurrentUser = Depends(require_admin)):
    return ReferenceData(db).list_room_types()


@router.get("/customers", response_model=List[AccountOut])
def list_customers(db: Session = Depends(get_db), _user: CurrentUser = Depends(require_admin)):
    return ReferenceData(db).list_customers()


@router.get("/admins", response_model=List[AccountOut])
def list_admins(db: Session = Depends(get_db), _user: CurrentUser = Depends(require_admin)):
    return ReferenceData(db).list_admins()


@router.get("/bookings", response_model=List[BookingOut])
def list_bookings(db: Session = Depends(get_db), _user: CurrentUser = Depends(require_admin)):
    return ReferenceData(db).list_bookings()


@router.get("/rooms", response_model=List[RoomOut])
def list_rooms(db: Session = Depends(get_db), _user: CurrentUser = Depends(require_admin)):
    return ReferenceData(db).list_rooms()

# ---------- ACCOUNTS ----------

@router.post("/users", response_model=AccountConfirmation, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: AccountCreate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(require_admin),
):
    result = AccountManager(db).create_account(payload)
    raise_for_failure(result)

    account = result.value
    return AccountConfirmation(
        message=f"User {account.full_name} was created successfully",
        actor=user.name,
        user=AccountOut.model_validate(account),
    )


@router.get("/users/{username}", response_model=AccountOut)
def edit_user(
    username: str,
    db: Session = Depends(get_db),
    _user: CurrentUser = Depends(require_admin),
):
    # AccountOut has no password field, so the edit view never echoes it
    account = AccountManager(db).find_by_username(username)
    if account is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=account_not_found(username).message,
        )
    return account


@router.put("/users/{username}", response_model=AccountConfirmation)
def update_user(
    username: str,
    payload: AccountUpdate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(require_admin),
):
    result = AccountManager(db).update_account(username, payload)
    raise_for_failure(result)

    return AccountConfirmation(
        message=f"User: {username} was updated successfully",
        actor=user.name,
        user=AccountOut.model_validate(result.value),
    )


@router.delete("/users/{username}", response_model=Confirmation)
def delete_user(
    username: str,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(require_admin),
):
    raise_for_failure(AccountManager(db).delete_account(username))
    return Confirmation(message=f"User {username} was deleted successfully", actor=user.name)

# ---------- ROOMS ----------

@router.post("/rooms", response_model=RoomConfirmation, status_code=status.HTTP_201_CREATED)
def create_room(
    payload: RoomCreate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(require_admin),
):
    result = RoomManager(db).create_room(payload)
    raise_for_failure(result)

    room = result.value
    return RoomConfirmation(
        message=f"Room {room.name} was added successfully",
        actor=user.name,
        room=RoomOut.model_validate(room),
    )


# live validation for the room form: /api/admin/rooms/check?name=101
@router.get("/rooms/check", response_class=PlainTextResponse)
def check_room_availability(
    name: str,
    db: Session = Depends(get_db),
    _user: CurrentUser = Depends(require_admin),
):
    return RoomManager(db).check_availability(name)


@router.get("/rooms/{room_id}", response_model=RoomOut)
def edit_room(
    room_id: int,
    db: Session = Depends(get_db),
    _user: CurrentUser = Depends(require_admin),
):
    room = RoomManager(db).find_by_id(room_id)
    if room is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=room_not_found(room_id).message)
    return room


@router.put("/rooms/{room_id}", response_model=RoomConfirmation)
def update_room(
    room_id: int,
    payload: RoomUpdate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(require_admin),
):
    result = RoomManager(db).update_room(room_id, payload)
    raise_for_failure(result)

    room = result.value
    return RoomConfirmation(
        message=f"Room {room.name} was updated successfully",
        actor=user.name,
        room=RoomOut.model_validate(room),
    )


@router.delete("/rooms/{room_id}", response_model=Confirmation)
def delete_room(
    room_id: int,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(require_admin),
):
    raise_for_failure(RoomManager(db).delete_room(room_id))
    logger.info("Room %s removed by %s", room_id, user.username)
    return Confirmation(message=f"Room No {room_id} was removed successfully.", actor=user.name)
