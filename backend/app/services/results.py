"""Outcome types shared by the account and room managers.

Validation failures are returned, not raised: every mutating manager call
answers with a :class:`Result` that either carries the persisted entity or a
single :class:`FieldError` naming the offending input field.
"""

import enum
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from sqlalchemy.exc import IntegrityError

T = TypeVar("T")


class ErrorCode(str, enum.Enum):
    DUPLICATE_USERNAME = "DuplicateUsername"
    DUPLICATE_EMAIL = "DuplicateEmail"
    DUPLICATE_NAME = "DuplicateName"
    NOT_FOUND = "NotFound"
    UNKNOWN_REFERENCE = "UnknownReference"


@dataclass(frozen=True)
class FieldError:
    code: ErrorCode
    field: str
    message: str

    def as_dict(self) -> dict:
        return {"code": self.code.value, "field": self.field, "message": self.message}


@dataclass(frozen=True)
class Result(Generic[T]):
    value: Optional[T] = None
    error: Optional[FieldError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: FieldError) -> "Result[T]":
        return cls(error=error)


# ---------- FIELD ERRORS ----------

def duplicate_username(username: str) -> FieldError:
    return FieldError(
        ErrorCode.DUPLICATE_USERNAME,
        "username",
        f"Username {username} already exists. Please fill in a different value.",
    )


def duplicate_email(email: str) -> FieldError:
    return FieldError(
        ErrorCode.DUPLICATE_EMAIL,
        "email",
        f"Email {email} is already registered. Please fill in a different value.",
    )


def duplicate_room_name(name: str) -> FieldError:
    return FieldError(
        ErrorCode.DUPLICATE_NAME,
        "name",
        f"Room {name} already exists. Please fill in a different value.",
    )


def account_not_found(username: str) -> FieldError:
    return FieldError(
        ErrorCode.NOT_FOUND,
        "username",
        f"Requested user: {username} does not exist in database.",
    )


def room_not_found(room_id: int) -> FieldError:
    return FieldError(
        ErrorCode.NOT_FOUND,
        "id",
        f"Room with Id {room_id} does not exist.",
    )


def unknown_room_type(type_id: int) -> FieldError:
    return FieldError(
        ErrorCode.UNKNOWN_REFERENCE,
        "type_id",
        f"Room type with Id {type_id} does not exist.",
    )


def unknown_booking(booking_id: int) -> FieldError:
    return FieldError(
        ErrorCode.UNKNOWN_REFERENCE,
        "booking_id",
        f"Booking with Id {booking_id} does not exist.",
    )


# ---------- CONSTRAINT TRANSLATION ----------

def violated_constraint(exc: IntegrityError, constraints: dict[str, tuple[str, ...]]) -> Optional[str]:
    """Return the key of the first constraint whose markers appear in ``exc``.

    SQLite reports ``UNIQUE constraint failed: accounts.username`` while
    Postgres reports the constraint name, so each key maps to several markers.
    """
    text = str(exc.orig) if exc.orig is not None else str(exc)
    for key, markers in constraints.items():
        if any(m in text for m in markers):
            return key
    return None
