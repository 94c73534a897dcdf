from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class RoleOut(BaseModel):
    id: int
    type: str

    class Config:
        from_attributes = True


class AccountCreate(BaseModel):
    username: str = Field(min_length=1)
    email: str = Field(min_length=3)
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    password: str = Field(min_length=1)
    role_ids: List[int] = []

    class Config:
        str_strip_whitespace = True


class AccountUpdate(BaseModel):
    """Edit-form payload.

    ``id`` and ``password`` are accepted because edit forms post them back,
    but the update path never copies either onto the stored account.
    """

    id: Optional[int] = None
    username: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = Field(default=None, min_length=3)
    first_name: Optional[str] = Field(default=None, min_length=1)
    last_name: Optional[str] = Field(default=None, min_length=1)
    password: Optional[str] = None
    role_ids: Optional[List[int]] = None

    class Config:
        str_strip_whitespace = True

    @field_validator("username", "email", "first_name", "last_name")
    @classmethod
    def not_null(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("must not be null")
        return v


class AccountOut(BaseModel):
    id: int
    username: str
    email: str
    first_name: str
    last_name: str
    roles: List[RoleOut] = []

    class Config:
        from_attributes = True
