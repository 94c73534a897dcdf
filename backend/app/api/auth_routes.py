# backend/app/api/auth_routes.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.api.deps_auth import CurrentUser, get_current_user, get_db
from app.core.security import create_access_token, verify_password
from app.models.account import Account

router = APIRouter()


class LoginIn(BaseModel):
    username: str
    password: str


class LoginOut(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: CurrentUser


def _authenticate(db: Session, username: str, password: str) -> LoginOut:
    account = db.query(Account).filter(Account.username == username.strip()).first()
    if not account or not verify_password(password, account.password_hash):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid username or password")

    roles: List[str] = account.role_types
    token = create_access_token({"sub": str(account.id), "roles": roles})

    return LoginOut(
        access_token=token,
        user=CurrentUser(
            id=account.id,
            username=account.username,
            name=account.full_name or account.username,
            roles=roles,
        ),
    )


# JSON login
@router.post("/login", response_model=LoginOut)
def login(payload: LoginIn, db: Session = Depends(get_db)):
    return _authenticate(db, payload.username, payload.password)


# OAuth2 form endpoint (Swagger Authorize uses this)
@router.post("/token", response_model=LoginOut)
def token(form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    return _authenticate(db, form_data.username or "", form_data.password or "")


@router.get("/me", response_model=CurrentUser)
def me(current_user: CurrentUser = Depends(get_current_user)):
    return current_user
