# backend/app/api/deps_auth.py

from typing import List

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.core.database import SessionLocal
from app.core.security import decode_token
from app.models.account import Account
from app.models.role import ROLE_ADMIN

# Only used by Swagger UI for the "Authorize" flow.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/token")


class CurrentUser(BaseModel):
    id: int
    username: str
    name: str
    roles: List[str]  # "ADMIN" | "CUSTOMER"


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> CurrentUser:
    cred_exc = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if not token or not isinstance(token, str):
        raise cred_exc

    try:
        payload = decode_token(token)
    except ValueError:
        raise cred_exc

    # sub is the account id
    try:
        account_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise cred_exc

    account = db.get(Account, account_id)
    if not account:
        raise cred_exc

    return CurrentUser(
        id=account.id,
        username=account.username,
        name=account.full_name or account.username,
        roles=account.role_types,
    )


def require_admin(user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
    if ROLE_ADMIN not in user.roles:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin role required")
    return user
