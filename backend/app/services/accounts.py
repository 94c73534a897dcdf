# backend/app/services/accounts.py

import logging
from typing import Iterable, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.security import hash_password
from app.models.account import Account
from app.models.role import Role
from app.schemas.account import AccountCreate, AccountUpdate
from app.services.results import (
    FieldError,
    Result,
    account_not_found,
    duplicate_email,
    duplicate_username,
    violated_constraint,
)

logger = logging.getLogger("hotel.accounts")

# the only columns an update may copy from the candidate
ACCOUNT_MERGE_FIELDS = ("first_name", "last_name", "username", "email")

_ACCOUNT_CONSTRAINTS = {
    "username": ("uq_accounts_username", "accounts.username"),
    "email": ("uq_accounts_email", "accounts.email"),
}


def merge_account(
    target: Account,
    candidate: AccountUpdate,
    roles: Optional[list[Role]] = None,
) -> Account:
    """Copy the allow-listed fields the candidate actually carries onto ``target``.

    Password hash and identity are never touched. ``roles`` replaces the
    role set only when given.
    """
    changes = candidate.model_dump(include=set(ACCOUNT_MERGE_FIELDS), exclude_unset=True)
    for k, v in changes.items():
        setattr(target, k, v)

    if roles is not None:
        target.roles = roles

    return target


class AccountManager:
    def __init__(self, db: Session):
        self.db = db

    def find_by_username(self, username: str) -> Optional[Account]:
        return self.db.query(Account).filter(Account.username == username).first()

    def find_by_email(self, email: str) -> Optional[Account]:
        return self.db.query(Account).filter(Account.email == email).first()

    def is_username_unique(self, exclude_id: Optional[int], username: str) -> bool:
        existing = self.find_by_username(username)
        return existing is None or (exclude_id is not None and existing.id == exclude_id)

    def is_email_unique(self, exclude_id: Optional[int], email: str) -> bool:
        existing = self.find_by_email(email)
        return existing is None or (exclude_id is not None and existing.id == exclude_id)

    def create_account(self, candidate: AccountCreate) -> Result[Account]:
        error = self._check_unique(None, candidate.username, candidate.email)
        if error:
            logger.info("Rejected new account %r: %s", candidate.username, error.code.value)
            return Result.failure(error)

        account = Account(
            username=candidate.username,
            email=candidate.email,
            first_name=candidate.first_name,
            last_name=candidate.last_name,
            password_hash=hash_password(candidate.password),
            roles=self._resolve_roles(candidate.role_ids),
        )
        self.db.add(account)

        error = self._commit(candidate.username, candidate.email)
        if error:
            return Result.failure(error)

        self.db.refresh(account)
        logger.info("Created account %s (id=%s)", account.username, account.id)
        return Result.success(account)

    def update_account(self, target_username: str, candidate: AccountUpdate) -> Result[Account]:
        account = self.find_by_username(target_username)
        if account is None:
            return Result.failure(account_not_found(target_username))

        # fields missing from a partial candidate keep their stored value
        username = candidate.username if candidate.username is not None else account.username
        email = candidate.email if candidate.email is not None else account.email

        error = self._check_unique(account.id, username, email)
        if error:
            logger.info("Rejected update of account %r: %s", target_username, error.code.value)
            return Result.failure(error)

        roles = self._resolve_roles(candidate.role_ids) if candidate.role_ids is not None else None
        merge_account(account, candidate, roles)

        error = self._commit(username, email)
        if error:
            return Result.failure(error)

        self.db.refresh(account)
        logger.info("Updated account %s (id=%s)", account.username, account.id)
        return Result.success(account)

    def delete_account(self, username: str) -> Result[None]:
        account = self.find_by_username(username)
        if account is None:
            return Result.failure(account_not_found(username))

        self.db.delete(account)
        self.db.commit()
        logger.info("Deleted account %s", username)
        return Result.success()

    # ---------- internals ----------

    def _check_unique(self, exclude_id: Optional[int], username: str, email: str) -> Optional[FieldError]:
        # username first; only the first failure is reported
        if not self.is_username_unique(exclude_id, username):
            return duplicate_username(username)
        if not self.is_email_unique(exclude_id, email):
            return duplicate_email(email)
        return None

    def _resolve_roles(self, role_ids: Iterable[int]) -> list[Role]:
        ids = list(dict.fromkeys(role_ids))
        if not ids:
            return []
        return self.db.query(Role).filter(Role.id.in_(ids)).order_by(Role.id).all()

    def _commit(self, username: str, email: str) -> Optional[FieldError]:
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            field = violated_constraint(exc, _ACCOUNT_CONSTRAINTS)
            if field is None:
                raise
            logger.warning("Unique constraint on accounts.%s hit at commit time", field)
            return duplicate_username(username) if field == "username" else duplicate_email(email)
        return None
