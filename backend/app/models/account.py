from datetime import datetime

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Table,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from app.core.database import Base
from app.models.role import Role

account_roles = Table(
    "account_roles",
    Base.metadata,
    Column("account_id", Integer, ForeignKey("accounts.id", ondelete="CASCADE"), primary_key=True),
    Column("role_id", Integer, ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True),
)


class Account(Base):
    __tablename__ = "accounts"

    __table_args__ = (
        # conflicts on these are translated back into field errors
        UniqueConstraint("username", name="uq_accounts_username"),
        UniqueConstraint("email", name="uq_accounts_email"),
    )

    id = Column(Integer, primary_key=True, index=True)

    username = Column(String, nullable=False, index=True)
    email = Column(String, nullable=False)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)

    # write-only, never serialized
    password_hash = Column(String, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)

    roles = relationship(Role, secondary=account_roles, lazy="selectin", order_by=Role.id)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def role_types(self) -> list[str]:
        return [r.type for r in self.roles]

    def __repr__(self) -> str:
        return f"<Account {self.username}>"
