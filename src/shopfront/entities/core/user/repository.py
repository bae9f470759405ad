"""Data-access layer for users."""

from typing import Any

from sqlmodel import Session, select

from src.shopfront.entities.core.user.entity import User
from src.shopfront.entities.core.user.table import UserTable


class UserRepository:
    """Data-access layer for users.

    Methods flush but never commit; the caller owns the transaction.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[User]:
        statement = select(UserTable).order_by(UserTable.id)
        rows = self._session.exec(statement).all()
        return [User.model_validate(row) for row in rows]

    def get(self, user_id: int) -> User | None:
        row = self._session.get(UserTable, user_id)
        if row is None:
            return None
        return User.model_validate(row)

    def create(self, email: str, password_hash: str) -> User:
        row = UserTable(email=email, password=password_hash)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return User.model_validate(row)

    def update(self, user_id: int, changes: dict[str, Any]) -> User | None:
        """Apply `changes` to the user, returning None when it does not exist."""
        row = self._session.get(UserTable, user_id)
        if row is None:
            return None
        for field, value in changes.items():
            setattr(row, field, value)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return User.model_validate(row)

    def delete(self, user_id: int) -> User | None:
        """Delete the user and return it as it was, or None if no row matched."""
        row = self._session.get(UserTable, user_id)
        if row is None:
            return None
        deleted = User.model_validate(row)
        self._session.delete(row)
        self._session.flush()
        return deleted
