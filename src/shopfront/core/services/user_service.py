"""User lifecycle: listing, creation, e-mail update and deletion."""

from collections.abc import Mapping
from typing import Any

from loguru import logger
from sqlmodel import Session

from src.shopfront.core.exceptions import NotFoundError
from src.shopfront.core.services.database.db_utils import persistence_errors
from src.shopfront.core.services.password_hasher import PasswordHasher
from src.shopfront.core.validation import (
    USER_CREATE_RULES,
    USER_UPDATE_RULES,
    parse_payload,
)
from src.shopfront.entities.core.user import User, UserCreate, UserRepository, UserUpdate

USER_NOT_FOUND = "User not found"


class UserService:
    """Validates user requests and applies them through `UserRepository`.

    Each public method is one request: validate, one database operation,
    commit. Bodies arrive as the raw decoded JSON. Failures surface as
    `ShopfrontError` subclasses.
    """

    def __init__(self, session: Session, password_hasher: PasswordHasher):
        self._session = session
        self._hasher = password_hasher
        self._repository = UserRepository(session)

    def list_users(self) -> list[User]:
        with persistence_errors(self._session):
            return self._repository.list_all()

    def create_user(self, payload: Mapping[str, Any] | None) -> User:
        data = parse_payload(payload, USER_CREATE_RULES, UserCreate)

        password_hash = self._hasher.hash(data.password)

        with persistence_errors(
            self._session, f"A user with e-mail {data.email} already exists"
        ):
            user = self._repository.create(data.email, password_hash)
            self._session.commit()

        logger.info("Created user {}", user.id)
        return user

    def update_user(self, user_id: int | None, payload: Mapping[str, Any] | None) -> User:
        """Overwrite the user's e-mail.

        Existence is checked before the body, so an unknown id is reported as
        not found even when the e-mail is missing too.
        """
        if user_id is None:
            raise NotFoundError(USER_NOT_FOUND)

        with persistence_errors(self._session):
            existing = self._repository.get(user_id)
        if existing is None:
            raise NotFoundError(USER_NOT_FOUND)

        data = parse_payload(payload, USER_UPDATE_RULES, UserUpdate)

        with persistence_errors(
            self._session, f"A user with e-mail {data.email} already exists"
        ):
            updated = self._repository.update(user_id, {"email": data.email})
            self._session.commit()

        if updated is None:
            raise NotFoundError(USER_NOT_FOUND)
        logger.info("Updated user {}", user_id)
        return updated

    def delete_user(self, user_id: int | None) -> User:
        if user_id is None:
            raise NotFoundError(USER_NOT_FOUND)

        with persistence_errors(self._session):
            deleted = self._repository.delete(user_id)
            self._session.commit()

        if deleted is None:
            raise NotFoundError(USER_NOT_FOUND)
        logger.info("Deleted user {}", user_id)
        return deleted
