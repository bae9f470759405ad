"""FastAPI dependency implementations."""

from __future__ import annotations

import re
from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.shopfront.api.http.app_data import ApplicationDependencies
from src.shopfront.core.services import PasswordHasher, ProductService, UserService

_LEADING_INTEGER = re.compile(r"^\s*([+-]?\d+)")

# Largest value an INTEGER primary key can hold (signed 64-bit)
_MAX_ID = 2**63 - 1


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    """Get the dependencies created by the application lifespan."""
    return request.app.state.app_dependencies


def get_session(request: Request) -> Iterator[Session]:
    """Yield a database session for the duration of one request."""
    app_deps = get_app_dependencies(request)
    session = app_deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_password_hasher(request: Request) -> PasswordHasher:
    """Get the password hasher instance."""
    return get_app_dependencies(request).password_hasher


def get_user_service(
    session: Session = Depends(get_session),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> UserService:
    return UserService(session, password_hasher)


def get_product_service(session: Session = Depends(get_session)) -> ProductService:
    return ProductService(session)


def parse_record_id(id: str) -> int | None:
    """Coerce the `{id}` path segment to an integer.

    Like a lenient integer parse, a leading integer is taken and any trailing
    text ignored (`"12abc"` is 12). Values without one, or outside the key
    range, come back as None and are reported as not found by the services.
    """
    match = _LEADING_INTEGER.match(id)
    if match is None:
        return None
    value = int(match.group(1))
    if not -_MAX_ID <= value <= _MAX_ID:
        return None
    return value
