"""Translation of SQLAlchemy failures into the application error taxonomy."""

from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session

from src.shopfront.core.exceptions import ConflictError, PersistenceError


@contextmanager
def persistence_errors(
    session: Session, conflict_message: str | None = None
) -> Iterator[None]:
    """Roll back and re-raise database failures as typed errors.

    With a `conflict_message`, unique constraint violations become
    `ConflictError(conflict_message)`. Every other SQLAlchemy failure,
    including an integrity error on a block that expects none, becomes a
    generic `PersistenceError`. The original exception is logged and chained,
    never shown to clients.
    """
    try:
        yield
    except IntegrityError as e:
        session.rollback()
        if conflict_message is None:
            logger.exception("Unexpected integrity violation")
            raise PersistenceError() from e
        logger.warning("Integrity violation: {}", e.orig)
        raise ConflictError(conflict_message) from e
    except SQLAlchemyError as e:
        session.rollback()
        logger.exception("Database operation failed")
        raise PersistenceError() from e
