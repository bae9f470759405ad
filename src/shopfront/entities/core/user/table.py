"""User database table model."""

from sqlmodel import Field

from src.shopfront.entities.core._base import EntityTable


class UserTable(EntityTable, table=True):
    """Database persistence model for users."""

    __tablename__ = "user"

    email: str = Field(unique=True, index=True, nullable=False)
    password: str = Field(nullable=False)
    first_name: str | None = None
    last_name: str | None = None
