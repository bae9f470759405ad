"""User domain entity."""

from typing import Any

from pydantic import BaseModel, Field

from src.shopfront.entities.core._base import Entity


class User(Entity):
    """User entity representing an account in the system.

    The stored password is always a bcrypt hash. It is part of the record
    returned by the listing and update endpoints.
    """

    email: str = Field(description="User's email address")
    password: str = Field(description="bcrypt hash of the user's password")
    first_name: str | None = Field(
        default=None, serialization_alias="firstName", description="User's first name"
    )
    last_name: str | None = Field(
        default=None, serialization_alias="lastName", description="User's last name"
    )

    def __eq__(self, other: Any) -> bool:
        """Compare users by business attributes, ignoring timestamps."""
        if not isinstance(other, User):
            return False

        return (
            self.id == other.id
            and self.email == other.email
            and self.password == other.password
            and self.first_name == other.first_name
            and self.last_name == other.last_name
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.email,
            self.password,
            self.first_name,
            self.last_name,
        ))


class UserCreate(BaseModel):
    """Body of `POST /user`, parsed once both fields are present."""

    email: str
    password: str


class UserUpdate(BaseModel):
    """Body of `PUT /user/{id}`."""

    email: str
