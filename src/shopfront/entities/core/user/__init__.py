"""User entity module.

This module contains all User-related classes organized by responsibility:
- User: Domain entity returned by the API
- UserCreate / UserUpdate: Request payloads
- UserTable: Database persistence model
- UserRepository: Data access layer
"""

from .entity import User, UserCreate, UserUpdate
from .repository import UserRepository
from .table import UserTable

__all__ = ["User", "UserCreate", "UserUpdate", "UserTable", "UserRepository"]
