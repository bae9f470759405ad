"""Core services exports."""

# Database Service
from .database.db_session import DbSessionService

# Password hashing
from .password_hasher import PasswordHasher

# Record Services
from .product_service import ProductService
from .user_service import UserService

__all__ = [
    # Database Service
    "DbSessionService",
    # Password hashing
    "PasswordHasher",
    # Record Services
    "ProductService",
    "UserService",
]
