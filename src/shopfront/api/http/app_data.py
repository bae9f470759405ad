from dataclasses import dataclass

from src.shopfront.core.services import DbSessionService, PasswordHasher


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    password_hasher: PasswordHasher
