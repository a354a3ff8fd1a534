"""PostgreSQL repository implementations."""

from gate.persistence.repository.account import PostgresAccountRepository
from gate.persistence.repository.credential import PostgresCredentialRepository
from gate.persistence.repository.invite import PostgresInviteRepository

__all__ = [
    "PostgresAccountRepository",
    "PostgresCredentialRepository",
    "PostgresInviteRepository",
]
