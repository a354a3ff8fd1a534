"""In-memory repository implementations for testing."""

from .account import InMemoryAccountRepository
from .credential import InMemoryCredentialRepository
from .invite import InMemoryInviteRepository

__all__ = [
    "InMemoryAccountRepository",
    "InMemoryCredentialRepository",
    "InMemoryInviteRepository",
]
