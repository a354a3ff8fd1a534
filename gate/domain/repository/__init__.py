"""Repository interfaces."""

from .account import AccountRepository
from .credential import CredentialRepository
from .invite import InviteRepository

__all__ = [
    "AccountRepository",
    "CredentialRepository",
    "InviteRepository",
]
