"""Domain models."""

from .account import Account
from .credential import Credential
from .invite import Invite

__all__ = ["Account", "Credential", "Invite"]
