"""Domain value objects."""

from gate.domain.value.credential import PasswordDigest
from gate.domain.value.identifiers import AccountId, InviteId
from gate.domain.value.types import (
    CodeDigest,
    CodePepper,
    InviteCode,
    normalize_email,
)

__all__ = [
    # Identifiers
    "AccountId",
    "InviteId",
    # Types
    "CodeDigest",
    "CodePepper",
    "InviteCode",
    "PasswordDigest",
    "normalize_email",
]
