"""Invite code hashing."""

import hashlib
import hmac
import secrets

from pydantic import ValidationError as PydanticValidationError

from gate.config import InviteSettings
from gate.domain.value import CodeDigest, CodePepper
from gate.util.error import ConfigurationError

from .base import Service

# No 0/O, 1/I/L: codes are read off emails and typed by hand
CODE_ALPHABET = "ABCDEFGHJKMNPQRSTUVWXYZ23456789"


def load_code_pepper(settings: InviteSettings) -> CodePepper:
    """Build the code pepper from configuration.

    Called once at startup.

    Args:
        settings: Invite settings

    Returns:
        The pepper

    Raises:
        ConfigurationError: If INVITES__CODE_PEPPER is missing or blank
    """
    if settings.code_pepper is None:
        raise ConfigurationError("INVITES__CODE_PEPPER is not set")
    try:
        return CodePepper(secret=settings.code_pepper)
    except PydanticValidationError as e:
        raise ConfigurationError("INVITES__CODE_PEPPER is blank") from e


class CodeHasher(Service):
    """Deterministic keyed digest of invite codes.

    HMAC-SHA256 over the normalized code, keyed with the pepper. Equal
    codes always map to the same digest, so invites can be looked up by
    digest without storing the code. Without the pepper, a digest reveals
    nothing usable about the code.
    """

    def __init__(self, pepper: CodePepper) -> None:
        """Initialize code hasher.

        Args:
            pepper: Secret key loaded at startup
        """
        self._key = pepper.key()

    @staticmethod
    def normalize(raw_code: str) -> str:
        """Strip surrounding whitespace and upper-case."""
        return raw_code.strip().upper()

    def hash(self, raw_code: str) -> CodeDigest:
        """Digest a raw invite code.

        Args:
            raw_code: Code as entered; case and surrounding whitespace are ignored

        Returns:
            64-char lowercase hex digest
        """
        normalized = self.normalize(raw_code)
        mac = hmac.new(self._key, normalized.encode("utf-8"), hashlib.sha256)
        return CodeDigest(mac.hexdigest())

    @staticmethod
    def generate_code(groups: int = 3, group_size: int = 4) -> str:
        """Generate a random, human-typable invite code.

        Args:
            groups: Number of dash-separated groups
            group_size: Characters per group

        Returns:
            Code like ``K7QM-XP3D-9HTW``
        """
        return "-".join(
            "".join(secrets.choice(CODE_ALPHABET) for _ in range(group_size))
            for _ in range(groups)
        )
