"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

import re

from pydantic import SecretStr, field_validator

from gate.domain.value.common import RootValueObject, ValueObject

_DIGEST_PATTERN = re.compile(r"^[0-9a-f]{64}$")


class InviteCode(RootValueObject[str]):
    """Plaintext invite code as typed by an applicant.

    Normalized on construction: surrounding whitespace removed and
    upper-cased, so "abc-123 " and "ABC-123" are the same code.
    Must be 4-128 characters once normalized.
    """

    @field_validator("root")
    @classmethod
    def normalize_code(cls, v: str) -> str:
        """Normalize and validate the code length."""
        normalized = v.strip().upper()
        if len(normalized) < 4 or len(normalized) > 128:
            raise ValueError("Invite code must be 4-128 characters")
        return normalized


class CodeDigest(RootValueObject[str]):
    """Keyed digest of an invite code.

    64 lowercase hex characters (HMAC-SHA256). This is the only form in
    which invite codes are stored.
    """

    @field_validator("root")
    @classmethod
    def validate_digest_format(cls, v: str) -> str:
        """Validate digest is lowercase hex of the right width."""
        if not _DIGEST_PATTERN.match(v):
            raise ValueError("Code digest must be 64 lowercase hex characters")
        return v


class CodePepper(ValueObject):
    """Secret key for invite code digests.

    Constructed once at startup from configuration and shared by
    reference. The secret is hidden from repr and logs.
    """

    secret: SecretStr

    @field_validator("secret")
    @classmethod
    def validate_not_blank(cls, v: SecretStr) -> SecretStr:
        """Reject empty or whitespace-only peppers."""
        if not v.get_secret_value().strip():
            raise ValueError("Pepper must not be blank")
        return v

    def key(self) -> bytes:
        """Return the raw key bytes for HMAC."""
        return self.secret.get_secret_value().encode("utf-8")


def normalize_email(email: str) -> str:
    """Normalize an email address for comparison and storage."""
    return email.strip().lower()
