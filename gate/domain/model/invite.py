"""Invite entity.

Invites gate account onboarding. Each invite is a single-use code that is
stored only as a keyed digest.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import Field, model_validator

from gate.domain.model.common import DomainModel
from gate.domain.value import AccountId, CodeDigest, InviteId, normalize_email

# Key in ``meta`` that binds an invite to one applicant email
BOUND_EMAIL_KEY = "email"


def is_usable_email(value: Any) -> bool:
    """Check that a bound email value is a non-blank string."""
    return isinstance(value, str) and bool(value.strip())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Invite(DomainModel):
    """Invite entity.

    Business rules:
    - The plaintext code is never stored, only ``code_hash``
    - ``used_at`` and ``used_by`` are set together or not at all
    - An invite is claimed at most once and never un-claimed
    - Invites are never deleted
    """

    id: InviteId
    code_hash: CodeDigest
    meta: dict[str, Any] = Field(default_factory=dict)
    expires_at: Optional[datetime] = None
    used_at: Optional[datetime] = None
    used_by: Optional[AccountId] = None
    created_by: Optional[AccountId] = None
    created_at: datetime = Field(default_factory=_utcnow)

    @model_validator(mode="after")
    def check_used_pair(self) -> "Invite":
        """Enforce that used_at and used_by are both set or both empty."""
        if (self.used_at is None) != (self.used_by is None):
            raise ValueError("used_at and used_by must be set together")
        return self

    @property
    def is_used(self) -> bool:
        return self.used_at is not None

    @property
    def is_email_bound(self) -> bool:
        """Whether ``meta`` carries an email binding, usable or not."""
        return self.meta.get(BOUND_EMAIL_KEY) is not None

    @property
    def bound_email(self) -> str | None:
        """Normalized email this invite is reserved for.

        None when unbound, and also when the stored binding is unusable
        (not a non-blank string); check ``is_email_bound`` to tell
        those apart.
        """
        email = self.meta.get(BOUND_EMAIL_KEY)
        if not is_usable_email(email):
            return None
        return normalize_email(email)

    def is_expired(self, now: datetime) -> bool:
        """Check expiry. An invite is expired from ``expires_at`` onwards."""
        return self.expires_at is not None and now >= self.expires_at
