"""Shared test data builders."""

import os
from datetime import datetime, timedelta, timezone
from uuid import uuid4

from gate.config import CredentialSettings
from gate.domain.model import Invite
from gate.domain.service import CodeHasher
from gate.domain.value import InviteId

TEST_PEPPER = os.environ["INVITES__CODE_PEPPER"]
ISSUER_KEY = os.environ["INVITES__ISSUER_API_KEY"]

# Minimum Argon2id costs, fast enough for unit tests
FAST_CREDENTIALS = CredentialSettings(
    time_cost=1, memory_cost=1024, parallelism=1, hash_len=32, salt_len=16
)


def make_invite(
    code_hasher: CodeHasher,
    code: str = "ABC-123",
    expires_in: timedelta | None = timedelta(hours=1),
    email: str | None = None,
) -> Invite:
    """Build an unused invite for a plaintext code.

    Args:
        code_hasher: Hasher used to digest the code
        code: Plaintext code
        expires_in: Lifetime from now, None for no expiry
        email: Optional email to bind the invite to

    Returns:
        Invite ready to store
    """
    now = datetime.now(timezone.utc)
    return Invite(
        id=InviteId(uuid4()),
        code_hash=code_hasher.hash(code),
        meta={"email": email} if email else {},
        expires_at=now + expires_in if expires_in is not None else None,
        created_at=now,
    )
