"""Credential entity."""

from datetime import datetime

from gate.domain.model.common import DomainModel
from gate.domain.value import AccountId


class Credential(DomainModel):
    """Password credential for an account.

    Replaced wholesale on every password change, never partially updated.
    ``password_hash`` is a self-describing Argon2 PHC string.
    """

    account_id: AccountId
    password_hash: str
    updated_at: datetime
