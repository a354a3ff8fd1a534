"""Account entity."""

from datetime import datetime

from gate.domain.model.common import DomainModel
from gate.domain.value import AccountId, InviteId


class Account(DomainModel):
    """Account provisioned from a redeemed invite.

    Only the fields onboarding needs; profile data lives elsewhere.
    """

    id: AccountId
    email: str
    invite_id: InviteId
    created_at: datetime
