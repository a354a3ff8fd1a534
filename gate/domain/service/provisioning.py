"""Account provisioning for redeemed invites."""

from abc import ABC, abstractmethod
from datetime import datetime, timezone

import logfire

from gate.domain.error import ValidationError
from gate.domain.model import Account, Invite
from gate.domain.repository import AccountRepository
from gate.domain.value import AccountId, normalize_email

from .base import Service


class AccountProvisioner(ABC):
    """Creates the account behind a successful redemption."""

    @abstractmethod
    async def provision(
        self, account_id: AccountId, email: str, invite: Invite
    ) -> AccountId:
        """Create an account for a claimed invite.

        Args:
            account_id: ID the invite was claimed for
            email: Applicant email
            invite: The claimed invite

        Returns:
            Reference to the provisioned account
        """
        pass


class RepositoryAccountProvisioner(AccountProvisioner, Service):
    """Provisioner that records accounts in the account repository."""

    def __init__(self, account_repository: AccountRepository) -> None:
        self.account_repository = account_repository

    async def provision(
        self, account_id: AccountId, email: str, invite: Invite
    ) -> AccountId:
        with logfire.span(
            "account_provisioner.provision",
            account_id=str(account_id),
            invite_id=str(invite.id),
        ):
            normalized = normalize_email(email)
            if await self.account_repository.find_by_email(normalized):
                logfire.warn("Email already registered", account_id=str(account_id))
                raise ValidationError("Email is already registered")

            account = await self.account_repository.create(
                Account(
                    id=account_id,
                    email=normalized,
                    invite_id=invite.id,
                    created_at=datetime.now(timezone.utc),
                )
            )
            logfire.info("Account provisioned", account_id=str(account.id))
            return account.id
