"""Credential repository interface."""

from abc import ABC, abstractmethod

from gate.domain.model.credential import Credential
from gate.domain.value import AccountId


class CredentialRepository(ABC):
    """Repository for Credential entity."""

    @abstractmethod
    async def find_by_account(self, account_id: AccountId) -> Credential | None:
        """Find the credential for an account.

        Args:
            account_id: Account ID

        Returns:
            The credential if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, credential: Credential) -> Credential:
        """Create or replace the credential for an account.

        Args:
            credential: The credential to store

        Returns:
            The stored credential
        """
        pass
