"""Account repository interface."""

from abc import ABC, abstractmethod

from gate.domain.model.account import Account
from gate.domain.value import AccountId


class AccountRepository(ABC):
    """Repository for accounts provisioned through onboarding."""

    @abstractmethod
    async def find_by_id(self, account_id: AccountId) -> Account | None:
        """Find an account by ID."""
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Account | None:
        """Find an account by normalized email."""
        pass

    @abstractmethod
    async def create(self, account: Account) -> Account:
        """Store a new account.

        Raises:
            ValidationError: If the email is already registered
        """
        pass
