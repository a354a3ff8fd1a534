"""In-memory account repository for testing."""

from typing import Optional

from gate.domain.error import ValidationError
from gate.domain.model import Account
from gate.domain.repository import AccountRepository
from gate.domain.value import AccountId


class InMemoryAccountRepository(AccountRepository):
    """In-memory implementation of AccountRepository for testing."""

    def __init__(self) -> None:
        self._accounts: dict[AccountId, Account] = {}

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID."""
        return self._accounts.get(account_id)

    async def find_by_email(self, email: str) -> Optional[Account]:
        """Find an account by normalized email."""
        for account in self._accounts.values():
            if account.email == email:
                return account
        return None

    async def create(self, account: Account) -> Account:
        """Store a new account.

        Raises:
            ValidationError: If the email is already registered
        """
        if await self.find_by_email(account.email):
            raise ValidationError("Email is already registered")
        self._accounts[account.id] = account
        return account
