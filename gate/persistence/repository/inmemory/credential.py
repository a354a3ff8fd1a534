"""In-memory credential repository for testing."""

from typing import Optional

from gate.domain.model import Credential
from gate.domain.repository import CredentialRepository
from gate.domain.value import AccountId


class InMemoryCredentialRepository(CredentialRepository):
    """In-memory implementation of CredentialRepository for testing."""

    def __init__(self) -> None:
        self._credentials: dict[AccountId, Credential] = {}

    async def find_by_account(self, account_id: AccountId) -> Optional[Credential]:
        """Find the credential for an account."""
        return self._credentials.get(account_id)

    async def save(self, credential: Credential) -> Credential:
        """Create or replace the credential for an account."""
        self._credentials[credential.account_id] = credential
        return credential
