"""Credential domain service."""

import asyncio
from datetime import datetime, timezone

import logfire
from pydantic import BaseModel

from gate.domain.error import FormatError, ValidationError
from gate.domain.model import Credential
from gate.domain.repository import CredentialRepository
from gate.domain.value import AccountId

from .base import Service
from .credential_hasher import CredentialHasher

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 200


class PasswordCheck(BaseModel):
    """Outcome of a password verification.

    ``reset_required`` means the stored hash is unreadable and the account
    must go through a password reset; it is not a wrong-password result.
    """

    valid: bool
    rehashed: bool = False
    reset_required: bool = False


class CredentialService(Service):
    """Stores and verifies account passwords.

    Hashing is CPU and memory bound, so it runs in a worker thread to keep
    the event loop responsive.
    """

    def __init__(
        self,
        credential_repository: CredentialRepository,
        credential_hasher: CredentialHasher,
    ) -> None:
        """Initialize credential service.

        Args:
            credential_repository: Credential repository
            credential_hasher: Password hasher
        """
        self.credential_repository = credential_repository
        self.credential_hasher = credential_hasher

    async def set_password(
        self, account_id: AccountId, password: str, now: datetime | None = None
    ) -> Credential:
        """Hash and store a password, replacing any previous credential.

        Args:
            account_id: Account ID
            password: New plaintext password
            now: Update time (defaults to current UTC time)

        Returns:
            Stored credential

        Raises:
            ValidationError: If the password length is out of bounds
        """
        if not PASSWORD_MIN_LENGTH <= len(password) <= PASSWORD_MAX_LENGTH:
            raise ValidationError(
                f"Password must be {PASSWORD_MIN_LENGTH}-{PASSWORD_MAX_LENGTH} characters"
            )

        with logfire.span(
            "credential_service.set_password", account_id=str(account_id)
        ):
            password_hash = await asyncio.to_thread(
                self.credential_hasher.hash, password
            )
            credential = Credential(
                account_id=account_id,
                password_hash=password_hash,
                updated_at=now or datetime.now(timezone.utc),
            )
            saved = await self.credential_repository.save(credential)
            logfire.info("Password set", account_id=str(account_id))
            return saved

    async def verify_password(
        self, account_id: AccountId, password: str
    ) -> PasswordCheck:
        """Verify a password, upgrading the stored hash when outdated.

        Args:
            account_id: Account ID
            password: Candidate plaintext password

        Returns:
            Verification outcome
        """
        with logfire.span(
            "credential_service.verify_password", account_id=str(account_id)
        ):
            credential = await self.credential_repository.find_by_account(account_id)
            if credential is None:
                logfire.info("No credential for account", account_id=str(account_id))
                return PasswordCheck(valid=False)

            try:
                valid = await asyncio.to_thread(
                    self.credential_hasher.verify, credential.password_hash, password
                )
            except FormatError as e:
                logfire.warn(
                    "Stored password hash unreadable, reset required",
                    account_id=str(account_id),
                    error=str(e),
                )
                return PasswordCheck(valid=False, reset_required=True)

            if not valid:
                return PasswordCheck(valid=False)

            if not self.credential_hasher.needs_rehash(credential.password_hash):
                return PasswordCheck(valid=True)

            await self.set_password(account_id, password)
            logfire.info("Password hash upgraded", account_id=str(account_id))
            return PasswordCheck(valid=True, rehashed=True)
