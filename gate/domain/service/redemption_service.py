"""Invite redemption domain service."""

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from gate.domain.error import (
    AlreadyUsedError,
    DomainError,
    EmailMismatchError,
    ExpiredError,
    InvalidCodeError,
    NotFoundError,
    ValidationError,
)
from gate.domain.repository import InviteRepository
from gate.domain.value import AccountId, InviteCode, normalize_email
from gate.util.observability import redact_digest

from .base import Service
from .code_hasher import CodeHasher
from .provisioning import AccountProvisioner

# Internal outcomes applicants must not be able to tell apart.
# Malformed code, unknown digest, already-used invite and a lost claim
# race all surface as InvalidCodeError.
REDEMPTION_ERROR_MAP: dict[type[Exception], type[DomainError]] = {
    PydanticValidationError: InvalidCodeError,
    NotFoundError: InvalidCodeError,
    AlreadyUsedError: InvalidCodeError,
}


@contextmanager
def collapse_redemption_errors() -> Iterator[None]:
    """Translate internal redemption failures to their public error."""
    try:
        yield
    except tuple(REDEMPTION_ERROR_MAP) as e:
        public = next(
            target
            for source, target in REDEMPTION_ERROR_MAP.items()
            if isinstance(e, source)
        )
        logfire.info(
            "Redemption rejected",
            reason=type(e).__name__,
            public_error=public.__name__,
        )
        raise public() from None


class RedemptionService(Service):
    """Redeems invite codes, at most once per invite."""

    def __init__(
        self,
        invite_repository: InviteRepository,
        code_hasher: CodeHasher,
        account_provisioner: AccountProvisioner,
    ) -> None:
        """Initialize redemption service.

        Args:
            invite_repository: Invite repository
            code_hasher: Invite code hasher
            account_provisioner: Creates the account for a claimed invite
        """
        self.invite_repository = invite_repository
        self.code_hasher = code_hasher
        self.account_provisioner = account_provisioner

    async def redeem(
        self, raw_code: str, email: str, now: datetime | None = None
    ) -> AccountId:
        """Redeem an invite code for an email address.

        Checks run in order: lookup, expiry, email binding, claim. Expiry
        and email binding are checked before anything is written, so an
        expired or mismatched invite stays unclaimed.

        Args:
            raw_code: Code as entered by the applicant
            email: Applicant email
            now: Redemption time (defaults to current UTC time)

        Returns:
            Reference to the provisioned account

        Raises:
            InvalidCodeError: Unknown, malformed or already used code
            ExpiredError: The invite has expired
            EmailMismatchError: The invite is bound to another email
            ValidationError: If ``now`` is naive or the email is blank
        """
        if not email.strip():
            raise ValidationError("email must not be blank")
        if now is None:
            now = datetime.now(timezone.utc)
        elif now.tzinfo is None:
            raise ValidationError("now must be timezone-aware")

        with logfire.span("redemption_service.redeem"):
            with collapse_redemption_errors():
                code = InviteCode(raw_code)
                code_hash = self.code_hasher.hash(code.root)
                invite = await self.invite_repository.find_by_hash(code_hash)
                if invite is None:
                    raise NotFoundError("Invite", redact_digest(code_hash))
                if invite.is_used:
                    raise AlreadyUsedError(str(invite.id))

            if invite.is_expired(now):
                logfire.info("Invite expired", invite_id=str(invite.id))
                raise ExpiredError()

            # An unusable binding compares as None and never matches
            if invite.is_email_bound and invite.bound_email != normalize_email(
                email
            ):
                logfire.info("Invite email mismatch", invite_id=str(invite.id))
                raise EmailMismatchError()

            account_id = AccountId(uuid4())
            with collapse_redemption_errors():
                claimed = await self.invite_repository.claim(
                    invite.id, account_id, now
                )

            logfire.info(
                "Invite claimed",
                invite_id=str(claimed.id),
                account_id=str(account_id),
            )
            return await self.account_provisioner.provision(
                account_id, email, claimed
            )
