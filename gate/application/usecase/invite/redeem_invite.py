"""Redeem invite use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field, field_validator

from gate.application.usecase.base import BaseUseCase
from gate.domain.service import CredentialService, RedemptionService
from gate.domain.service.credential_service import (
    PASSWORD_MAX_LENGTH,
    PASSWORD_MIN_LENGTH,
)


class RedeemInviteRequest(BaseModel):
    """Redeem invite request.

    The password is validated here, before redemption, so a bad password
    never burns an invite.
    """

    code: str = Field(max_length=256)
    email: str = Field(min_length=3, max_length=255)
    password: str = Field(
        min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH
    )

    @field_validator("email")
    @classmethod
    def validate_email_not_blank(cls, v: str) -> str:
        """Reject emails that are only whitespace."""
        if not v.strip():
            raise ValueError("Email must not be blank")
        return v


class RedeemInviteResponse(BaseModel):
    """Redeem invite response."""

    account_id: str


class RedeemInviteUseCase(BaseUseCase):
    """Use case for onboarding an applicant with an invite code.

    Redeems the code, then stores the new account's password.
    """

    def __init__(
        self,
        redemption_service: RedemptionService,
        credential_service: CredentialService,
    ) -> None:
        """Initialize redeem invite use case.

        Args:
            redemption_service: Invite redemption domain service
            credential_service: Credential domain service
        """
        self.redemption_service = redemption_service
        self.credential_service = credential_service

    async def execute(
        self, request: RedeemInviteRequest, now: datetime | None = None
    ) -> RedeemInviteResponse:
        """Redeem an invite and set the account password.

        Args:
            request: Redemption request
            now: Redemption time (defaults to current UTC time)

        Returns:
            Provisioned account reference

        Raises:
            InvalidCodeError: Unknown, malformed or already used code
            ExpiredError: The invite has expired
            EmailMismatchError: The invite is bound to another email
        """
        with logfire.span("redeem_invite.execute"):
            account_id = await self.redemption_service.redeem(
                request.code, request.email, now
            )
            await self.credential_service.set_password(
                account_id, request.password, now
            )
            logfire.info("Applicant onboarded", account_id=str(account_id))
            return RedeemInviteResponse(account_id=str(account_id))
