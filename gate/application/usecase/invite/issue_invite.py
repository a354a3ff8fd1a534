"""Issue invite use case."""

from datetime import datetime, timedelta, timezone
from typing import Any

import logfire
from pydantic import BaseModel, Field, model_validator

from gate.application.usecase.base import BaseUseCase
from gate.config import Settings
from gate.domain.model.invite import BOUND_EMAIL_KEY
from gate.domain.service import CodeHasher, InviteService
from gate.domain.value import AccountId


class IssueInviteRequest(BaseModel):
    """Request to issue an invite.

    ``code`` is generated when omitted. ``expires_at`` wins over
    ``ttl_days``; with neither, the configured default TTL applies.
    """

    code: str | None = Field(default=None, min_length=4, max_length=128)
    email: str | None = Field(default=None, max_length=255)
    meta: dict[str, Any] = Field(default_factory=dict)
    expires_at: datetime | None = None
    ttl_days: int | None = Field(default=None, ge=1)
    never_expires: bool = False
    created_by: AccountId | None = None

    @model_validator(mode="after")
    def check_expiry_options(self) -> "IssueInviteRequest":
        if self.never_expires and (self.expires_at or self.ttl_days):
            raise ValueError("never_expires cannot be combined with an expiry")
        return self


class IssueInviteResponse(BaseModel):
    """Response after issuing an invite.

    ``code`` is the only time the plaintext code is available; it is not
    stored anywhere.
    """

    invite_id: str
    code: str
    expires_at: datetime | None
    email: str | None
    created_at: datetime


class IssueInviteUseCase(BaseUseCase):
    """Use case for issuing a single invite."""

    def __init__(self, invite_service: InviteService, settings: Settings) -> None:
        """Initialize use case.

        Args:
            invite_service: Invite domain service
            settings: Application settings
        """
        self.invite_service = invite_service
        self.settings = settings

    async def execute(self, request: IssueInviteRequest) -> IssueInviteResponse:
        """Issue an invite.

        Args:
            request: Issue invite request

        Returns:
            Created invite with its plaintext code

        Raises:
            ValidationError: If the code is malformed
            DuplicateCodeError: If the code was already issued
        """
        now = datetime.now(timezone.utc)
        code = request.code or CodeHasher.generate_code()

        meta = dict(request.meta)
        if request.email:
            meta[BOUND_EMAIL_KEY] = request.email

        with logfire.span("issue_invite", generated_code=request.code is None):
            invite = await self.invite_service.issue_invite(
                raw_code=code,
                meta=meta,
                expires_at=self._resolve_expiry(request, now),
                created_by=request.created_by,
            )

        return IssueInviteResponse(
            invite_id=str(invite.id),
            code=CodeHasher.normalize(code),
            expires_at=invite.expires_at,
            email=invite.bound_email,
            created_at=invite.created_at,
        )

    def _resolve_expiry(
        self, request: IssueInviteRequest, now: datetime
    ) -> datetime | None:
        if request.never_expires:
            return None
        if request.expires_at is not None:
            if request.expires_at.tzinfo is None:
                return request.expires_at.replace(tzinfo=timezone.utc)
            return request.expires_at
        ttl_days = request.ttl_days or self.settings.invites.default_ttl_days
        if ttl_days is None:
            return None
        return now + timedelta(days=ttl_days)
