"""Invite issuance domain service."""

from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from gate.domain.error import DuplicateCodeError, ValidationError
from gate.domain.model.invite import BOUND_EMAIL_KEY, Invite, is_usable_email
from gate.domain.repository import InviteRepository
from gate.domain.value import AccountId, InviteCode, InviteId
from gate.util.observability import redact_digest

from .base import Service
from .code_hasher import CodeHasher


class InviteService(Service):
    """Domain service for issuing and listing invites."""

    def __init__(
        self, invite_repository: InviteRepository, code_hasher: CodeHasher
    ) -> None:
        """Initialize invite service.

        Args:
            invite_repository: Invite repository
            code_hasher: Invite code hasher
        """
        self.invite_repository = invite_repository
        self.code_hasher = code_hasher

    async def issue_invite(
        self,
        raw_code: str,
        meta: dict[str, Any] | None = None,
        expires_at: datetime | None = None,
        created_by: AccountId | None = None,
    ) -> Invite:
        """Issue a new invite.

        Only the keyed digest of the code is stored.

        Args:
            raw_code: Plaintext code handed to the applicant
            meta: Free-form metadata; ``meta["email"]`` binds the invite
            expires_at: Optional expiry
            created_by: Issuing account

        Returns:
            Created invite

        Raises:
            ValidationError: If any input is malformed
            DuplicateCodeError: If the code was already issued
        """
        try:
            code = InviteCode(raw_code)
        except PydanticValidationError as e:
            raise ValidationError("Invite code must be 4-128 characters") from e

        meta = dict(meta or {})
        if BOUND_EMAIL_KEY in meta and not is_usable_email(meta[BOUND_EMAIL_KEY]):
            raise ValidationError("meta.email must be a non-blank string")

        if expires_at is not None and expires_at.tzinfo is None:
            raise ValidationError("expires_at must be timezone-aware")

        code_hash = self.code_hasher.hash(code.root)

        with logfire.span(
            "invite_service.issue_invite", code_hash=redact_digest(code_hash)
        ):
            invite = Invite(
                id=InviteId(uuid4()),
                code_hash=code_hash,
                meta=meta,
                expires_at=expires_at,
                created_by=created_by,
                created_at=datetime.now(timezone.utc),
            )

            try:
                saved = await self.invite_repository.create(invite)
            except DuplicateCodeError:
                logfire.warn(
                    "Invite code already issued", code_hash=redact_digest(code_hash)
                )
                raise

            logfire.info(
                "Invite issued",
                invite_id=str(saved.id),
                expires_at=saved.expires_at,
                email_bound=saved.is_email_bound,
            )
            return saved

    async def get_invite(self, invite_id: InviteId) -> Invite | None:
        """Get invite by ID.

        Args:
            invite_id: Invite ID

        Returns:
            Invite if found, None otherwise
        """
        with logfire.span("invite_service.get_invite", invite_id=str(invite_id)):
            return await self.invite_repository.find_by_id(invite_id)

    async def list_invites(
        self, used: bool | None = None, limit: int = 50, offset: int = 0
    ) -> list[Invite]:
        """List invites, newest first.

        Args:
            used: Optional used/unused filter
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of invites
        """
        with logfire.span(
            "invite_service.list_invites", used=used, limit=limit, offset=offset
        ):
            invites = await self.invite_repository.list_invites(used, limit, offset)
            logfire.info("Invites listed", count=len(invites))
            return invites

    async def count_invites(self, used: bool | None = None) -> int:
        """Count invites with an optional used/unused filter."""
        with logfire.span("invite_service.count_invites", used=used):
            return await self.invite_repository.count_invites(used)
