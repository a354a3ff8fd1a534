"""Get invite use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from gate.application.usecase.base import BaseUseCase
from gate.application.usecase.invite.list_invites import InviteSummary
from gate.domain.service import InviteService
from gate.domain.value import InviteId


class GetInviteRequest(BaseModel):
    """Get invite request."""

    invite_id: UUID


class GetInviteUseCase(BaseUseCase):
    """Use case for looking up one issued invite."""

    def __init__(self, invite_service: InviteService) -> None:
        """Initialize use case.

        Args:
            invite_service: Invite domain service
        """
        self.invite_service = invite_service

    async def execute(self, request: GetInviteRequest) -> Optional[InviteSummary]:
        """Get an invite by ID.

        The code is not part of the result; only its digest is stored.

        Args:
            request: Invite to look up

        Returns:
            Invite summary if found, None otherwise
        """
        invite = await self.invite_service.get_invite(InviteId(request.invite_id))
        if invite is None:
            return None
        return InviteSummary.from_invite(invite)
