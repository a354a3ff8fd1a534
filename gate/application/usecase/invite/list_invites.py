"""List invites use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from gate.application.usecase.base import BaseUseCase
from gate.domain.model import Invite
from gate.domain.service import InviteService


class ListInvitesRequest(BaseModel):
    """List invites request."""

    used: bool | None = None
    limit: int = Field(default=50, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class InviteSummary(BaseModel):
    """Invite as shown to issuers.

    Deliberately omits the code hash.
    """

    invite_id: str
    email: str | None
    expires_at: datetime | None
    used_at: datetime | None
    used_by: str | None
    created_at: datetime

    @classmethod
    def from_invite(cls, invite: Invite) -> "InviteSummary":
        return cls(
            invite_id=str(invite.id),
            email=invite.bound_email,
            expires_at=invite.expires_at,
            used_at=invite.used_at,
            used_by=str(invite.used_by) if invite.used_by else None,
            created_at=invite.created_at,
        )


class ListInvitesResponse(BaseModel):
    """List invites response."""

    invites: list[InviteSummary]
    total: int


class ListInvitesUseCase(BaseUseCase):
    """Use case for listing issued invites."""

    def __init__(self, invite_service: InviteService) -> None:
        """Initialize use case.

        Args:
            invite_service: Invite domain service
        """
        self.invite_service = invite_service

    async def execute(self, request: ListInvitesRequest) -> ListInvitesResponse:
        """List invites.

        Args:
            request: Filter and pagination

        Returns:
            Page of invites and total count for the filter
        """
        invites = await self.invite_service.list_invites(
            request.used, request.limit, request.offset
        )
        total = await self.invite_service.count_invites(request.used)

        return ListInvitesResponse(
            invites=[InviteSummary.from_invite(invite) for invite in invites],
            total=total,
        )
