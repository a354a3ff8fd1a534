"""Invite use cases."""

from gate.application.usecase.invite.get_invite import (
    GetInviteRequest,
    GetInviteUseCase,
)
from gate.application.usecase.invite.issue_invite import (
    IssueInviteRequest,
    IssueInviteResponse,
    IssueInviteUseCase,
)
from gate.application.usecase.invite.list_invites import (
    InviteSummary,
    ListInvitesRequest,
    ListInvitesResponse,
    ListInvitesUseCase,
)
from gate.application.usecase.invite.redeem_invite import (
    RedeemInviteRequest,
    RedeemInviteResponse,
    RedeemInviteUseCase,
)

__all__ = [
    "GetInviteRequest",
    "GetInviteUseCase",
    "InviteSummary",
    "IssueInviteRequest",
    "IssueInviteResponse",
    "IssueInviteUseCase",
    "ListInvitesRequest",
    "ListInvitesResponse",
    "ListInvitesUseCase",
    "RedeemInviteRequest",
    "RedeemInviteResponse",
    "RedeemInviteUseCase",
]
