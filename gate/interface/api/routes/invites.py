"""Invite routes."""

import hmac
from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, Query, status

from gate.application.usecase.invite import (
    GetInviteRequest,
    GetInviteUseCase,
    InviteSummary,
    IssueInviteRequest,
    IssueInviteResponse,
    IssueInviteUseCase,
    ListInvitesRequest,
    ListInvitesResponse,
    ListInvitesUseCase,
    RedeemInviteRequest,
    RedeemInviteResponse,
    RedeemInviteUseCase,
)
from gate.config import InviteSettings

router = APIRouter(prefix="/invites", tags=["invites"], route_class=DishkaRoute)


def _require_issuer(settings: InviteSettings, issuer_key: str | None) -> None:
    """Check the issuer key header.

    Raises:
        HTTPException: If issuance is disabled or the key is wrong
    """
    if settings.issuer_api_key is None:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invite issuance is disabled",
        )
    expected = settings.issuer_api_key.get_secret_value().encode("utf-8")
    if not issuer_key or not hmac.compare_digest(
        issuer_key.encode("utf-8"), expected
    ):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid issuer key",
        )


@router.post(
    "", response_model=IssueInviteResponse, status_code=status.HTTP_201_CREATED
)
async def issue_invite(
    request: IssueInviteRequest,
    issue_invite_use_case: FromDishka[IssueInviteUseCase],
    invite_settings: FromDishka[InviteSettings],
    x_issuer_key: str | None = Header(default=None),
) -> IssueInviteResponse:
    """Issue an invite.

    The plaintext code is only ever returned here.

    Args:
        request: Code (optional), binding email, metadata and expiry
        issue_invite_use_case: Issue invite use case from DI
        invite_settings: Invite settings from DI
        x_issuer_key: Issuer API key header

    Returns:
        Created invite including its code
    """
    _require_issuer(invite_settings, x_issuer_key)
    return await issue_invite_use_case.execute(request)


@router.get("", response_model=ListInvitesResponse)
async def list_invites(
    list_invites_use_case: FromDishka[ListInvitesUseCase],
    invite_settings: FromDishka[InviteSettings],
    x_issuer_key: str | None = Header(default=None),
    used: bool | None = Query(default=None),
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListInvitesResponse:
    """List issued invites.

    Args:
        list_invites_use_case: List invites use case from DI
        invite_settings: Invite settings from DI
        x_issuer_key: Issuer API key header
        used: Optional used/unused filter
        limit: Maximum number of results (1-100)
        offset: Number of results to skip

    Returns:
        Page of invites
    """
    _require_issuer(invite_settings, x_issuer_key)
    return await list_invites_use_case.execute(
        ListInvitesRequest(used=used, limit=limit, offset=offset)
    )


@router.get("/{invite_id}", response_model=InviteSummary)
async def get_invite(
    invite_id: UUID,
    get_invite_use_case: FromDishka[GetInviteUseCase],
    invite_settings: FromDishka[InviteSettings],
    x_issuer_key: str | None = Header(default=None),
) -> InviteSummary:
    """Get one issued invite. The code itself is never returned.

    Args:
        invite_id: Invite UUID
        get_invite_use_case: Get invite use case from DI
        invite_settings: Invite settings from DI
        x_issuer_key: Issuer API key header

    Returns:
        Invite summary

    Raises:
        HTTPException: If the invite does not exist
    """
    _require_issuer(invite_settings, x_issuer_key)
    invite = await get_invite_use_case.execute(GetInviteRequest(invite_id=invite_id))
    if invite is None:
        logfire.warn("Invite not found", invite_id=str(invite_id))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Invite not found",
        )
    return invite


@router.post(
    "/redeem",
    response_model=RedeemInviteResponse,
    status_code=status.HTTP_201_CREATED,
)
async def redeem_invite(
    request: RedeemInviteRequest,
    redeem_invite_use_case: FromDishka[RedeemInviteUseCase],
) -> RedeemInviteResponse:
    """Redeem an invite code and create the applicant's account.

    Domain errors are rendered by the handlers in ``gate.interface.error``.

    Args:
        request: Code, email and password
        redeem_invite_use_case: Redeem invite use case from DI

    Returns:
        The new account reference
    """
    return await redeem_invite_use_case.execute(request)
