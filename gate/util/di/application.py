"""Application layer DI providers."""

from dishka import Scope, provide

from gate.application.usecase.invite import (
    GetInviteUseCase,
    IssueInviteUseCase,
    ListInvitesUseCase,
    RedeemInviteUseCase,
)
from gate.config import Settings
from gate.domain.service import CredentialService, InviteService, RedemptionService
from gate.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_issue_invite_use_case(
        self, invite_service: InviteService, settings: Settings
    ) -> IssueInviteUseCase:
        """Provide issue invite use case."""
        return IssueInviteUseCase(invite_service=invite_service, settings=settings)

    @provide(scope=Scope.REQUEST)
    def get_redeem_invite_use_case(
        self,
        redemption_service: RedemptionService,
        credential_service: CredentialService,
    ) -> RedeemInviteUseCase:
        """Provide redeem invite use case."""
        return RedeemInviteUseCase(
            redemption_service=redemption_service,
            credential_service=credential_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_invite_use_case(
        self, invite_service: InviteService
    ) -> GetInviteUseCase:
        """Provide get invite use case."""
        return GetInviteUseCase(invite_service=invite_service)

    @provide(scope=Scope.REQUEST)
    def get_list_invites_use_case(
        self, invite_service: InviteService
    ) -> ListInvitesUseCase:
        """Provide list invites use case."""
        return ListInvitesUseCase(invite_service=invite_service)
