"""Domain layer DI providers."""

from dishka import Scope, provide

from gate.config import CredentialSettings
from gate.domain.repository import (
    AccountRepository,
    CredentialRepository,
    InviteRepository,
)
from gate.domain.service import (
    AccountProvisioner,
    CodeHasher,
    CredentialHasher,
    CredentialService,
    InviteService,
    RedemptionService,
    RepositoryAccountProvisioner,
)
from gate.domain.value import CodePepper
from gate.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Hashers are stateless and APP-scoped. Services are REQUEST-scoped to
    align with the repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_code_hasher(self, pepper: CodePepper) -> CodeHasher:
        """Provide invite code hasher."""
        return CodeHasher(pepper=pepper)

    @provide(scope=Scope.APP)
    def get_credential_hasher(self, settings: CredentialSettings) -> CredentialHasher:
        """Provide password hasher."""
        return CredentialHasher(settings=settings)

    @provide
    def get_account_provisioner(
        self, account_repository: AccountRepository
    ) -> AccountProvisioner:
        """Provide account provisioner."""
        return RepositoryAccountProvisioner(account_repository=account_repository)

    @provide
    def get_invite_service(
        self, invite_repository: InviteRepository, code_hasher: CodeHasher
    ) -> InviteService:
        """Provide invite domain service."""
        return InviteService(
            invite_repository=invite_repository, code_hasher=code_hasher
        )

    @provide
    def get_redemption_service(
        self,
        invite_repository: InviteRepository,
        code_hasher: CodeHasher,
        account_provisioner: AccountProvisioner,
    ) -> RedemptionService:
        """Provide redemption domain service."""
        return RedemptionService(
            invite_repository=invite_repository,
            code_hasher=code_hasher,
            account_provisioner=account_provisioner,
        )

    @provide
    def get_credential_service(
        self,
        credential_repository: CredentialRepository,
        credential_hasher: CredentialHasher,
    ) -> CredentialService:
        """Provide credential domain service."""
        return CredentialService(
            credential_repository=credential_repository,
            credential_hasher=credential_hasher,
        )
