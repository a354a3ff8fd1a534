"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from gate.config import CredentialSettings, InviteSettings, Settings
from gate.domain.service import load_code_pepper
from gate.domain.value import CodePepper
from gate.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_invite_settings(self, settings: Settings) -> InviteSettings:
        """Provide invite settings."""
        return settings.invites

    @provide(scope=Scope.APP)
    def provide_credential_settings(self, settings: Settings) -> CredentialSettings:
        """Provide credential settings."""
        return settings.credentials

    @provide(scope=Scope.APP)
    def provide_code_pepper(self, invite_settings: InviteSettings) -> CodePepper:
        """Provide the invite code pepper, built once per container."""
        return load_code_pepper(invite_settings)
