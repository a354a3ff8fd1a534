"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from gate.interface.api.routes import health, invites
from gate.interface.error import register_error_handlers
from gate.util.di.container import create_container, setup_di
from gate.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function;
    scripts/start_app.py handles this.

    Args:
        container: DI container to use (defaults to the production container)

    Raises:
        ConfigurationError: If required configuration is missing
    """
    # Builds settings and checks the pepper before anything else
    container = container or create_container()

    app_instance = FastAPI(
        title="Gate API",
        description="Invite-gated onboarding: invite issuance and redemption",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    setup_di(app_instance, container)
    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(invites.router)

    return app_instance
