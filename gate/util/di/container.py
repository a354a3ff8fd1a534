"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka

from gate.config import Settings
from gate.domain.service import load_code_pepper
from gate.util.di import PROVIDERS, get_provider


def check_startup_config(settings: Settings) -> None:
    """Fail fast on configuration the app cannot run without.

    Dishka builds dependencies lazily, so without this a missing pepper
    would only surface on the first redemption.

    Raises:
        ConfigurationError: If required configuration is missing
    """
    load_code_pepper(settings.invites)


def create_container() -> AsyncContainer:
    """Build production container (all prod implementations).

    Settings are loaded from environment variables automatically.

    Returns:
        Configured DI container with production providers

    Raises:
        ConfigurationError: If required configuration is missing
    """
    check_startup_config(Settings())

    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    # Include FastapiProvider for proper integration with FastAPI
    return make_async_container(*provider_instances, FastapiProvider())


def setup_di(app, container: AsyncContainer) -> None:
    """Setup dependency injection for FastAPI.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
