"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container

from blog.config import Settings
from blog.util.di import PROVIDERS, get_provider
from blog.util.logging import setup_logging
from blog.util.observability import configure_logfire


def create_container(settings: Settings | None = None) -> AsyncContainer:
    """Build production container (all prod implementations).

    Configures logging and Logfire before any provider runs.

    Args:
        settings: Settings used for logging setup; loaded from the
            environment when omitted

    Returns:
        Configured DI container with production providers
    """
    settings = settings or Settings()
    setup_logging(settings)
    configure_logfire(settings)

    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*provider_instances)
