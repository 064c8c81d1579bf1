"""Startup and shutdown of the authentication core.

``auth_flow_lifespan`` configures logging, brings up the identity-provider
gateway and the process-wide session store, and tears both down on exit.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

from authflow.core.config import Settings, get_settings
from authflow.flows.factory import create_controller
from authflow.gateway.factory import create_auth_gateway
from authflow.navigation.delayed import DelayedNavigator
from authflow.observability.logging import get_logger, setup_logging
from authflow.session.store import initialize_session_store, shutdown_session_store


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from authflow.flows.controller import SubmissionController
    from authflow.gateway.firebase import FirebaseAuthGateway
    from authflow.navigation.protocol import Navigator
    from authflow.schemas.enums import ScreenKind
    from authflow.session.store import SessionStore


logger = get_logger(__name__)


@dataclass
class AuthFlows:
    """Running authentication core handed to the UI layer."""

    settings: Settings
    gateway: FirebaseAuthGateway
    session_store: SessionStore

    def controller_for(
        self,
        screen: ScreenKind,
        navigator: Navigator | None = None,
        delayed_navigator: DelayedNavigator | None = None,
    ) -> SubmissionController:
        """Create the controller for a newly mounted screen."""
        return create_controller(
            screen,
            self.gateway,
            navigator,
            session_store=self.session_store,
            delayed_navigator=delayed_navigator,
            settings=self.settings,
        )


@asynccontextmanager
async def auth_flow_lifespan(
    settings: Settings | None = None,
    gateway: FirebaseAuthGateway | None = None,
) -> AsyncGenerator[AuthFlows, None]:
    """Run the authentication core for the duration of the context.

    Args:
        settings: Optional settings override. If not provided, uses get_settings().
        gateway: Optional pre-built gateway (tests, shared HTTP clients).

    Raises:
        ConfigurationError: If no gateway is given and the API key is missing.
    """
    if settings is None:
        settings = get_settings()

    setup_logging(
        log_level=settings.logging.level,
        log_format=settings.logging.format,
        is_development=settings.is_development,
    )
    logger.info(
        "Starting auth flows",
        app_name=settings.app.name,
        environment=settings.APP_ENV,
    )

    if gateway is None:
        gateway = create_auth_gateway(settings)
    await gateway.initialize()
    store = initialize_session_store()

    try:
        yield AuthFlows(settings=settings, gateway=gateway, session_store=store)
    finally:
        shutdown_session_store()
        await gateway.shutdown()
        logger.info("Auth flows stopped")
