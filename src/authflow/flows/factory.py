"""Build the controller that matches a screen."""

from __future__ import annotations

from typing import TYPE_CHECKING

from authflow.flows.controller import (
    ResetRequestController,
    SignInController,
    SignUpController,
)
from authflow.schemas.enums import ScreenKind


if TYPE_CHECKING:
    from authflow.core.config import Settings
    from authflow.flows.controller import SubmissionController
    from authflow.gateway.protocol import AuthGateway
    from authflow.navigation.delayed import DelayedNavigator
    from authflow.navigation.protocol import Navigator
    from authflow.session.store import SessionStore


def create_controller(
    screen: ScreenKind,
    gateway: AuthGateway,
    navigator: Navigator | None = None,
    *,
    session_store: SessionStore | None = None,
    delayed_navigator: DelayedNavigator | None = None,
    settings: Settings | None = None,
) -> SubmissionController:
    """Create a fresh controller for one mounted screen.

    Args:
        screen: Which form is being mounted.
        gateway: Identity-provider gateway.
        navigator: Required for the reset-request screen.
        session_store: Store written on sign-in/sign-up success. Defaults to
            the process-wide store.
        delayed_navigator: Timer source for the reset redirect.
        settings: Supplies ``flows`` tuning; code defaults apply when None.

    Raises:
        ValueError: If a reset-request controller is requested without a
            navigator.
    """
    tuning: dict[str, int] = {}
    redirect: dict[str, int] = {}
    if settings is not None:
        tuning["min_secret_length"] = settings.flows.min_secret_length
        redirect["redirect_delay_ms"] = settings.flows.reset_redirect_delay_ms

    if screen is ScreenKind.SIGN_IN:
        return SignInController(gateway, session_store, **tuning)
    if screen is ScreenKind.SIGN_UP:
        return SignUpController(gateway, session_store, **tuning)

    if navigator is None:
        msg = "A navigator is required for the reset-request screen"
        raise ValueError(msg)
    return ResetRequestController(
        gateway,
        navigator,
        delayed_navigator,
        **tuning,
        **redirect,
    )
