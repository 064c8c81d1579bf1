"""Gateway factory."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from authflow.core.config import get_settings
from authflow.gateway.exceptions import ConfigurationError
from authflow.gateway.firebase import FirebaseAuthGateway
from authflow.observability.logging import get_logger


if TYPE_CHECKING:
    from authflow.core.config import Settings


logger = get_logger(__name__)


def create_auth_gateway(
    settings: Settings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> FirebaseAuthGateway:
    """Create the identity-provider gateway from configuration.

    Args:
        settings: Application settings. If None, loaded from environment.
        http_client: Optional shared HTTP client.

    Raises:
        ConfigurationError: If ``IDENTITY_PROVIDER_API_KEY`` is not set.
    """
    if settings is None:
        settings = get_settings()

    if not settings.IDENTITY_PROVIDER_API_KEY:
        msg = "IDENTITY_PROVIDER_API_KEY is required to reach the identity provider"
        raise ConfigurationError(msg)

    logger.info(
        "Creating auth gateway",
        base_url=settings.identity_provider.base_url,
    )
    return FirebaseAuthGateway(
        api_key=settings.IDENTITY_PROVIDER_API_KEY,
        base_url=settings.identity_provider.base_url,
        timeout=settings.identity_provider.timeout,
        http_client=http_client,
    )
