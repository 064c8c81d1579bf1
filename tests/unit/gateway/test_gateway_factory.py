"""Unit tests for the gateway factory."""

from __future__ import annotations

import pytest

from authflow.core.config import Settings
from authflow.gateway.exceptions import ConfigurationError
from authflow.gateway.factory import create_auth_gateway
from authflow.gateway.firebase import FirebaseAuthGateway


pytestmark = pytest.mark.unit


class TestCreateAuthGateway:
    """Tests for create_auth_gateway."""

    def test_requires_api_key(self) -> None:
        settings = Settings(IDENTITY_PROVIDER_API_KEY="")

        with pytest.raises(ConfigurationError, match="IDENTITY_PROVIDER_API_KEY"):
            create_auth_gateway(settings)

    def test_builds_gateway_from_settings(self) -> None:
        settings = Settings(
            IDENTITY_PROVIDER_API_KEY="key",
            identity_provider={"base_url": "https://idp.test/v1", "timeout": 3.0},
        )

        gateway = create_auth_gateway(settings)

        assert isinstance(gateway, FirebaseAuthGateway)
        assert gateway.endpoint_url("accounts:signUp") == "https://idp.test/v1/accounts:signUp"
