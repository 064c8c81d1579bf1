"""Unit tests for the auth flow lifespan."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from authflow.core.config import Settings
from authflow.core.lifespan import AuthFlows, auth_flow_lifespan
from authflow.flows.controller import SignInController
from authflow.gateway.exceptions import ConfigurationError
from authflow.schemas.enums import ScreenKind
from authflow.session.store import get_session_store


pytestmark = pytest.mark.unit


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Test-environment settings; APP_ENV also selects the YAML overrides."""
    monkeypatch.setenv("APP_ENV", "test")
    return Settings(IDENTITY_PROVIDER_API_KEY="key")


@pytest.fixture
def mock_gateway() -> MagicMock:
    gateway = MagicMock()
    gateway.initialize = AsyncMock()
    gateway.shutdown = AsyncMock()
    gateway.sign_in = AsyncMock()
    return gateway


class TestAuthFlowLifespan:
    """Tests for auth_flow_lifespan."""

    async def test_initializes_and_shuts_down(
        self,
        settings: Settings,
        mock_gateway: MagicMock,
    ) -> None:
        with patch("authflow.core.lifespan.setup_logging") as mock_setup:
            async with auth_flow_lifespan(settings, gateway=mock_gateway) as flows:
                assert isinstance(flows, AuthFlows)
                assert get_session_store() is flows.session_store
                mock_gateway.initialize.assert_awaited_once()

        mock_setup.assert_called_once_with(
            log_level="DEBUG",
            log_format="text",
            is_development=False,
        )
        mock_gateway.shutdown.assert_awaited_once()
        with pytest.raises(RuntimeError):
            get_session_store()

    async def test_controller_for_uses_shared_store(
        self,
        settings: Settings,
        mock_gateway: MagicMock,
    ) -> None:
        with patch("authflow.core.lifespan.setup_logging"):
            async with auth_flow_lifespan(settings, gateway=mock_gateway) as flows:
                controller = flows.controller_for(ScreenKind.SIGN_IN)

                assert isinstance(controller, SignInController)
                assert controller._session_store is flows.session_store

    async def test_shuts_down_on_error(
        self,
        settings: Settings,
        mock_gateway: MagicMock,
    ) -> None:
        with patch("authflow.core.lifespan.setup_logging"), pytest.raises(KeyError):
            async with auth_flow_lifespan(settings, gateway=mock_gateway):
                raise KeyError("boom")

        mock_gateway.shutdown.assert_awaited_once()

    async def test_builds_gateway_from_settings(self, settings: Settings) -> None:
        with (
            patch("authflow.core.lifespan.setup_logging"),
            patch("authflow.core.lifespan.create_auth_gateway") as mock_create,
        ):
            gateway = MagicMock()
            gateway.initialize = AsyncMock()
            gateway.shutdown = AsyncMock()
            mock_create.return_value = gateway

            async with auth_flow_lifespan(settings) as flows:
                assert flows.gateway is gateway

        mock_create.assert_called_once_with(settings)

    async def test_missing_api_key_fails_fast(self, settings: Settings) -> None:
        settings = settings.model_copy(update={"IDENTITY_PROVIDER_API_KEY": ""})

        with patch("authflow.core.lifespan.setup_logging"), pytest.raises(ConfigurationError):
            async with auth_flow_lifespan(settings):
                pass
