"""Unit tests for create_controller."""

from __future__ import annotations

import pytest

from authflow.core.config import Settings
from authflow.flows.controller import (
    ResetRequestController,
    SignInController,
    SignUpController,
)
from authflow.flows.factory import create_controller
from authflow.navigation.delayed import DelayedNavigator
from authflow.schemas.enums import Route, ScreenKind
from authflow.session.store import SessionStore
from tests.fixtures.fakes import FakeScheduler, RecordingNavigator, StubGateway


pytestmark = pytest.mark.unit


class TestCreateController:
    """Tests for the controller factory."""

    @pytest.mark.parametrize(
        ("screen", "expected"),
        [
            (ScreenKind.SIGN_IN, SignInController),
            (ScreenKind.SIGN_UP, SignUpController),
            (ScreenKind.RESET_REQUEST, ResetRequestController),
        ],
    )
    def test_builds_matching_controller(
        self,
        screen: ScreenKind,
        expected: type,
        gateway: StubGateway,
        navigator: RecordingNavigator,
        session_store: SessionStore,
    ) -> None:
        controller = create_controller(
            screen,
            gateway,
            navigator,
            session_store=session_store,
        )

        assert isinstance(controller, expected)
        assert controller.screen is screen

    def test_reset_request_requires_navigator(self, gateway: StubGateway) -> None:
        with pytest.raises(ValueError, match="navigator"):
            create_controller(ScreenKind.RESET_REQUEST, gateway)

    def test_controllers_are_independent(
        self,
        gateway: StubGateway,
        session_store: SessionStore,
    ) -> None:
        first = create_controller(ScreenKind.SIGN_IN, gateway, session_store=session_store)
        second = create_controller(ScreenKind.SIGN_IN, gateway, session_store=session_store)

        first.teardown()

        assert second.alive is True

    async def test_settings_tune_flows(
        self,
        gateway: StubGateway,
        navigator: RecordingNavigator,
        scheduler: FakeScheduler,
    ) -> None:
        settings = Settings(flows={"reset_redirect_delay_ms": 1200, "min_secret_length": 10})
        controller = create_controller(
            ScreenKind.RESET_REQUEST,
            gateway,
            navigator,
            delayed_navigator=DelayedNavigator(scheduler),
            settings=settings,
        )

        await controller.submit({"email": "test@example.com"})
        scheduler.advance(1200)

        assert navigator.routes == [Route.SIGN_IN]

    def test_settings_tune_secret_length(
        self,
        gateway: StubGateway,
        session_store: SessionStore,
    ) -> None:
        settings = Settings(flows={"min_secret_length": 10})
        controller = create_controller(
            ScreenKind.SIGN_IN,
            gateway,
            session_store=session_store,
            settings=settings,
        )

        errors = controller.validate({"email": "test@example.com", "secret": "password1"})

        assert errors == {"secret": "Password must be at least 10 characters"}
