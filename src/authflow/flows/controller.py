"""Per-screen submission controllers.

A controller owns one form's submission state machine::

    IDLE -> SUBMITTING -> SUCCEEDED | FAILED
    SUCCEEDED | FAILED -> IDLE  (on resubmit, or on field edit after FAILED)

``submit()`` validates the form, calls the identity provider once and
records the outcome. While a call is outstanding further submits are
ignored rather than queued. After ``teardown()`` results that arrive late
are dropped: no state change, no session write, no navigation.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any, ClassVar

from authflow.errors import messages
from authflow.errors.translator import translate
from authflow.flows.state import (
    TRANSITIONS,
    SubmissionState,
    SubmissionStatus,
    SubmitResult,
)
from authflow.gateway.exceptions import AuthGatewayError
from authflow.navigation.delayed import DelayedNavigator
from authflow.observability.logging import bind_context, get_logger, unbind_context
from authflow.schemas.enums import Route, ScreenKind
from authflow.schemas.forms import FIELD_EMAIL, FIELD_SECRET
from authflow.session.store import get_session_store
from authflow.validation.constants import MIN_SECRET_LENGTH
from authflow.validation.gate import validate


if TYPE_CHECKING:
    from authflow.errors.translator import ErrorTranslation
    from authflow.gateway.protocol import AuthGateway
    from authflow.navigation.delayed import CancelHandle
    from authflow.navigation.protocol import Navigator
    from authflow.schemas.forms import FieldErrors, FieldValues
    from authflow.schemas.identity import SessionIdentity
    from authflow.session.store import SessionStore


logger = get_logger(__name__)

RESET_REDIRECT_DELAY_MS = 3000


class SubmissionController:
    """Base submission state machine for one screen instance.

    Subclasses set ``screen`` and implement ``_call_gateway`` and
    ``_on_success``.
    """

    screen: ClassVar[ScreenKind]

    def __init__(
        self,
        gateway: AuthGateway,
        *,
        min_secret_length: int = MIN_SECRET_LENGTH,
    ) -> None:
        self._gateway = gateway
        self._min_secret_length = min_secret_length
        self._state = SubmissionState.idle()
        self._alive = True

    # -------------------------------------------------------------------------
    # Caller-visible state
    # -------------------------------------------------------------------------

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def busy(self) -> bool:
        """True only while the provider call is outstanding."""
        return self._state.status is SubmissionStatus.SUBMITTING

    @property
    def alive(self) -> bool:
        return self._alive

    @property
    def can_submit(self) -> bool:
        """Whether the submit affordance should be enabled."""
        return self._alive and not self.busy

    @property
    def message(self) -> str | None:
        """The single screen-level message to show, if any."""
        if self._state.status is SubmissionStatus.FAILED:
            return self._state.message
        return None

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def validate(self, values: FieldValues) -> FieldErrors:
        """Run this screen's validation rules without submitting."""
        return validate(values, self.screen, min_secret_length=self._min_secret_length)

    def field_edited(self) -> None:
        """Note a user edit; clears a previous failure."""
        if self._alive and self._state.status is SubmissionStatus.FAILED:
            self._transition(SubmissionState.idle())

    async def submit(self, values: FieldValues) -> SubmitResult:
        """Validate ``values`` and, if valid, call the identity provider.

        Args:
            values: Current form values.

        Returns:
            Whether the submission was attempted, plus any validation
            errors. Provider failures are reported through ``state``.
        """
        if not self.can_submit:
            logger.debug(
                "Submit ignored",
                screen=self.screen.value,
                status=self._state.status.value,
                alive=self._alive,
            )
            return SubmitResult(accepted=False)

        field_errors = self.validate(values)
        if field_errors:
            return SubmitResult(accepted=False, field_errors=field_errors)

        if self._state.status is not SubmissionStatus.IDLE:
            self._transition(SubmissionState.idle())
        self._transition(SubmissionState.submitting())

        bind_context(screen=self.screen.value)
        try:
            outcome = await self._call_gateway(values)
        except AuthGatewayError as e:
            self._finish_failed(translate(self.screen, e.code), e.code)
        except asyncio.CancelledError:
            logger.warning("Submission cancelled", screen=self.screen.value)
            self._finish_failed(translate(self.screen, None), None)
            raise
        except Exception:
            logger.exception("Unexpected identity provider failure")
            self._finish_failed(translate(self.screen, None), None)
        else:
            if self._discard_if_dead():
                return SubmitResult(accepted=True)
            self._transition(SubmissionState.succeeded())
            self._on_success(outcome)
        finally:
            unbind_context("screen")

        return SubmitResult(accepted=True)

    def teardown(self) -> None:
        """Detach from the screen. Late provider results are dropped."""
        if not self._alive:
            return
        self._alive = False
        logger.debug("Controller torn down", screen=self.screen.value)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _finish_failed(self, translation: ErrorTranslation, code: str | None) -> None:
        if self._discard_if_dead():
            return
        logger.info(
            "Submission failed",
            provider_code=code,
            category=translation.category.value,
        )
        self._transition(
            SubmissionState.failed(translation.category, translation.message)
        )

    def _discard_if_dead(self) -> bool:
        if self._alive:
            return False
        logger.debug("Discarding result for torn-down screen", screen=self.screen.value)
        return True

    def _transition(self, new_state: SubmissionState) -> None:
        current = self._state.status
        if new_state.status not in TRANSITIONS[current]:
            msg = f"Illegal submission transition {current} -> {new_state.status}"
            raise RuntimeError(msg)
        logger.debug(
            "Submission state change",
            screen=self.screen.value,
            from_status=current.value,
            to_status=new_state.status.value,
        )
        self._state = new_state

    async def _call_gateway(self, values: FieldValues) -> Any:
        raise NotImplementedError

    def _on_success(self, outcome: Any) -> None:
        raise NotImplementedError


class _SessionWritingController(SubmissionController):
    """Writes the returned identity into the session store on success."""

    def __init__(
        self,
        gateway: AuthGateway,
        session_store: SessionStore | None = None,
        *,
        min_secret_length: int = MIN_SECRET_LENGTH,
    ) -> None:
        super().__init__(gateway, min_secret_length=min_secret_length)
        self._session_store = session_store or get_session_store()

    def _on_success(self, outcome: SessionIdentity) -> None:
        self._session_store.set(outcome)


class SignInController(_SessionWritingController):
    """Sign-in form. Success establishes the session."""

    screen = ScreenKind.SIGN_IN

    async def _call_gateway(self, values: FieldValues) -> SessionIdentity:
        return await self._gateway.sign_in(values[FIELD_EMAIL], values[FIELD_SECRET])


class SignUpController(_SessionWritingController):
    """Account creation form. Success establishes the session."""

    screen = ScreenKind.SIGN_UP

    async def _call_gateway(self, values: FieldValues) -> SessionIdentity:
        return await self._gateway.sign_up(values[FIELD_EMAIL], values[FIELD_SECRET])


class ResetRequestController(SubmissionController):
    """Password-reset-request form.

    On success the session is left alone, the confirmation message is shown,
    submit stays disabled for the rest of the screen's life and the sign-in
    screen is opened after ``redirect_delay_ms``.
    """

    screen = ScreenKind.RESET_REQUEST

    def __init__(
        self,
        gateway: AuthGateway,
        navigator: Navigator,
        delayed_navigator: DelayedNavigator | None = None,
        *,
        redirect_delay_ms: int = RESET_REDIRECT_DELAY_MS,
        min_secret_length: int = MIN_SECRET_LENGTH,
    ) -> None:
        super().__init__(gateway, min_secret_length=min_secret_length)
        self._navigator = navigator
        self._delayed_navigator = delayed_navigator or DelayedNavigator()
        self._redirect_delay_ms = redirect_delay_ms
        self._redirect: CancelHandle | None = None

    @property
    def can_submit(self) -> bool:
        return super().can_submit and self._state.status is not SubmissionStatus.SUCCEEDED

    @property
    def message(self) -> str | None:
        if self._state.status is SubmissionStatus.SUCCEEDED:
            return messages.RESET_EMAIL_SENT
        return super().message

    @property
    def redirect(self) -> CancelHandle | None:
        """Handle of the pending redirect to sign-in, if any."""
        return self._redirect

    async def _call_gateway(self, values: FieldValues) -> None:
        await self._gateway.send_password_reset(values[FIELD_EMAIL])

    def _on_success(self, outcome: None) -> None:
        if self._redirect is not None:
            self._delayed_navigator.cancel(self._redirect)
        self._redirect = self._delayed_navigator.schedule(
            self._navigate_to_sign_in,
            self._redirect_delay_ms,
        )

    def _navigate_to_sign_in(self) -> None:
        if not self._alive:
            return
        logger.info("Redirecting to sign-in after reset request")
        self._navigator.navigate(Route.SIGN_IN)

    def teardown(self) -> None:
        if self._redirect is not None:
            self._delayed_navigator.cancel(self._redirect)
        super().teardown()
