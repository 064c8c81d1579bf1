"""Client-side authentication orchestration for sign-in, sign-up and password reset.

Usage:
    from authflow import ScreenKind, create_controller, validate

    controller = create_controller(ScreenKind.SIGN_IN, gateway, navigator)
    result = await controller.submit({"email": email, "secret": secret})
"""

from authflow.errors import ErrorTranslation, translate
from authflow.flows import (
    ResetRequestController,
    SignInController,
    SignUpController,
    SubmissionController,
    SubmissionState,
    SubmissionStatus,
    SubmitResult,
    create_controller,
)
from authflow.navigation import CancelHandle, DelayedNavigator, Navigator
from authflow.schemas import ErrorCategory, Route, ScreenKind, SessionIdentity
from authflow.session import SessionStore, get_session_store, sign_out
from authflow.validation import validate


__all__ = [
    "CancelHandle",
    "DelayedNavigator",
    "ErrorCategory",
    "ErrorTranslation",
    "Navigator",
    "ResetRequestController",
    "Route",
    "ScreenKind",
    "SessionIdentity",
    "SessionStore",
    "SignInController",
    "SignUpController",
    "SubmissionController",
    "SubmissionState",
    "SubmissionStatus",
    "SubmitResult",
    "create_controller",
    "get_session_store",
    "sign_out",
    "translate",
    "validate",
]
