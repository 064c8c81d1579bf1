"""Enumeration types shared across the authentication flows."""

from __future__ import annotations

from enum import StrEnum


class ScreenKind(StrEnum):
    """Authentication screen a form belongs to.

    Selects the validation rule set and the error translation policy.
    """

    SIGN_IN = "sign-in"
    SIGN_UP = "sign-up"
    RESET_REQUEST = "reset-request"


class Route(StrEnum):
    """Navigation targets reachable from the authentication screens."""

    SIGN_IN = "SignIn"
    SIGN_UP = "SignUp"
    RESET_REQUEST = "ResetRequest"


class ErrorCategory(StrEnum):
    """User-facing classification of a failed submission."""

    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    NOT_REGISTERED = "NOT_REGISTERED"
    ALREADY_REGISTERED = "ALREADY_REGISTERED"
    WEAK_SECRET = "WEAK_SECRET"
    RATE_LIMITED = "RATE_LIMITED"
    NETWORK_UNAVAILABLE = "NETWORK_UNAVAILABLE"
    ACCOUNT_DISABLED = "ACCOUNT_DISABLED"
    INVALID_FORMAT = "INVALID_FORMAT"
    UNKNOWN = "UNKNOWN"
