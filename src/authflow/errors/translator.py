"""Translate identity-provider error codes into user-facing failures.

One table per screen. The same provider code intentionally yields different
outcomes depending on the screen:

- sign-in folds ``user-not-found``, ``wrong-password`` and
  ``invalid-credential`` into one generic ``INVALID_CREDENTIALS`` message so
  a failed attempt never tells whether the email is registered;
- reset-request reports ``user-not-found`` as ``NOT_REGISTERED`` because the
  user has to know whether a reset email went out.

Codes missing from a screen's table fall back to ``UNKNOWN`` with that
screen's generic retry message. Raw provider text is never surfaced.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from authflow.errors import messages
from authflow.schemas.enums import ErrorCategory, ScreenKind


PROVIDER_CODE_PREFIX: Final[str] = "auth/"


@dataclass(frozen=True, slots=True)
class ErrorTranslation:
    """Category and message shown for a failed submission."""

    category: ErrorCategory
    message: str


def _entry(category: ErrorCategory, message: str) -> ErrorTranslation:
    return ErrorTranslation(category=category, message=message)


_SIGN_IN_INVALID = _entry(ErrorCategory.INVALID_CREDENTIALS, messages.SIGN_IN_FAILED)
_INVALID_FORMAT = _entry(ErrorCategory.INVALID_FORMAT, messages.INVALID_EMAIL)
_NETWORK = _entry(ErrorCategory.NETWORK_UNAVAILABLE, messages.NETWORK_UNAVAILABLE)

TRANSLATION_TABLE: Final[dict[ScreenKind, dict[str, ErrorTranslation]]] = {
    ScreenKind.SIGN_IN: {
        "invalid-credential": _SIGN_IN_INVALID,
        "wrong-password": _SIGN_IN_INVALID,
        "user-not-found": _SIGN_IN_INVALID,
        "invalid-email": _INVALID_FORMAT,
        "user-disabled": _entry(
            ErrorCategory.ACCOUNT_DISABLED, messages.SIGN_IN_ACCOUNT_DISABLED
        ),
        "too-many-requests": _entry(
            ErrorCategory.RATE_LIMITED, messages.SIGN_IN_RATE_LIMITED
        ),
        "network-request-failed": _NETWORK,
    },
    ScreenKind.SIGN_UP: {
        "email-already-in-use": _entry(
            ErrorCategory.ALREADY_REGISTERED, messages.SIGN_UP_ALREADY_REGISTERED
        ),
        "invalid-email": _INVALID_FORMAT,
        "weak-password": _entry(ErrorCategory.WEAK_SECRET, messages.SIGN_UP_WEAK_SECRET),
        "network-request-failed": _NETWORK,
        "operation-not-allowed": _entry(
            ErrorCategory.UNKNOWN, messages.SIGN_UP_OPERATION_NOT_ALLOWED
        ),
    },
    ScreenKind.RESET_REQUEST: {
        "user-not-found": _entry(
            ErrorCategory.NOT_REGISTERED, messages.RESET_NOT_REGISTERED
        ),
        "invalid-email": _INVALID_FORMAT,
        "too-many-requests": _entry(
            ErrorCategory.RATE_LIMITED, messages.RESET_RATE_LIMITED
        ),
        "network-request-failed": _NETWORK,
    },
}

FALLBACK_TRANSLATIONS: Final[dict[ScreenKind, ErrorTranslation]] = {
    ScreenKind.SIGN_IN: _entry(ErrorCategory.UNKNOWN, messages.SIGN_IN_UNKNOWN),
    ScreenKind.SIGN_UP: _entry(ErrorCategory.UNKNOWN, messages.SIGN_UP_UNKNOWN),
    ScreenKind.RESET_REQUEST: _entry(ErrorCategory.UNKNOWN, messages.RESET_UNKNOWN),
}


def normalize_code(provider_code: str | None) -> str:
    """Strip the SDK ``auth/`` prefix and surrounding whitespace."""
    code = (provider_code or "").strip().lower()
    return code.removeprefix(PROVIDER_CODE_PREFIX)


def translate(screen: ScreenKind, provider_code: str | None) -> ErrorTranslation:
    """Map a provider error code to the failure shown on ``screen``.

    Args:
        screen: Screen the failed submission came from.
        provider_code: Opaque provider code, bare (``user-not-found``) or
            prefixed (``auth/user-not-found``). ``None`` counts as unknown.

    Returns:
        The category and message to surface.
    """
    return TRANSLATION_TABLE[screen].get(
        normalize_code(provider_code),
        FALLBACK_TRANSLATIONS[screen],
    )
