"""Field-level validation for the authentication forms.

``validate`` is pure: it reads the submitted values, applies every rule of
the screen's rule set and reports all failures at once. It never touches the
network or the session.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from authflow.schemas.forms import (
    FIELD_EMAIL,
    FIELD_SECRET,
    FIELD_SECRET_CONFIRMATION,
)
from authflow.validation.constants import (
    CONFIRMATION_MISMATCH,
    CONFIRMATION_REQUIRED,
    EMAIL_INVALID,
    EMAIL_PATTERN,
    EMAIL_REQUIRED,
    MIN_SECRET_LENGTH,
    SCREEN_FIELDS,
    SECRET_REQUIRED,
    SECRET_TOO_SHORT,
)


if TYPE_CHECKING:
    from authflow.schemas.enums import ScreenKind
    from authflow.schemas.forms import FieldErrors, FieldValues


def _check_email(values: FieldValues, _min_length: int) -> str | None:
    email = values.get(FIELD_EMAIL) or ""
    if not email:
        return EMAIL_REQUIRED
    if not EMAIL_PATTERN.fullmatch(email):
        return EMAIL_INVALID
    return None


def _check_secret(values: FieldValues, min_length: int) -> str | None:
    secret = values.get(FIELD_SECRET) or ""
    if not secret:
        return SECRET_REQUIRED
    if len(secret) < min_length:
        return SECRET_TOO_SHORT.format(min_length=min_length)
    return None


def _check_confirmation(values: FieldValues, _min_length: int) -> str | None:
    confirmation = values.get(FIELD_SECRET_CONFIRMATION) or ""
    if not confirmation:
        return CONFIRMATION_REQUIRED
    if confirmation != (values.get(FIELD_SECRET) or ""):
        return CONFIRMATION_MISMATCH
    return None


_RULES = {
    FIELD_EMAIL: _check_email,
    FIELD_SECRET: _check_secret,
    FIELD_SECRET_CONFIRMATION: _check_confirmation,
}


def validate(
    values: FieldValues,
    screen: ScreenKind,
    *,
    min_secret_length: int = MIN_SECRET_LENGTH,
) -> FieldErrors:
    """Validate form values against the rule set of ``screen``.

    Args:
        values: Raw field values. Missing fields count as empty.
        screen: Screen whose rule set applies.
        min_secret_length: Minimum password length.

    Returns:
        Mapping of field name to message for every failing field. An empty
        dict means the values may be submitted.
    """
    errors: FieldErrors = {}
    for field in SCREEN_FIELDS[screen]:
        message = _RULES[field](values, min_secret_length)
        if message is not None:
            errors[field] = message
    return errors
