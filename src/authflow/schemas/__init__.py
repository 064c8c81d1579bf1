"""Shared schemas: enums, identity model and form types."""

from authflow.schemas.enums import ErrorCategory, Route, ScreenKind
from authflow.schemas.forms import (
    FIELD_EMAIL,
    FIELD_SECRET,
    FIELD_SECRET_CONFIRMATION,
    FieldErrors,
    FieldValues,
)
from authflow.schemas.identity import SessionIdentity


__all__ = [
    "FIELD_EMAIL",
    "FIELD_SECRET",
    "FIELD_SECRET_CONFIRMATION",
    "ErrorCategory",
    "FieldErrors",
    "FieldValues",
    "Route",
    "ScreenKind",
    "SessionIdentity",
]
