"""Validation rules and messages for the authentication forms."""

from __future__ import annotations

import re
from typing import Final

from authflow.schemas.enums import ScreenKind
from authflow.schemas.forms import (
    FIELD_EMAIL,
    FIELD_SECRET,
    FIELD_SECRET_CONFIRMATION,
)


MIN_SECRET_LENGTH: Final[int] = 6

# local@domain where the domain has at least one dot-separated label after
# the first one.
EMAIL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?)+$"
)

# Fields checked per screen, in display order.
SCREEN_FIELDS: Final[dict[ScreenKind, tuple[str, ...]]] = {
    ScreenKind.SIGN_IN: (FIELD_EMAIL, FIELD_SECRET),
    ScreenKind.SIGN_UP: (FIELD_EMAIL, FIELD_SECRET, FIELD_SECRET_CONFIRMATION),
    ScreenKind.RESET_REQUEST: (FIELD_EMAIL,),
}


# =============================================================================
# Messages
# =============================================================================

EMAIL_REQUIRED: Final[str] = "Email is a required field"
EMAIL_INVALID: Final[str] = "Email must be a valid email"
SECRET_REQUIRED: Final[str] = "Password is a required field"
SECRET_TOO_SHORT: Final[str] = "Password must be at least {min_length} characters"
CONFIRMATION_REQUIRED: Final[str] = "Confirm Password is a required field"
CONFIRMATION_MISMATCH: Final[str] = "Confirm Password must match password."
