"""Form field names and value/error containers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final, TypeAlias


FIELD_EMAIL: Final[str] = "email"
FIELD_SECRET: Final[str] = "secret"
FIELD_SECRET_CONFIRMATION: Final[str] = "secret_confirmation"

# Raw input owned by the active screen, keyed by field name.
FieldValues: TypeAlias = Mapping[str, str]

# Field name -> message. Empty means the form is valid.
FieldErrors: TypeAlias = dict[str, str]
