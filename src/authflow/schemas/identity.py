"""Signed-in identity model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SessionIdentity(BaseModel):
    """Identity of the currently signed-in user.

    Attributes:
        id: Provider-assigned user identifier.
        email: Email address the user signed in with.
    """

    id: str = Field(..., min_length=1, description="Provider user identifier")
    email: str = Field(..., description="Account email address")

    model_config = {"frozen": True}
