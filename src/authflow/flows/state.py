"""Submission state machine values."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from authflow.schemas.enums import ErrorCategory
    from authflow.schemas.forms import FieldErrors


class SubmissionStatus(StrEnum):
    """Phases of a form submission."""

    IDLE = "IDLE"
    SUBMITTING = "SUBMITTING"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"


@dataclass(frozen=True, slots=True)
class SubmissionState:
    """Current phase plus, for FAILED only, the category and message."""

    status: SubmissionStatus
    category: ErrorCategory | None = None
    message: str | None = None

    @classmethod
    def idle(cls) -> SubmissionState:
        return cls(SubmissionStatus.IDLE)

    @classmethod
    def submitting(cls) -> SubmissionState:
        return cls(SubmissionStatus.SUBMITTING)

    @classmethod
    def succeeded(cls) -> SubmissionState:
        return cls(SubmissionStatus.SUCCEEDED)

    @classmethod
    def failed(cls, category: ErrorCategory, message: str) -> SubmissionState:
        return cls(SubmissionStatus.FAILED, category=category, message=message)


# Allowed transitions; SUCCEEDED/FAILED go back through IDLE on resubmit.
TRANSITIONS: dict[SubmissionStatus, frozenset[SubmissionStatus]] = {
    SubmissionStatus.IDLE: frozenset({SubmissionStatus.SUBMITTING}),
    SubmissionStatus.SUBMITTING: frozenset(
        {SubmissionStatus.SUCCEEDED, SubmissionStatus.FAILED}
    ),
    SubmissionStatus.SUCCEEDED: frozenset({SubmissionStatus.IDLE}),
    SubmissionStatus.FAILED: frozenset({SubmissionStatus.IDLE}),
}


@dataclass(frozen=True, slots=True)
class SubmitResult:
    """Outcome of a ``submit()`` call.

    Attributes:
        accepted: False when the call was ignored (already submitting,
            screen torn down, or reset already sent) or failed validation.
        field_errors: Validation errors; empty when validation passed or
            did not run.
    """

    accepted: bool
    field_errors: FieldErrors = field(default_factory=dict)
