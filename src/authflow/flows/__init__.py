"""Submission controllers for the authentication screens."""

from authflow.flows.controller import (
    ResetRequestController,
    SignInController,
    SignUpController,
    SubmissionController,
)
from authflow.flows.factory import create_controller
from authflow.flows.state import SubmissionState, SubmissionStatus, SubmitResult


__all__ = [
    "ResetRequestController",
    "SignInController",
    "SignUpController",
    "SubmissionController",
    "SubmissionState",
    "SubmissionStatus",
    "SubmitResult",
    "create_controller",
]
