"""Observability package (logging)."""

from authflow.observability.logging import (
    bind_context,
    clear_context,
    get_logger,
    mask_email,
    setup_logging,
)


__all__ = [
    "bind_context",
    "clear_context",
    "get_logger",
    "mask_email",
    "setup_logging",
]
