"""Form validation package."""

from authflow.validation.gate import validate


__all__ = ["validate"]
