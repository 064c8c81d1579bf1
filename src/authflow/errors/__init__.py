"""Error translation package."""

from authflow.errors.translator import ErrorTranslation, translate


__all__ = ["ErrorTranslation", "translate"]
