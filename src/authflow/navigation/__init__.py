"""Navigation contracts and delayed navigation."""

from authflow.navigation.delayed import CancelHandle, DelayedNavigator
from authflow.navigation.protocol import Navigator, Scheduler


__all__ = [
    "CancelHandle",
    "DelayedNavigator",
    "Navigator",
    "Scheduler",
]
