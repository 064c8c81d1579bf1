"""Navigation and scheduling protocols."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable


if TYPE_CHECKING:
    from authflow.schemas.enums import Route


@runtime_checkable
class Navigator(Protocol):
    """Moves the app to another authentication screen."""

    def navigate(self, route: Route) -> None:
        """Show the screen registered under ``route``."""
        ...


class TimerHandle(Protocol):
    """Handle returned by ``Scheduler.call_later``."""

    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Source of one-shot timers.

    ``asyncio.AbstractEventLoop`` satisfies this protocol.
    """

    def call_later(
        self,
        delay: float,
        callback: Callable[..., Any],
        *args: Any,
    ) -> TimerHandle: ...
