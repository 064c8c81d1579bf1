"""Cancellable one-shot delayed actions.

Used by the reset-request flow to move back to the sign-in screen a few
seconds after the reset email went out. Every pending action must be
cancelled when its screen goes away; otherwise the callback would navigate
on behalf of a screen that no longer exists.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from authflow.observability.logging import get_logger


if TYPE_CHECKING:
    from collections.abc import Callable

    from authflow.navigation.protocol import Scheduler, TimerHandle


logger = get_logger(__name__)


class CancelHandle:
    """Handle for a scheduled action.

    The action runs at most once. After ``cancel()`` it never runs.
    """

    def __init__(self, action: Callable[[], None], delay_ms: int) -> None:
        self._action = action
        self.delay_ms = delay_ms
        self._timer: TimerHandle | None = None
        self._cancelled = False
        self._fired = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def fired(self) -> bool:
        return self._fired

    @property
    def pending(self) -> bool:
        """True until the action fires or is cancelled."""
        return not (self._cancelled or self._fired)

    def cancel(self) -> bool:
        """Cancel the action.

        Returns:
            True if the action was still pending, False otherwise.
        """
        if not self.pending:
            return False
        self._cancelled = True
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        return True

    def _attach(self, timer: TimerHandle) -> None:
        self._timer = timer

    def _fire(self) -> None:
        if not self.pending:
            return
        self._fired = True
        self._timer = None
        self._action()


class DelayedNavigator:
    """Schedules one-shot actions after a delay given in milliseconds."""

    def __init__(self, scheduler: Scheduler | None = None) -> None:
        """Initialize the navigator.

        Args:
            scheduler: Timer source. Defaults to the running event loop,
                looked up at scheduling time.
        """
        self._scheduler = scheduler
        self._pending: set[CancelHandle] = set()

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def schedule(self, action: Callable[[], None], delay_ms: int) -> CancelHandle:
        """Run ``action`` once, no earlier than ``delay_ms`` from now.

        Raises:
            ValueError: If ``delay_ms`` is negative.
        """
        if delay_ms < 0:
            msg = f"delay_ms must be >= 0, got {delay_ms}"
            raise ValueError(msg)

        scheduler = self._scheduler or asyncio.get_running_loop()
        handle = CancelHandle(action, delay_ms)

        def _run() -> None:
            self._pending.discard(handle)
            handle._fire()  # noqa: SLF001

        handle._attach(scheduler.call_later(delay_ms / 1000, _run))  # noqa: SLF001
        self._pending.add(handle)
        logger.debug("Delayed action scheduled", delay_ms=delay_ms)
        return handle

    def cancel(self, handle: CancelHandle) -> None:
        """Cancel a scheduled action. Safe to call more than once."""
        self._pending.discard(handle)
        if handle.cancel():
            logger.debug("Delayed action cancelled", delay_ms=handle.delay_ms)

    def cancel_all(self) -> None:
        """Cancel every action that has not fired yet."""
        for handle in list(self._pending):
            self.cancel(handle)
