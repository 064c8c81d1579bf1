"""Process-wide holder of the signed-in identity.

Writers: the sign-in/sign-up controllers on success, the external sign-out
trigger (``sign_out``) and whatever restores a persisted session at startup.
Everything else only reads or subscribes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from authflow.observability.logging import get_logger, mask_email


if TYPE_CHECKING:
    from collections.abc import Callable

    from authflow.schemas.identity import SessionIdentity

    SessionListener = Callable[[SessionIdentity | None], None]


logger = get_logger(__name__)


class SessionStore:
    """In-memory session identity with change notification.

    Starts signed out. Reads are synchronous and always reflect the latest
    ``set``. Listeners run synchronously, in subscription order, whenever
    the stored identity changes. A listener that raises is logged and the
    rest are still notified. Nothing is persisted.
    """

    def __init__(self) -> None:
        self._identity: SessionIdentity | None = None
        self._listeners: list[SessionListener] = []

    def get(self) -> SessionIdentity | None:
        """Return the current identity, or None when signed out."""
        return self._identity

    def set(self, identity: SessionIdentity | None) -> None:
        """Replace the current identity and notify listeners on change."""
        if identity == self._identity:
            return
        self._identity = identity
        if identity is None:
            logger.info("Session cleared")
        else:
            logger.info(
                "Session established",
                user_id=identity.id,
                email=mask_email(identity.email),
            )
        for listener in list(self._listeners):
            try:
                listener(identity)
            except Exception:
                logger.exception("Session listener failed", listener=repr(listener))

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register ``listener`` for identity changes.

        Returns:
            Callable that removes the listener. Calling it twice is harmless.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe


# Store state container (avoids global statement for mutation)
_state: dict[str, SessionStore | None] = {"store": None}


def initialize_session_store() -> SessionStore:
    """Create the process-wide store if needed and return it."""
    store = _state["store"]
    if store is None:
        store = SessionStore()
        _state["store"] = store
        logger.info("Session store initialized")
    return store


def get_session_store() -> SessionStore:
    """Return the process-wide store.

    Raises:
        RuntimeError: If ``initialize_session_store()`` has not been called.
    """
    store = _state["store"]
    if store is None:
        msg = "Session store not initialized. Call initialize_session_store() during startup."
        raise RuntimeError(msg)
    return store


def shutdown_session_store() -> None:
    """Clear and drop the process-wide store."""
    store = _state["store"]
    if store is not None:
        store.set(None)
        _state["store"] = None
        logger.info("Session store shutdown")


def sign_out(store: SessionStore | None = None) -> None:
    """Explicit sign-out trigger: clear the session identity."""
    (store or get_session_store()).set(None)
