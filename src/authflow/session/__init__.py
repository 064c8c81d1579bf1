"""Session identity store."""

from authflow.session.store import (
    SessionStore,
    get_session_store,
    initialize_session_store,
    shutdown_session_store,
    sign_out,
)


__all__ = [
    "SessionStore",
    "get_session_store",
    "initialize_session_store",
    "shutdown_session_store",
    "sign_out",
]
