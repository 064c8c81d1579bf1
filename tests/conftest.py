"""Shared test fixtures for the authentication core tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from authflow.schemas.identity import SessionIdentity
from authflow.session.store import SessionStore, _state
from tests.fixtures.fakes import FakeScheduler, RecordingNavigator, StubGateway


@pytest.fixture
def identity() -> SessionIdentity:
    """Identity returned by the stub gateway."""
    return SessionIdentity(id="u1", email="test@example.com")


@pytest.fixture
def gateway(identity: SessionIdentity) -> StubGateway:
    """Gateway that answers immediately with ``identity``."""
    return StubGateway(identity=identity)


@pytest.fixture
def scheduler() -> FakeScheduler:
    """Simulated millisecond clock."""
    return FakeScheduler()


@pytest.fixture
def navigator() -> RecordingNavigator:
    """Navigator that records requested routes."""
    return RecordingNavigator()


@pytest.fixture
def session_store() -> SessionStore:
    """Fresh, signed-out session store."""
    return SessionStore()


@pytest.fixture(autouse=True)
def reset_global_session_store() -> Iterator[None]:
    """Keep the process-wide store from leaking between tests."""
    _state["store"] = None
    yield
    _state["store"] = None
