from __future__ import annotations

import pytest

from tinyemitter import EventEmitter


@pytest.fixture
def emitter() -> EventEmitter:
    """Emitter with default options (meta-events enabled)."""
    return EventEmitter()


@pytest.fixture
def quiet_emitter() -> EventEmitter:
    """Emitter that does not raise newListener/removeListener events."""
    return EventEmitter({"emitEventEmitterEvents": False})


@pytest.fixture
def calls() -> list:
    return []
