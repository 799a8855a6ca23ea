"""Pytest fixtures for emitter tests."""

import pytest

from emitter.lib.events import Emitter


class Recorder:
    """Callable listener that records every payload it receives."""

    def __init__(self, name: str = "recorder", calls: list | None = None):
        self.name = name
        # Shared call logs let tests check ordering across listeners
        self.calls = calls if calls is not None else []
        self.payloads: list = []

    def __call__(self, payload):
        self.payloads.append(payload)
        self.calls.append((self.name, payload))

    @property
    def call_count(self) -> int:
        return len(self.payloads)


@pytest.fixture
def emitter():
    """Create an empty Emitter."""
    return Emitter()


@pytest.fixture
def recorder():
    """Create a single recording listener."""
    return Recorder()


@pytest.fixture
def make_recorder():
    """Factory for recording listeners that share one call log."""
    calls: list = []

    def _make(name: str) -> Recorder:
        return Recorder(name, calls)

    _make.calls = calls
    return _make
