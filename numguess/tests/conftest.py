"""
Pytest fixtures for Numguess tests.
"""

import pytest

from numguess.engine_core import GuessSession, SecretGenerator, Session
from numguess.session import InMemorySessionStore
from numguess.api.service import GuessService


class ScriptedGenerator(SecretGenerator):
    """Generator that hands out predetermined secrets and counts draws."""

    def __init__(self, secrets):
        super().__init__()
        self._secrets = list(secrets)
        self.calls = 0

    def next(self) -> int:
        self.calls += 1
        return self._secrets.pop(0)


class FakeClock:
    """Manually advanced clock for expiry tests."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture
def scripted_generator():
    """Generator yielding 50, then 7, then 99."""
    return ScriptedGenerator([50, 7, 99])


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock) -> InMemorySessionStore:
    return InMemorySessionStore(ttl=60, clock=clock)


@pytest.fixture
def active_game(scripted_generator) -> GuessSession:
    """A game whose secret is 50 (next secrets: 7, 99)."""
    game = GuessSession(Session(), scripted_generator)
    game.ensure_initialized()
    return game


@pytest.fixture
def service(store, scripted_generator) -> GuessService:
    return GuessService(store=store, generator=scripted_generator)
