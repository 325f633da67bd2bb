"""
Tests for GuessService.

Tests:
- Session creation and reuse across guesses
- Outcomes and messages
- Handling of unknown keys
- Store failures propagate
"""

import random

import pytest

from numguess.api.service import GuessService
from numguess.engine_core import Outcome, SecretGenerator, Session
from numguess.session import InMemorySessionStore, SessionStore


class TestGuessService:
    """Tests for GuessService."""

    def test_first_guess_creates_session(self, service, store):
        result = service.submit_guess(None, "1")

        assert result.new_session
        assert result.outcome == Outcome.TOO_LOW
        assert "too low" in result.message
        assert store.get(result.session_key).target == 50

    def test_session_reused_between_guesses(self, service, scripted_generator):
        first = service.submit_guess(None, "1")
        second = service.submit_guess(first.session_key, "100")

        assert not second.new_session
        assert second.session_key == first.session_key
        assert second.outcome == Outcome.TOO_HIGH
        assert scripted_generator.calls == 1

    def test_correct_guess_starts_new_round(self, service, store, scripted_generator):
        key = service.submit_guess(None, "1").session_key

        result = service.submit_guess(key, "50")

        assert result.outcome == Outcome.CORRECT
        assert "Congratulations" in result.message
        assert scripted_generator.calls == 2
        assert store.get(key).target == 7

    def test_invalid_guess(self, service, store):
        key = service.submit_guess(None, "1").session_key

        result = service.submit_guess(key, "abc")

        assert result.outcome == Outcome.INVALID
        assert "Invalid input" in result.message
        assert store.get(key).target == 50

    def test_unknown_key_is_replaced(self, service, store):
        """Client-chosen keys are never adopted."""
        result = service.submit_guess("made-up-key", "1")

        assert result.new_session
        assert result.session_key != "made-up-key"
        assert store.get("made-up-key") is None

    def test_expired_session_starts_over(self, service, store, clock):
        key = service.submit_guess(None, "1").session_key
        clock.advance(120)

        result = service.submit_guess(key, "50")

        assert result.new_session
        assert result.session_key != key
        # The old round is gone; the fresh session draws the next secret (7)
        assert result.outcome == Outcome.TOO_HIGH

    def test_existing_session_state_is_used(self, service, store):
        store.set("known", Session(target=42))

        result = service.submit_guess("known", "42")

        assert result.outcome == Outcome.CORRECT
        assert store.get("known").target == 50

    def test_session_keys_are_unique(self, service):
        keys = {service.new_session_key() for _ in range(100)}
        assert len(keys) == 100

    def test_store_failure_propagates(self):
        class DownStore(SessionStore):
            def get(self, key):
                raise ConnectionError("store unavailable")

            def set(self, key, session):
                raise ConnectionError("store unavailable")

        service = GuessService(store=DownStore())

        with pytest.raises(ConnectionError):
            service.submit_guess("abc", "42")


class RecordingStore(InMemorySessionStore):
    """Store noting whether the session's lock is held on each access."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.accesses = []

    def get(self, key):
        self.accesses.append(("get", self.lock(key).locked()))
        return super().get(key)

    def set(self, key, session):
        self.accesses.append(("set", self.lock(key).locked()))
        super().set(key, session)


class TestServiceLocking:
    """The read-compare-replace sequence runs under the session's lock."""

    def test_lock_held_for_get_and_set(self, clock, scripted_generator):
        store = RecordingStore(ttl=60, clock=clock)
        store.set("known", Session(target=42))
        store.accesses.clear()
        service = GuessService(store=store, generator=scripted_generator)

        service.submit_guess("known", "42")

        assert store.accesses[-2:] == [("get", True), ("set", True)]
        assert not store.lock("known").locked()

    def test_lock_held_for_new_session(self, clock, scripted_generator):
        store = RecordingStore(ttl=60, clock=clock)
        service = GuessService(store=store, generator=scripted_generator)

        result = service.submit_guess(None, "1")

        assert store.accesses == [("get", True), ("set", True)]
        assert not store.lock(result.session_key).locked()

    def test_held_lock_blocks_second_request(self, service, store):
        key = service.submit_guess(None, "1").session_key
        held = store.lock(key)
        held.acquire()
        try:
            store.delete(key)
            assert not store.lock(key).acquire(blocking=False)
        finally:
            held.release()


class TestCookielessTraffic:
    """Sessions abandoned by cookieless clients are freed after the TTL."""

    def test_abandoned_sessions_are_freed(self, service, store, clock):
        service.generator = SecretGenerator(random.Random(7))
        for _ in range(200):
            service.submit_guess(None, "1")
        clock.advance(10_000)

        for _ in range(5):
            service.submit_guess(None, "1")

        assert len(store) == 5
