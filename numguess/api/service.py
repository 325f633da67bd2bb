"""
API Service - Business logic layer between HTTP and the engine.

The service:
1. Resolves the caller's session (or creates one)
2. Runs the guessing state machine on it
3. Writes the session back to the store
4. Returns the outcome with its display message

This layer is framework-agnostic (can be used with FastAPI, Flask, a CLI, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass, field
import uuid

from .models import GuessResult
from .pages import message_for
from ..engine_core import GuessSession, SecretGenerator, Session
from ..session import SessionStore, InMemorySessionStore


@dataclass
class GuessService:
    """
    Main service for the guessing game.

    Usage:
        service = GuessService()
        result = service.submit_guess(cookie_value, form_value)
        # render result.message, issue a cookie if result.new_session
    """
    store: SessionStore = field(default_factory=InMemorySessionStore)
    generator: SecretGenerator = field(default_factory=SecretGenerator)

    def new_session_key(self) -> str:
        """Opaque, unguessable session key."""
        return uuid.uuid4().hex

    def submit_guess(self, session_key: str | None, raw_guess: str | None) -> GuessResult:
        """
        Evaluate one guess for the given session.

        Unknown or expired keys are never adopted; a fresh key is issued
        instead. Store errors propagate to the caller.
        """
        new_session = False
        if not session_key or self.store.get(session_key) is None:
            session_key = self.new_session_key()
            new_session = True

        with self.store.lock(session_key):
            session = self.store.get(session_key)
            if session is None:
                session = Session()

            game = GuessSession(session, self.generator)
            game.ensure_initialized()
            outcome = game.evaluate(raw_guess)

            self.store.set(session_key, session)

        return GuessResult(
            session_key=session_key,
            outcome=outcome,
            message=message_for(outcome),
            new_session=new_session,
        )
