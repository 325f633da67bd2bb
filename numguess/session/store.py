"""
Session Store - Maps session keys to Session values.

The game only needs two operations from a store:
    get(key) -> Session | None
    set(key, session)

InMemorySessionStore adds what a servlet container's session manager
would provide: idle expiry and a lock per session so that
read-compare-replace on one session never interleaves. A lock is kept
for as long as someone holds it, even if its session is removed.

Errors raised by a store are not caught by callers.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
import logging
import threading
import time

from ..engine_core.state import Session

logger = logging.getLogger(__name__)

# Seconds of inactivity before a session is dropped (30 minutes)
DEFAULT_SESSION_TTL = 1800


class SessionStore(ABC):
    """Interface for session storage."""

    @abstractmethod
    def get(self, key: str) -> Session | None:
        """Return the session for `key`, or None if unknown or expired."""

    @abstractmethod
    def set(self, key: str, session: Session) -> None:
        """Associate `session` with `key`."""

    def lock(self, key: str) -> threading.Lock:
        """
        Lock guarding one session.

        The base implementation hands out a fresh lock, which is only
        correct for stores that serialise access themselves.
        """
        return threading.Lock()


class InMemorySessionStore(SessionStore):
    """
    Process-local session store.

    No persistence - sessions live in a dict and disappear with the
    process or after `ttl` seconds without access.
    """

    def __init__(self, ttl: float = DEFAULT_SESSION_TTL, clock=time.time):
        if ttl <= 0:
            raise ValueError(f"Session TTL must be positive, got {ttl}")
        self.ttl = ttl
        self._clock = clock
        self._sessions: dict[str, Session] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, key: str) -> bool:
        return key in self._sessions

    def get(self, key: str) -> Session | None:
        now = self._clock()
        with self._guard:
            session = self._sessions.get(key)
            if session is None:
                return None
            if self._is_expired(session, now):
                self._evict(key)
                return None
            session.touch(now)
            return session

    def set(self, key: str, session: Session) -> None:
        now = self._clock()
        session.touch(now)
        with self._guard:
            if key not in self._sessions:
                # Every new key sweeps idle sessions, so abandoned ones cannot pile up
                self._sweep(now)
                logger.info("Session created: %s", _short(key))
            self._sessions[key] = session

    def delete(self, key: str) -> bool:
        """Remove a session. Returns True if it existed."""
        with self._guard:
            if key not in self._sessions:
                return False
            self._evict(key)
            return True

    def lock(self, key: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = self._locks[key] = threading.Lock()
            return lock

    def cleanup_expired(self) -> int:
        """
        Drop every session idle for longer than the TTL.

        Also runs whenever a new key is stored; returns how many were removed.
        """
        with self._guard:
            return self._sweep(self._clock())

    def _sweep(self, now: float) -> int:
        # Caller holds self._guard
        expired = [
            key for key, session in self._sessions.items()
            if self._is_expired(session, now)
        ]
        for key in expired:
            self._evict(key)

        # Locks that were held when their session went away
        orphaned = [
            key for key, lock in self._locks.items()
            if key not in self._sessions and not lock.locked()
        ]
        for key in orphaned:
            del self._locks[key]
        return len(expired)

    def _is_expired(self, session: Session, now: float) -> bool:
        return now - session.last_accessed > self.ttl

    def _evict(self, key: str):
        # Caller holds self._guard. A held lock stays so later callers queue on it.
        self._sessions.pop(key, None)
        lock = self._locks.get(key)
        if lock is not None and not lock.locked():
            del self._locks[key]
        logger.info("Session expired or removed: %s", _short(key))


def _short(key: str) -> str:
    """Key prefix, safe to log."""
    return f"{key[:8]}..."
