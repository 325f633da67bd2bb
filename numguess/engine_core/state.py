"""
Game State - Value types for one player's guessing session.

Design principles:
- The Session holds only the current secret (plus timestamps the store uses)
- Phase is derived from the secret, never stored separately
- Outcomes are a closed set of tags, rendered elsewhere
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import time


class SessionPhase(Enum):
    """Phases of the guessing state machine."""
    UNINITIALIZED = "uninitialized"  # No secret drawn yet
    ACTIVE = "active"  # A secret is waiting to be guessed


class Outcome(str, Enum):
    """Result of evaluating one guess."""
    TOO_LOW = "too_low"
    TOO_HIGH = "too_high"
    CORRECT = "correct"
    INVALID = "invalid"


@dataclass
class Session:
    """
    Per-user game state.

    Owned by a session store and borrowed by GuessSession for the
    duration of one evaluation. Only GuessSession writes `target`.
    """
    target: int | None = None

    # Bookkeeping for the store (idle expiry); game logic ignores these
    created_at: float = field(default_factory=time.time)
    last_accessed: float = field(default_factory=time.time)

    @property
    def phase(self) -> SessionPhase:
        if self.target is None:
            return SessionPhase.UNINITIALIZED
        return SessionPhase.ACTIVE

    def touch(self, now: float | None = None):
        """Record an access for idle-expiry purposes."""
        self.last_accessed = time.time() if now is None else now
