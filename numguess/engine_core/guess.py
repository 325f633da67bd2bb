"""
Guess Session - The per-session guessing state machine.

States:
    UNINITIALIZED  no secret yet (Session.target is None)
    ACTIVE         a secret is set

Transitions:
    ensure_initialized()  UNINITIALIZED -> ACTIVE (no-op when ACTIVE)
    evaluate(raw)         ACTIVE(old) -> ACTIVE(new) on a correct guess,
                          otherwise ACTIVE(old) -> ACTIVE(old)

A malformed guess is an ordinary INVALID outcome, not an exception.
Guesses outside the secret range are compared like any other integer.
"""

from __future__ import annotations

from .state import Session, SessionPhase, Outcome
from .secret import SecretGenerator

# Signed 32-bit range accepted for guesses
GUESS_MIN = -(2 ** 31)
GUESS_MAX = 2 ** 31 - 1


def parse_guess(raw: str | None) -> int | None:
    """
    Parse the submitted text as an integer.

    Accepts an optional sign followed by decimal digits (any script, e.g.
    "42", "-7", "١٢") and nothing else: no whitespace, underscores or
    fractions. Returns None for missing, empty, non-numeric or
    out-of-range text.
    """
    if raw is None:
        return None
    digits = raw[1:] if raw[:1] in ("+", "-") else raw
    if not digits.isdecimal():
        return None
    value = int(raw)
    if value < GUESS_MIN or value > GUESS_MAX:
        return None
    return value


class GuessSession:
    """
    Applies guesses to a borrowed Session.

    Usage:
        game = GuessSession(session, generator)
        game.ensure_initialized()
        outcome = game.evaluate("42")

    Do not keep a GuessSession around between requests; build one per
    evaluation and let the store keep the Session.
    """

    def __init__(self, session: Session, generator: SecretGenerator | None = None):
        self.session = session
        self.generator = generator or SecretGenerator()

    @property
    def phase(self) -> SessionPhase:
        return self.session.phase

    def ensure_initialized(self) -> int:
        """
        Draw a secret if the session has none.

        Idempotent. Returns the current target.
        """
        if self.session.target is None:
            self.session.target = self.generator.next()
        return self.session.target

    def evaluate(self, raw_guess: str | None) -> Outcome:
        """
        Compare a guess with the secret.

        A correct guess replaces the secret before returning, so the next
        call already plays the new round.
        """
        target = self.ensure_initialized()

        guess = parse_guess(raw_guess)
        if guess is None:
            return Outcome.INVALID

        if guess < target:
            return Outcome.TOO_LOW
        if guess > target:
            return Outcome.TOO_HIGH

        self.session.target = self.generator.next()
        return Outcome.CORRECT
