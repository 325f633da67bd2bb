"""
Engine Core - The guessing state machine.

The core:
1. Draws secrets with SecretGenerator
2. Holds the per-session target in a Session value
3. Evaluates guesses via GuessSession
4. Replaces the secret after a correct guess

Nothing here knows about HTTP, cookies or storage.
"""

from .state import Session, SessionPhase, Outcome
from .secret import SecretGenerator, SECRET_MIN, SECRET_MAX
from .guess import GuessSession, parse_guess

__all__ = [
    "Session",
    "SessionPhase",
    "Outcome",
    "SecretGenerator",
    "SECRET_MIN",
    "SECRET_MAX",
    "GuessSession",
    "parse_guess",
]
