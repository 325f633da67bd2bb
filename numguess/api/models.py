"""
API Models - Results handed from the service to the HTTP layer.

Plain dataclasses; the HTTP layer decides how to render them.
"""

from __future__ import annotations
from dataclasses import dataclass

from ..engine_core.state import Outcome


@dataclass
class GuessResult:
    """Result of one submitted guess."""
    session_key: str
    outcome: Outcome
    message: str

    # True when a session was created for this request (cookie must be issued)
    new_session: bool = False
