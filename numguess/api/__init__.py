"""
API Module - Browser interface for the game.

Exposes the engine over HTTP:
1. GET /guess shows the guessing form
2. POST /guess evaluates a guess against the caller's session
3. GET /health for load balancers

Session identity comes from a cookie. All state is session-scoped.
"""

from .models import GuessResult
from .schemas import HealthResponse
from .pages import MESSAGES, message_for, render_form, render_result
from .service import GuessService
from .app import create_app

__all__ = [
    # Models
    "GuessResult",
    "HealthResponse",
    # Rendering
    "MESSAGES",
    "message_for",
    "render_form",
    "render_result",
    # Service
    "GuessService",
    "create_app",
]
