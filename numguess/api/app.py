"""
FastAPI Application - Browser front end for the guessing game.

Endpoints:
    GET    /guess     Guessing form (no session side effects)
    POST   /guess     Evaluate the `guess` form field against the caller's session
    GET    /health    Health check

The caller's session is identified by an opaque key in an HttpOnly
cookie. Pages are plain HTML; only /health returns JSON.
"""

from contextlib import asynccontextmanager
from typing import Annotated, Optional
import logging
import os

from .. import __version__

# Environment configuration
NUMGUESS_ENV = os.getenv("NUMGUESS_ENV", "development")
NUMGUESS_SESSION_COOKIE = os.getenv("NUMGUESS_SESSION_COOKIE", "numguess_session")
NUMGUESS_SESSION_TTL = os.getenv("NUMGUESS_SESSION_TTL", "1800")

logger = logging.getLogger(__name__)


def configure_logging():
    """Configure root logging from LOG_LEVEL and LOG_FORMAT."""
    default_level = "DEBUG" if NUMGUESS_ENV == "development" else "INFO"
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", default_level).upper(),
        format=os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
    )


def create_app(service=None, session_cookie: Optional[str] = None):
    """
    Create the FastAPI application.

    Args:
        service: Optional GuessService instance (creates new if not provided)
        session_cookie: Cookie name carrying the session key
            (defaults to NUMGUESS_SESSION_COOKIE)

    Returns:
        FastAPI application instance
    """
    try:
        from fastapi import FastAPI, Form, Request
        from fastapi.responses import HTMLResponse
    except ImportError:
        raise ImportError(
            "FastAPI not installed. Install with: pip install fastapi uvicorn python-multipart"
        )

    from .service import GuessService
    from .schemas import HealthResponse
    from .pages import render_form, render_result
    from ..session import InMemorySessionStore

    @asynccontextmanager
    async def lifespan(app):
        """Set up logging when the server starts the app."""
        configure_logging()
        yield

    app = FastAPI(
        title="Numguess",
        description="Guess the secret number between 1 and 100, one session per browser.",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        lifespan=lifespan,
    )

    cookie_name = session_cookie or NUMGUESS_SESSION_COOKIE
    if service is None:
        ttl = float(NUMGUESS_SESSION_TTL)
        service = GuessService(store=InMemorySessionStore(ttl=ttl))
    api_service = service
    app.state.service = api_service

    def root_path(request: Request) -> str:
        return request.scope.get("root_path", "")

    # =========================================================================
    # Game Endpoints
    # =========================================================================

    @app.get(
        "/guess",
        response_class=HTMLResponse,
        tags=["Game"],
        summary="Show the guessing form",
    )
    async def guess_form(request: Request) -> HTMLResponse:
        return HTMLResponse(render_form(root_path(request)))

    @app.post(
        "/guess",
        response_class=HTMLResponse,
        tags=["Game"],
        summary="Submit a guess",
    )
    async def submit_guess(
        request: Request,
        guess: Annotated[Optional[str], Form(description="The guessed number")] = None,
    ) -> HTMLResponse:
        """
        Evaluate a guess against the caller's secret.

        Always answers 200 with one of the four feedback messages.
        A session cookie is issued when a new session had to be created.
        """
        result = api_service.submit_guess(request.cookies.get(cookie_name), guess)
        logger.debug("Guess %r: %s (new session: %s)", guess, result.outcome.value, result.new_session)

        response = HTMLResponse(render_result(result.message, root_path(request)))
        if result.new_session:
            response.set_cookie(
                cookie_name,
                result.session_key,
                httponly=True,
                samesite="lax",
                path=root_path(request) or "/",
            )
        return response

    # =========================================================================
    # Health Check
    # =========================================================================

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        """Health check endpoint for load balancers."""
        return HealthResponse(
            status="healthy",
            service="numguess",
            version=__version__,
        )

    return app


# For running directly: uvicorn numguess.api.app:app
app = None
try:
    app = create_app()
except ImportError:
    # FastAPI not installed
    pass
