"""
Pages - Fixed feedback messages and the HTML around them.

Every outcome maps to exactly one message. Links are built from the
ASGI root_path so the app works when mounted under a prefix.
"""

from __future__ import annotations
from html import escape

from ..engine_core.state import Outcome
from ..engine_core.secret import SECRET_MIN, SECRET_MAX

MESSAGES: dict[Outcome, str] = {
    Outcome.TOO_LOW: "Your guess is too low. Try again!",
    Outcome.TOO_HIGH: "Your guess is too high. Try again!",
    Outcome.CORRECT: "Congratulations! You guessed the number!",
    Outcome.INVALID: "Invalid input. Please enter a valid number.",
}


def message_for(outcome: Outcome) -> str:
    return MESSAGES[outcome]


def _guess_url(root_path: str) -> str:
    return escape(f"{root_path.rstrip('/')}/guess", quote=True)


def render_form(root_path: str = "") -> str:
    """The guessing form."""
    return (
        "<h1>Number Guessing Game</h1>\n"
        f"<form action='{_guess_url(root_path)}' method='post'>\n"
        f"Guess a number between {SECRET_MIN} and {SECRET_MAX}: "
        "<input type='text' name='guess' />\n"
        "<input type='submit' value='Submit' />\n"
        "</form>\n"
    )


def render_result(message: str, root_path: str = "") -> str:
    """Feedback for one guess followed by the Play Again link."""
    return (
        f"<h2>{escape(message)}</h2>\n"
        f"<a href='{_guess_url(root_path)}'>Play Again</a>\n"
    )
