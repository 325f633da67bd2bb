"""
Numguess - Session-scoped number guessing game

The server picks a secret integer per user session and answers every
guess with "too low", "too high" or "correct". After a win a new secret
is drawn for the next round.

The package provides:
- A secret generator and the per-session guessing state machine
- A session store keyed by an opaque session key
- A FastAPI front end serving the HTML form
- A small CLI for serving and for terminal play
"""

__version__ = "0.1.0"
