"""
Session Module - Keyed storage for guessing sessions.

A session belongs to one browser (one opaque session key):
- Created on the first guess from that browser
- Holds the current secret between requests
- Expires after a period of inactivity

Sessions are EPHEMERAL:
- In-memory only, no database
- Lost on restart or expiry; the next guess starts a fresh round
"""

from .store import SessionStore, InMemorySessionStore, DEFAULT_SESSION_TTL

__all__ = [
    "SessionStore",
    "InMemorySessionStore",
    "DEFAULT_SESSION_TTL",
]
