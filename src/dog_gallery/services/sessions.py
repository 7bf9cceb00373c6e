"""Server-side session storage."""

import secrets
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol

from dog_gallery.domain.sessions import SessionData


class SessionStore(Protocol):
    """Storage interface for browser sessions."""

    def create(self, data: SessionData) -> str:
        """Store a new session and return its id."""

    def get(self, session_id: str) -> SessionData | None:
        """Return session data if the id is live."""

    def update(self, session_id: str, data: SessionData) -> None:
        """Replace the data stored for a live session."""

    def destroy(self, session_id: str) -> None:
        """Forget a session; unknown ids are ignored."""


@dataclass
class _SessionEntry:
    data: SessionData
    expires_at: datetime


@dataclass
class InMemorySessionStore(SessionStore):
    """Process-lifetime session store with an idle timeout.

    Every successful ``get`` or ``update`` pushes the expiry forward; idle
    sessions are dropped lazily on lookup and swept whenever one is created.
    """

    idle_ttl_seconds: int
    _entries: dict[str, _SessionEntry]

    def __init__(self, idle_ttl_seconds: int = 86400) -> None:
        self.idle_ttl_seconds = idle_ttl_seconds
        self._entries = {}

    def _expiry(self) -> datetime:
        return datetime.now(tz=UTC) + timedelta(seconds=self.idle_ttl_seconds)

    def _live_entry(self, session_id: str) -> _SessionEntry | None:
        entry = self._entries.get(session_id)
        if entry is None:
            return None
        if datetime.now(tz=UTC) >= entry.expires_at:
            self._entries.pop(session_id, None)
            return None
        return entry

    def create(self, data: SessionData) -> str:
        """Store a new session under a random id."""
        self.sweep()
        session_id = secrets.token_urlsafe(24)
        self._entries[session_id] = _SessionEntry(data=data, expires_at=self._expiry())
        return session_id

    def get(self, session_id: str) -> SessionData | None:
        """Return the live session for an id and refresh its expiry."""
        entry = self._live_entry(session_id)
        if entry is None:
            return None
        entry.expires_at = self._expiry()
        return entry.data

    def update(self, session_id: str, data: SessionData) -> None:
        """Replace session data; destroyed or expired ids stay gone."""
        entry = self._live_entry(session_id)
        if entry is not None:
            entry.data = data
            entry.expires_at = self._expiry()

    def destroy(self, session_id: str) -> None:
        """Remove a session if present."""
        self._entries.pop(session_id, None)

    def sweep(self) -> int:
        """Drop every expired session and return how many were removed."""
        now = datetime.now(tz=UTC)
        expired = [key for key, entry in self._entries.items() if now >= entry.expires_at]
        for key in expired:
            del self._entries[key]
        return len(expired)

    def __len__(self) -> int:
        return len(self._entries)
