"""Domain models for browser sessions."""

from dataclasses import dataclass


@dataclass
class SessionData:
    """Per-browser state held by the session store."""

    user_id: str
    username: str
    current_image: str | None = None
