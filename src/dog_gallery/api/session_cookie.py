"""Signed session cookie helpers."""

import hashlib
import hmac

SESSION_COOKIE_NAME = "dog_gallery.sid"


def _signature(session_id: str, secret: str) -> str:
    """Build an HMAC signature for a session id."""
    return hmac.new(
        secret.encode("utf-8"), session_id.encode("utf-8"), hashlib.sha256
    ).hexdigest()


def sign_session_id(session_id: str, secret: str) -> str:
    """Encode signed session cookie contents."""
    return f"{session_id}.{_signature(session_id, secret)}"


def unsign_session_id(raw_value: str | None, secret: str) -> str | None:
    """Decode and verify a signed session cookie value."""
    value = (raw_value or "").strip()
    if "." not in value:
        return None
    session_id, signature = value.rsplit(".", 1)
    if not session_id:
        return None
    if not hmac.compare_digest(signature, _signature(session_id, secret)):
        return None
    return session_id
