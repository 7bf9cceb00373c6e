"""Request-scoped dependencies shared by the page routes."""

from dataclasses import dataclass

from fastapi import Depends, Request

from dog_gallery.api.session_cookie import SESSION_COOKIE_NAME, unsign_session_id
from dog_gallery.containers import AppContainer
from dog_gallery.domain.errors import LoginRequiredError
from dog_gallery.domain.sessions import SessionData


@dataclass
class RequestContext:
    """Everything a handler may touch for one request."""

    container: AppContainer
    session_id: str | None
    session: SessionData | None

    @property
    def user(self) -> SessionData:
        """Return the session user; only valid behind ``require_login``."""
        if self.session is None:
            raise LoginRequiredError
        return self.session


def get_request_context(request: Request) -> RequestContext:
    """Resolve the signed session cookie into live session data."""
    container: AppContainer = request.app.state.container
    session_id = unsign_session_id(
        request.cookies.get(SESSION_COOKIE_NAME), container.settings.session_secret
    )
    session = container.session_store.get(session_id) if session_id else None
    return RequestContext(container=container, session_id=session_id, session=session)


def require_login(
    context: RequestContext = Depends(get_request_context),
) -> RequestContext:
    """Ensure the request carries a logged-in session."""
    if context.session is None or not context.session.user_id:
        raise LoginRequiredError
    return context
