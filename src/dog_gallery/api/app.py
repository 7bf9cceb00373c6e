"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import RedirectResponse

from dog_gallery.api.pages import router as pages_router
from dog_gallery.app_logging import configure_logging
from dog_gallery.containers import AppContainer
from dog_gallery.domain.errors import LoginRequiredError


def create_app(container: AppContainer, *, manage_resources: bool = True) -> FastAPI:
    """Create a FastAPI app configured with dependencies.

    With ``manage_resources`` the app prepares the store on startup and
    closes the container on shutdown. The console entrypoint passes False
    and handles both itself around the listener.
    """
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if manage_resources:
            app.state.container.init_store()
        yield
        if manage_resources:
            await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan, docs_url=None, redoc_url=None, openapi_url=None)
    app.state.container = container

    @app.exception_handler(LoginRequiredError)
    async def redirect_to_login(
        request: Request, exc: LoginRequiredError
    ) -> RedirectResponse:
        logger.debug("Login required for %s", request.url.path)
        return RedirectResponse("/login", status_code=status.HTTP_302_FOUND)

    app.include_router(pages_router)
    return app
