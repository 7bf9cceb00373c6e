"""HTML page routes."""

import logging
from dataclasses import replace

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from starlette.concurrency import run_in_threadpool

from dog_gallery.api.dependencies import (
    RequestContext,
    get_request_context,
    require_login,
)
from dog_gallery.api.forms import LoginForm, SaveForm
from dog_gallery.api.session_cookie import SESSION_COOKIE_NAME, sign_session_id
from dog_gallery.api.views import render_home, render_login, render_saved
from dog_gallery.domain.errors import DataStoreError, ImageProviderError
from dog_gallery.domain.sessions import SessionData

logger = logging.getLogger(__name__)

# Repository calls block on pymongo and always run in the threadpool.

router = APIRouter(tags=["pages"])


def _redirect(path: str) -> RedirectResponse:
    return RedirectResponse(path, status_code=status.HTTP_302_FOUND)


@router.get("/")
async def index() -> Response:
    """Send visitors to the login page."""
    return _redirect("/login")


@router.get("/login", response_class=HTMLResponse)
async def login_form() -> Response:
    """Show the login form."""
    return HTMLResponse(render_login())


@router.post("/login", response_class=HTMLResponse)
async def login(
    request: Request, context: RequestContext = Depends(get_request_context)
) -> Response:
    """Log in by username, creating the user on first sight."""
    form = LoginForm.model_validate(dict(await request.form()))
    if not form.username:
        return HTMLResponse(render_login("Username is required."))

    try:
        user = await run_in_threadpool(
            context.container.user_service.ensure_user, form.username
        )
    except DataStoreError:
        logger.exception("Error in /login", extra={"username": form.username})
        return HTMLResponse(render_login("Something went wrong. Try again."))

    store = context.container.session_store
    if context.session_id:
        store.destroy(context.session_id)
    session_id = store.create(SessionData(user_id=user.id, username=user.username))
    response = _redirect("/home")
    response.set_cookie(
        SESSION_COOKIE_NAME,
        sign_session_id(session_id, context.container.settings.session_secret),
        httponly=True,
        samesite="lax",
    )
    return response


@router.post("/logout")
async def logout(context: RequestContext = Depends(get_request_context)) -> Response:
    """Destroy the session, if any, and return to the login page."""
    if context.session_id:
        context.container.session_store.destroy(context.session_id)
    response = _redirect("/login")
    response.delete_cookie(SESSION_COOKIE_NAME)
    return response


@router.get("/home", response_class=HTMLResponse)
async def home(context: RequestContext = Depends(require_login)) -> Response:
    """Show the last fetched image, if any."""
    user = context.user
    return HTMLResponse(render_home(user, user.current_image))


@router.get("/random", response_class=HTMLResponse)
async def random_image(context: RequestContext = Depends(require_login)) -> Response:
    """Fetch a new random image and remember it in the session."""
    user = context.user
    try:
        image_url = await context.container.random_image_service.fetch_image_url()
    except ImageProviderError:
        logger.exception("Error fetching random image")
        return HTMLResponse(
            render_home(
                user, None, error="Could not load image. Please try again."
            )
        )

    updated = replace(user, current_image=image_url)
    if context.session_id:
        context.container.session_store.update(context.session_id, updated)
    return HTMLResponse(render_home(updated, image_url))


@router.post("/save")
async def save_image(
    request: Request, context: RequestContext = Depends(require_login)
) -> Response:
    """Save the submitted image, falling back to the session's current one."""
    user = context.user
    form = SaveForm.model_validate(dict(await request.form()))
    image_url = form.image_url or user.current_image
    if not image_url:
        return _redirect("/home")

    try:
        await run_in_threadpool(
            context.container.saved_image_service.save_image, user.user_id, image_url
        )
    except DataStoreError:
        logger.exception("Error saving image", extra={"user_id": user.user_id})
        return _redirect("/home")
    return _redirect("/saved")


@router.get("/saved", response_class=HTMLResponse)
async def saved_images(context: RequestContext = Depends(require_login)) -> Response:
    """List the user's saved images, newest first."""
    user = context.user
    try:
        images = await run_in_threadpool(
            context.container.saved_image_service.list_saved, user.user_id
        )
    except DataStoreError:
        logger.exception("Error loading saved images", extra={"user_id": user.user_id})
        images = []
    return HTMLResponse(render_saved(user, images))
