"""Server-rendered HTML pages."""

from html import escape

from dog_gallery.domain.models import SavedImageRecord
from dog_gallery.domain.sessions import SessionData

_STYLE = """
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      header { display: flex; gap: 1rem; align-items: center; margin-bottom: 1.5rem; }
      form.inline { display: inline; }
      button { padding: 0.4rem 0.8rem; margin-right: 0.5rem; }
      input { padding: 0.4rem 0.6rem; width: 240px; }
      img.dog { max-width: 480px; max-height: 480px; display: block; margin: 1rem 0; }
      ul.saved { list-style: none; padding: 0; }
      ul.saved li { margin-bottom: 1.5rem; }
      .error { color: #b00020; }
      .muted { color: #666; }
"""


def _page(title: str, body: str, current_user: SessionData | None = None) -> str:
    """Wrap page content in the shared layout."""
    header = ""
    if current_user is not None:
        header = f"""
    <header>
      <span>Logged in as <strong>{escape(current_user.username)}</strong></span>
      <a href="/home">Home</a>
      <a href="/saved">Saved</a>
      <form class="inline" method="post" action="/logout">
        <button type="submit">Log out</button>
      </form>
    </header>"""
    return f"""<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>{escape(title)}</title>
    <style>{_STYLE}    </style>
  </head>
  <body>{header}
{body}
  </body>
</html>
"""


def _error_block(error: str | None) -> str:
    if not error:
        return ""
    return f'    <p class="error" role="alert">{escape(error)}</p>\n'


def render_login(error: str | None = None) -> str:
    """Render the username login form."""
    body = f"""    <h1>Dog Gallery</h1>
{_error_block(error)}    <form method="post" action="/login">
      <label for="username">Username</label><br />
      <input id="username" name="username" autocomplete="username" />
      <button type="submit">Log in</button>
    </form>"""
    return _page("Log in", body)


def render_home(
    current_user: SessionData,
    current_image: str | None,
    error: str | None = None,
) -> str:
    """Render the home page with the current image, if any."""
    if current_image:
        image_block = f"""    <img class="dog" src="{escape(current_image)}" alt="Random dog" />
    <form method="post" action="/save">
      <input type="hidden" name="imageUrl" value="{escape(current_image)}" />
      <button type="submit">Save this dog</button>
    </form>"""
    else:
        image_block = '    <p class="muted">No dog yet. Fetch one!</p>'
    body = f"""    <h1>Random dogs</h1>
{_error_block(error)}    <form method="get" action="/random">
      <button type="submit">Get a random dog</button>
    </form>
{image_block}"""
    return _page("Home", body, current_user)


def render_saved(current_user: SessionData, images: list[SavedImageRecord]) -> str:
    """Render the user's saved images with their save timestamps."""
    if images:
        items = "\n".join(
            f"""      <li>
        <img class="dog" src="{escape(image.image_url)}" alt="Saved dog" />
        <span class="muted">Saved {escape(image.saved_at.strftime("%Y-%m-%d %H:%M:%S %Z").strip())}</span>
      </li>"""
            for image in images
        )
        listing = f'    <ul class="saved">\n{items}\n    </ul>'
    else:
        listing = '    <p class="muted">You have not saved any dogs yet.</p>'
    body = f"""    <h1>Saved dogs</h1>
{listing}"""
    return _page("Saved", body, current_user)
