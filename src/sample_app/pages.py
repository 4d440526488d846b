"""The tutorial's static pages.

``/`` answers with plain ``Hello World!``; home, help, about and contact
render inside the site layout with their own title. ``app`` is what
``sample-app run`` serves by default.
"""

import logging
import secrets

from sample_app.app import App
from sample_app.config import AppConfig
from sample_app.errors import ConfigurationError
from sample_app.middleware import CSRFMiddleware, SessionConfig, SessionMiddleware
from sample_app.routing.static import StaticPage
from sample_app.templating import Template

logger = logging.getLogger("sample_app.pages")

LANDING = StaticPage("/", body="Hello World!", name="landing")

PAGES: tuple[StaticPage, ...] = tuple(
    StaticPage(
        f"/static_pages/{slug}",
        template=f"static_pages/{slug}.html",
        title=slug.capitalize(),
        name=slug,
    )
    for slug in ("home", "help", "about", "contact")
)


def page_not_found() -> Template:
    return Template("errors/404.html", title="Not Found")


def _session_secret(config: AppConfig) -> str:
    """The configured key, or a throwaway one for a single-process server.

    Worker processes each import the app, so a generated key would differ
    between them and sessions signed by one worker would fail in another.
    """
    if config.secret_key:
        return config.secret_key
    if config.workers > 1:
        msg = f"secret_key is required when serving with {config.workers} workers."
        raise ConfigurationError(msg)
    logger.warning("no secret_key configured; sessions end when the server restarts")
    return secrets.token_hex(32)


def create_app(config: AppConfig | None = None) -> App:
    app = App(config)
    for page in (LANDING, *PAGES):
        app.add_page(page)
    app.error(404)(page_not_found)

    if app.config.csrf:
        app.add_middleware(SessionMiddleware(SessionConfig(_session_secret(app.config))))
        app.add_middleware(CSRFMiddleware())
    return app


app = create_app()
