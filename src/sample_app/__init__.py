"""sample_app: the Rails tutorial's static pages, served over ASGI.

::

    from sample_app import App

    app = App()
    app.static_page("/", body="Hello World!")
    app.static_page("/static_pages/help", template="static_pages/help.html", title="Help")

The tutorial app itself is ``sample_app.pages.app``.
"""

from importlib import import_module

__version__ = "0.1.0"

_EXPORTS = {
    "App": "sample_app.app",
    "AppConfig": "sample_app.config",
    "Request": "sample_app.http.request",
    "Response": "sample_app.http.response",
    "StaticPage": "sample_app.routing.static",
    "Template": "sample_app.templating.template",
    "create_app": "sample_app.pages",
    "ConfigurationError": "sample_app.errors",
    "DuplicateRouteError": "sample_app.errors",
    "HTTPError": "sample_app.errors",
    "MethodNotAllowed": "sample_app.errors",
    "NotFound": "sample_app.errors",
    "RouteNotFound": "sample_app.errors",
    "SampleAppError": "sample_app.errors",
    "TemplateRenderError": "sample_app.errors",
}

__all__ = sorted(_EXPORTS)


def __getattr__(name: str) -> object:
    """Import public names on first use so ``import sample_app`` stays light."""
    if name not in _EXPORTS:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(import_module(_EXPORTS[name]), name)
