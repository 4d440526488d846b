"""Exceptions raised by sample_app.

Setup mistakes are ``ConfigurationError`` and stop the app before it
serves anything. ``HTTPError`` and its subclasses become responses with
their status code; anything else becomes a 500.
"""

from dataclasses import dataclass


class SampleAppError(Exception):
    pass


class ConfigurationError(SampleAppError):
    pass


class DuplicateRouteError(ConfigurationError):
    """Two registrations for one method and path."""

    def __init__(self, method: str, path: str) -> None:
        self.method = method
        self.path = path
        super().__init__(f"Route {method} {path!r} is already registered.")


class TemplateRenderError(SampleAppError):
    """A page's template is missing or broken. Served as a 500."""

    def __init__(self, template_name: str, reason: str = "") -> None:
        self.template_name = template_name
        self.reason = reason
        suffix = f": {reason}" if reason else ""
        super().__init__(f"Could not render template {template_name!r}{suffix}")


@dataclass(frozen=True, slots=True)
class HTTPError(SampleAppError):
    """Answer the request with *status*, *detail* and extra *headers*."""

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        return f"{self.status}: {self.detail}" if self.detail else str(self.status)


class NotFound(HTTPError):  # noqa: N818
    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(404, detail)


RouteNotFound = NotFound


class MethodNotAllowed(HTTPError):  # noqa: N818
    """The path exists but not for this method; ``Allow`` lists the ones it has."""

    def __init__(self, allowed: frozenset[str]) -> None:
        allow = ", ".join(sorted(allowed))
        super().__init__(405, f"Method not allowed. Allowed methods: {allow}", (("Allow", allow),))
