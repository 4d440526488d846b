"""Pages whose response never changes: literal text or a titled template."""

from dataclasses import dataclass

from sample_app.errors import ConfigurationError
from sample_app.templating import Template


@dataclass(frozen=True, slots=True)
class StaticPage:
    """A path bound to a fixed body or to a template and its page title.

    ::

        StaticPage("/", body="Hello World!")
        StaticPage("/static_pages/help", template="static_pages/help.html", title="Help")
    """

    path: str
    body: str | None = None
    template: str | None = None
    title: str = ""
    name: str | None = None

    def __post_init__(self) -> None:
        if (self.body is None) == (self.template is None):
            msg = f"Static page {self.path!r} needs exactly one of body= or template=."
            raise ConfigurationError(msg)

    def respond(self) -> str | Template:
        if self.template is None:
            return self.body
        return Template(self.template, title=self.title)
