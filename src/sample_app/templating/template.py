from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Template:
    """A page to render inside the site layout.

    Handlers return one of these; ``title`` feeds ``full_title()`` in the
    layout's ``<title>`` element.
    """

    name: str
    title: str = ""

    @property
    def context(self) -> dict[str, str]:
        return {"title": self.title}
