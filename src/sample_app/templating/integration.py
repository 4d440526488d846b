"""Builds the kida environment for an app and renders ``Template`` values.

Templates under ``config.template_dir`` shadow the packaged ones of the
same name, so a deployment can restyle the layout without touching code.
"""

from collections.abc import Callable
from pathlib import Path

from kida import ChoiceLoader, Environment, FileSystemLoader, PackageLoader
from kida.environment.exceptions import TemplateNotFoundError

from sample_app.config import AppConfig
from sample_app.errors import TemplateRenderError
from sample_app.middleware.csrf import csrf_meta_tag
from sample_app.templating.template import Template


def make_full_title(site_title: str) -> Callable[..., str]:
    """``full_title("Help")`` is ``"Help | <site_title>"``; no title gives the site title."""

    def full_title(page_title: str = "") -> str:
        return f"{page_title} | {site_title}" if page_title else site_title

    return full_title


def create_environment(config: AppConfig) -> Environment:
    search: list[FileSystemLoader | PackageLoader] = [PackageLoader("sample_app", "templates")]
    if Path(config.template_dir).is_dir():
        search.insert(0, FileSystemLoader(str(config.template_dir)))

    env = Environment(
        loader=ChoiceLoader(search),
        autoescape=config.autoescape,
        auto_reload=config.debug,
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
    )
    env.add_global("site_title", config.site_title)
    env.add_global("full_title", make_full_title(config.site_title))
    env.add_global("csrf_meta_tag", csrf_meta_tag)
    return env


def render_template(env: Environment, template: Template) -> str:
    """Render *template*; a missing file becomes ``TemplateRenderError``."""
    try:
        compiled = env.get_template(template.name)
    except TemplateNotFoundError as exc:
        raise TemplateRenderError(template.name, "template not found") from exc
    return compiled.render(template.context)
