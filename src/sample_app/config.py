"""Settings for one ``App``, passed in explicitly rather than read from globals."""

from dataclasses import dataclass
from pathlib import Path

DEFAULT_SITE_TITLE = "Ruby on Rails Tutorial Sample App"


@dataclass(frozen=True, slots=True)
class AppConfig:
    """::

        AppConfig(site_title="Acme Sample App", port=3000)

    ``secret_key`` signs session cookies. It may stay empty for a single
    worker (a random key is generated per process) but is required once
    ``workers`` is above one.
    """

    site_title: str = DEFAULT_SITE_TITLE

    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    workers: int = 1
    log_level: str = "info"

    # Looked up before the packaged templates; ignored if it does not exist
    template_dir: str | Path = "templates"
    autoescape: bool = True
    trim_blocks: bool = True
    lstrip_blocks: bool = True

    secret_key: str = ""
    csrf: bool = True
