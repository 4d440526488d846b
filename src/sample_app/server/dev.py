"""Serving an ``App`` with pounce, installed through the ``server`` extra."""

from typing import Any

from sample_app.errors import ConfigurationError


def run_server(app: Any, host: str, port: int, *, workers: int = 1, reload: bool = False) -> None:
    """Block serving *app* on ``host:port`` until interrupted.

    The live ASGI object is handed to ``pounce.Server`` directly rather than
    through an import string.
    """
    try:
        from pounce.config import ServerConfig
        from pounce.server import Server
    except ImportError:
        msg = "pounce is not installed; run: pip install 'sample-app[server]'"
        raise ConfigurationError(msg) from None

    Server(ServerConfig(host=host, port=port, workers=workers, reload=reload), app).run()
