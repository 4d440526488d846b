"""kida templates: the ``Template`` return value and the environment behind it."""

from sample_app.templating.template import Template

__all__ = ["Template"]
