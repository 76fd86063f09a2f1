"""CLI subapps: one module per tool."""

from chapter_splitter.tools.config import config_app

__all__ = ["config_app"]
