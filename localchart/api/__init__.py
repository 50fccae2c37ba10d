"""HTTP surface for the chart renderer."""

from .app import create_app, get_app

__all__ = ["create_app", "get_app"]
