"""HTTP routers for the chart service."""

from . import charts, health

__all__ = ["charts", "health"]
