"""localchart: deterministic SVG chart rendering without remote services.

The render core lives in :mod:`localchart.charts`; persistence, raster
conversion, the HTTP API and the CLI are thin layers around it.
"""

from .charts import ChartOptions, ChartRequest, ChartType, render_chart, render_request

__version__ = "1.0.0"

__all__ = [
    "ChartOptions",
    "ChartRequest",
    "ChartType",
    "__version__",
    "render_chart",
    "render_request",
]
