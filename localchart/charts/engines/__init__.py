"""Layout engines, one module per chart family."""

from .area import render_area
from .column import render_column
from .dual_axes import render_dual_axes
from .funnel import render_funnel
from .histogram import render_histogram
from .line import render_line
from .pie import render_pie
from .radar import render_radar
from .scatter import render_scatter

__all__ = [
    "render_area",
    "render_column",
    "render_dual_axes",
    "render_funnel",
    "render_histogram",
    "render_line",
    "render_pie",
    "render_radar",
    "render_scatter",
]
