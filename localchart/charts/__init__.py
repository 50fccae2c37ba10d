"""Chart layout core: option models, coercion, engines and assembly."""

from .dispatch import ChartType, dispatch
from .document import FOOTER_NOTICE, assemble_document, render_chart, render_request
from .options import ChartOptions, ChartRequest, SeriesSpec

__all__ = [
    "FOOTER_NOTICE",
    "ChartOptions",
    "ChartRequest",
    "ChartType",
    "SeriesSpec",
    "assemble_document",
    "dispatch",
    "render_chart",
    "render_request",
]
