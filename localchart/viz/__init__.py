"""SVG primitives shared by the chart engines.

The helpers here build deterministic scenes: element order is paint order
and attribute order is sorted, so the same input always serialises to the
same bytes.
"""

from .svg import Fragment, SvgDocument, SvgElement, element
from .theme import DEFAULT_THEME, ChartTheme

__all__ = [
    "ChartTheme",
    "DEFAULT_THEME",
    "Fragment",
    "SvgDocument",
    "SvgElement",
    "element",
]
