"""Palettes and the shared style block for chart documents."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Sequence, Tuple


@dataclass(frozen=True)
class ChartTheme:
    """Colour tokens and CSS rules used when rendering chart documents.

    ``palettes`` maps a palette name to an ordered colour cycle.  Engines pick
    colours by index, wrapping around when a chart has more series than the
    palette has entries.

    ``classes`` holds the CSS rule body for every class the engines emit.
    Classes applied to shapes that carry their own inline ``fill`` must not
    declare ``fill`` here, otherwise the stylesheet would win over the
    presentation attribute.
    """

    identifier: str
    palettes: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)
    colors: Mapping[str, str] = field(default_factory=dict)
    classes: Mapping[str, str] = field(default_factory=dict)

    def palette(self, name: str = "series") -> Tuple[str, ...]:
        try:
            return self.palettes[name]
        except KeyError as exc:
            raise KeyError(f"Unknown palette '{name}'") from exc

    def pick(self, index: int, palette: str = "series") -> str:
        colors = self.palette(palette)
        return colors[index % len(colors)]

    def color(self, role: str, default: str = "#333") -> str:
        return self.colors.get(role, default)

    def style_block(self) -> str:
        return "\n".join(f".{name} {{ {rule} }}" for name, rule in self.classes.items())


_FONT = "font-family: Arial, sans-serif;"

_SERIES: Sequence[str] = ("#4285f4", "#ea4335", "#fbbc04", "#34a853", "#9aa0a6", "#ff6d01")

DEFAULT_THEME = ChartTheme(
    identifier="localchart-default",
    palettes={
        "series": tuple(_SERIES),
        "pie": tuple(_SERIES) + ("#ab47bc", "#26c6da"),
        "radar": ("#4285f4", "#ea4335", "#fbbc04", "#34a853"),
        "funnel": ("#4285f4", "#5bb974", "#fbbc04", "#ea4335", "#9aa0a6", "#ff6d01"),
    },
    colors={
        "primary": "#4285f4",
        "secondary": "#ea4335",
        "grid": "#ddd",
        "inverse": "#fff",
        "muted": "#888",
    },
    classes={
        "chart-title": f"{_FONT} font-size: 20px; font-weight: bold; text-anchor: middle; fill: #333;",
        "axis-label": f"{_FONT} font-size: 12px; fill: #666;",
        "axis-title": f"{_FONT} font-size: 14px; font-weight: bold; fill: #333;",
        "value-label": f"{_FONT} font-size: 12px;",
        "footer-note": f"{_FONT} font-size: 12px;",
        "chart-bar": "stroke: #fff; stroke-width: 1;",
        "chart-line": "fill: none; stroke-width: 2;",
        "chart-point": "stroke-width: 2;",
        "chart-area": "fill-opacity: 0.3;",
        "axis": "stroke: #333; stroke-width: 1;",
        "legend-text": f"{_FONT} font-size: 12px; fill: #333;",
    },
)
