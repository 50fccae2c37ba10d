"""Drawing helpers shared by the cartesian engines."""
from __future__ import annotations

from ...viz import DEFAULT_THEME, ChartTheme, Fragment
from ..options import ChartOptions
from ..scale import CanvasArea

NO_DATA = "No data available"


def placeholder(options: ChartOptions, message: str = NO_DATA) -> Fragment:
    """Centred plain-text fragment used for degenerate input."""

    fragment = Fragment()
    fragment.text(
        options.width / 2,
        options.height / 2,
        message,
        text_anchor="middle",
        class_="axis-label",
    )
    return fragment


def draw_axes(fragment: Fragment, area: CanvasArea) -> None:
    fragment.line(area.x, area.y, area.x, area.bottom, class_="axis")
    fragment.line(area.x, area.bottom, area.right, area.bottom, class_="axis")


def draw_axis_titles(fragment: Fragment, area: CanvasArea, options: ChartOptions) -> None:
    if options.axis_x_title:
        fragment.text(
            area.center_x,
            area.bottom + 50,
            options.axis_x_title,
            text_anchor="middle",
            class_="axis-title",
        )
    if options.axis_y_title:
        draw_vertical_title(fragment, 30, area.y + area.height / 2, options.axis_y_title)


def draw_vertical_title(fragment: Fragment, x: float, y: float, title: str) -> None:
    fragment.text(
        x,
        y,
        title,
        text_anchor="middle",
        class_="axis-title",
        transform=f"rotate(-90 {_num(x)} {_num(y)})",
    )


def legend_swatch(
    fragment: Fragment,
    x: float,
    y: float,
    color: str,
    label: str,
) -> None:
    fragment.rect(x, y, 12, 12, fill=color)
    fragment.text(x + 18, y + 9, label, class_="legend-text")


def _num(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else repr(float(value))


def theme_or_default(theme: ChartTheme | None) -> ChartTheme:
    return theme or DEFAULT_THEME
