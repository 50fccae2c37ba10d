"""Document assembly and the public render entry points."""
from __future__ import annotations

import logging
import random
from typing import Any, Mapping, Optional, Union

from ..viz import DEFAULT_THEME, ChartTheme, Fragment, SvgDocument, element
from .dispatch import ChartType, dispatch
from .engines._common import placeholder
from .options import ChartOptions, ChartRequest

__all__ = ["FOOTER_NOTICE", "assemble_document", "default_title", "render_chart", "render_request"]

LOGGER = logging.getLogger(__name__)

FOOTER_NOTICE = "Generated locally - No remote uploads"

Logger = Union[logging.Logger, logging.LoggerAdapter]


def default_title(tag: str) -> str:
    """``"pie"`` -> ``"Pie Chart"``; only the first letter changes case."""

    return f"{tag[:1].upper()}{tag[1:]} Chart"


def assemble_document(
    tag: str,
    fragment: Fragment,
    options: ChartOptions,
    theme: ChartTheme | None = None,
) -> str:
    """Wrap ``fragment`` with the style block, title and footer notice."""

    palette = theme or DEFAULT_THEME
    doc = SvgDocument(width=options.width, height=options.height)
    doc.add(element("style", text=palette.style_block()))
    doc.add(
        element(
            "text",
            text=options.title or default_title(tag),
            x=options.width / 2,
            y=30,
            class_="chart-title",
        )
    )
    doc.extend(fragment)
    doc.add(
        element(
            "text",
            text=FOOTER_NOTICE,
            x=10,
            y=options.height - 10,
            fill=palette.color("muted"),
            class_="footer-note",
        )
    )
    return doc.to_string(pretty=True)


def _has_data(chart_type: ChartType, data: Any, options: ChartOptions) -> bool:
    if chart_type is ChartType.DUAL_AXES and options.series:
        return True
    return isinstance(data, (list, tuple)) and len(data) > 0


def render_chart(
    chart_type: str,
    data: Any,
    options: Optional[Union[ChartOptions, Mapping[str, Any]]] = None,
    *,
    theme: ChartTheme | None = None,
    logger: Optional[Logger] = None,
    rng: random.Random | None = None,
) -> str:
    """Render ``data`` as a complete SVG document for ``chart_type``.

    Unsupported chart types render with the column engine.  Empty or
    non-list data yields a document with a placeholder message instead of an
    error.  ``rng`` only affects scatter points that lack coordinates.
    """

    log = logger or LOGGER
    resolved_options = ChartOptions.from_payload(options)
    resolved = ChartType.lookup(chart_type)
    if resolved is None:
        log.warning(
            "unsupported chart type %r; rendering as column",
            chart_type,
            extra={"chart_type": chart_type, "fallback": ChartType.COLUMN.value},
        )
        resolved = ChartType.resolve(chart_type)

    if _has_data(resolved, data, resolved_options):
        fragment = dispatch(resolved, data, resolved_options, theme, rng=rng)
    else:
        fragment = placeholder(resolved_options)

    log.debug(
        "rendered %s chart (%d elements)",
        resolved.value,
        len(fragment),
        extra={
            "chart_type": resolved.value,
            "points": len(data) if isinstance(data, (list, tuple)) else 0,
            "width": resolved_options.width,
            "height": resolved_options.height,
        },
    )
    return assemble_document(str(chart_type), fragment, resolved_options, theme)


def render_request(
    request: ChartRequest,
    *,
    theme: ChartTheme | None = None,
    logger: Optional[Logger] = None,
    rng: random.Random | None = None,
) -> str:
    return render_chart(
        request.type,
        request.data,
        request.options,
        theme=theme,
        logger=logger,
        rng=rng,
    )
