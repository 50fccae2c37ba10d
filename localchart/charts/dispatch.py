"""Chart type resolution and the engine registry."""
from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional

from ..viz import ChartTheme, Fragment
from . import points as coerce
from .engines import (
    render_area,
    render_column,
    render_dual_axes,
    render_funnel,
    render_histogram,
    render_line,
    render_pie,
    render_radar,
    render_scatter,
)
from .options import ChartOptions

__all__ = ["ALIASES", "ENGINES", "ChartType", "EngineSpec", "dispatch"]


class ChartType(str, Enum):
    COLUMN = "column"
    LINE = "line"
    PIE = "pie"
    AREA = "area"
    SCATTER = "scatter"
    RADAR = "radar"
    FUNNEL = "funnel"
    DUAL_AXES = "dual-axes"
    HISTOGRAM = "histogram"

    @classmethod
    def lookup(cls, tag: str) -> Optional["ChartType"]:
        """Exact match on the lower-cased tag (aliases included), else ``None``."""

        key = str(tag).strip().lower()
        if key in ALIASES:
            return ALIASES[key]
        try:
            return cls(key)
        except ValueError:
            return None

    @classmethod
    def resolve(cls, tag: str) -> "ChartType":
        """Like :meth:`lookup` but unsupported tags render as a column chart."""

        return cls.lookup(tag) or UNSUPPORTED_FALLBACK


ALIASES: Mapping[str, ChartType] = {"bar": ChartType.COLUMN}

UNSUPPORTED_FALLBACK = ChartType.COLUMN


@dataclass(frozen=True)
class EngineSpec:
    """Coercion step and layout engine for one chart family."""

    coerce: Callable[[Any, ChartOptions], Any]
    render: Callable[..., Fragment]


ENGINES: Dict[ChartType, EngineSpec] = {
    ChartType.COLUMN: EngineSpec(coerce.coerce_column, render_column),
    ChartType.LINE: EngineSpec(coerce.coerce_timeline, render_line),
    ChartType.AREA: EngineSpec(coerce.coerce_timeline, render_area),
    ChartType.PIE: EngineSpec(coerce.coerce_categories, render_pie),
    ChartType.SCATTER: EngineSpec(coerce.coerce_xy, render_scatter),
    ChartType.RADAR: EngineSpec(coerce.coerce_radar, render_radar),
    ChartType.FUNNEL: EngineSpec(coerce.coerce_categories, render_funnel),
    ChartType.DUAL_AXES: EngineSpec(coerce.coerce_dual_axes, render_dual_axes),
    ChartType.HISTOGRAM: EngineSpec(coerce.coerce_histogram, render_histogram),
}


def dispatch(
    chart_type: ChartType,
    data: Any,
    options: ChartOptions,
    theme: ChartTheme | None = None,
    *,
    rng: random.Random | None = None,
) -> Fragment:
    """Coerce ``data`` for ``chart_type`` and run its engine."""

    spec = ENGINES[chart_type]
    records = spec.coerce(data, options)
    if chart_type is ChartType.SCATTER:
        return spec.render(records, options, theme, rng=rng)
    return spec.render(records, options, theme)
