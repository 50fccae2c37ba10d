"""Boundary coercion of loosely typed chart data into strict records.

Raw data arrives as JSON-ish values: mappings, bare numbers, strings or
anything else a caller sends.  Each chart family has one coercion function
here; engines only ever see the records returned by these functions.
Coercion never raises, malformed entries are either dropped or mapped to a
neutral record, depending on the family.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from .options import ChartOptions

__all__ = [
    "CategoryGroupValue",
    "DualAxesData",
    "LabeledValue",
    "RadarValue",
    "XYPoint",
    "coerce_categories",
    "coerce_column",
    "coerce_dual_axes",
    "coerce_histogram",
    "coerce_radar",
    "coerce_series",
    "coerce_timeline",
    "coerce_xy",
    "to_number",
]

DEFAULT_GROUP = "Series 1"
UNKNOWN_LABEL = "Unknown"


@dataclass(frozen=True)
class CategoryGroupValue:
    category: str
    group: str
    value: float


@dataclass(frozen=True)
class LabeledValue:
    label: str
    value: float


@dataclass(frozen=True)
class XYPoint:
    x: Optional[float]
    y: Optional[float]

    @property
    def has_coordinates(self) -> bool:
        return self.x is not None and self.y is not None


@dataclass(frozen=True)
class RadarValue:
    name: str
    group: str
    value: float


@dataclass(frozen=True)
class DualAxesData:
    categories: Tuple[str, ...]
    bars: Tuple[float, ...]
    line: Tuple[float, ...]
    bar_title: Optional[str] = None
    line_title: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.categories or not (self.bars or self.line)


def to_number(value: Any) -> Optional[float]:
    """Coerce ``value`` to a finite float, or ``None`` when impossible."""

    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def _as_list(data: Any) -> List[Any]:
    return list(data) if isinstance(data, (list, tuple)) else []


def _field(item: Any, *names: str) -> Any:
    if not isinstance(item, Mapping):
        return None
    for name in names:
        value = item.get(name)
        if value is not None:
            return value
    return None


def _fallback(item: Any) -> LabeledValue:
    return LabeledValue(UNKNOWN_LABEL, to_number(item) or 0.0)


def coerce_column(data: Any, options: ChartOptions) -> List[CategoryGroupValue]:
    """Keep entries with a category and a numeric value."""

    records: List[CategoryGroupValue] = []
    for item in _as_list(data):
        category = _field(item, "category")
        value = to_number(_field(item, "value"))
        if not category or value is None:
            continue
        group = _field(item, "group") or DEFAULT_GROUP
        records.append(CategoryGroupValue(str(category), str(group), value))
    return records


def coerce_timeline(data: Any, options: ChartOptions) -> List[LabeledValue]:
    """Line/area records; the label prefers ``time`` over ``category``."""

    records: List[LabeledValue] = []
    for item in _as_list(data):
        label = _field(item, "time", "category")
        raw_value = _field(item, "value")
        if label is None or raw_value is None:
            records.append(_fallback(item))
            continue
        records.append(LabeledValue(str(label), to_number(raw_value) or 0.0))
    return records


def coerce_categories(data: Any, options: ChartOptions) -> List[LabeledValue]:
    """Pie/funnel records keyed by ``category``."""

    records: List[LabeledValue] = []
    for item in _as_list(data):
        label = _field(item, "category")
        raw_value = _field(item, "value")
        if label is None or raw_value is None:
            records.append(_fallback(item))
            continue
        records.append(LabeledValue(str(label), to_number(raw_value) or 0.0))
    return records


def coerce_xy(data: Any, options: ChartOptions) -> List[XYPoint]:
    records: List[XYPoint] = []
    for item in _as_list(data):
        x = to_number(_field(item, "x"))
        y = to_number(_field(item, "y"))
        if x is None or y is None:
            records.append(XYPoint(None, None))
        else:
            records.append(XYPoint(x, y))
    return records


def coerce_radar(data: Any, options: ChartOptions) -> List[RadarValue]:
    records: List[RadarValue] = []
    for item in _as_list(data):
        name = _field(item, "name")
        group = _field(item, "group")
        value = to_number(_field(item, "value"))
        if not name or not group or value is None:
            continue
        records.append(RadarValue(str(name), str(group), value))
    return records


def coerce_histogram(data: Any, options: ChartOptions) -> List[float]:
    values: List[float] = []
    for item in _as_list(data):
        raw = item.get("value") if isinstance(item, Mapping) else item
        number = to_number(raw)
        if number is not None:
            values.append(number)
    return values


def coerce_series(values: Sequence[Any]) -> Tuple[float, ...]:
    return tuple(to_number(value) or 0.0 for value in values)


def coerce_dual_axes(data: Any, options: ChartOptions) -> DualAxesData:
    """Read the ``series`` option, or fall back to legacy per-row objects."""

    if options.series:
        bars: Tuple[float, ...] = ()
        line: Tuple[float, ...] = ()
        bar_title = line_title = None
        for spec in options.series:
            if spec.type == "column" and not bars:
                bars = coerce_series(spec.data)
                bar_title = spec.axis_y_title
            elif spec.type == "line" and not line:
                line = coerce_series(spec.data)
                line_title = spec.axis_y_title
        categories = tuple(options.categories or ())
        if not categories:
            categories = tuple(str(index + 1) for index in range(max(len(bars), len(line))))
        return DualAxesData(categories, bars, line, bar_title, line_title)

    labels: List[str] = []
    bar_values: List[float] = []
    line_values: List[float] = []
    for index, item in enumerate(_as_list(data)):
        if not isinstance(item, Mapping):
            continue
        label = _field(item, "category", "time")
        labels.append(str(label) if label is not None else str(index + 1))
        bar_values.append(to_number(_field(item, "bar", "value")) or 0.0)
        line_values.append(to_number(_field(item, "line", "value2")) or 0.0)
    categories = tuple(options.categories or labels)
    return DualAxesData(categories, tuple(bar_values), tuple(line_values))
