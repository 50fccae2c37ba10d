"""Request and option models accepted by the render core."""
from __future__ import annotations

import math
from typing import Any, List, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = ["ChartOptions", "ChartRequest", "SeriesSpec"]

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600
DEFAULT_BINS = 10
MAX_BINS = 1000


def _lenient_int(value: Any, default: int, maximum: Optional[int] = None) -> int:
    """Positive integer from ``value``; anything else yields ``default``."""

    if isinstance(value, bool) or value is None:
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number) or number < 1:
        return default
    result = int(number)
    return min(result, maximum) if maximum is not None else result


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text or None


class SeriesSpec(BaseModel):
    """One series of a dual-axes chart."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    type: Literal["column", "line"]
    data: List[Any] = Field(default_factory=list)
    axis_y_title: Optional[str] = Field(default=None, alias="axisYTitle")

    @field_validator("type", mode="before")
    @classmethod
    def _normalise_type(cls, value: Any) -> Any:
        return value.lower() if isinstance(value, str) else value

    @field_validator("data", mode="before")
    @classmethod
    def _listify(cls, value: Any) -> List[Any]:
        return list(value) if isinstance(value, (list, tuple)) else []

    @field_validator("axis_y_title", mode="before")
    @classmethod
    def _title(cls, value: Any) -> Optional[str]:
        return _optional_text(value)


class ChartOptions(BaseModel):
    """Display options shared by every engine.

    Numeric fields are coerced leniently: a value that cannot be read as a
    positive number falls back to its default instead of failing the render,
    and ``bins`` is capped at ``MAX_BINS``.  Unknown keys are kept so callers
    can round-trip their payloads.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    title: Optional[str] = None
    axis_x_title: Optional[str] = Field(default=None, alias="axisXTitle")
    axis_y_title: Optional[str] = Field(default=None, alias="axisYTitle")
    bins: int = DEFAULT_BINS
    series: Optional[List[SeriesSpec]] = None
    categories: Optional[List[str]] = None

    @field_validator("width", mode="before")
    @classmethod
    def _width(cls, value: Any) -> int:
        return _lenient_int(value, DEFAULT_WIDTH)

    @field_validator("height", mode="before")
    @classmethod
    def _height(cls, value: Any) -> int:
        return _lenient_int(value, DEFAULT_HEIGHT)

    @field_validator("bins", mode="before")
    @classmethod
    def _bins(cls, value: Any) -> int:
        return _lenient_int(value, DEFAULT_BINS, MAX_BINS)

    @field_validator("title", "axis_x_title", "axis_y_title", mode="before")
    @classmethod
    def _text(cls, value: Any) -> Optional[str]:
        return _optional_text(value)

    @field_validator("series", mode="before")
    @classmethod
    def _series(cls, value: Any) -> Optional[List[Any]]:
        if not isinstance(value, (list, tuple)):
            return None
        kept = [
            item
            for item in value
            if isinstance(item, Mapping) and str(item.get("type", "")).lower() in {"column", "line"}
        ]
        return kept or None

    @field_validator("categories", mode="before")
    @classmethod
    def _categories(cls, value: Any) -> Optional[List[str]]:
        if not isinstance(value, (list, tuple)):
            return None
        return [str(item) for item in value]

    @classmethod
    def from_payload(cls, payload: Any) -> "ChartOptions":
        """Build options from a raw mapping; anything else yields defaults."""

        if isinstance(payload, ChartOptions):
            return payload
        if not isinstance(payload, Mapping):
            return cls()
        return cls.model_validate(dict(payload))


class ChartRequest(BaseModel):
    """A single render invocation: chart type tag, raw data and options."""

    model_config = ConfigDict(frozen=True)

    type: str
    data: Any = Field(default_factory=list)
    options: ChartOptions = Field(default_factory=ChartOptions)

    @field_validator("options", mode="before")
    @classmethod
    def _options(cls, value: Any) -> ChartOptions:
        return ChartOptions.from_payload(value)
