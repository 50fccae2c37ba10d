"""Chart rendering endpoints."""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import ORJSONResponse, Response

from ...charts import ChartRequest, ChartType, render_request
from ...charts.dispatch import ALIASES
from ...config import get_settings
from ...storage import ChartWriter, generate_chart

router = APIRouter(
    prefix="/v1/charts",
    tags=["charts"],
    default_response_class=ORJSONResponse,
)

SVG_MEDIA_TYPE = "image/svg+xml"


def get_writer() -> ChartWriter:
    return ChartWriter(get_settings().output_dir)


@router.get("/types")
def chart_types() -> dict[str, Any]:
    return {
        "types": [member.value for member in ChartType],
        "aliases": {alias: target.value for alias, target in ALIASES.items()},
        "fallback": ChartType.resolve("").value,
    }


@router.post("/render", response_class=Response)
def render(payload: ChartRequest) -> Response:
    """Return the SVG document without touching the filesystem."""

    return Response(content=render_request(payload), media_type=SVG_MEDIA_TYPE)


@router.post("", response_model=dict[str, str])
def create(payload: ChartRequest, writer: ChartWriter = Depends(get_writer)) -> dict[str, str]:
    """Render and persist the chart, returning where it was written."""

    artifact = generate_chart(payload.type, payload.data, payload.options, writer=writer)
    return artifact.to_payload()


__all__ = ["get_writer", "router"]
