"""Persist rendered chart documents to the local filesystem."""
from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Union

from .charts import ChartOptions, render_chart
from .errors import ChartGenerationError

__all__ = ["ChartArtifact", "ChartWriter", "generate_chart"]

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChartArtifact:
    """Location of a persisted chart document."""

    chart_type: str
    path: Path

    @property
    def filename(self) -> str:
        return self.path.name

    @property
    def uri(self) -> str:
        return self.path.resolve().as_uri()

    def to_payload(self) -> dict[str, str]:
        return {
            "type": self.chart_type,
            "filename": self.filename,
            "path": str(self.path.resolve()),
            "uri": self.uri,
        }


class ChartWriter:
    """Write documents into ``output_dir`` under unique, timestamped names."""

    def __init__(
        self,
        output_dir: Union[str, Path],
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.output_dir = Path(output_dir)
        self._clock = clock

    def timestamp(self) -> int:
        return int(self._clock() * 1000)

    def _unique_path(self, stem: str, suffix: str) -> Path:
        candidate = self.output_dir / f"{stem}{suffix}"
        counter = 1
        while candidate.exists():
            candidate = self.output_dir / f"{stem}_{counter}{suffix}"
            counter += 1
        return candidate

    def write(self, chart_type: str, svg: str, *, stamp: Optional[int] = None) -> ChartArtifact:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        stamp = self.timestamp() if stamp is None else stamp
        path = self._unique_path(f"{_safe_tag(chart_type)}_{stamp}", ".svg")
        path.write_text(svg, encoding="utf-8")
        LOGGER.info("chart SVG saved locally: %s", path)
        return ChartArtifact(chart_type=chart_type, path=path)

    def write_error(self, chart_type: str, message: str, options: Any, *, stamp: int) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self._unique_path(f"{_safe_tag(chart_type)}_{stamp}_error", ".txt")
        body = (
            f"Error generating chart: {message}\n"
            f"Options: {json.dumps(_jsonable(options), indent=2, default=str)}"
        )
        path.write_text(body, encoding="utf-8")
        return path


def generate_chart(
    chart_type: str,
    data: Any,
    options: Optional[Union[ChartOptions, Mapping[str, Any]]] = None,
    *,
    writer: ChartWriter,
    logger: Optional[logging.Logger] = None,
) -> ChartArtifact:
    """Render and persist a chart.

    On failure an error report is written next to where the document would
    have gone and :class:`ChartGenerationError` is raised; the caller decides
    what to do with it.
    """

    stamp = writer.timestamp()
    try:
        svg = render_chart(chart_type, data, options, logger=logger)
        return writer.write(chart_type, svg, stamp=stamp)
    except Exception as exc:
        LOGGER.error("error generating %s chart: %s", chart_type, exc)
        try:
            error_path = writer.write_error(chart_type, str(exc), options, stamp=stamp)
        except OSError as write_exc:
            LOGGER.error("could not write error report: %s", write_exc)
            error_path = None
        raise ChartGenerationError(
            f"Failed to generate chart SVG: {exc}",
            chart_type=chart_type,
            error_path=error_path,
        ) from exc


def _safe_tag(chart_type: str) -> str:
    cleaned = "".join(ch if ch.isalnum() or ch in "-_" else "_" for ch in str(chart_type))
    return cleaned or "chart"


def _jsonable(options: Any) -> Any:
    if isinstance(options, ChartOptions):
        return options.model_dump(by_alias=True, exclude_none=True)
    return options
