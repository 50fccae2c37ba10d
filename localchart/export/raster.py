"""Convert chart SVG documents to PNG with external converter programs.

Converters are tried in order; a missing executable is skipped and a failing
one falls through to the next.  When nothing works an HTML page embedding
the SVG is written next to the target so the chart can be converted by
hand.
"""
from __future__ import annotations

import html
import logging
import shutil
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

from ..errors import ConversionError, ConverterUnavailableError

__all__ = [
    "CONVERTERS",
    "INSTALL_HINTS",
    "ConversionReport",
    "convert_directory",
    "convert_svg_to_png",
]

LOGGER = logging.getLogger(__name__)

# (executable, argv builder taking (svg, png))
CONVERTERS: Tuple[Tuple[str, Callable[[Path, Path], List[str]]], ...] = (
    ("rsvg-convert", lambda svg, png: ["rsvg-convert", "-o", str(png), str(svg)]),
    ("magick", lambda svg, png: ["magick", str(svg), str(png)]),
    ("convert", lambda svg, png: ["convert", str(svg), str(png)]),
    ("inkscape", lambda svg, png: ["inkscape", f"--export-filename={png}", str(svg)]),
)

INSTALL_HINTS = """To install SVG converters:

macOS (Homebrew):
  brew install librsvg imagemagick inkscape

Ubuntu/Debian:
  sudo apt install librsvg2-bin imagemagick inkscape

Windows (Chocolatey):
  choco install rsvg-convert imagemagick inkscape
"""

Runner = Callable[[Sequence[str]], subprocess.CompletedProcess]
Which = Callable[[str], Optional[str]]


def _default_runner(cmd: Sequence[str]) -> subprocess.CompletedProcess:
    return subprocess.run(list(cmd), capture_output=True, text=True, check=True)


@dataclass
class ConversionReport:
    converted: List[Path] = field(default_factory=list)
    failed: List[Path] = field(default_factory=list)
    fallbacks: List[Path] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def convert_svg_to_png(
    svg_path: Path,
    png_path: Path,
    *,
    runner: Runner | None = None,
    which: Which = shutil.which,
) -> str:
    """Convert one file and return the name of the converter that worked."""

    svg_path = Path(svg_path)
    png_path = Path(png_path)
    if not svg_path.exists():
        raise ConversionError(f"SVG file not found: {svg_path}")
    run = runner or _default_runner
    for executable, build in CONVERTERS:
        if which(executable) is None:
            continue
        try:
            run(build(svg_path, png_path))
        except (OSError, subprocess.CalledProcessError) as exc:
            LOGGER.debug("%s failed for %s: %s", executable, svg_path, exc)
            continue
        return executable

    fallback = write_html_fallback(svg_path, png_path)
    raise ConverterUnavailableError(
        f"No converter available. Created {fallback} for manual conversion.",
        fallback_path=fallback,
    )


def write_html_fallback(svg_path: Path, png_path: Path) -> Path:
    svg_markup = svg_path.read_text(encoding="utf-8")
    if svg_markup.startswith("<?xml"):
        svg_markup = svg_markup.split("?>", 1)[1].lstrip()
    page = f"""<!DOCTYPE html>
<html>
<head>
    <title>SVG to PNG</title>
    <style>
        body {{ margin: 0; padding: 20px; background: white; font-family: Arial, sans-serif; }}
        .notice {{ margin-bottom: 20px; padding: 10px; border: 1px solid #ddd; background: #f9f9f9; }}
        svg {{ border: 1px solid #ccc; }}
    </style>
</head>
<body>
    <div class="notice">
        <strong>Manual Conversion Required</strong><br>
        Source: {html.escape(svg_path.name)}<br>
        Target: {html.escape(png_path.name)}<br>
        Right-click the SVG below and save as PNG, or take a screenshot.
    </div>
    {svg_markup}
</body>
</html>
"""
    target = png_path.with_suffix(".html")
    target.write_text(page, encoding="utf-8")
    LOGGER.info("created fallback HTML: %s", target)
    return target


def convert_directory(
    input_dir: Path,
    output_dir: Optional[Path] = None,
    *,
    runner: Runner | None = None,
    which: Which = shutil.which,
) -> ConversionReport:
    """Convert every ``*.svg`` in ``input_dir``; output defaults to the input."""

    source = Path(input_dir)
    if not source.is_dir():
        raise ConversionError(f"Input directory not found: {source}")
    target = Path(output_dir) if output_dir else source
    target.mkdir(parents=True, exist_ok=True)

    report = ConversionReport()
    for svg_path in sorted(source.iterdir()):
        if svg_path.suffix.lower() != ".svg":
            continue
        png_path = target / f"{svg_path.stem}.png"
        try:
            used = convert_svg_to_png(svg_path, png_path, runner=runner, which=which)
        except ConverterUnavailableError as exc:
            report.failed.append(svg_path)
            report.fallbacks.append(exc.fallback_path)
            LOGGER.error("failed: %s - %s", svg_path.name, exc)
            continue
        report.converted.append(svg_path)
        LOGGER.info("%s -> %s (%s)", svg_path.name, png_path.name, used)
    return report
