"""Raster export of chart documents."""

from .raster import ConversionReport, convert_directory, convert_svg_to_png

__all__ = ["ConversionReport", "convert_directory", "convert_svg_to_png"]
