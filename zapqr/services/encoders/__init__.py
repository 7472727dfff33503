"""Encoder strategies, one per export format."""

from .pdf_encoder import PdfEncoder, a4_placement
from .raster_encoder import JpegEncoder, PngEncoder, RasterEncoder, WebpEncoder
from .svg_encoder import SvgEncoder

__all__ = [
    "SvgEncoder",
    "RasterEncoder",
    "PngEncoder",
    "WebpEncoder",
    "JpegEncoder",
    "PdfEncoder",
    "a4_placement",
]
