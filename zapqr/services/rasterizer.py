from __future__ import annotations

import logging

from zapqr.domain.errors import RasterizationError
from zapqr.domain.interfaces import IImageCodec
from zapqr.domain.models import RasterSurface, VectorSource

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESOLUTION = 16384


class Rasterizer:
    """Draws a vector source onto a white, square surface of side `resolution`."""

    def __init__(self, codec: IImageCodec, *, max_resolution: int = DEFAULT_MAX_RESOLUTION) -> None:
        self._codec = codec
        self._max_resolution = max_resolution

    def rasterize(self, source: VectorSource | None, resolution: int) -> RasterSurface:
        if source is None or not source.markup.strip():
            raise RasterizationError("No vector source to rasterize")
        if isinstance(resolution, bool) or not isinstance(resolution, int):
            raise RasterizationError(f"Resolution must be an integer, got {resolution!r}")
        if resolution <= 0:
            raise RasterizationError(f"Resolution must be positive, got {resolution}")
        if resolution > self._max_resolution:
            raise RasterizationError(
                f"Resolution {resolution} exceeds the {self._max_resolution}px limit"
            )

        surface = self._codec.rasterize(source.to_bytes(), resolution)
        if (surface.width, surface.height) != (resolution, resolution):
            raise RasterizationError(
                f"Expected a {resolution}x{resolution} surface, "
                f"got {surface.width}x{surface.height}"
            )
        logger.debug("Rasterized source at %dpx", resolution)
        return surface
