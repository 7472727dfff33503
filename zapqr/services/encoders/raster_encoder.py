from __future__ import annotations

import logging

from zapqr.domain.errors import EncodingError
from zapqr.domain.interfaces import IEncoder, IImageCodec
from zapqr.domain.models import (
    ExportArtifact,
    ExportFormat,
    ExportOptions,
    FormatDescriptor,
    VectorSource,
)
from zapqr.services.rasterizer import Rasterizer

logger = logging.getLogger(__name__)


def clamp_quality(quality: int) -> int:
    return max(1, min(100, int(quality)))


class RasterEncoder(IEncoder):
    """Rasterize at `options.resolution`, then encode with the descriptor's MIME type."""

    def __init__(
        self, descriptor: FormatDescriptor, rasterizer: Rasterizer, codec: IImageCodec
    ) -> None:
        super().__init__(descriptor)
        self._rasterizer = rasterizer
        self._codec = codec

    def quality_for(self, options: ExportOptions) -> float | None:
        if not self.descriptor.lossy:
            return None
        return clamp_quality(options.quality) / 100

    def encode(self, source: VectorSource, options: ExportOptions) -> ExportArtifact:
        mime = self.descriptor.mime_type
        if not self._codec.supports(mime):
            raise EncodingError(f"No image encoder available for {mime}")

        surface = self._rasterizer.rasterize(source, options.resolution)
        payload = self._codec.encode(surface, mime, self.quality_for(options))
        if not payload:
            raise EncodingError(f"{self.descriptor.label} encoder returned no data")
        logger.debug("%s: %dpx -> %d bytes", self.descriptor.label, options.resolution, len(payload))
        return self.artifact(payload, options)


class PngEncoder(RasterEncoder):
    format = ExportFormat.PNG


class WebpEncoder(RasterEncoder):
    format = ExportFormat.WEBP


class JpegEncoder(RasterEncoder):
    format = ExportFormat.JPEG
