from __future__ import annotations

from zapqr.domain.errors import EncodingError
from zapqr.domain.interfaces import IEncoder, IImageCodec
from zapqr.domain.models import (
    ExportArtifact,
    ExportFormat,
    ExportOptions,
    FormatDescriptor,
    PagePlacement,
    VectorSource,
)
from zapqr.services.rasterizer import Rasterizer

A4_WIDTH_MM = 210.0
A4_HEIGHT_MM = 297.0
QR_SIZE_MM = 100.0

_PNG_MIME = "image/png"


def a4_placement(size_mm: float = QR_SIZE_MM) -> PagePlacement:
    """Square of `size_mm` centred on a portrait A4 page."""
    return PagePlacement(
        page_width_mm=A4_WIDTH_MM,
        page_height_mm=A4_HEIGHT_MM,
        x_mm=(A4_WIDTH_MM - size_mm) / 2,
        y_mm=(A4_HEIGHT_MM - size_mm) / 2,
        size_mm=size_mm,
    )


class PdfEncoder(IEncoder):
    """Rasterize, encode a lossless PNG intermediate, embed it on an A4 page."""

    format = ExportFormat.PDF

    def __init__(
        self,
        descriptor: FormatDescriptor,
        rasterizer: Rasterizer,
        codec: IImageCodec,
        placement: PagePlacement | None = None,
    ) -> None:
        super().__init__(descriptor)
        self._rasterizer = rasterizer
        self._codec = codec
        self.placement = placement or a4_placement()

    def encode(self, source: VectorSource, options: ExportOptions) -> ExportArtifact:
        if not self._codec.supports(_PNG_MIME):
            raise EncodingError("PDF export needs a PNG encoder for the page image")

        surface = self._rasterizer.rasterize(source, options.resolution)
        png = self._codec.encode(surface, _PNG_MIME, None)
        payload = self._codec.compose_pdf(png, self.placement)
        return self.artifact(payload, options)
