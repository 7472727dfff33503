from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from PyQt6.QtCore import QBuffer, QByteArray, QIODevice, QMarginsF, QRectF, Qt
from PyQt6.QtGui import QImage, QImageWriter, QPageLayout, QPageSize, QPainter, QPdfWriter
from PyQt6.QtSvg import QSvgRenderer

from zapqr.domain.errors import EncodingError, RasterizationError
from zapqr.domain.interfaces import IImageCodec
from zapqr.domain.models import PagePlacement, RasterSurface

logger = logging.getLogger(__name__)

_MM_PER_INCH = 25.4

# MIME type -> Qt image writer format name
_WRITER_FORMATS: dict[str, str] = {
    "image/png": "png",
    "image/jpeg": "jpeg",
    "image/webp": "webp",
}


class QtImageCodec(IImageCodec):
    """
    Qt-backed host primitives (QSvgRenderer, QImage, QImageWriter, QPdfWriter).

    Needs a QGuiApplication (or QApplication) instance for painting and
    image format plugins.
    """

    def __init__(self, *, pdf_dpi: int = 300) -> None:
        self._pdf_dpi = pdf_dpi
        self._live_buffers = 0

    @property
    def live_buffers(self) -> int:
        """Number of memory buffers currently open (0 between calls)."""
        return self._live_buffers

    @contextmanager
    def scoped_buffer(self) -> Iterator[QBuffer]:
        buf = QBuffer()
        if not buf.open(QIODevice.OpenModeFlag.WriteOnly):
            raise OSError("Cannot open memory buffer")
        self._live_buffers += 1
        try:
            yield buf
        finally:
            buf.close()
            self._live_buffers -= 1

    # ---------- raster ----------

    def rasterize(self, svg: bytes, resolution: int) -> RasterSurface:
        renderer = QSvgRenderer(QByteArray(svg))
        if not renderer.isValid():
            raise RasterizationError("Failed to load SVG")

        image = QImage(resolution, resolution, QImage.Format.Format_RGB32)
        if image.isNull():
            raise RasterizationError(
                f"Could not allocate a {resolution}x{resolution} surface"
            )
        image.fill(Qt.GlobalColor.white)

        painter = QPainter()
        if not painter.begin(image):
            raise RasterizationError("Could not get a painter for the surface")
        try:
            painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
            # Default aspect mode ignores the ratio, so the source fills the square.
            renderer.render(painter, QRectF(0, 0, resolution, resolution))
        finally:
            painter.end()

        return RasterSurface(width=image.width(), height=image.height(), image=image)

    # ---------- encode ----------

    def supports(self, mime_type: str) -> bool:
        name = _WRITER_FORMATS.get(mime_type)
        if name is None:
            return False
        available = {
            bytes(f.data()).decode("ascii").lower() for f in QImageWriter.supportedImageFormats()
        }
        return name in available

    def encode(self, surface: RasterSurface, mime_type: str, quality: float | None) -> bytes:
        if not self.supports(mime_type):
            raise EncodingError(f"No image encoder available for {mime_type}")

        # Qt takes 0..100, -1 meaning the writer default (lossless for PNG)
        q = -1 if quality is None else int(round(quality * 100))
        with self.scoped_buffer() as buf:
            if not surface.image.save(buf, _WRITER_FORMATS[mime_type], q):
                raise EncodingError(f"Encoding to {mime_type} failed")
            payload = bytes(buf.data().data())

        logger.debug("Encoded %s (%d bytes)", mime_type, len(payload))
        return payload

    def compose_pdf(self, png: bytes, placement: PagePlacement) -> bytes:
        image = QImage.fromData(png, "PNG")
        if image.isNull():
            raise EncodingError("Intermediate PNG could not be decoded")

        with self.scoped_buffer() as buf:
            writer = QPdfWriter(buf)
            writer.setResolution(self._pdf_dpi)
            writer.setCreator("zapqr")
            layout = QPageLayout(
                QPageSize(QPageSize.PageSizeId.A4),
                QPageLayout.Orientation.Portrait,
                QMarginsF(0, 0, 0, 0),
                QPageLayout.Unit.Millimeter,
            )
            writer.setPageLayout(layout)

            painter = QPainter()
            if not painter.begin(writer):
                raise EncodingError("Could not start PDF page")
            try:
                px = self._pdf_dpi / _MM_PER_INCH
                target = QRectF(
                    placement.x_mm * px,
                    placement.y_mm * px,
                    placement.size_mm * px,
                    placement.size_mm * px,
                )
                painter.drawImage(target, image)
            finally:
                painter.end()
            payload = bytes(buf.data().data())

        if not payload:
            raise EncodingError("PDF writer produced no output")
        return payload
