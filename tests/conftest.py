from __future__ import annotations

import logging
import os
import re
import time
import zlib
from pathlib import Path

import pytest

# Headless Qt for CI; must be set before the first QGuiApplication is created.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from zapqr.di.container import Container  # noqa: E402
from zapqr.domain.models import ExportArtifact  # noqa: E402
from zapqr.services.codecs.qt_codec import QtImageCodec  # noqa: E402
from zapqr.services.config.export_config import ExportConfig  # noqa: E402
from zapqr.services.source import MarkupContainer  # noqa: E402
from zapqr.utils.logging_config import ROOT_LOGGER  # noqa: E402

# 21x21 "QR" with two finder-like squares on a transparent background
SAMPLE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="21" height="21" viewBox="0 0 21 21">'
    '<rect x="0" y="0" width="7" height="7" fill="#000000" />'
    '<rect x="14" y="14" width="7" height="7" fill="#000000" />'
    "</svg>"
)


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        if created:
            app.quit()


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """setup_logging() detaches the package logger from root; undo that per test."""
    yield
    logger = logging.getLogger(ROOT_LOGGER)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


# --- Fakes ---


class RecordingDownloader:
    def __init__(self) -> None:
        self.delivered: list[ExportArtifact] = []
        self.times: list[float] = []

    def deliver(self, artifact: ExportArtifact) -> None:
        self.delivered.append(artifact)
        self.times.append(time.monotonic())

    @property
    def names(self) -> list[str]:
        return [a.file_name for a in self.delivered]


class CountingGate:
    def __init__(self) -> None:
        self.acquired = 0
        self.resets = 0

    def acquire(self) -> None:
        self.acquired += 1

    def reset(self) -> None:
        self.resets += 1


_PDF_STREAM = re.compile(rb"obj\s*<<((?:(?!endobj).)*?)>>\s*stream\r?\n(.*?)endstream", re.S)


def _decode_pdf_streams(pdf: bytes) -> list[tuple[bytes, bytes]]:
    """(dictionary, decoded data) for every stream object; Flate streams are inflated."""
    out = []
    for header, data in _PDF_STREAM.findall(pdf):
        if b"/FlateDecode" in header:
            data = zlib.decompressobj().decompress(data)
        out.append((header, data))
    return out


# --- Common fixtures ---


@pytest.fixture()
def sample_svg() -> str:
    return SAMPLE_SVG


@pytest.fixture()
def svg_container(sample_svg: str) -> MarkupContainer:
    return MarkupContainer(f'<div class="qr-wrapper">{sample_svg}</div>')


@pytest.fixture()
def codec(qapp) -> QtImageCodec:
    return QtImageCodec()


@pytest.fixture()
def downloader() -> RecordingDownloader:
    return RecordingDownloader()


@pytest.fixture()
def gate() -> CountingGate:
    return CountingGate()


@pytest.fixture()
def container(qapp, tmp_path: Path, downloader, gate) -> Container:
    return Container(
        config=ExportConfig(output_dir=tmp_path),
        downloader=downloader,
        gate=gate,
    )


@pytest.fixture()
def pdf_streams():
    return _decode_pdf_streams


@pytest.fixture()
def require_webp(codec: QtImageCodec) -> None:
    if not codec.supports("image/webp"):
        pytest.skip("Qt build has no WebP image plugin")
