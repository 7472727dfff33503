from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from zapqr.domain.models import (
    ExportArtifact,
    ExportFormat,
    ExportOptions,
    FormatDescriptor,
    PagePlacement,
    RasterSurface,
    VectorSource,
)


class IImageCodec(Protocol):
    """Host rendering primitives: SVG decode, pixel surfaces, image and PDF encoders."""

    def rasterize(self, svg: bytes, resolution: int) -> RasterSurface: ...
    def supports(self, mime_type: str) -> bool: ...
    def encode(self, surface: RasterSurface, mime_type: str, quality: float | None) -> bytes: ...
    def compose_pdf(self, png: bytes, placement: PagePlacement) -> bytes: ...


class ISourceContainer(Protocol):
    """Something the rendering layer has already drawn the QR vector into."""

    def find_vector(self) -> VectorSource | None: ...


class IDownloader(Protocol):
    """Hands a finished artifact to the host save-to-disk mechanism."""

    def deliver(self, artifact: ExportArtifact) -> None: ...


class IRateLimiter(Protocol):
    """Throttles successive deliveries."""

    def acquire(self) -> None: ...
    def reset(self) -> None: ...


class IConfigService(Protocol):
    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...
    def as_dict(self) -> Mapping[str, Mapping[str, str]]: ...

    @property
    def loaded_from(self) -> Path | None: ...


class IEncoder(ABC):
    """Encoding strategy for one export format."""

    format: ExportFormat

    def __init__(self, descriptor: FormatDescriptor) -> None:
        if descriptor.format is not self.format:
            raise ValueError(
                f"{type(self).__name__} encodes {self.format.value}, got {descriptor.format.value}"
            )
        self.descriptor = descriptor

    def file_name_for(self, options: ExportOptions) -> str:
        return f"{options.file_name}.{self.descriptor.extension}"

    def artifact(self, payload: bytes, options: ExportOptions) -> ExportArtifact:
        return ExportArtifact(
            payload=payload,
            file_name=self.file_name_for(options),
            mime_type=self.descriptor.mime_type,
        )

    @abstractmethod
    def encode(self, source: VectorSource, options: ExportOptions) -> ExportArtifact:
        """Produce a complete artifact or raise EncodingError."""
        raise NotImplementedError
