from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

DEFAULT_RESOLUTION = 1000
DEFAULT_QUALITY = 85
FILE_NAME_PREFIX = "zaplink-qr-"


class ExportFormat(str, Enum):
    """Closed set of output encodings."""

    PNG = "png"
    SVG = "svg"
    PDF = "pdf"
    WEBP = "webp"
    JPEG = "jpeg"

    @classmethod
    def parse(cls, value: ExportFormat | str) -> ExportFormat:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unsupported export format: {value!r}") from None


@dataclass(frozen=True)
class VectorSource:
    """Serialized SVG markup of the QR graphic (square intrinsic aspect ratio)."""

    markup: str

    def to_bytes(self) -> bytes:
        return self.markup.encode("utf-8")


@dataclass(frozen=True)
class FormatDescriptor:
    format: ExportFormat
    label: str
    description: str
    extension: str
    lossy: bool
    mime_type: str


@dataclass(frozen=True)
class ExportOptions:
    format: ExportFormat
    resolution: int = DEFAULT_RESOLUTION
    quality: int = DEFAULT_QUALITY  # only read by lossy encoders
    include_frame: bool = False
    include_logo: bool = False
    file_name: str = f"{FILE_NAME_PREFIX}code"

    def __post_init__(self) -> None:
        # accept "png" as well as ExportFormat.PNG
        object.__setattr__(self, "format", ExportFormat.parse(self.format))


@dataclass(frozen=True)
class ResolutionPreset:
    label: str
    value: int
    tag: str


@dataclass
class RasterSurface:
    """Square pixel buffer. `image` is the host handle (QImage for the Qt codec)."""

    width: int
    height: int
    image: Any


@dataclass(frozen=True)
class ExportArtifact:
    payload: bytes
    file_name: str
    mime_type: str

    @property
    def size(self) -> int:
        return len(self.payload)


@dataclass(frozen=True)
class PagePlacement:
    page_width_mm: float
    page_height_mm: float
    x_mm: float
    y_mm: float
    size_mm: float


def default_file_name(name: str | None = None) -> str:
    """Base file name used by the editor when the user has not picked one."""
    return f"{FILE_NAME_PREFIX}{name or 'code'}"
