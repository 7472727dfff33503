"""Domain layer: interfaces, errors and simple models (dataclasses)."""

from .errors import (
    BatchExportError,
    EncodingError,
    ExportError,
    RasterizationError,
    SourceNotFoundError,
)
from .interfaces import IDownloader, IEncoder, IImageCodec, IRateLimiter, ISourceContainer
from .models import (
    ExportArtifact,
    ExportFormat,
    ExportOptions,
    FormatDescriptor,
    PagePlacement,
    RasterSurface,
    ResolutionPreset,
    VectorSource,
    default_file_name,
)

__all__ = [
    "ExportError",
    "SourceNotFoundError",
    "EncodingError",
    "RasterizationError",
    "BatchExportError",
    "IImageCodec",
    "ISourceContainer",
    "IDownloader",
    "IRateLimiter",
    "IEncoder",
    "ExportFormat",
    "ExportOptions",
    "ExportArtifact",
    "FormatDescriptor",
    "PagePlacement",
    "RasterSurface",
    "ResolutionPreset",
    "VectorSource",
    "default_file_name",
]
