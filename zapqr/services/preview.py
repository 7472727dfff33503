from __future__ import annotations

from dataclasses import dataclass

from zapqr.domain.models import ExportFormat
from zapqr.services.catalog import FormatCatalog
from zapqr.services.size_estimator import estimate

QUALITY_MIN = 10
QUALITY_MAX = 100
QUALITY_STEP = 5

_VECTOR_FORMATS = frozenset({ExportFormat.SVG, ExportFormat.PDF})


@dataclass(frozen=True)
class ExportPreview:
    """What the export panel shows for the current format/resolution/quality."""

    format: ExportFormat
    label: str
    lossy: bool
    effective_quality: int
    quality_hint: str
    detail: str
    resolution_adjustable: bool
    size_estimate: str


def quality_hint(label: str, lossy: bool, quality: int) -> str:
    if not lossy:
        return f"{label} is lossless — maximum quality preserved"
    if quality >= 80:
        return "High quality — larger file"
    if quality >= 50:
        return "Balanced quality and size"
    return "Small file — lower quality"


def build_preview(
    catalog: FormatCatalog, fmt: ExportFormat | str, resolution: int, quality: int
) -> ExportPreview:
    info = catalog.describe(fmt)
    is_vector = info.format in _VECTOR_FORMATS
    return ExportPreview(
        format=info.format,
        label=info.label,
        lossy=info.lossy,
        effective_quality=quality if info.lossy else QUALITY_MAX,
        quality_hint=quality_hint(info.label, info.lossy, quality),
        detail="Vector" if is_vector else f"{resolution}px",
        resolution_adjustable=not is_vector,
        size_estimate=estimate(info.format, resolution, quality),
    )
