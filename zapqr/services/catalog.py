from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from zapqr.domain.interfaces import IEncoder
from zapqr.domain.models import ExportFormat, FormatDescriptor, ResolutionPreset

_DESCRIPTORS: Mapping[ExportFormat, FormatDescriptor] = MappingProxyType(
    {
        ExportFormat.PNG: FormatDescriptor(
            format=ExportFormat.PNG,
            label="PNG",
            description="Best for general use — crisp, lossless",
            extension="png",
            lossy=False,
            mime_type="image/png",
        ),
        ExportFormat.SVG: FormatDescriptor(
            format=ExportFormat.SVG,
            label="SVG",
            description="Scalable vector — perfect for print",
            extension="svg",
            lossy=False,
            mime_type="image/svg+xml",
        ),
        ExportFormat.PDF: FormatDescriptor(
            format=ExportFormat.PDF,
            label="PDF",
            description="Print-ready A4 document",
            extension="pdf",
            lossy=False,
            mime_type="application/pdf",
        ),
        ExportFormat.WEBP: FormatDescriptor(
            format=ExportFormat.WEBP,
            label="WebP",
            description="Modern web format — smaller file size",
            extension="webp",
            lossy=True,
            mime_type="image/webp",
        ),
        ExportFormat.JPEG: FormatDescriptor(
            format=ExportFormat.JPEG,
            label="JPEG",
            description="Universal compatibility",
            extension="jpeg",
            lossy=True,
            mime_type="image/jpeg",
        ),
    }
)

RESOLUTION_PRESETS: tuple[ResolutionPreset, ...] = (
    ResolutionPreset(label="Low (300px)", value=300, tag="Web"),
    ResolutionPreset(label="Medium (1000px)", value=1000, tag="Social"),
    ResolutionPreset(label="High (2000px)", value=2000, tag="Print"),
    ResolutionPreset(label="Ultra (4000px)", value=4000, tag="Banner"),
)


def describe(fmt: ExportFormat | str) -> FormatDescriptor:
    """Static lookup; raises ValueError for anything outside ExportFormat."""
    return _DESCRIPTORS[ExportFormat.parse(fmt)]


def preset_for(value: int) -> ResolutionPreset | None:
    return next((p for p in RESOLUTION_PRESETS if p.value == value), None)


@dataclass
class FormatCatalog:
    """
    Format metadata plus the ExportFormat -> encoder strategy table.
    Instance-based so each container (and each test) owns its own table.
    """

    _encoders: dict[ExportFormat, IEncoder] = field(default_factory=dict)

    # ---- metadata ----

    def describe(self, fmt: ExportFormat | str) -> FormatDescriptor:
        return describe(fmt)

    def formats(self) -> list[ExportFormat]:
        return list(_DESCRIPTORS)

    def descriptors(self) -> list[FormatDescriptor]:
        return list(_DESCRIPTORS.values())

    def lossy_formats(self) -> list[ExportFormat]:
        return [d.format for d in _DESCRIPTORS.values() if d.lossy]

    # ---- strategy table ----

    def register(self, encoder: IEncoder) -> None:
        self._encoders[encoder.format] = encoder

    def encoder_for(self, fmt: ExportFormat | str) -> IEncoder:
        return self._encoders[ExportFormat.parse(fmt)]

    def encoders(self) -> list[IEncoder]:
        return list(self._encoders.values())
