from __future__ import annotations

from zapqr.domain.interfaces import IEncoder
from zapqr.domain.models import ExportArtifact, ExportFormat, ExportOptions, VectorSource


class SvgEncoder(IEncoder):
    """Vector passthrough: resolution and quality are irrelevant."""

    format = ExportFormat.SVG

    def encode(self, source: VectorSource, options: ExportOptions) -> ExportArtifact:
        return self.artifact(source.to_bytes(), options)
