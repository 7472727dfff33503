from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from zapqr.domain.models import ExportFormat


class ExportError(Exception):
    """Base class for every failure raised by the export pipeline."""


class SourceNotFoundError(ExportError):
    """The supplied container holds no vector element."""


class EncodingError(ExportError):
    """A format-specific encoder could not produce an artifact."""


class RasterizationError(EncodingError):
    """Vector decode/draw failed or the surface could not be allocated."""


class BatchExportError(ExportError):
    """Raised after a best-effort batch in which one or more formats failed."""

    def __init__(self, failures: Sequence[tuple[ExportFormat, Exception]]) -> None:
        self.failures = list(failures)
        names = ", ".join(fmt.value for fmt, _ in self.failures)
        super().__init__(f"Batch export failed for: {names}")
