from __future__ import annotations

import logging
from enum import Enum

from zapqr.domain.errors import BatchExportError, ExportError, SourceNotFoundError
from zapqr.domain.interfaces import IDownloader, IRateLimiter, ISourceContainer
from zapqr.domain.models import ExportFormat, ExportOptions
from zapqr.services.catalog import FormatCatalog

logger = logging.getLogger(__name__)

BATCH_SEQUENCE: tuple[ExportFormat, ...] = (
    ExportFormat.PNG,
    ExportFormat.SVG,
    ExportFormat.PDF,
    ExportFormat.WEBP,
    ExportFormat.JPEG,
)


class BatchPolicy(str, Enum):
    ABORT = "abort"  # first failure stops the batch
    CONTINUE = "continue"  # export what we can, then raise BatchExportError

    @classmethod
    def parse(cls, value: BatchPolicy | str) -> BatchPolicy:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown batch policy: {value!r}") from None


class ExportOrchestrator:
    """
    Public entry points of the pipeline.

    Every delivery passes through the rate limiter, so batch downloads are
    spaced out and a single export right after a batch is too. Errors are
    never swallowed; reporting them is the caller's job.
    """

    def __init__(
        self,
        catalog: FormatCatalog,
        downloader: IDownloader,
        gate: IRateLimiter,
        *,
        batch_policy: BatchPolicy = BatchPolicy.ABORT,
    ) -> None:
        self.catalog = catalog
        self.downloader = downloader
        self.gate = gate
        self.batch_policy = BatchPolicy.parse(batch_policy)

    def export_one(self, container: ISourceContainer, options: ExportOptions) -> None:
        source = container.find_vector()
        if source is None:
            raise SourceNotFoundError("QR code SVG not found")

        encoder = self.catalog.encoder_for(options.format)
        artifact = encoder.encode(source, options)

        self.gate.acquire()
        self.downloader.deliver(artifact)
        logger.info("Exported %s as %s", encoder.format.value, artifact.file_name)

    def export_all(
        self,
        container: ISourceContainer,
        file_name_base: str,
        resolution: int,
        quality: int,
    ) -> None:
        failures: list[tuple[ExportFormat, Exception]] = []
        for fmt in BATCH_SEQUENCE:
            options = ExportOptions(
                format=fmt,
                resolution=resolution,
                quality=quality,
                include_frame=True,
                include_logo=True,
                file_name=file_name_base,
            )
            try:
                self.export_one(container, options)
            except (ExportError, OSError) as e:
                logger.warning("Batch export of %s failed: %s", fmt.value, e)
                if self.batch_policy is BatchPolicy.ABORT:
                    raise
                failures.append((fmt, e))

        if failures:
            raise BatchExportError(failures)
