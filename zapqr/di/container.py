from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from zapqr.domain.interfaces import IDownloader, IImageCodec, IRateLimiter
from zapqr.domain.models import ExportFormat
from zapqr.services.catalog import FormatCatalog
from zapqr.services.codecs.qt_codec import QtImageCodec
from zapqr.services.config.export_config import ExportConfig, build_export_config
from zapqr.services.downloader import FileDownloader
from zapqr.services.encoders import JpegEncoder, PdfEncoder, PngEncoder, SvgEncoder, WebpEncoder
from zapqr.services.orchestrator import ExportOrchestrator
from zapqr.services.rasterizer import Rasterizer
from zapqr.services.rate_limiter import MinimumIntervalGate


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Registers the built-in encoders (png, svg, pdf, webp, jpeg) in its own catalog
      - Builds the orchestrator with the configured batch policy and throttle
    """

    def __init__(
        self,
        config: ExportConfig | None = None,
        codec: IImageCodec | None = None,
        downloader: IDownloader | None = None,
        gate: IRateLimiter | None = None,
    ) -> None:
        self.config: ExportConfig = config or ExportConfig()
        self.codec: IImageCodec = codec or QtImageCodec()
        self.rasterizer = Rasterizer(self.codec, max_resolution=self.config.max_resolution)
        self.downloader: IDownloader = downloader or FileDownloader(self.config.output_dir)
        self.gate: IRateLimiter = gate or MinimumIntervalGate(self.config.batch_interval_ms)

        self.catalog = FormatCatalog()
        self._register_builtin_encoders()

        self.orchestrator = ExportOrchestrator(
            self.catalog,
            self.downloader,
            self.gate,
            batch_policy=self.config.batch_policy,
        )

    @staticmethod
    def default(
        *,
        explicit_ini: Path | None = None,
        project_root: Path | None = None,
        output_dir: Path | None = None,
    ) -> Container:
        """Build a container from the INI configuration; `output_dir` overrides [export]."""
        config = build_export_config(explicit_ini=explicit_ini, project_root=project_root)
        if output_dir is not None:
            config = replace(config, output_dir=Path(output_dir))
        return Container(config=config)

    # ---------- Internals ----------

    def _register_builtin_encoders(self) -> None:
        c = self.catalog
        c.register(SvgEncoder(c.describe(ExportFormat.SVG)))
        c.register(PngEncoder(c.describe(ExportFormat.PNG), self.rasterizer, self.codec))
        c.register(WebpEncoder(c.describe(ExportFormat.WEBP), self.rasterizer, self.codec))
        c.register(JpegEncoder(c.describe(ExportFormat.JPEG), self.rasterizer, self.codec))
        c.register(PdfEncoder(c.describe(ExportFormat.PDF), self.rasterizer, self.codec))
