from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_downloads_dir

from zapqr.domain.interfaces import IConfigService
from zapqr.domain.models import DEFAULT_QUALITY, DEFAULT_RESOLUTION
from zapqr.services.config.ini_config_service import IniConfigService
from zapqr.services.orchestrator import BatchPolicy
from zapqr.services.rasterizer import DEFAULT_MAX_RESOLUTION
from zapqr.services.rate_limiter import DEFAULT_INTERVAL_MS

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _project_root_fallback() -> Path:
    """
    Project root resolution that also works in PyInstaller:
      - PyInstaller onefile/onedir uses sys._MEIPASS as bundle root
      - dev mode walks up from this file
    """
    meipass = getattr(sys, "_MEIPASS", None)  # type: ignore[attr-defined]
    if meipass:
        return Path(meipass)

    # zapqr/services/config/export_config.py -> parents[3] = repository root
    return Path(__file__).resolve().parents[3]


@dataclass(frozen=True)
class ExportConfig:
    """Validated export defaults read from the [export] and [logging] sections."""

    resolution: int = DEFAULT_RESOLUTION
    quality: int = DEFAULT_QUALITY
    batch_interval_ms: int = DEFAULT_INTERVAL_MS
    batch_policy: BatchPolicy = BatchPolicy.ABORT
    output_dir: Path = Path(".")
    max_resolution: int = DEFAULT_MAX_RESOLUTION
    log_level: str = "INFO"
    log_file: Path | None = None
    loaded_from: Path | None = None

    @classmethod
    def from_service(cls, cfg: IConfigService) -> ExportConfig:
        def positive(key: str, default: int, upper: int | None = None) -> int:
            v = cfg.get_int("export", key, default)
            if v is None or v <= 0 or (upper is not None and v > upper):
                logger.warning("Invalid [export] %s, using %s", key, default)
                return default
            return v

        raw_policy = cfg.get("export", "batch_policy", BatchPolicy.ABORT.value) or ""
        try:
            policy = BatchPolicy.parse(raw_policy)
        except ValueError:
            logger.warning("Invalid [export] batch_policy %r, using abort", raw_policy)
            policy = BatchPolicy.ABORT

        interval = cfg.get_int("export", "batch_interval_ms", DEFAULT_INTERVAL_MS)
        if interval is None or interval < 0:
            logger.warning("Invalid [export] batch_interval_ms, using %s", DEFAULT_INTERVAL_MS)
            interval = DEFAULT_INTERVAL_MS

        out = (cfg.get("export", "output_dir", "") or "").strip()
        output_dir = Path(out).expanduser() if out else Path(user_downloads_dir())

        level = (cfg.get("logging", "level", "INFO") or "INFO").strip().upper()
        if level not in _LOG_LEVELS:
            logger.warning("Invalid [logging] level %r, using INFO", level)
            level = "INFO"
        log_file = (cfg.get("logging", "file", "") or "").strip()

        max_res = positive("max_resolution", DEFAULT_MAX_RESOLUTION)
        return cls(
            resolution=positive("resolution", DEFAULT_RESOLUTION, max_res),
            quality=positive("quality", DEFAULT_QUALITY, 100),
            batch_interval_ms=interval,
            batch_policy=policy,
            output_dir=output_dir,
            max_resolution=max_res,
            log_level=level,
            log_file=Path(log_file).expanduser() if log_file else None,
            loaded_from=cfg.loaded_from,
        )


def build_export_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> ExportConfig:
    root = project_root or _project_root_fallback()
    ini = IniConfigService(explicit_path=explicit_ini, project_root=root)
    return ExportConfig.from_service(ini)
