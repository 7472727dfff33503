from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from PyQt6.QtGui import QGuiApplication

from zapqr.di.container import Container
from zapqr.domain.errors import ExportError
from zapqr.services.source import FileContainer
from zapqr.utils.constants import APP_NAME, APP_ORG
from zapqr.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

USAGE = "usage: python -m zapqr.main <qr.svg> [output-dir]"


def run_app(argv: Sequence[str]) -> int:
    """
    Bootstraps Qt, composes the pipeline via the DI container and batch-exports
    the given SVG in every format.
    """
    if len(argv) < 2:
        print(USAGE, file=sys.stderr)
        return 2

    QGuiApplication.setOrganizationName(APP_ORG)
    QGuiApplication.setApplicationName(APP_NAME)
    # painting and image plugins need a live application object
    app = QGuiApplication.instance() or QGuiApplication(list(argv))  # noqa: F841

    output_dir = Path(argv[2]) if len(argv) > 2 else None
    container = Container.default(output_dir=output_dir)
    cfg = container.config
    setup_logging(cfg.log_level, cfg.log_file)

    source_path = Path(argv[1])
    try:
        container.orchestrator.export_all(
            FileContainer(source_path),
            source_path.stem,
            cfg.resolution,
            cfg.quality,
        )
    except (ExportError, OSError) as e:
        logger.error("Export failed: %s", e)
        return 1
    return 0
