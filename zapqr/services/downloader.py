from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from zapqr.domain.interfaces import IDownloader
from zapqr.domain.models import ExportArtifact

logger = logging.getLogger(__name__)


class FileDownloader(IDownloader):
    """Saves artifacts atomically into a downloads directory."""

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def target_for(self, artifact: ExportArtifact) -> Path:
        return self.output_dir / artifact.file_name

    def deliver(self, artifact: ExportArtifact) -> None:
        path = self.target_for(artifact)
        path.parent.mkdir(parents=True, exist_ok=True)

        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            raise OSError(f"Cannot open for write: {path}")
        sf.write(artifact.payload)
        if not sf.commit():
            raise OSError(f"Commit failed for: {path}")
        logger.info("Saved %s (%d bytes)", path, artifact.size)
