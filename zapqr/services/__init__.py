"""Concrete services: catalog, rasterizer, encoders, orchestration and delivery."""

from .catalog import RESOLUTION_PRESETS, FormatCatalog, describe
from .downloader import FileDownloader
from .orchestrator import BATCH_SEQUENCE, BatchPolicy, ExportOrchestrator
from .rasterizer import Rasterizer
from .rate_limiter import MinimumIntervalGate
from .size_estimator import estimate, estimate_kb
from .source import FileContainer, MarkupContainer

__all__ = [
    "FormatCatalog",
    "RESOLUTION_PRESETS",
    "describe",
    "Rasterizer",
    "ExportOrchestrator",
    "BatchPolicy",
    "BATCH_SEQUENCE",
    "FileDownloader",
    "MinimumIntervalGate",
    "MarkupContainer",
    "FileContainer",
    "estimate",
    "estimate_kb",
]
