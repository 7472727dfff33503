from __future__ import annotations

import math
import random

from zapqr.domain.models import ExportFormat

SVG_ESTIMATE_KB = 5.0
_KB_PER_MB = 1024


def _png_kb(resolution: int) -> float:
    return (resolution / 300) ** 2 * 50


def estimate_kb(
    fmt: ExportFormat | str,
    resolution: int,
    quality: int,
    *,
    rng: random.Random | None = None,
) -> float:
    """
    Approximate output size in KB. Advisory only.

    SVG is a fixed midpoint unless an explicit ``rng`` is given, in which case
    the legacy 3-7 KB jitter is reproduced.
    """
    fmt = ExportFormat.parse(fmt)
    if fmt is ExportFormat.SVG:
        return 3 + rng.random() * 4 if rng is not None else SVG_ESTIMATE_KB
    if fmt is ExportFormat.PDF:
        return 100 + (resolution / 1000) * 60
    if fmt is ExportFormat.PNG:
        return _png_kb(resolution)
    if fmt is ExportFormat.WEBP:
        return _png_kb(resolution) * (quality / 100) * 0.4
    return _png_kb(resolution) * (quality / 100) * 0.6


def format_size(size_kb: float) -> str:
    if size_kb >= _KB_PER_MB:
        return f"~{size_kb / _KB_PER_MB:.1f} MB"
    # half-up, not banker's rounding
    return f"~{math.floor(size_kb + 0.5)} KB"


def estimate(
    fmt: ExportFormat | str,
    resolution: int,
    quality: int,
    *,
    rng: random.Random | None = None,
) -> str:
    return format_size(estimate_kb(fmt, resolution, quality, rng=rng))
