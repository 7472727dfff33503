import random

import pytest

from zapqr.domain.models import ExportFormat
from zapqr.services.size_estimator import estimate, estimate_kb, format_size


def test_png_examples_scale_quadratically():
    assert estimate("png", 300, 100) == "~50 KB"
    assert estimate("png", 600, 100) == "~200 KB"


def test_pdf_example():
    assert estimate("pdf", 1000, 100) == "~160 KB"


def test_svg_is_a_fixed_midpoint_by_default():
    assert estimate(ExportFormat.SVG, 300, 10) == "~5 KB"
    assert estimate(ExportFormat.SVG, 4000, 100) == "~5 KB"


def test_svg_legacy_jitter_stays_in_band():
    rng = random.Random(1234)
    for _ in range(50):
        assert 3 <= estimate_kb("svg", 1000, 85, rng=rng) < 7


def test_large_values_switch_to_megabytes():
    # (4000/300)^2 * 50 = 8888.9 KB
    assert estimate("png", 4000, 100) == "~8.7 MB"
    assert format_size(1024) == "~1.0 MB"
    assert format_size(1023.4) == "~1023 KB"


def test_kilobytes_round_half_up():
    assert format_size(2.5) == "~3 KB"
    assert format_size(160.5) == "~161 KB"


@pytest.mark.parametrize("fmt, factor", [("webp", 0.4), ("jpeg", 0.6)])
def test_lossy_estimates(fmt, factor):
    png = estimate_kb("png", 1000, 85)
    assert estimate_kb(fmt, 1000, 50) == pytest.approx(png * 0.5 * factor)


@pytest.mark.parametrize("fmt", ["webp", "jpeg"])
def test_lossy_estimates_are_monotonic_and_bounded(fmt):
    baseline = estimate_kb("png", 2000, 100)
    values = [estimate_kb(fmt, 2000, q) for q in range(10, 101)]
    assert all(a <= b for a, b in zip(values, values[1:]))
    assert max(values) <= baseline


@pytest.mark.parametrize("fmt", ["png", "svg", "pdf"])
def test_quality_does_not_affect_lossless_estimates(fmt):
    assert estimate(fmt, 1000, 10) == estimate(fmt, 1000, 100)


def test_unknown_format_raises():
    with pytest.raises(ValueError):
        estimate("gif", 300, 100)
