import pytest

from zapqr.domain.interfaces import IEncoder
from zapqr.domain.models import ExportArtifact, ExportFormat, ExportOptions, VectorSource
from zapqr.services.catalog import RESOLUTION_PRESETS, FormatCatalog, describe, preset_for


class DummyEncoder(IEncoder):
    format = ExportFormat.SVG

    def encode(self, source: VectorSource, options: ExportOptions) -> ExportArtifact:
        return self.artifact(b"dummy", options)


def test_describe_is_total_over_the_enum():
    for fmt in ExportFormat:
        d = describe(fmt)
        assert d.format is fmt
        assert d.extension == fmt.value


def test_only_webp_and_jpeg_are_lossy():
    lossy = {fmt for fmt in ExportFormat if describe(fmt).lossy}
    assert lossy == {ExportFormat.WEBP, ExportFormat.JPEG}
    assert set(FormatCatalog().lossy_formats()) == lossy


def test_describe_accepts_strings_and_rejects_unknown():
    assert describe("jpeg").mime_type == "image/jpeg"
    with pytest.raises(ValueError):
        describe("bmp")


def test_formats_are_listed_in_declaration_order():
    assert [f.value for f in FormatCatalog().formats()] == ["png", "svg", "pdf", "webp", "jpeg"]


def test_descriptor_labels_and_mime_types():
    cat = FormatCatalog()
    assert [d.label for d in cat.descriptors()] == ["PNG", "SVG", "PDF", "WebP", "JPEG"]
    assert cat.describe(ExportFormat.PDF).mime_type == "application/pdf"
    assert cat.describe(ExportFormat.SVG).mime_type == "image/svg+xml"


def test_register_and_lookup_encoder():
    cat = FormatCatalog()
    enc = DummyEncoder(describe(ExportFormat.SVG))
    cat.register(enc)
    assert cat.encoder_for("svg") is enc
    assert cat.encoders() == [enc]


def test_lookup_of_unregistered_encoder_raises():
    with pytest.raises(KeyError):
        FormatCatalog().encoder_for(ExportFormat.PNG)


def test_encoder_rejects_mismatched_descriptor():
    with pytest.raises(ValueError):
        DummyEncoder(describe(ExportFormat.PNG))


def test_catalogs_do_not_share_encoders():
    a, b = FormatCatalog(), FormatCatalog()
    a.register(DummyEncoder(describe(ExportFormat.SVG)))
    assert b.encoders() == []


def test_resolution_presets():
    assert [(p.value, p.tag) for p in RESOLUTION_PRESETS] == [
        (300, "Web"),
        (1000, "Social"),
        (2000, "Print"),
        (4000, "Banner"),
    ]
    assert preset_for(2000).label == "High (2000px)"
    assert preset_for(1234) is None
