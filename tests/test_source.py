import pytest

from zapqr.services.source import FileContainer, MarkupContainer, extract_svg


def test_bare_svg_is_found(sample_svg):
    src = MarkupContainer(sample_svg).find_vector()
    assert src is not None
    assert src.markup.startswith("<svg")
    assert 'xmlns="http://www.w3.org/2000/svg"' in src.markup
    assert "ns0:" not in src.markup


def test_svg_nested_in_wrapper_is_extracted_without_wrapper(svg_container):
    src = svg_container.find_vector()
    assert src is not None
    assert "qr-wrapper" not in src.markup
    assert src.markup.endswith("</svg>")


def test_first_svg_wins_and_trailing_text_is_dropped():
    markup = (
        '<div><svg width="1" height="1"><rect id="first"/></svg> tail text'
        '<svg width="2" height="2"><rect id="second"/></svg></div>'
    )
    src = extract_svg(markup)
    assert 'id="first"' in src.markup
    assert "second" not in src.markup
    assert "tail text" not in src.markup


@pytest.mark.parametrize("markup", ["", "   ", "<div><span/></div>", "<svg><rect></svg>", "not markup"])
def test_absent_or_malformed_source_yields_none(markup):
    assert MarkupContainer(markup).find_vector() is None


def test_container_is_read_at_call_time(sample_svg):
    c = MarkupContainer("<div/>")
    assert c.find_vector() is None
    c.markup = sample_svg
    assert c.find_vector() is not None


def test_file_container_reads_every_time(tmp_path, sample_svg):
    p = tmp_path / "qr.svg"
    c = FileContainer(p)
    assert c.find_vector() is None  # missing file

    p.write_text(sample_svg, encoding="utf-8")
    first = c.find_vector()
    assert first is not None

    p.write_text("<div/>", encoding="utf-8")
    assert c.find_vector() is None
