from __future__ import annotations

import copy
import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from zapqr.domain.interfaces import ISourceContainer
from zapqr.domain.models import VectorSource

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

# Keep serialized output free of ns0: prefixes
ET.register_namespace("", SVG_NS)
ET.register_namespace("xlink", XLINK_NS)


def _is_svg(el: ET.Element) -> bool:
    tag = el.tag if isinstance(el.tag, str) else ""
    return tag == "svg" or tag == f"{{{SVG_NS}}}svg"


def extract_svg(markup: str) -> VectorSource | None:
    """Return the first <svg> element in `markup`, serialized, or None."""
    if not markup or not markup.strip():
        return None
    try:
        root = ET.fromstring(markup)
    except ET.ParseError as e:
        logger.warning("Container markup is not well-formed: %s", e)
        return None

    svg = next((el for el in root.iter() if _is_svg(el)), None)
    if svg is None:
        return None

    svg = copy.copy(svg)
    svg.tail = None
    return VectorSource(markup=ET.tostring(svg, encoding="unicode"))


class MarkupContainer(ISourceContainer):
    """Holds the markup the QR renderer produced (bare <svg> or a wrapper around one)."""

    def __init__(self, markup: str) -> None:
        self.markup = markup

    def find_vector(self) -> VectorSource | None:
        return extract_svg(self.markup)


class FileContainer(ISourceContainer):
    """Reads an SVG/markup file on every lookup; nothing is cached."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def find_vector(self) -> VectorSource | None:
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Cannot read %s: %s", self.path, e)
            return None
        return extract_svg(text)
