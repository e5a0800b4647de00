"""SVG document loader — facade over xml.etree.

Turns raw SVG text into an element tree and answers the few document-level
questions the converter asks: canvas size and whether a transform
attribute is the identity.
"""

from __future__ import annotations

import logging
import math
import re
import xml.etree.ElementTree as ET

from vectoricon.engine.errors import InvalidAttribute, InvalidDocument, MissingAttribute
from vectoricon.utils.math_helpers import parse_length

logger = logging.getLogger(__name__)

_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
_TRANSFORM_FN_RE = re.compile(r"(translate|scale|rotate|skewX|skewY|matrix)\s*\(([^)]*)\)", re.IGNORECASE)
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

# Value of each transform function's parameters that leaves geometry untouched
_IDENTITY_PARAMS = {
    "translate": (0.0, 0.0),
    "scale": (1.0, 1.0),
    "rotate": (0.0, 0.0, 0.0),
    "skewx": (0.0,),
    "skewy": (0.0,),
    "matrix": (1.0, 0.0, 0.0, 1.0, 0.0, 0.0),
}


def local_name(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def load_document(svg_text: str) -> ET.Element:
    """Parse SVG text and return the <svg> root element."""
    svg_text = _COMMENT_RE.sub("", svg_text)
    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as e:
        raise InvalidDocument(f"SVG does not parse: {e}") from e
    if local_name(root.tag) != "svg":
        raise InvalidDocument(f"Root element is <{local_name(root.tag)}>, expected <svg>")
    return root


def read_length(element: ET.Element, name: str, default: float | None = None) -> float:
    """Numeric attribute value. Absent → default, or MissingAttribute when there is none."""
    tag = local_name(element.tag)
    text = element.get(name)
    if text is None or not text.strip():
        if default is None:
            raise MissingAttribute(tag, name)
        return default
    value = parse_length(text)
    if value is None:
        raise InvalidAttribute(tag, name, text)
    return value


def parse_viewbox(root: ET.Element) -> tuple[float, float, float, float] | None:
    """viewBox as (min_x, min_y, width, height), or None when absent or malformed."""
    text = root.get("viewBox")
    if not text:
        return None
    parts = text.replace(",", " ").split()
    if len(parts) != 4:
        logger.warning("Ignoring malformed viewBox %r", text)
        return None
    values = [parse_length(p) for p in parts]
    if any(v is None for v in values):
        logger.warning("Ignoring malformed viewBox %r", text)
        return None
    return tuple(values)  # type: ignore[return-value]


def canvas_size(root: ET.Element) -> tuple[float, float]:
    """Canvas (width, height) from the viewBox, falling back to width/height attributes."""
    viewbox = parse_viewbox(root)
    if viewbox is not None:
        return viewbox[2], viewbox[3]

    width = parse_length(root.get("width", ""))
    if width is None:
        raise MissingAttribute("svg", "viewBox")
    height = parse_length(root.get("height", ""))
    return width, height if height is not None else width


def is_identity_transform(text: str | None) -> bool:
    """True for an absent/empty transform or one made only of no-op functions.

    Anything that cannot be recognized counts as a real transform.
    """
    if text is None or not text.strip():
        return True

    remainder = _TRANSFORM_FN_RE.sub("", text).replace(",", "").strip()
    if remainder:
        return False

    for name, params in _TRANSFORM_FN_RE.findall(text):
        nums = [float(n) for n in _NUMBER_RE.findall(params)]
        name = name.lower()
        if name == "scale" and len(nums) == 1:
            nums = nums * 2
        elif name == "rotate":
            # The rotation center does not matter for a zero angle
            nums = nums[:1]
        identity = _IDENTITY_PARAMS[name]
        if not nums or len(nums) > len(identity):
            return False
        if not all(math.isclose(n, i, abs_tol=1e-9) for n, i in zip(nums, identity)):
            return False
    return True
