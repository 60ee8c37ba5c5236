"""VML shape parser: maps legacy vector markup onto SVG element descriptions."""

from typing import Optional

from ..models.nodes import DomType, DocxElement, ImageHref, VmlElement
from . import units
from .xml_parser import xml

_SHAPE_TAGS = {
    "rect": ("rect", {"width": "100%", "height": "100%"}),
    "oval": ("ellipse", {"cx": "50%", "cy": "50%", "rx": "50%", "ry": "50%"}),
    "line": ("line", {}),
    "shape": ("g", {}),
}


def parse_vml_element(elem) -> Optional[VmlElement]:
    """
    Parse one VML shape.

    Returns:
        VmlElement, or None for unsupported shape kinds
    """
    shape = _SHAPE_TAGS.get(xml.local_name(elem))
    if shape is None:
        return None

    tag_name, attrs = shape
    result = VmlElement(tag_name=tag_name, attrs=dict(attrs))

    for name, value in xml.attrs(elem):
        if name == "style":
            result.css_style_text = value
        elif name == "fillcolor":
            result.attrs["fill"] = value
        elif name == "from":
            x1, y1 = _parse_point(value)
            result.attrs.update(x1=x1, y1=y1)
        elif name == "to":
            x2, y2 = _parse_point(value)
            result.attrs.update(x2=x2, y2=y2)

    for child in xml.elements(elem):
        name = xml.local_name(child)
        if name == "stroke":
            result.attrs["stroke"] = xml.attr(child, "color")
            result.attrs["stroke-width"] = xml.length_attr(child, "weight", units.EMU) or "1px"
        elif name == "fill":
            continue
        elif name == "imagedata":
            result.tag_name = "image"
            result.attrs.update(width="100%", height="100%")
            result.image_href = ImageHref(id=xml.attr(child, "id"), title=xml.attr(child, "title"))
        else:
            nested = parse_vml_element(child)
            if nested is not None:
                result.children.append(nested)

    return result


def parse_vml_picture(elem) -> DocxElement:
    """Parse a ``pict`` element into a picture node holding its shapes."""
    result = DocxElement(type=DomType.VML_PICTURE)
    for child in xml.elements(elem):
        shape = parse_vml_element(child)
        if shape is not None:
            result.children.append(shape)
    return result


def _parse_point(value: str):
    coords = value.split(",")
    return (coords + [None, None])[:2]
