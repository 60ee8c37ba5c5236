"""
Experimental tab-stop layout.

Without a layout engine the horizontal position of a tab can only be
estimated: text width is approximated from the character count and the
run font size. The span of each tab is then widened with ``word-spacing``
so that the following text starts near the matching stop.
"""

from dataclasses import dataclass, replace
from typing import List, Optional

from ..models.nodes import DocxElement, DomType, Text
from ..models.section import ParagraphTab
from ..parser.units import length_to_points
from .html_node import HtmlElement, RawHtml

MAX_TABS = 50
DEFAULT_FONT_SIZE = 11.0
CHAR_WIDTH_RATIO = 0.5
DEFAULT_LINE_WIDTH = 468.0


@dataclass
class TabStop:
    pos: float = 0.0
    leader: Optional[str] = "none"
    style: Optional[str] = "left"


DEFAULT_TAB = TabStop()


def compute_tab_stops(tabs: Optional[List[ParagraphTab]], default_tab_size: Optional[str],
                      line_width: float) -> List[TabStop]:
    """
    Sorted tab stops of a paragraph.

    Explicit stops are extended with default stops every ``default_tab_size``
    until the line is full or ``MAX_TABS`` stops exist.
    """
    stops = sorted(
        (TabStop(length_to_points(t.position) or 0.0, t.leader, t.style) for t in tabs or []),
        key=lambda t: t.pos,
    ) or [replace(DEFAULT_TAB)]

    size = length_to_points(default_tab_size)
    if not size or size <= 0:
        return stops

    pos = stops[-1].pos + size
    while pos < line_width and len(stops) < MAX_TABS:
        stops.append(TabStop(pos))
        pos += size

    return stops


def find_tab_stop(stops: List[TabStop], left: float) -> Optional[TabStop]:
    return next((t for t in stops if t.style != "clear" and t.pos > left), None)


def estimate_text_width(text: str, font_size: Optional[float] = None) -> float:
    return len(text) * (font_size or DEFAULT_FONT_SIZE) * CHAR_WIDTH_RATIO


def run_font_size(node: DocxElement) -> float:
    run = node.find_parent(DomType.RUN)
    size = length_to_points(run.css_style.get("font-size")) if run is not None else None
    return size or DEFAULT_FONT_SIZE


def apply_tab_stop(span: HtmlElement, stop: TabStop, width: float) -> None:
    span.children = [RawHtml("&nbsp;")]
    span.style["text-decoration"] = "inherit"
    span.style["word-spacing"] = f"{width:.0f}pt"

    if stop.leader in ("dot", "middleDot"):
        span.style["text-decoration"] = "underline"
        span.style["text-decoration-style"] = "dotted"
    elif stop.leader in ("hyphen", "heavy", "underscore"):
        span.style["text-decoration"] = "underline"


def segment_widths(paragraph: DocxElement) -> List[float]:
    """Estimated width of the text before each tab of a paragraph, then of the text after the last one."""
    widths = [0.0]
    for node in paragraph.iter_descendants():
        if node.type == DomType.TAB:
            widths.append(0.0)
        elif node.type == DomType.TEXT and isinstance(node, Text):
            widths[-1] += estimate_text_width(node.text, run_font_size(node))
    return widths


def update_paragraph_tabs(paragraph: Optional[DocxElement], pending: list,
                          default_tab_size: Optional[str]) -> None:
    """
    Lay out the tabs of one paragraph, left to right.

    Args:
        paragraph: Paragraph node owning the tabs
        pending: Its ``PendingTab`` records in document order
        default_tab_size: ``defaultTabStop`` of the document settings
    """
    if not pending:
        return

    if paragraph is None:
        segments = [0.0] * (len(pending) + 1)
        tab_nodes: List[DocxElement] = [p.node for p in pending]
    else:
        segments = segment_widths(paragraph)
        tab_nodes = [n for n in paragraph.iter_descendants() if n.type == DomType.TAB]

    order = {id(node): index for index, node in enumerate(tab_nodes)}
    # start of the text following the previous tab
    cursor = 0.0

    for record in pending:
        index = order.get(id(record.node))
        if index is None or index + 1 >= len(segments):
            continue

        stops = compute_tab_stops(record.stops, default_tab_size, record.line_width or DEFAULT_LINE_WIDTH)
        left = cursor + segments[index]
        stop = find_tab_stop(stops, left)
        if stop is None:
            cursor = left
            continue

        mul = {"right": 1.0, "center": 0.5}.get(stop.style, 0.0)
        cursor = max(stop.pos - mul * segments[index + 1], left)
        apply_tab_stop(record.span, stop, max(cursor - left, 1.0))
