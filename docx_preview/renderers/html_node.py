"""
In-memory HTML tree.

The renderer builds ``HtmlElement`` trees instead of a browser DOM. Elements
keep attributes, an inline style map and a class list separately so that
resource tasks can patch them after the render pass, and serialize to
HTML text with ``to_html()``.
"""

from html import escape
from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

VOID_TAGS = frozenset({"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "wbr"})
RAW_TEXT_TAGS = frozenset({"script", "style"})


class Comment:
    """HTML comment node."""

    def __init__(self, text: str):
        self.text = text

    def to_html(self) -> str:
        return f"<!--{self.text.replace('--', '- -')}-->"

    def __repr__(self) -> str:
        return f"Comment({self.text!r})"


class RawHtml:
    """Markup inserted verbatim (character references and the like)."""

    def __init__(self, html: str):
        self.html = html

    def to_html(self) -> str:
        return self.html

    def __repr__(self) -> str:
        return f"RawHtml({self.html!r})"


HtmlNode = Union["HtmlElement", Comment, RawHtml, str]


class HtmlElement:
    """
    One element of the output tree.

    Args:
        tag: Tag name
        attrs: Attributes; ``None`` values are skipped on output
        style: Inline CSS properties
        classes: Class names
        children: Child elements, comments, raw markup or text
        ns: XML namespace (SVG and MathML elements)
    """

    def __init__(
        self,
        tag: str,
        attrs: Optional[Dict[str, Any]] = None,
        style: Optional[Dict[str, str]] = None,
        classes: Optional[Iterable[str]] = None,
        children: Optional[Iterable[HtmlNode]] = None,
        ns: Optional[str] = None,
    ):
        self.tag = tag
        self.attrs: Dict[str, Any] = dict(attrs or {})
        self.style: Dict[str, str] = dict(style or {})
        self.classes: List[str] = []
        self.children: List[HtmlNode] = []
        self.ns = ns

        if classes:
            self.add_class(*classes)
        if children:
            self.extend(children)

    def __repr__(self) -> str:
        return f"HtmlElement({self.tag!r}, children={len(self.children)})"

    # Tree editing

    def append(self, child: Optional[HtmlNode]) -> None:
        if child is not None:
            self.children.append(child)

    def extend(self, children: Iterable[Optional[HtmlNode]]) -> None:
        for child in children:
            self.append(child)

    def clear(self) -> None:
        self.children.clear()

    def add_class(self, *names: str) -> None:
        for name in names:
            for part in (name or "").split():
                if part not in self.classes:
                    self.classes.append(part)

    @property
    def class_name(self) -> str:
        return " ".join(self.classes)

    @class_name.setter
    def class_name(self, value: Optional[str]) -> None:
        self.classes = []
        if value:
            self.add_class(value)

    def set_style(self, values: Optional[Dict[str, Optional[str]]]) -> None:
        """Merge CSS properties into the inline style; ``None`` values are ignored."""
        if not values:
            return
        for key, value in values.items():
            if value is not None:
                self.style[key] = value

    def get(self, name: str, default: Any = None) -> Any:
        return self.attrs.get(name, default)

    def set(self, name: str, value: Any) -> None:
        self.attrs[name] = value

    # Queries

    def iter(self, tag: Optional[str] = None) -> Iterator["HtmlElement"]:
        """Depth-first iteration over this element and its descendant elements."""
        if tag is None or self.tag == tag:
            yield self
        for child in self.children:
            if isinstance(child, HtmlElement):
                yield from child.iter(tag)

    def find(self, tag: str) -> Optional["HtmlElement"]:
        return next((e for e in self.iter(tag) if e is not self), None)

    def find_all(self, tag: str) -> List["HtmlElement"]:
        return [e for e in self.iter(tag) if e is not self]

    def elements(self) -> List["HtmlElement"]:
        return [c for c in self.children if isinstance(c, HtmlElement)]

    @property
    def text_content(self) -> str:
        parts = []
        for child in self.children:
            if isinstance(child, str):
                parts.append(child)
            elif isinstance(child, HtmlElement):
                parts.append(child.text_content)
        return "".join(parts)

    # Serialization

    def style_text(self) -> str:
        return "; ".join(f"{key}: {value}" for key, value in self.style.items())

    def to_html(self) -> str:
        attrs = []
        if self.classes:
            attrs.append(f' class="{escape(self.class_name)}"')
        for key, value in self.attrs.items():
            if value is None or value is False:
                continue
            if value is True:
                attrs.append(f" {key}")
            else:
                attrs.append(f' {key}="{escape(str(value))}"')
        if self.style:
            attrs.append(f' style="{escape(self.style_text())}"')

        open_tag = f"<{self.tag}{''.join(attrs)}"

        if self.tag in VOID_TAGS and self.ns is None:
            return f"{open_tag}>"
        if self.ns is not None and not self.children:
            return f"{open_tag}/>"

        raw = self.tag in RAW_TEXT_TAGS
        inner = "".join(
            (child if raw else escape(child, quote=False)) if isinstance(child, str) else child.to_html()
            for child in self.children
        )
        return f"{open_tag}>{inner}</{self.tag}>"


def create_style_element(css_text: str) -> HtmlElement:
    return HtmlElement("style", children=[css_text])
