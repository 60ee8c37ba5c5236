"""
Options for docx-preview.

Holds the switches shared by the package reader, the document parser and the HTML renderer.
"""

import re
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Union

from .exceptions import ConfigurationError


@dataclass
class Options:
    """
    Loading and rendering options.

    ``use_mathml_polyfill`` only reserves an empty placeholder style sheet
    after the predefined styles; no polyfill rules are generated.
    ``load_unknown_parts`` registers targets of relationship types without a
    payload parser (custom XML, images...) as raw parts and follows their
    relationships; by default such targets are skipped.
    """

    debug: bool = True
    class_name: str = "word"
    trim_xml_declaration: bool = True
    ignore_width: bool = False
    ignore_height: bool = False
    ignore_fonts: bool = False
    break_pages: bool = True
    experimental: bool = False
    in_wrapper: bool = True
    ignore_last_rendered_page_break: bool = True
    render_headers: bool = True
    render_footers: bool = True
    render_footnotes: bool = True
    render_endnotes: bool = True
    use_base64_url: bool = False
    use_mathml_polyfill: bool = False
    render_changes: bool = False
    keep_origin: bool = False
    load_unknown_parts: bool = False

    @classmethod
    def from_value(cls, value: Union["Options", Mapping[str, Any], None] = None) -> "Options":
        """
        Build options from ``None``, an ``Options`` instance or a mapping.

        Mapping keys may use either snake_case or camelCase names
        (``className``, ``useBase64URL``...).

        Raises:
            ConfigurationError: if a key does not name a known option
        """
        if value is None:
            return cls()
        if isinstance(value, Options):
            return replace(value)
        if not isinstance(value, Mapping):
            raise ConfigurationError("Options must be a mapping or Options instance", type(value).__name__)

        known = {f.name for f in fields(cls)}
        overrides: Dict[str, Any] = {}
        for key, item in value.items():
            name = _normalize_key(key)
            if name not in known:
                raise ConfigurationError("Unknown option", str(key))
            overrides[name] = item
        return cls(**overrides)

    def merged(self, **overrides: Any) -> "Options":
        return Options.from_value({**self.to_dict(), **overrides})

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


_ALIASES = {
    "useBase64URL": "use_base64_url",
    "useMathMLPolyfill": "use_mathml_polyfill",
}


def _normalize_key(key: str) -> str:
    if key in _ALIASES:
        return _ALIASES[key]
    return re.sub(r"(?<!^)(?=[A-Z])", "_", key).lower()

