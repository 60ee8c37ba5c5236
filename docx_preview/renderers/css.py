"""
CSS text generation.

Builds the style sheets emitted ahead of the document body: the predefined
layout rules, theme variables, document styles and numbering rules.
"""

import logging
import re
from typing import Dict, List, Optional, Tuple

from ..models.parts import Theme
from ..models.styles import NumberingStyle, Style
from ..utils.helpers import key_by

logger = logging.getLogger(__name__)

NUM_FORMATS = {
    "none": "none",
    "bullet": "disc",
    "decimal": "decimal",
    "lowerLetter": "lower-alpha",
    "upperLetter": "upper-alpha",
    "lowerRoman": "lower-roman",
    "upperRoman": "upper-roman",
}

# numbering suffix -> CSS escape appended to the counter content
LEVEL_SUFFIXES = {
    "tab": "\\9",
    "space": "\\a0",
}

_LEVEL_PLACEHOLDER = re.compile(r"(%\d+)")


def style_to_string(selectors: str, values: Optional[Dict[str, str]], css_text: Optional[str] = None) -> str:
    """
    Format one CSS rule.

    Args:
        selectors: Rule selector list
        values: Property map, emitted in insertion order
        css_text: Extra declarations appended verbatim

    Returns:
        Rule text terminated by CRLF
    """
    result = f"{selectors} {{\r\n"
    for key, value in (values or {}).items():
        result += f"  {key}: {value};\r\n"
    if css_text:
        result += css_text
    return f"{result}}}\r\n"


def default_style(class_name: str) -> str:
    c = class_name
    return f"""
.{c}-wrapper {{ background: gray; padding: 30px; padding-bottom: 0px; display: flex; flex-flow: column; align-items: center; }}
.{c}-wrapper>section.{c} {{ background: white; box-shadow: 0 0 10px rgba(0, 0, 0, 0.5); margin-bottom: 30px; }}
.{c} {{ color: black; }}
section.{c} {{ box-sizing: border-box; display: flex; flex-flow: column nowrap; position: relative; overflow: hidden; }}
section.{c}>article {{ margin-bottom: auto; }}
.{c} table {{ border-collapse: collapse; }}
.{c} table td, .{c} table th {{ vertical-align: top; }}
.{c} p {{ margin: 0pt; min-height: 1em; }}
.{c} span {{ white-space: pre-wrap; overflow-wrap: break-word; }}
.{c} a {{ color: inherit; text-decoration: inherit; }}
"""


def theme_variables(theme: Optional[Theme]) -> Dict[str, str]:
    """CSS custom properties for the theme fonts and colours."""
    variables: Dict[str, str] = {}
    if theme is None:
        return variables

    font_scheme = theme.font_scheme
    if font_scheme is not None:
        if font_scheme.major_font is not None:
            variables["--docx-majorHAnsi-font"] = font_scheme.major_font.latin_typeface
        if font_scheme.minor_font is not None:
            variables["--docx-minorHAnsi-font"] = font_scheme.minor_font.latin_typeface

    if theme.color_scheme is not None:
        for name, value in theme.color_scheme.colors.items():
            variables[f"--docx-{name}-color"] = f"#{value}"

    return variables


def theme_style(theme: Optional[Theme], class_name: str) -> str:
    return style_to_string(f".{class_name}", theme_variables(theme))


def styles_to_css(styles: List[Style], style_map: Dict[str, Style], class_name: str, debug: bool = False) -> str:
    """
    Emit the rules of resolved document styles.

    Linked styles contribute their sub-styles. The default style of each
    target also applies to bare ``target`` elements under the root class.
    """
    text = ""
    default_styles = key_by([s for s in styles if s.is_default], lambda s: s.target)

    for style in styles:
        sub_styles = list(style.styles)

        if style.linked:
            linked = style_map.get(style.linked)
            if linked is not None:
                sub_styles.extend(linked.styles)
            elif debug:
                logger.warning(f"Can't find linked style {style.linked}")

        for sub_style in sub_styles:
            selector = f"{style.target or ''}.{style.css_name}"
            if style.target != sub_style.target:
                selector += f" {sub_style.target}"
            if default_styles.get(style.target) is style:
                selector = f".{class_name} {style.target}, {selector}"
            text += style_to_string(selector, sub_style.values)

    return text


def numbering_class(class_name: str, num_id: Optional[str], level: Optional[int]) -> str:
    return f"{class_name}-num-{num_id}-{level}"


def numbering_counter(class_name: str, num_id: Optional[str], level: Optional[int]) -> str:
    return f"{class_name}-num-{num_id}-{level}"


def num_format_to_css_value(num_format: Optional[str]) -> Optional[str]:
    return NUM_FORMATS.get(num_format, num_format)


def _escape_css_string(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


def level_text_to_content(text: str, suff: Optional[str], num_id: Optional[str],
                          num_format: Optional[str], class_name: str) -> str:
    """
    Turn a level text such as ``%1.%2.`` into a CSS ``content`` value.

    Each ``%N`` becomes a counter of level N-1 of the same numbering.
    """
    parts = []
    for chunk in _LEVEL_PLACEHOLDER.split(text):
        if _LEVEL_PLACEHOLDER.fullmatch(chunk):
            level = int(chunk[1:]) - 1
            parts.append(f'"counter({numbering_counter(class_name, num_id, level)}, {num_format})"')
        else:
            parts.append(_escape_css_string(chunk))

    return f'"{"".join(parts)}{LEVEL_SUFFIXES.get(suff, "")}"'


def _counter_reset(counter: str, start: Optional[int]) -> str:
    # counters are incremented before display
    if start is None or start == 1:
        return counter
    return f"{counter} {start - 1}"


def bullet_variable(class_name: str, src: str) -> str:
    return f"--{class_name}-{src}".lower()


def numbering_to_css(numberings: List[NumberingStyle], class_name: str,
                     root_selector: str) -> Tuple[str, List[Tuple[str, str]]]:
    """
    Emit numbering rules.

    Returns:
        The rule text and the ``(variable, relationship id)`` pairs of picture
        bullets whose image must be loaded into the variable
    """
    text = ""
    root_counters = []
    bullets = []

    for num in numberings:
        selector = f"p.{numbering_class(class_name, num.id, num.level)}"
        list_style_type = "none"

        if num.bullet is not None and num.bullet.src:
            variable = bullet_variable(class_name, num.bullet.src)
            text += style_to_string(f"{selector}:before", {
                "content": "' '",
                "display": "inline-block",
                "background": f"var({variable})",
            }, num.bullet.style)
            bullets.append((variable, num.bullet.src))
        elif num.level_text:
            counter = numbering_counter(class_name, num.id, num.level)
            reset = _counter_reset(counter, num.start)

            if num.level and num.level > 0:
                text += style_to_string(f"p.{numbering_class(class_name, num.id, num.level - 1)}", {
                    "counter-reset": reset,
                })
            else:
                root_counters.append(reset)

            text += style_to_string(f"{selector}:before", {
                "content": level_text_to_content(num.level_text, num.suff, num.id,
                                                 num_format_to_css_value(num.format), class_name),
                "counter-increment": counter,
                **num.r_style,
            })
        else:
            list_style_type = num_format_to_css_value(num.format)

        text += style_to_string(selector, {
            "display": "list-item",
            "list-style-position": "inside",
            "list-style-type": list_style_type,
            **num.p_style,
        })

    if root_counters:
        text += style_to_string(root_selector, {"counter-reset": " ".join(root_counters)})

    return text, bullets


def font_face(family: Optional[str], url: str, font_type: Optional[str]) -> str:
    values = {
        "font-family": family,
        "src": f"url({url})",
    }
    if font_type in ("bold", "boldItalic"):
        values["font-weight"] = "bold"
    if font_type in ("italic", "boldItalic"):
        values["font-style"] = "italic"
    return style_to_string("@font-face", values)
