"""
Units converter for DOCX documents.

Converts raw WordprocessingML measurements (twentieths of a point, EMU,
half-points, eighths of a point...) into CSS lengths.
"""

import re
from typing import NamedTuple, Optional


class LengthUsage(NamedTuple):
    """Multiplier and CSS unit for one kind of raw measurement."""

    mul: float
    unit: str


DXA = LengthUsage(0.05, "pt")
EMU = LengthUsage(1 / 12700, "pt")
FONT_SIZE = LengthUsage(0.5, "pt")
BORDER = LengthUsage(0.125, "pt")
POINT = LengthUsage(1, "pt")
PERCENT = LengthUsage(0.02, "%")
LINE_HEIGHT = LengthUsage(1 / 240, "")
VML_EMU = LengthUsage(1 / 12700, "")

_FINAL_UNIT = re.compile(r".+(p[xt]|%)$")
_LEADING_INT = re.compile(r"^\s*([-+]?\d+)")


def parse_int(value: Optional[str], base: int = 10) -> Optional[int]:
    """
    Parse the leading integer of ``value``.

    Trailing garbage is ignored (``"12pt"`` -> 12) and values without a
    leading number yield None.
    """
    if value is None:
        return None
    if base == 16:
        match = re.match(r"^\s*([-+]?[0-9a-fA-F]+)", value)
    else:
        match = _LEADING_INT.match(value)
    if not match:
        return None
    return int(match.group(1), base)


def parse_float(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    match = re.match(r"^\s*([-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?)", value)
    return float(match.group(1)) if match else None


def convert_length(value: Optional[str], usage: LengthUsage = DXA) -> Optional[str]:
    """
    Convert a raw measurement into a CSS length.

    Values already expressed in ``pt``, ``px`` or ``%`` are returned unchanged.

    Args:
        value: Raw attribute value
        usage: Measurement kind

    Returns:
        CSS length with two decimals, or None
    """
    if value is None or _FINAL_UNIT.match(value):
        return value

    number = parse_int(value)
    if number is None:
        return None
    return f"{number * usage.mul:.2f}{usage.unit}"


def convert_boolean(value: Optional[str], default: Optional[bool] = False) -> Optional[bool]:
    if value in ("1", "on", "true"):
        return True
    if value in ("0", "off", "false"):
        return False
    return default


def length_to_points(length: Optional[str]) -> Optional[float]:
    """Read the numeric part of a CSS length produced by ``convert_length``."""
    return parse_float(length)
