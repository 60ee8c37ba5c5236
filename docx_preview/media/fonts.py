"""Embedded font deobfuscation."""

import re

GUID_KEY_LENGTH = 16
OBFUSCATED_HEADER_LENGTH = 32


def deobfuscate(data: bytes, guid_key: str) -> bytes:
    """
    Reverse the obfuscation of an embedded font.

    The first 32 bytes are XORed with the 16 bytes of the font key GUID,
    read in reverse order.

    Args:
        data: Obfuscated font bytes
        guid_key: ``fontKey`` attribute, e.g. ``{2AB35C6F-...}``

    Returns:
        Font bytes
    """
    trimmed = re.sub(r"[{}-]", "", guid_key)
    numbers = [int(trimmed[i * 2:i * 2 + 2], 16) for i in range(GUID_KEY_LENGTH)]
    numbers.reverse()

    result = bytearray(data)
    for i in range(min(OBFUSCATED_HEADER_LENGTH, len(result))):
        result[i] ^= numbers[i % GUID_KEY_LENGTH]
    return bytes(result)
