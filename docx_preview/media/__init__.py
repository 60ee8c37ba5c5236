"""Media module: embedded fonts and resource URLs."""

from .fonts import deobfuscate
from .resources import ResourceStore, sniff_mime_type, to_data_url

__all__ = ["deobfuscate", "ResourceStore", "sniff_mime_type", "to_data_url"]
