"""
Package module for OPC containers.

Zip access, relationship files and the generic part record.
"""

from .opc_package import OpenXmlPackage
from .part import Part
from .relationships import Relationship, RelationshipTypes, TOP_LEVEL_RELATIONSHIPS

__all__ = [
    "OpenXmlPackage",
    "Part",
    "Relationship",
    "RelationshipTypes",
    "TOP_LEVEL_RELATIONSHIPS",
]
