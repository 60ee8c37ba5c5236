"""Utility helpers for docx-preview."""

from .rich_logger import setup_logging

__all__ = ["setup_logging"]
