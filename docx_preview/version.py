"""Version information for docx-preview."""

__version__ = "0.1.0"
