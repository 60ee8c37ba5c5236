"""Custom exceptions for docx-preview."""

from typing import Optional


class DocxPreviewError(Exception):
    """Base exception for docx-preview errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class PackageError(DocxPreviewError):
    """Exception raised when the input is not a readable package."""

    pass


class ParsingError(DocxPreviewError):
    """Exception raised when a part contains malformed XML."""

    def __init__(self, message: str, details: Optional[str] = None, path: Optional[str] = None):
        super().__init__(message, details)
        self.path = path


class RenderingError(DocxPreviewError):
    """Exception raised during document rendering."""

    pass


class ConfigurationError(DocxPreviewError):
    """Exception raised for unknown or invalid options."""

    pass
