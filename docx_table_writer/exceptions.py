"""Custom exceptions for DOCX Table Writer."""

from typing import Optional


class DocxTableWriterError(Exception):
    """Base exception for DOCX Table Writer errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class StyleError(DocxTableWriterError):
    """Exception raised when a style value is not allowed."""

    pass


class GeometryError(DocxTableWriterError):
    """Exception raised during page geometry lookups."""

    pass


class ExportError(DocxTableWriterError):
    """Exception raised while writing WordML."""

    pass


class DocumentImportError(DocxTableWriterError):
    """Exception raised when a table description cannot be imported."""

    pass


class ConfigError(DocxTableWriterError):
    """Exception raised for invalid export configuration."""

    pass
