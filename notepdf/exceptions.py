"""Custom exceptions for notepdf."""

from typing import Optional


class NotePdfError(Exception):
    """Base exception for notepdf errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ConfigError(NotePdfError):
    """Exception raised for invalid or unreadable settings."""

    pass


class GeometryError(NotePdfError):
    """Exception raised for impossible page geometry."""

    pass


class LayoutError(NotePdfError):
    """Exception raised during layout calculation."""

    pass


class FontError(NotePdfError):
    """Exception raised during font resolution."""

    pass


class RenderingError(NotePdfError):
    """Exception raised while drawing a render plan."""

    pass


class PdfCreationError(RenderingError):
    """Raised once per failed note export, wrapping the underlying cause."""

    pass


class StorageError(NotePdfError):
    """Exception raised while persisting generated files."""

    pass
