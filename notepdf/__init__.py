"""
notepdf - print plain-text notes to watermarked single-page PDFs.

A note (title + body) is laid out on one page with an optional header
line, an optional footer line, body text wrapped to the page width and a
rotated, semi-transparent watermark, then rendered with ReportLab.

Quick Start:
    from notepdf import DocumentConfig, NotePdfExporter, VaultStorage

    exporter = NotePdfExporter(DocumentConfig(header_text="Notes"), VaultStorage("."))
    exporter.create_pdf("Shopping", "Milk\\nEggs")

The layout step on its own:
    from notepdf import layout_document, page_geometry, ReportLabFontMetrics

    plan = layout_document(DocumentConfig(), "Hello", page_geometry(), ReportLabFontMetrics())
"""

from .version import __version__, __version_info__

from .exceptions import (
    NotePdfError,
    ConfigError,
    GeometryError,
    LayoutError,
    FontError,
    RenderingError,
    PdfCreationError,
    StorageError,
)

from .engine import (
    ColorSpec,
    FixedFontMetrics,
    FontMetricsProvider,
    PageGeometry,
    RenderPlan,
    ReportLabFontMetrics,
    TextBlock,
    compute_body,
    compute_footer,
    compute_header,
    compute_watermark,
    layout_document,
    page_geometry,
)
from .settings import DEFAULT_SETTINGS, DocumentConfig, SettingsStore
from .storage import VaultStorage, pdf_filename
from .renderers import PdfRenderer
from .api import NotePdfExporter

__all__ = [
    "__version__",
    "__version_info__",
    "NotePdfError",
    "ConfigError",
    "GeometryError",
    "LayoutError",
    "FontError",
    "RenderingError",
    "PdfCreationError",
    "StorageError",
    "ColorSpec",
    "FixedFontMetrics",
    "FontMetricsProvider",
    "PageGeometry",
    "RenderPlan",
    "ReportLabFontMetrics",
    "TextBlock",
    "compute_body",
    "compute_footer",
    "compute_header",
    "compute_watermark",
    "layout_document",
    "page_geometry",
    "DEFAULT_SETTINGS",
    "DocumentConfig",
    "SettingsStore",
    "VaultStorage",
    "pdf_filename",
    "PdfRenderer",
    "NotePdfExporter",
]
