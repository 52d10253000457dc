"""
High-level API for exporting notes as watermarked PDFs.

Example:
    from notepdf import NotePdfExporter, SettingsStore, VaultStorage

    exporter = NotePdfExporter(SettingsStore().load(), VaultStorage("vault"))
    exporter.create_pdf("Meeting notes", "Hello")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from .engine.geometry import DEFAULT_MARGIN, DEFAULT_PAGE_SIZE, PageGeometry, Size, page_geometry
from .engine.layout_engine import layout_document
from .engine.layout_primitives import RenderPlan
from .engine.text_metrics import DEFAULT_FONT, FontMetricsProvider, ReportLabFontMetrics
from .exceptions import NotePdfError, PdfCreationError
from .renderers.pdf_renderer import PdfRenderer
from .settings import DocumentConfig
from .storage import VaultStorage, pdf_filename

logger = logging.getLogger(__name__)


class NotePdfExporter:
    """Lays out, renders and stores single-page note PDFs."""

    def __init__(
        self,
        settings: DocumentConfig,
        storage: VaultStorage,
        *,
        page_size: Union[str, Size, Iterable[float]] = DEFAULT_PAGE_SIZE,
        margin: float = DEFAULT_MARGIN,
        font_name: str = DEFAULT_FONT,
        metrics: Optional[FontMetricsProvider] = None,
        overwrite: bool = False,
    ):
        """
        Initialize exporter.

        Args:
            settings: Document settings used for every export
            storage: Destination for generated files
            page_size: Page size preset or dimensions in points
            margin: Uniform page margin in points
            font_name: Standard PDF font for all text
            metrics: Font metrics override (defaults to ReportLab metrics for ``font_name``)
            overwrite: Replace existing PDFs with the same name
        """
        self.settings = settings
        self.storage = storage
        self.geometry: PageGeometry = page_geometry(page_size, margin)
        self.metrics = metrics or ReportLabFontMetrics(font_name)
        self.renderer = PdfRenderer(font_name=font_name, metrics=self.metrics)
        self.overwrite = overwrite

    def build_plan(self, content: str) -> RenderPlan:
        return layout_document(self.settings, content, self.geometry, self.metrics)

    def render_bytes(self, title: str, content: str) -> bytes:
        plan = self.build_plan(content)
        return self.renderer.render(plan, self.geometry, title=title)

    def create_pdf(self, title: str, content: str) -> Path:
        """
        Export a note as ``<title>.pdf``.

        Args:
            title: Note title, also used for the file name
            content: Note text

        Returns:
            Path of the stored PDF

        Raises:
            PdfCreationError: If layout, rendering or storage fails; nothing
                is written in that case
        """
        try:
            file_name = pdf_filename(title)
            data = self.render_bytes(title, content)
            path = self.storage.create_binary(file_name, data, overwrite=self.overwrite)
        except (NotePdfError, OSError) as exc:
            logger.error(f"PDF creation failed for '{title}': {exc}")
            raise PdfCreationError(f"Failed to create PDF for '{title}'", str(exc)) from exc

        logger.info(f"PDF saved as {file_name}")
        return path
