"""Renderers turning render plans into PDF documents."""

from .base_renderer import BaseRenderer, IRenderer
from .pdf_renderer import PdfRenderer
from .text_renderer import TextBlockRenderer

__all__ = ["BaseRenderer", "IRenderer", "PdfRenderer", "TextBlockRenderer"]
