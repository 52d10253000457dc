"""

Font metrics providers - measuring text width and height.

The layout engine only needs two queries against a font/size pair:
the advance width of a string and the height of the font's glyph box.
`ReportLabFontMetrics` answers them from ReportLab's AFM data for the
standard PDF fonts.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Tuple

from reportlab.pdfbase import pdfmetrics

from ..exceptions import FontError

logger = logging.getLogger(__name__)


DEFAULT_FONT = "Helvetica"

# The 14 standard PDF fonts; always available, never embedded.
STANDARD_FONTS: Tuple[str, ...] = (
    "Helvetica",
    "Helvetica-Bold",
    "Helvetica-Oblique",
    "Helvetica-BoldOblique",
    "Times-Roman",
    "Times-Bold",
    "Times-Italic",
    "Times-BoldItalic",
    "Courier",
    "Courier-Bold",
    "Courier-Oblique",
    "Courier-BoldOblique",
    "Symbol",
    "ZapfDingbats",
)


class FontMetricsProvider(ABC):
    """Interface for font metric lookups used by the layout engine."""

    @abstractmethod
    def measure_width(self, text: str, size: float) -> float:
        """Advance width of ``text`` at ``size`` points."""

    @abstractmethod
    def measure_height(self, size: float) -> float:
        """Height of the font's glyph box (ascent to descent) at ``size`` points."""


class ReportLabFontMetrics(FontMetricsProvider):
    """

    Metrics for a standard PDF font backed by ReportLab.

    Height includes the descender, so a string of capitals is slightly
    shorter than the reported box.

    """

    def __init__(self, font_name: str = DEFAULT_FONT):
        if font_name not in STANDARD_FONTS:
            raise FontError(
                f"Unsupported font: {font_name}",
                "only the standard PDF fonts can be used",
            )
        self.font_name = font_name
        try:
            self._font = pdfmetrics.getFont(font_name)
        except KeyError as exc:
            raise FontError(f"Font not available in ReportLab: {font_name}") from exc

    def measure_width(self, text: str, size: float) -> float:
        if not text:
            return 0.0
        return pdfmetrics.stringWidth(text, self.font_name, size)

    def measure_height(self, size: float) -> float:
        if not size:
            return 0.0
        ascent, descent = pdfmetrics.getAscentDescent(self.font_name, size)
        return ascent - descent

    def __repr__(self) -> str:
        return f"ReportLabFontMetrics({self.font_name!r})"


class FixedFontMetrics(FontMetricsProvider):
    """Returns the same width and height for every query."""

    def __init__(self, width: float, height: float):
        self.width = float(width)
        self.height = float(height)

    def measure_width(self, text: str, size: float) -> float:
        return self.width

    def measure_height(self, size: float) -> float:
        return self.height
