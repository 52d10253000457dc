"""Layout engine: geometry, metrics and page composition."""

from .geometry import DEFAULT_MARGIN, DEFAULT_PAGE_SIZE, PAGE_SIZES, PageGeometry, Point, Size, page_geometry
from .layout_engine import (
    HEADER_BODY_GAP,
    LINE_HEIGHT_RATIO,
    TEXT_COLOR,
    WATERMARK_COLOR,
    WATERMARK_OPACITY,
    compute_body,
    compute_footer,
    compute_header,
    compute_watermark,
    layout_document,
)
from .layout_primitives import BLACK, ColorSpec, RenderPlan, TextBlock
from .line_breaker import LineBreaker
from .text_metrics import FixedFontMetrics, FontMetricsProvider, ReportLabFontMetrics, STANDARD_FONTS

__all__ = [
    "BLACK",
    "ColorSpec",
    "DEFAULT_MARGIN",
    "DEFAULT_PAGE_SIZE",
    "FixedFontMetrics",
    "FontMetricsProvider",
    "HEADER_BODY_GAP",
    "LINE_HEIGHT_RATIO",
    "LineBreaker",
    "PAGE_SIZES",
    "PageGeometry",
    "Point",
    "RenderPlan",
    "ReportLabFontMetrics",
    "STANDARD_FONTS",
    "TEXT_COLOR",
    "Size",
    "TextBlock",
    "WATERMARK_COLOR",
    "WATERMARK_OPACITY",
    "compute_body",
    "compute_footer",
    "compute_header",
    "compute_watermark",
    "layout_document",
    "page_geometry",
]
