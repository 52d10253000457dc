"""Page composition for a single-page note.

Turns settings, note content and page geometry into an ordered
`RenderPlan`. Nothing here draws or touches files; the only outside call is
the font metric lookup for watermark centring.

Preconditions: `geometry` is a valid `PageGeometry` (see its invariants).
Numeric settings are not re-validated: a NaN watermark angle is passed
through to the watermark block unchanged.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..settings import DocumentConfig
from .geometry import PageGeometry
from .layout_primitives import BLACK, ColorSpec, RenderPlan, TextBlock
from .text_metrics import FontMetricsProvider

logger = logging.getLogger(__name__)


# Space between the header baseline band and the first body line.
HEADER_BODY_GAP = 10.0
LINE_HEIGHT_RATIO = 1.2

TEXT_COLOR = BLACK

WATERMARK_COLOR = ColorSpec(0.9, 0.9, 0.9)
WATERMARK_OPACITY = 0.5


def compute_header(config: DocumentConfig, geometry: PageGeometry) -> Optional[TextBlock]:
    """Header line in the middle of the top margin band, or ``None``."""
    if config.header_text is None:
        return None
    return TextBlock(
        role="header",
        content=config.header_text,
        font_size=config.body_font_size,
        x=geometry.margin,
        y=geometry.height - geometry.margin / 2,
        color=TEXT_COLOR,
    )


def compute_footer(config: DocumentConfig, geometry: PageGeometry) -> Optional[TextBlock]:
    """Footer line in the middle of the bottom margin band, or ``None``."""
    if config.footer_text is None:
        return None
    return TextBlock(
        role="footer",
        content=config.footer_text,
        font_size=config.body_font_size,
        x=geometry.margin,
        y=geometry.margin / 2,
        color=TEXT_COLOR,
    )


def compute_body(
    content: str,
    config: DocumentConfig,
    geometry: PageGeometry,
    header_present: bool,
) -> TextBlock:
    """
    Body text block bounded by the left and right margins.

    The first line starts at the top margin, pushed down by one line plus
    `HEADER_BODY_GAP` when a header is drawn. Always returned, also for
    empty content.

    Args:
        content: Note text, may contain newlines
        config: Document settings
        geometry: Page geometry
        header_present: Whether a header block is part of the plan

    Returns:
        TextBlock for the body
    """
    font_size = config.body_font_size
    header_offset = font_size + HEADER_BODY_GAP if header_present else 0.0
    return TextBlock(
        role="body",
        content=content or "",
        font_size=font_size,
        x=geometry.margin,
        y=geometry.height - geometry.margin - header_offset,
        color=TEXT_COLOR,
        max_width=geometry.width - 2 * geometry.margin,
        line_height=font_size * LINE_HEIGHT_RATIO,
    )


def compute_watermark(
    config: DocumentConfig,
    font_metrics: FontMetricsProvider,
    geometry: PageGeometry,
) -> Optional[TextBlock]:
    """
    Watermark block centred on the page, or ``None`` without watermark text.

    The origin centres the un-rotated text box; the rotation is applied by
    the renderer about that origin, so rotated text is not visually
    centred. This matches the established output and is kept as is.
    """
    text = config.watermark_text
    if text is None:
        return None

    font_size = config.watermark_font_size
    text_width = font_metrics.measure_width(text, font_size)
    text_height = font_metrics.measure_height(font_size)

    return TextBlock(
        role="watermark",
        content=text,
        font_size=font_size,
        x=geometry.width / 2 - text_width / 2,
        y=geometry.height / 2 - text_height / 2,
        color=WATERMARK_COLOR,
        opacity=WATERMARK_OPACITY,
        rotation_degrees=config.watermark_angle,
    )


def layout_document(
    config: DocumentConfig,
    content: str,
    geometry: PageGeometry,
    font_metrics: FontMetricsProvider,
) -> RenderPlan:
    """
    Build the render plan for one note.

    Blocks are ordered header, footer, body, watermark; absent blocks are
    left out. Overlaps (e.g. long bodies running under the watermark or the
    footer) are not resolved.
    """
    header = compute_header(config, geometry)
    footer = compute_footer(config, geometry)
    body = compute_body(content, config, geometry, header_present=header is not None)
    watermark = compute_watermark(config, font_metrics, geometry)

    plan = RenderPlan([block for block in (header, footer, body, watermark) if block is not None])
    logger.debug(f"Layout plan: {plan.roles} on {geometry.width:.0f}x{geometry.height:.0f}pt page")
    return plan
