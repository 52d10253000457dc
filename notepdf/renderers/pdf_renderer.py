"""

PDF renderer executing a `RenderPlan` with ReportLab.

The whole document is built in memory; callers receive the finished bytes
and decide where to store them.

"""

from __future__ import annotations

import logging
from io import BytesIO
from typing import Optional

from ..engine.geometry import PageGeometry
from ..engine.layout_primitives import RenderPlan
from ..engine.text_metrics import DEFAULT_FONT, FontMetricsProvider, ReportLabFontMetrics
from ..exceptions import RenderingError
from ..version import __version__
from .base_renderer import BaseRenderer
from .render_utils import ensure_plan_drawable
from .text_renderer import TextBlockRenderer

logger = logging.getLogger(__name__)


class PdfRenderer(BaseRenderer):
    """Renders a single-page plan into PDF bytes."""

    def __init__(
        self,
        font_name: str = DEFAULT_FONT,
        metrics: Optional[FontMetricsProvider] = None,
    ) -> None:
        super().__init__()
        self.font_name = font_name
        self.metrics = metrics or ReportLabFontMetrics(font_name)

    def render(self, plan: RenderPlan, geometry: PageGeometry, title: Optional[str] = None) -> bytes:
        """

        Draw every block of ``plan`` in order onto a blank page.

        Args:
        plan: Blocks to draw, first block at the bottom of the z-order
        geometry: Page size
        title: Optional document title stored in the PDF metadata

        Returns:
        Serialized PDF document

        Raises:
        RenderingError: If a block cannot be drawn; no bytes are produced

        """
        ensure_plan_drawable(plan)

        buffer = BytesIO()
        canvas = self._init_canvas(buffer, geometry)
        if title:
            canvas.setTitle(title)
        canvas.setCreator(f"notepdf {__version__}")

        text_renderer = TextBlockRenderer(canvas, font_name=self.font_name, metrics=self.metrics)
        try:
            for block in plan:
                text_renderer.draw(block)
            self._finish()
        except (ValueError, KeyError, UnicodeError) as exc:
            self.canvas = None
            logger.error(f"Failed to draw render plan: {exc}")
            raise RenderingError("Failed to draw render plan", str(exc)) from exc

        data = buffer.getvalue()
        logger.debug(f"Rendered {len(plan)} block(s) into {len(data)} bytes")
        return data
