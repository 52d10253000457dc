"""Draws positioned text blocks on a ReportLab canvas."""

from __future__ import annotations

import logging

from reportlab.pdfgen.canvas import Canvas

from ..engine.layout_primitives import TextBlock
from ..engine.line_breaker import LineBreaker
from ..engine.text_metrics import FontMetricsProvider
from .render_utils import to_color

logger = logging.getLogger(__name__)


class TextBlockRenderer:
    """Render header, footer, body and watermark blocks."""

    def __init__(self, canvas: Canvas, *, font_name: str, metrics: FontMetricsProvider) -> None:
        self.canvas = canvas
        self.font_name = font_name
        self.metrics = metrics
        self.line_breaker = LineBreaker(metrics)

    def draw(self, block: TextBlock) -> int:
        """
        Draw one block.

        Args:
            block: Block to draw

        Returns:
            Number of lines drawn
        """
        if block.is_empty:
            return 0

        lines = self.line_breaker.break_text(block.content, block.font_size, block.max_width)
        line_height = block.line_height or self.metrics.measure_height(block.font_size)

        self.canvas.saveState()
        try:
            color = to_color(block.color, alpha=block.opacity)
            self.canvas.setFillColor(color)
            self.canvas.setFillAlpha(block.opacity)

            # Rotation pivots on the block origin, positive = counter-clockwise
            self.canvas.translate(block.x, block.y)
            if block.rotation_degrees:
                self.canvas.rotate(block.rotation_degrees)

            self.canvas.setFont(self.font_name, block.font_size)
            for index, line in enumerate(lines):
                if line:
                    self.canvas.drawString(0, -index * line_height, line)
        finally:
            self.canvas.restoreState()

        logger.debug(f"Drew {block.role} block: {len(lines)} line(s) at ({block.x:.2f}, {block.y:.2f})")
        return len(lines)
