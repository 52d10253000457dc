"""Utility helpers shared across renderer components."""

from __future__ import annotations

import math
from typing import Iterable

from reportlab.lib.colors import Color

from ..engine.layout_primitives import ColorSpec, TextBlock
from ..exceptions import RenderingError


def to_color(spec: ColorSpec, alpha: float = 1.0) -> Color:
    """Convert a `ColorSpec` into a ReportLab colour with the given alpha."""
    return Color(spec.r, spec.g, spec.b, alpha=alpha)


def ensure_drawable(block: TextBlock) -> None:
    """Reject blocks whose numbers would produce an invalid content stream."""
    fields = {
        "x": block.x,
        "y": block.y,
        "font_size": block.font_size,
        "rotation_degrees": block.rotation_degrees,
    }
    if block.max_width is not None:
        fields["max_width"] = block.max_width
    if block.line_height is not None:
        fields["line_height"] = block.line_height

    for name, value in fields.items():
        if not math.isfinite(value):
            raise RenderingError(f"Cannot draw {block.role} block", f"{name} is {value!r}")


def ensure_plan_drawable(blocks: Iterable[TextBlock]) -> None:
    for block in blocks:
        ensure_drawable(block)
