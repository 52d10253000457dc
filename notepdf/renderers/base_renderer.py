"""Base classes and interfaces for plan renderers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from io import BytesIO
from typing import Optional, Union

from reportlab.pdfgen import canvas as pdf_canvas

from ..engine.geometry import PageGeometry
from ..engine.layout_primitives import RenderPlan


CanvasTarget = Union[str, BytesIO]


class IRenderer(ABC):
    """Interface for renderer implementations."""

    @abstractmethod
    def render(self, plan: RenderPlan, geometry: PageGeometry) -> bytes:
        """Render the plan onto one page and return the serialized document."""


class BaseRenderer(IRenderer):
    """Common functionality shared by concrete renderer implementations."""

    def __init__(self) -> None:
        self.canvas: Optional[pdf_canvas.Canvas] = None

    def render(self, plan: RenderPlan, geometry: PageGeometry) -> bytes:  # pragma: no cover - interface
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Canvas helpers
    # ------------------------------------------------------------------
    def _init_canvas(self, output: CanvasTarget, geometry: PageGeometry) -> pdf_canvas.Canvas:
        page_size = (geometry.width, geometry.height)
        if hasattr(output, "write"):
            self.canvas = pdf_canvas.Canvas(output, pagesize=page_size)
        else:
            self.canvas = pdf_canvas.Canvas(str(output), pagesize=page_size)
        return self.canvas

    def _finish(self) -> None:
        if self.canvas is not None:
            self.canvas.showPage()
            self.canvas.save()
            self.canvas = None
