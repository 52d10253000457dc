"""

Standardized data structures describing layout engine output.

Every element the renderer draws is a `TextBlock`; the blocks for one
document are collected in a `RenderPlan`, so the renderer does not need to
interpret settings or page geometry on its own.

"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterator, List, Literal, Optional, Tuple

from ..exceptions import LayoutError

###############################################################################
# Common abstractions
###############################################################################


@dataclass(frozen=True, slots=True)
class ColorSpec:
    """Simple colour description (RGB in the 0-1 range)."""

    r: float
    g: float
    b: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.r, self.g, self.b)


BLACK = ColorSpec(0.0, 0.0, 0.0)


BlockRole = Literal["header", "footer", "body", "watermark"]


###############################################################################
# Text blocks
###############################################################################


@dataclass(frozen=True, slots=True)
class TextBlock:
    """

    Single positioned text element.

    `x`/`y` is the baseline origin of the first line in PDF points. When
    `max_width` is set the renderer wraps the content to that width and
    advances `line_height` per line. Rotation is applied about the origin.

    """

    role: BlockRole
    content: str
    font_size: float
    x: float
    y: float
    color: ColorSpec = BLACK
    opacity: float = 1.0
    rotation_degrees: float = 0.0
    max_width: Optional[float] = None
    line_height: Optional[float] = None

    def __post_init__(self):
        if not 0.0 <= self.opacity <= 1.0:
            raise LayoutError("Opacity must be within [0, 1]", f"{self.role}: {self.opacity}")

    @property
    def normalized_rotation(self) -> float:
        """Rotation folded into [0, 360); NaN stays NaN."""
        if not math.isfinite(self.rotation_degrees):
            return self.rotation_degrees
        return self.rotation_degrees % 360.0

    @property
    def is_empty(self) -> bool:
        return not self.content

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["color"] = list(self.color.as_tuple())
        return data


@dataclass(slots=True)
class RenderPlan:
    """Ordered text blocks for one page; order is the drawing (z) order."""

    blocks: List[TextBlock] = field(default_factory=list)

    def __iter__(self) -> Iterator[TextBlock]:
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)

    def __getitem__(self, index: int) -> TextBlock:
        return self.blocks[index]

    @property
    def roles(self) -> List[str]:
        return [block.role for block in self.blocks]

    def get(self, role: BlockRole) -> Optional[TextBlock]:
        for block in self.blocks:
            if block.role == role:
                return block
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {"blocks": [block.to_dict() for block in self.blocks]}
