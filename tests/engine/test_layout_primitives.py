"""Tests for layout primitives."""

import math

import pytest

from notepdf.engine.layout_primitives import BLACK, ColorSpec, RenderPlan, TextBlock
from notepdf.exceptions import LayoutError


def _block(role="body", **kwargs):
    values = {"content": "text", "font_size": 12.0, "x": 1.0, "y": 2.0}
    values.update(kwargs)
    return TextBlock(role=role, **values)


class TestTextBlock:
    """Test suite for TextBlock."""

    def test_defaults(self):
        """Test default style."""
        block = _block()

        assert block.color == BLACK
        assert block.opacity == 1.0
        assert block.rotation_degrees == 0.0
        assert block.max_width is None

    @pytest.mark.parametrize("opacity", [-0.1, 1.1])
    def test_opacity_range(self, opacity):
        """Test opacity outside [0, 1] is rejected."""
        with pytest.raises(LayoutError):
            _block(opacity=opacity)

    @pytest.mark.parametrize("angle,expected", [(-45, 315), (0, 0), (360, 0), (405, 45)])
    def test_normalized_rotation(self, angle, expected):
        """Test rotation folding."""
        assert _block(rotation_degrees=angle).normalized_rotation == pytest.approx(expected)

    def test_normalized_rotation_nan(self):
        """Test NaN is not folded."""
        assert math.isnan(_block(rotation_degrees=float("nan")).normalized_rotation)

    def test_to_dict(self):
        """Test serialisation."""
        data = _block(color=ColorSpec(0.9, 0.9, 0.9)).to_dict()

        assert data["role"] == "body"
        assert data["color"] == [0.9, 0.9, 0.9]
        assert data["x"] == 1.0

    def test_frozen(self):
        """Test blocks are immutable."""
        with pytest.raises(AttributeError):
            _block().x = 5


class TestRenderPlan:
    """Test suite for RenderPlan."""

    def test_sequence_behaviour(self):
        """Test iteration, length, indexing and lookup."""
        header = _block("header")
        body = _block("body")
        plan = RenderPlan([header, body])

        assert len(plan) == 2
        assert list(plan) == [header, body]
        assert plan[1] is body
        assert plan.roles == ["header", "body"]
        assert plan.get("body") is body
        assert plan.get("watermark") is None

    def test_to_dict(self):
        """Test serialisation keeps order."""
        plan = RenderPlan([_block("footer"), _block("body")])

        assert [b["role"] for b in plan.to_dict()["blocks"]] == ["footer", "body"]
