"""Tests for font metrics providers."""

import pytest
from reportlab.pdfbase import pdfmetrics

from notepdf.engine.text_metrics import (
    STANDARD_FONTS,
    FixedFontMetrics,
    FontMetricsProvider,
    ReportLabFontMetrics,
)
from notepdf.exceptions import FontError


class TestReportLabFontMetrics:
    """Test suite for ReportLab-backed metrics."""

    def test_width_matches_reportlab(self):
        """Test width equals ReportLab's string width."""
        metrics = ReportLabFontMetrics("Helvetica")

        assert metrics.measure_width("Obsidian", 70) == pytest.approx(
            pdfmetrics.stringWidth("Obsidian", "Helvetica", 70)
        )

    def test_width_scales_with_size(self):
        """Test width is proportional to font size."""
        metrics = ReportLabFontMetrics()

        assert metrics.measure_width("Hello", 24) == pytest.approx(2 * metrics.measure_width("Hello", 12))

    def test_empty_text_has_no_width(self):
        """Test empty string width."""
        assert ReportLabFontMetrics().measure_width("", 12) == 0.0

    def test_height_is_ascent_minus_descent(self):
        """Test height includes the descender."""
        ascent, descent = pdfmetrics.getAscentDescent("Helvetica", 70)
        height = ReportLabFontMetrics().measure_height(70)

        assert height == pytest.approx(ascent - descent)
        assert height > ascent

    def test_zero_size(self):
        """Test zero-size height."""
        assert ReportLabFontMetrics().measure_height(0) == 0.0

    @pytest.mark.parametrize("font", STANDARD_FONTS)
    def test_standard_fonts_load(self, font):
        """Test every standard font resolves."""
        assert ReportLabFontMetrics(font).font_name == font

    def test_unknown_font(self):
        """Test non-standard font rejection."""
        with pytest.raises(FontError, match="Unsupported font"):
            ReportLabFontMetrics("Comic Sans")


class TestFixedFontMetrics:
    """Test suite for fixed metrics."""

    def test_constant_answers(self):
        """Test the same box for any input."""
        metrics = FixedFontMetrics(10, 5)

        assert isinstance(metrics, FontMetricsProvider)
        assert metrics.measure_width("anything", 99) == 10.0
        assert metrics.measure_height(1) == 5.0


class TestLineBreakerWithReportLab:
    """Test suite for wrapping with real font metrics."""

    def test_indented_note_lines(self):
        """Test indented list and code lines keep their spaces."""
        from notepdf.engine.line_breaker import LineBreaker

        lines = LineBreaker(ReportLabFontMetrics()).break_text("- item\n\tnested\n    code  x", 12, 512)

        assert lines == ["- item", "    nested", "    code  x"]
