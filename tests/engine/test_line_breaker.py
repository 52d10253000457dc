"""Tests for body text line breaking."""

from notepdf.engine.line_breaker import LineBreaker
from notepdf.engine.text_metrics import FontMetricsProvider


class CharMetrics(FontMetricsProvider):
    """Every character is 10pt wide."""

    def measure_width(self, text, size):
        return 10.0 * len(text)

    def measure_height(self, size):
        return float(size)


class TestLineBreaker:
    """Test suite for LineBreaker."""

    def setup_method(self):
        self.breaker = LineBreaker(CharMetrics())

    def test_empty_text(self):
        """Test that empty text has no lines."""
        assert self.breaker.break_text("", 12, 100) == []

    def test_no_width_splits_on_newlines_only(self):
        """Test unbounded blocks keep their lines."""
        assert self.breaker.break_text("a b c\r\nd\re", 12) == ["a b c", "d", "e"]

    def test_wraps_greedily(self):
        """Test words fill a line until the width is reached."""
        assert self.breaker.break_text("aaa bbb ccc", 12, 70) == ["aaa bbb", "ccc"]

    def test_exact_fit(self):
        """Test a line exactly as wide as the limit."""
        assert self.breaker.break_text("aaaa bbbb", 12, 90) == ["aaaa bbbb"]

    def test_blank_lines_kept(self):
        """Test empty paragraphs become empty lines."""
        assert self.breaker.break_text("one\n\ntwo", 12, 100) == ["one", "", "two"]

    def test_long_word_on_own_line(self):
        """Test an overlong word is not dropped."""
        lines = self.breaker.break_text("hi abcdefghijkl yo", 12, 50)

        assert lines == ["hi", "abcdefghijkl", "yo"]

    def test_tabs_expanded(self):
        """Test tabs become spaces."""
        assert self.breaker.break_text("a\tb", 12) == ["a    b"]

    def test_indentation_kept_when_wrapping(self):
        """Test leading spaces, tabs and inner space runs survive wrapping."""
        lines = self.breaker.break_text("- item\n\tnested\n    code  x", 12, 512)

        assert lines == ["- item", "    nested", "    code  x"]

    def test_indent_stays_on_first_line_only(self):
        """Test wrapped continuation lines start at the word."""
        assert self.breaker.break_text("  aa bb", 12, 50) == ["  aa", "bb"]

    def test_trailing_spaces_dropped(self):
        """Test trailing spaces do not force a wrap."""
        assert self.breaker.break_text("abc     ", 12, 30) == ["abc"]

    def test_whitespace_only_paragraph(self):
        """Test a line of spaces becomes an empty line."""
        assert self.breaker.break_text("a\n   \nb", 12, 100) == ["a", "", "b"]
