"""Body text line breaking for the renderer."""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from .text_metrics import FontMetricsProvider

logger = logging.getLogger(__name__)

_NEWLINES = re.compile(r"\r\n|\r|\n")
_SPACE_RUNS = re.compile(r"( +)")
_TAB_REPLACEMENT = "    "


class LineBreaker:
    """Simple greedy line breaker.

    Explicit newlines always start a new line and empty lines are kept.
    Within a paragraph lines break at spaces. Indentation and runs of
    spaces inside a line are kept as written. A word wider than
    ``max_width`` is placed on a line of its own rather than dropped.
    """

    def __init__(self, metrics: FontMetricsProvider) -> None:
        self.metrics = metrics

    def break_text(self, text: str, font_size: float, max_width: Optional[float] = None) -> List[str]:
        if not text:
            return []

        text = text.replace("\t", _TAB_REPLACEMENT)
        paragraphs = _NEWLINES.split(text)
        if max_width is None:
            return paragraphs

        lines: List[str] = []
        for paragraph in paragraphs:
            lines.extend(self._break_paragraph(paragraph, font_size, max_width))
        return lines

    def _break_paragraph(self, paragraph: str, font_size: float, max_width: float) -> List[str]:
        if not paragraph.strip():
            return [""]

        # Alternating words and space runs: [word, spaces, word, ...]
        pieces = _SPACE_RUNS.split(paragraph.rstrip(" "))
        indent = ""
        if pieces[0] == "":
            indent = pieces[1]
            pieces = pieces[2:]

        lines: List[str] = []
        current_line = ""
        separator = indent
        for index in range(0, len(pieces), 2):
            word = pieces[index]
            if current_line or index == 0:
                candidate = f"{current_line}{separator}{word}"
            else:
                candidate = word
            separator = pieces[index + 1] if index + 1 < len(pieces) else ""

            if self.metrics.measure_width(candidate, font_size) <= max_width:
                current_line = candidate
                continue

            if current_line:
                lines.append(current_line)
            current_line = word

            if self.metrics.measure_width(word, font_size) > max_width:
                logger.debug("Word wider than %.2fpt kept on its own line: %r", max_width, word[:30])
                lines.append(word)
                current_line = ""

        if current_line:
            lines.append(current_line)

        return lines
