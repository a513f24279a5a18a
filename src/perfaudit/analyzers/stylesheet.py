"""Stylesheet pattern analyzer.

Lexical heuristics only: every counter is an independent regex scan over the
raw text, so overlapping matches across counters are expected.
"""

from __future__ import annotations

import re

from perfaudit.errors import AnalysisError
from perfaudit.schemas.metrics import StylesheetMetrics

_RULE_BLOCK = re.compile(r"\{[^}]*\}")
_MEDIA = re.compile(r"@media[^{]*\{")
_KEYFRAMES = re.compile(r"@keyframes[^{]*\{")
_WILL_CHANGE = re.compile(r"will-change\s*:")
_TRANSFORM = re.compile(r"transform\s*:")
_ANIMATION = re.compile(r"animation\s*:")
_TRANSITION = re.compile(r"transition\s*:")
# Four whitespace-separated components ahead of an opening brace: a brace-terminated
# segment counts when it holds at least three whitespace characters.
_WHITESPACE = re.compile(r"\s")
_IMPORTANT = "!important"


def _count(pattern: re.Pattern[str], text: str) -> int:
    return len(pattern.findall(text))


def _count_complex_selectors(text: str) -> int:
    # Same count as findall over r"[^{]*\s+[^{]*\s+[^{]*\s+[^{]*\{", in linear time.
    return sum(1 for segment in text.split("{")[:-1] if len(_WHITESPACE.findall(segment)) >= 3)


def analyze_stylesheet(css_text: str) -> StylesheetMetrics:
    """Count structural and performance-relevant patterns in ``css_text``."""
    if not isinstance(css_text, str):
        raise AnalysisError("stylesheet analyzer", f"expected text, got {type(css_text).__name__}")

    return StylesheetMetrics(
        total_lines=len(css_text.split("\n")),
        total_rules=_count(_RULE_BLOCK, css_text),
        media_query_count=_count(_MEDIA, css_text),
        keyframe_count=_count(_KEYFRAMES, css_text),
        will_change_count=_count(_WILL_CHANGE, css_text),
        transform_count=_count(_TRANSFORM, css_text),
        animation_count=_count(_ANIMATION, css_text),
        transition_count=_count(_TRANSITION, css_text),
        complex_selector_count=_count_complex_selectors(css_text),
        important_count=css_text.count(_IMPORTANT),
    )
