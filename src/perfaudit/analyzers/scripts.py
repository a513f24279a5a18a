"""Embedded-script pattern analyzer — scans inline <script> blocks of a page."""

from __future__ import annotations

import re

from perfaudit.errors import AnalysisError
from perfaudit.schemas.metrics import ScriptMetrics

_SCRIPT_BLOCK = re.compile(r"<script[^>]*>[\s\S]*?</script>", re.IGNORECASE)
_SCRIPT_TAG = re.compile(r"</?script[^>]*>", re.IGNORECASE)

_EVENT_LISTENER = re.compile(r"addEventListener")
_SET_TIMEOUT = re.compile(r"setTimeout")
_SET_INTERVAL = re.compile(r"setInterval")
_ANIMATION_FRAME = re.compile(r"requestAnimationFrame")
_DOM_QUERY = re.compile(r"querySelector|getElementById|getElementsBy")


def extract_script_blocks(markup_text: str) -> list[str]:
    """Return the body of every <script> block in document order, tags stripped."""
    return [
        _SCRIPT_TAG.sub("", match.group(0))
        for match in _SCRIPT_BLOCK.finditer(markup_text)
    ]


def analyze_scripts(markup_text: str) -> ScriptMetrics:
    """Sum script pattern counts across all embedded blocks of ``markup_text``.

    A page without any <script> block yields all-zero metrics.
    """
    if not isinstance(markup_text, str):
        raise AnalysisError("script analyzer", f"expected text, got {type(markup_text).__name__}")

    blocks = extract_script_blocks(markup_text)

    total_lines = 0
    listeners = timeouts = intervals = frames = queries = 0
    for body in blocks:
        total_lines += len(body.split("\n"))
        listeners += len(_EVENT_LISTENER.findall(body))
        timeouts += len(_SET_TIMEOUT.findall(body))
        intervals += len(_SET_INTERVAL.findall(body))
        frames += len(_ANIMATION_FRAME.findall(body))
        queries += len(_DOM_QUERY.findall(body))

    return ScriptMetrics(
        total_lines=total_lines,
        event_listener_count=listeners,
        set_timeout_count=timeouts,
        set_interval_count=intervals,
        animation_frame_count=frames,
        dom_query_count=queries,
        script_block_count=len(blocks),
    )
