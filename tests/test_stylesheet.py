"""Tests for the stylesheet pattern analyzer."""

import time

import pytest

from perfaudit.analyzers.stylesheet import analyze_stylesheet
from perfaudit.errors import AnalysisError
from perfaudit.schemas.metrics import StylesheetMetrics


class TestAnalyzeStylesheet:

    def test_reference_sample(self) -> None:
        css = ".a .b .c .d { color:red; } @media (max-width:1px){ } !important !important"
        m = analyze_stylesheet(css)
        assert m.complex_selector_count >= 1
        assert m.media_query_count == 1
        assert m.important_count == 2
        assert m.total_rules == 2

    def test_empty_text(self) -> None:
        m = analyze_stylesheet("")
        assert m == StylesheetMetrics(total_lines=1)

    def test_trailing_newline_counts_extra_line(self) -> None:
        assert analyze_stylesheet("a{}\nb{}\n").total_lines == 3
        assert analyze_stylesheet("a{}\nb{}").total_lines == 2

    def test_property_tokens_allow_space_before_colon(self) -> None:
        css = (
            ".x { will-change : transform; transform: none; }\n"
            ".y { animation :fade 1s; transition: opacity 1s; }\n"
        )
        m = analyze_stylesheet(css)
        assert m.will_change_count == 1
        assert m.transform_count == 1
        assert m.animation_count == 1
        assert m.transition_count == 1

    def test_transform_value_is_not_a_property(self) -> None:
        m = analyze_stylesheet(".c { transition: transform 0.2s; }")
        assert m.transform_count == 0
        assert m.transition_count == 1

    def test_keyframes_opener_counted_once(self) -> None:
        css = "@keyframes spin { from { opacity: 0; } to { opacity: 1; } }"
        m = analyze_stylesheet(css)
        assert m.keyframe_count == 1
        assert m.media_query_count == 0

    def test_nested_braces_count_innermost_blocks(self) -> None:
        m = analyze_stylesheet("@media print { .a { color: red; } .b { color: blue; } }")
        assert m.total_rules == 2

    def test_simple_selector_is_not_complex(self) -> None:
        assert analyze_stylesheet(".a{color:red}").complex_selector_count == 0

    def test_idempotent(self) -> None:
        css = ".a .b .c .d { x: y; }\n@media screen { .e { transition: all 1s; } }\n"
        assert analyze_stylesheet(css) == analyze_stylesheet(css)

    def test_rejects_non_text(self) -> None:
        with pytest.raises(AnalysisError, match="stylesheet analyzer"):
            analyze_stylesheet(b".a{}")  # type: ignore[arg-type]


class TestComplexSelectorCount:

    def test_exact_count(self) -> None:
        css = (
            ".a{x:y}"
            ".a .b .c .d {x:y}"
            ".p .q{x:y}"
            ".m\n.n\n.o\n.r{x:y}"
        )
        # Short selectors are skipped; the four-part and the multi-line selector count.
        assert analyze_stylesheet(css).complex_selector_count == 2

    def test_long_trailing_comment(self) -> None:
        css = ".a { color: red; }\n" * 50 + "/* " + "lorem ipsum " * 60 + "*/"
        start = time.perf_counter()
        m = analyze_stylesheet(css)
        elapsed = time.perf_counter() - start
        assert m.complex_selector_count == 49
        assert elapsed < 1.0
