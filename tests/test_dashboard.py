"""Tests for HTML dashboard generation."""

from __future__ import annotations

from perfaudit.output.dashboard import render_dashboard
from perfaudit.output.report import assemble_report
from perfaudit.schemas.metrics import AssetInventory, AssetRecord, SizeVerdict, StylesheetMetrics
from perfaudit.schemas.report import Category, Priority, Recommendation


class TestRenderDashboard:

    def test_renders_score_and_recommendations(self) -> None:
        recs = [Recommendation(category=Category.STYLESHEET, priority=Priority.HIGH, message="Add will-change")]
        report = assemble_report(
            [],
            StylesheetMetrics(total_rules=3),
            None,
            AssetInventory(
                records=[AssetRecord(name="big.png", size_kb=900.0, extension=".png", verdict=SizeVerdict.NEEDS_IMPROVEMENT)],
                total_count=1,
                total_size_kb=900.0,
            ),
            recs,
            85,
        )
        html = render_dashboard(report, site_name="Demo")
        assert "<title>Performance Report: Demo</title>" in html
        assert "85/100" in html
        assert "band-good" in html
        assert "HIGH priority" in html
        assert "Add will-change" in html
        assert "big.png" in html
        assert "total rules" in html
        assert "Inline JavaScript" not in html

    def test_escapes_messages(self) -> None:
        recs = [Recommendation(category=Category.ASSET, priority=Priority.MEDIUM, message="<img> is large")]
        html = render_dashboard(assemble_report([], None, None, None, recs, 90))
        assert "&lt;img&gt; is large" in html
        assert "<img> is large" not in html

    def test_no_recommendations(self) -> None:
        html = render_dashboard(assemble_report([], None, None, None, [], 100))
        assert "No recommended improvements." in html
        assert "band-excellent" in html
