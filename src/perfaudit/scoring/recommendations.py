"""Recommendation rules.

Rules run in a fixed order and append to a fresh list, so the same metrics
always produce the same sequence. A ``None`` metrics record means the artifact
was not analyzed and its rules are skipped.
"""

from __future__ import annotations

from perfaudit.schemas.metrics import AssetInventory, ScriptMetrics, SizeVerdict, StylesheetMetrics
from perfaudit.schemas.report import Category, Priority, Recommendation

COMPLEX_SELECTOR_LIMIT = 10
IMPORTANT_LIMIT = 5
RULE_COUNT_LIMIT = 500
DOM_QUERY_LIMIT = 20
SCRIPT_LINE_LIMIT = 1000
ASSET_TOTAL_LIMIT_KB = 5000
MODERN_IMAGE_FORMATS = frozenset({".webp"})


def _format_kb(size_kb: float) -> str:
    return f"{size_kb:.2f}".rstrip("0").rstrip(".")


def stylesheet_rules(css: StylesheetMetrics) -> list[Recommendation]:
    recs: list[Recommendation] = []

    def add(priority: Priority, message: str) -> None:
        recs.append(Recommendation(category=Category.STYLESHEET, priority=priority, message=message))

    if css.will_change_count < css.animation_count:
        add(Priority.HIGH, "Add the will-change property to animated elements")
    if css.complex_selector_count > COMPLEX_SELECTOR_LIMIT:
        add(Priority.MEDIUM, "Many complex selectors detected. Prefer simpler selectors")
    if css.important_count > IMPORTANT_LIMIT:
        add(Priority.MEDIUM, "Heavy use of !important detected. Review the CSS architecture")
    if css.total_rules > RULE_COUNT_LIMIT:
        add(Priority.LOW, "Large number of CSS rules. Consider removing unused CSS")
    return recs


def script_rules(js: ScriptMetrics) -> list[Recommendation]:
    recs: list[Recommendation] = []

    def add(priority: Priority, message: str) -> None:
        recs.append(Recommendation(category=Category.SCRIPT, priority=priority, message=message))

    if js.animation_frame_count == 0 and js.set_timeout_count > 0:
        add(Priority.HIGH, "Use requestAnimationFrame instead of setTimeout for animations")
    if js.set_interval_count > 0:
        add(Priority.MEDIUM, "setInterval usage detected. Check its performance impact")
    if js.dom_query_count > DOM_QUERY_LIMIT:
        add(Priority.MEDIUM, "Many DOM queries detected. Cache and reuse element lookups")
    if js.total_lines > SCRIPT_LINE_LIMIT:
        add(Priority.LOW, "Inline JavaScript is large. Consider moving it to external files")
    return recs


def asset_rules(assets: AssetInventory) -> list[Recommendation]:
    recs: list[Recommendation] = []

    def add(priority: Priority, message: str) -> None:
        recs.append(Recommendation(category=Category.ASSET, priority=priority, message=message))

    if assets.total_size_kb > ASSET_TOTAL_LIMIT_KB:
        add(Priority.HIGH, "Total asset size is large. Optimize images")

    for record in assets.records:
        if record.verdict is SizeVerdict.NEEDS_IMPROVEMENT:
            add(Priority.MEDIUM, f"{record.name} is large ({_format_kb(record.size_kb)}KB)")

    has_modern = any(r.extension in MODERN_IMAGE_FORMATS for r in assets.records)
    if not has_modern and assets.total_count > 0:
        add(Priority.LOW, "Consider serving images as WebP to reduce file size")
    return recs


def build_recommendations(
    css: StylesheetMetrics | None,
    js: ScriptMetrics | None,
    assets: AssetInventory | None,
) -> list[Recommendation]:
    """Evaluate every rule against the available metrics, in rule order."""
    recs: list[Recommendation] = []
    if css is not None:
        recs.extend(stylesheet_rules(css))
    if js is not None:
        recs.extend(script_rules(js))
    if assets is not None:
        recs.extend(asset_rules(assets))
    return recs
