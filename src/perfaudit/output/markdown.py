"""Markdown report builder — renders AuditReport to a structured Markdown document."""

from __future__ import annotations

from perfaudit.schemas.report import AuditReport
from perfaudit.scoring.score import score_band

_PRIORITY_ICON = {"high": "🔴", "medium": "🟡", "low": "🟢"}


def render_markdown_report(report: AuditReport, *, site_name: str = "") -> str:
    """Render an AuditReport into a Markdown string."""
    sections: list[str] = []
    band = score_band(report.score)

    # Title
    title = f"# Performance Report: {site_name}\n" if site_name else "# Performance Report\n"
    sections.append(title)
    sections.append(f"*Generated: {report.generated_at}*\n")

    # Score
    sections.append("## Score\n")
    sections.append(f"**{report.score}/100** ({band.label}) {band.description}.\n")
    s = report.summary
    sections.append(
        f"{s.total_recommendations} recommendations: "
        f"{s.high_priority} high, {s.medium_priority} medium, {s.low_priority} low.\n"
    )

    # Files
    if report.file_records:
        sections.append("## File Sizes\n")
        sections.append("| File | Size (KB) | Status |")
        sections.append("|------|-----------|--------|")
        for rec in report.file_records:
            sections.append(f"| {rec.name} | {rec.size_kb} | {rec.verdict.label} |")
        sections.append("")

    # Stylesheet
    if report.stylesheet:
        css = report.stylesheet
        sections.append("## Stylesheet\n")
        sections.append("| Metric | Count |")
        sections.append("|--------|-------|")
        for label, value in (
            ("Lines", css.total_lines),
            ("Rules", css.total_rules),
            ("Media queries", css.media_query_count),
            ("Keyframes", css.keyframe_count),
            ("will-change", css.will_change_count),
            ("transform", css.transform_count),
            ("animation", css.animation_count),
            ("transition", css.transition_count),
            ("Complex selectors", css.complex_selector_count),
            ("!important", css.important_count),
        ):
            sections.append(f"| {label} | {value} |")
        sections.append("")

    # Script
    if report.script:
        js = report.script
        sections.append("## Inline JavaScript\n")
        sections.append("| Metric | Count |")
        sections.append("|--------|-------|")
        for label, value in (
            ("Lines", js.total_lines),
            ("Script tags", js.script_block_count),
            ("Event listeners", js.event_listener_count),
            ("setTimeout", js.set_timeout_count),
            ("setInterval", js.set_interval_count),
            ("requestAnimationFrame", js.animation_frame_count),
            ("DOM queries", js.dom_query_count),
        ):
            sections.append(f"| {label} | {value} |")
        sections.append("")

    # Assets
    if report.assets:
        sections.append("## Assets\n")
        sections.append(
            f"{report.assets.total_count} assets, {report.assets.total_size_kb}KB total.\n"
        )
        if report.assets.records:
            sections.append("| Asset | Type | Size (KB) | Status |")
            sections.append("|-------|------|-----------|--------|")
            for rec in report.assets.records:
                sections.append(f"| {rec.name} | {rec.extension or '—'} | {rec.size_kb} | {rec.verdict.label} |")
            sections.append("")

    # Recommendations
    sections.append("## Recommendations\n")
    groups = report.grouped_recommendations()
    if not groups:
        sections.append("No recommended improvements.\n")
    for priority, recs in groups:
        icon = _PRIORITY_ICON[priority.value]
        sections.append(f"### {icon} {priority.value.capitalize()} priority\n")
        for index, rec in enumerate(recs, 1):
            sections.append(f"{index}. **[{rec.category.label}]** {rec.message}")
        sections.append("")

    return "\n".join(sections)
