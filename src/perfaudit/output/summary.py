"""Plain-text summary of an AuditReport, as printed at the end of a run."""

from __future__ import annotations

from perfaudit.schemas.report import AuditReport
from perfaudit.scoring.score import score_band

_RULE = "=" * 50


def _or_na(value: object) -> str:
    return "N/A" if value is None else str(value)


def render_summary(report: AuditReport) -> str:
    """Render score, band, grouped recommendations and a statistics footer."""
    band = score_band(report.score)
    lines: list[str] = [
        "Performance Test Report",
        _RULE,
        "",
        f"Overall performance score: {report.score}/100",
        f"   {band.label} - {band.description}",
    ]

    groups = report.grouped_recommendations()
    if groups:
        lines.append("")
        lines.append("Recommended improvements:")
        for priority, recs in groups:
            lines.append("")
            lines.append(f"  {priority.value.upper()} priority:")
            for index, rec in enumerate(recs, 1):
                lines.append(f"    {index}. [{rec.category.label}] {rec.message}")
    else:
        lines.append("")
        lines.append("No recommended improvements")

    css_rules = report.stylesheet.total_rules if report.stylesheet else None
    js_lines = report.script.total_lines if report.script else None
    asset_total = f"{report.assets.total_size_kb}KB" if report.assets else None

    lines.extend([
        "",
        "Statistics:",
        f"  Files analyzed: {report.summary.total_files}",
        f"  CSS rules: {_or_na(css_rules)}",
        f"  JavaScript lines: {_or_na(js_lines)}",
        f"  Total asset size: {_or_na(asset_total)}",
    ])
    return "\n".join(lines) + "\n"
