"""Static HTML dashboard generator — renders AuditReport to a self-contained HTML file."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from perfaudit.schemas.report import AuditReport
from perfaudit.scoring.score import score_band

_TEMPLATE_DIR = Path(__file__).parent / "templates"


def render_dashboard(report: AuditReport, *, site_name: str = "") -> str:
    """Render an AuditReport into a self-contained HTML dashboard."""
    env = Environment(loader=FileSystemLoader(str(_TEMPLATE_DIR)), autoescape=True)
    template = env.get_template("dashboard.html")

    band = score_band(report.score)
    groups = [
        {
            "priority": priority.value,
            "items": [
                {"category": rec.category.label, "message": rec.message}
                for rec in recs
            ],
        }
        for priority, recs in report.grouped_recommendations()
    ]

    return template.render(
        site_name=site_name,
        generated_at=report.generated_at,
        score=report.score,
        band=band.value,
        band_label=band.label,
        band_description=band.description,
        summary=report.summary.model_dump(),
        file_records=[
            {"name": r.name, "size_kb": r.size_kb, "status": r.verdict.label, "verdict": r.verdict.value}
            for r in report.file_records
        ],
        stylesheet=report.stylesheet.model_dump() if report.stylesheet else None,
        script=report.script.model_dump() if report.script else None,
        assets=report.assets.model_dump(mode="json") if report.assets else None,
        groups=groups,
    )
