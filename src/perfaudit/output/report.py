"""Report assembly and JSON persistence."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from pathlib import Path

from perfaudit.schemas.metrics import AssetInventory, FileSizeRecord, ScriptMetrics, StylesheetMetrics
from perfaudit.schemas.report import AuditReport, Priority, Recommendation, SummaryCounts


def assemble_report(
    file_records: Sequence[FileSizeRecord],
    css: StylesheetMetrics | None,
    js: ScriptMetrics | None,
    assets: AssetInventory | None,
    recommendations: Sequence[Recommendation],
    score: int,
) -> AuditReport:
    """Merge analyzer outputs, recommendations and score into one AuditReport."""
    tally = Counter(rec.priority for rec in recommendations)
    summary = SummaryCounts(
        total_files=len(file_records),
        total_recommendations=len(recommendations),
        high_priority=tally[Priority.HIGH],
        medium_priority=tally[Priority.MEDIUM],
        low_priority=tally[Priority.LOW],
    )
    return AuditReport(
        score=score,
        summary=summary,
        file_records=list(file_records),
        stylesheet=css,
        script=js,
        assets=assets,
        recommendations=list(recommendations),
    )


def save_report(report: AuditReport, path: str | Path) -> Path:
    """Write ``report`` as indented JSON and return the path written."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(report.model_dump_json(indent=2))
    return path


def load_report(path: str | Path) -> AuditReport:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Report file not found: {path}")
    return AuditReport.model_validate_json(path.read_text())
