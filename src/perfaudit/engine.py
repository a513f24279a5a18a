"""Audit engine — reads the site, runs the analyzers, scores and assembles the report."""

from __future__ import annotations

import logging
from collections.abc import Callable

from perfaudit.analyzers.assets import analyze_assets
from perfaudit.analyzers.scripts import analyze_scripts
from perfaudit.analyzers.sizes import analyze_file_sizes
from perfaudit.analyzers.stylesheet import analyze_stylesheet
from perfaudit.output.report import assemble_report
from perfaudit.schemas.config import AuditConfig
from perfaudit.schemas.metrics import AssetInventory, ScriptMetrics, StylesheetMetrics
from perfaudit.schemas.report import AuditReport
from perfaudit.scoring.recommendations import build_recommendations
from perfaudit.scoring.score import compute_score
from perfaudit.shared.site_reader import SiteReader

logger = logging.getLogger(__name__)


def run_audit(
    cfg: AuditConfig,
    reader: SiteReader | None = None,
    on_progress: Callable[[str], None] | None = None,
) -> AuditReport:
    """Run a full audit of the site described by ``cfg``.

    Missing artifacts are skipped (their metrics stay ``None`` in the report).
    Analyzer failures propagate to the caller.

    Args:
        cfg: Validated audit configuration
        reader: Optional pre-built SiteReader (defaults to one rooted at cfg.target_path)
        on_progress: Optional callback(step: str) invoked as each phase starts
    """
    if reader is None:
        reader = SiteReader(cfg.target_path, ignore=cfg.asset_ignore)

    def progress(step: str) -> None:
        logger.info(step)
        if on_progress:
            on_progress(step)

    # Phase 1: File sizes
    progress("Analyzing file sizes")
    present = [name for name in cfg.scanned_files if reader.is_file(name)]
    for name in cfg.scanned_files:
        if name not in present:
            logger.warning("%s not found, skipping size check", name)
    file_records = analyze_file_sizes(present, reader.size_kb, cfg.file_thresholds)

    # Phase 2: Stylesheet
    progress("Analyzing CSS performance")
    css: StylesheetMetrics | None = None
    if reader.is_file(cfg.stylesheet):
        css = analyze_stylesheet(reader.read_text(cfg.stylesheet))
        logger.debug("Stylesheet metrics: %s", css.model_dump())
    else:
        logger.warning("%s not found, skipping stylesheet analysis", cfg.stylesheet)

    # Phase 3: Inline scripts
    progress("Analyzing JavaScript performance")
    js: ScriptMetrics | None = None
    if reader.is_file(cfg.entry_html):
        js = analyze_scripts(reader.read_text(cfg.entry_html))
        logger.debug("Script metrics: %s", js.model_dump())
    else:
        logger.warning("%s not found, skipping script analysis", cfg.entry_html)

    # Phase 4: Assets
    progress("Analyzing assets")
    assets: AssetInventory | None = None
    if reader.is_dir(cfg.assets_dir):
        names = reader.list_assets(cfg.assets_dir)
        assets = analyze_assets(
            names,
            lambda name: reader.size_kb(f"{cfg.assets_dir}/{name}"),
            cfg.asset_thresholds,
        )
        logger.info("%d assets, %sKB total", assets.total_count, assets.total_size_kb)
    else:
        logger.warning("%s directory not found, skipping asset analysis", cfg.assets_dir)

    # Phase 5: Score & assemble
    progress("Generating report")
    recommendations = build_recommendations(css, js, assets)
    score = compute_score(recommendations)
    logger.info("Score %d/100 with %d recommendations", score, len(recommendations))

    return assemble_report(file_records, css, js, assets, recommendations, score)
