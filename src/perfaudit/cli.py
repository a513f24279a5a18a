"""Typer CLI — ``perfaudit run``, ``perfaudit validate`` and ``perfaudit render`` commands."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console

from perfaudit.config import load_config
from perfaudit.output.summary import render_summary
from perfaudit.schemas.config import AuditConfig
from perfaudit.schemas.report import AuditReport

# Load .env file from the working directory (if it exists)
load_dotenv()

app = typer.Typer(
    name="perfaudit",
    help="Static performance audit for a small frontend site: file sizes, CSS, inline JS and assets.",
    no_args_is_help=True,
)
console = Console()
logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
    )


def _resolve_config(config: Path | None, path: Path) -> AuditConfig:
    if config is not None:
        return load_config(config)
    return AuditConfig(target_path=str(path.resolve()))


def _write_extras(
    report: AuditReport, *, markdown: Path | None, dashboard: Path | None, site_name: str
) -> None:
    if markdown:
        from perfaudit.output.markdown import render_markdown_report

        markdown.parent.mkdir(parents=True, exist_ok=True)
        markdown.write_text(render_markdown_report(report, site_name=site_name))
        console.print(f"[green]Markdown report written to:[/] {markdown}")
    if dashboard:
        from perfaudit.output.dashboard import render_dashboard

        dashboard.parent.mkdir(parents=True, exist_ok=True)
        dashboard.write_text(render_dashboard(report, site_name=site_name))
        console.print(f"[green]HTML dashboard written to:[/] {dashboard}")


@app.command()
def validate(
    config: Path = typer.Option(..., "--config", "-c", envvar="PERFAUDIT_CONFIG", help="Path to perfaudit.yml"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Validate a configuration file without running the audit."""
    _setup_logging(verbose)

    try:
        cfg = load_config(config)
    except Exception as exc:
        console.print(f"[red]Config validation failed:[/] {exc}")
        raise typer.Exit(code=1)

    console.print("[green]Config is valid![/]\n")
    console.print(f"  Target path: {cfg.target_path}")
    console.print(f"  Entry HTML:  {cfg.entry_html}")
    console.print(f"  Stylesheet:  {cfg.stylesheet}")
    console.print(f"  Test pages:  {len(cfg.test_pages)}")
    for page in cfg.test_pages:
        console.print(f"    - {page}")
    console.print(f"  Assets dir:  {cfg.assets_dir}")
    if cfg.asset_ignore:
        console.print(f"  Ignoring:    {cfg.asset_ignore}")
    if cfg.file_thresholds:
        console.print(f"  File thresholds:  {cfg.file_thresholds}")
    if cfg.asset_thresholds:
        console.print(f"  Asset thresholds: {cfg.asset_thresholds}")
    console.print(f"  Output:      {cfg.output_path}")


@app.command()
def run(
    config: Path = typer.Option(None, "--config", "-c", envvar="PERFAUDIT_CONFIG", help="Path to perfaudit.yml"),
    path: Path = typer.Option(Path("."), "--path", "-p", help="Site directory to audit when no config is given."),
    output: Path = typer.Option(None, "--output", "-o", help="Where to write the JSON report (overrides config)."),
    markdown: Path = typer.Option(None, "--markdown", help="Also write a Markdown report to this path."),
    dashboard: Path = typer.Option(None, "--dashboard", help="Also write an HTML dashboard to this path."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Run the performance audit and write the JSON report."""
    _setup_logging(verbose)

    try:
        cfg = _resolve_config(config, path)
    except Exception as exc:
        console.print(f"[red]Config validation failed:[/] {exc}")
        raise typer.Exit(code=1)

    console.print(f"[bold]Starting performance audit for:[/] {cfg.site_name or cfg.target_path}\n")

    try:
        report = _run_with_progress(cfg)
    except Exception as exc:
        logger.debug("Audit failed", exc_info=True)
        console.print(f"[red]Audit failed:[/] {exc}")
        raise typer.Exit(code=1)

    # Summary contains literal [CSS]-style tags, so bypass Rich markup.
    console.print(render_summary(report), markup=False, highlight=False)

    out_path = output or _default_output(cfg)
    from perfaudit.output.report import save_report

    save_report(report, out_path)
    console.print(f"[green]JSON report written to:[/] {out_path}")

    _write_extras(report, markdown=markdown, dashboard=dashboard, site_name=cfg.site_name)
    console.print("\n[green]Performance audit complete[/]")


@app.command()
def render(
    report_path: Path = typer.Option(..., "--report", "-r", help="JSON report from a previous run."),
    markdown: Path = typer.Option(None, "--markdown", help="Write a Markdown report to this path."),
    dashboard: Path = typer.Option(None, "--dashboard", help="Write an HTML dashboard to this path."),
    site_name: str = typer.Option("", "--site-name", help="Site name for report titles."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Re-render the summary, Markdown report and HTML dashboard from a saved JSON report.

    Example:

        perfaudit render --report performance-report.json --dashboard report.html
    """
    _setup_logging(verbose)
    from perfaudit.output.report import load_report

    try:
        report = load_report(report_path)
    except Exception as exc:
        console.print(f"[red]Could not load report:[/] {exc}")
        raise typer.Exit(code=1)

    console.print(render_summary(report), markup=False, highlight=False)
    _write_extras(report, markdown=markdown, dashboard=dashboard, site_name=site_name)


def _default_output(cfg: AuditConfig) -> Path:
    out = Path(cfg.output_path)
    return out if out.is_absolute() else Path(cfg.target_path) / out


def _run_with_progress(cfg: AuditConfig) -> AuditReport:
    """Run the engine with a spinner per phase; marks the running phase failed on error."""
    from perfaudit.engine import run_audit
    from perfaudit.shared.progress import AuditProgress

    with AuditProgress(console=console) as progress:
        try:
            return run_audit(cfg, on_progress=progress.start_phase)
        except Exception as exc:
            progress.fail_phase(progress.current or "Audit", str(exc))
            raise
