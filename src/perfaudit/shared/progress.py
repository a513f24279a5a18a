"""Rich progress display for the audit phases."""

from __future__ import annotations

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

console = Console()


class AuditProgress:
    """Tracks the analysis phases of a run using a Rich spinner per phase."""

    def __init__(self, *, console: Console = console) -> None:
        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            TimeElapsedColumn(),
            console=console,
            transient=False,
        )
        self._task_ids: dict[str, int] = {}
        self._current: str | None = None

    def __enter__(self) -> "AuditProgress":
        self._progress.__enter__()
        return self

    def __exit__(self, *args: object) -> None:
        if self._current is not None:
            self.finish_phase(self._current)
        self._progress.__exit__(*args)

    def start_phase(self, name: str) -> None:
        """Finish the running phase (if any) and start tracking ``name``."""
        if self._current is not None:
            self.finish_phase(self._current)
        tid = self._progress.add_task(f"[cyan]{name}[/]", total=None)
        self._task_ids[name] = tid
        self._current = name

    def finish_phase(self, name: str) -> None:
        if name in self._task_ids:
            self._progress.update(
                self._task_ids[name],
                description=f"[green]✓ {name}[/]",
                completed=True,
            )
        if self._current == name:
            self._current = None

    def fail_phase(self, name: str, error: str) -> None:
        if name in self._task_ids:
            self._progress.update(
                self._task_ids[name],
                description=f"[red]✗ {name}: {error}[/]",
                completed=True,
            )
        if self._current == name:
            self._current = None

    @property
    def current(self) -> str | None:
        return self._current
