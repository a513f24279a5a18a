"""Gitignore-aware access to the frontend artifacts of a site directory."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

import pathspec

from perfaudit.analyzers.sizes import bytes_to_kb

logger = logging.getLogger(__name__)

# Never inventoried as assets
_ALWAYS_IGNORE = {
    ".DS_Store",
    "Thumbs.db",
    ".gitkeep",
}


class SiteReader:
    """Read pages, stylesheets and asset listings below a site root."""

    def __init__(self, root: str | Path, *, ignore: Iterable[str] = ()) -> None:
        self.root = Path(root).resolve()
        if not self.root.is_dir():
            raise ValueError(f"Site root is not a directory: {self.root}")
        self._spec = self._load_ignore_spec(list(ignore))

    def _load_ignore_spec(self, extra: list[str]) -> pathspec.PathSpec | None:
        lines: list[str] = []
        gi = self.root / ".gitignore"
        if gi.exists():
            lines.extend(gi.read_text().splitlines())
        lines.extend(extra)
        if not lines:
            return None
        return pathspec.PathSpec.from_lines("gitignore", lines)

    def _resolve(self, subpath: str) -> Path:
        target = (self.root / subpath).resolve()
        if target != self.root and self.root not in target.parents:
            raise ValueError(f"Path escapes site root: {subpath}")
        return target

    def _is_ignored(self, rel: Path) -> bool:
        if rel.name in _ALWAYS_IGNORE:
            return True
        if self._spec and self._spec.match_file(rel.as_posix()):
            return True
        return False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def is_file(self, subpath: str) -> bool:
        return self._resolve(subpath).is_file()

    def is_dir(self, subpath: str) -> bool:
        return self._resolve(subpath).is_dir()

    def read_text(self, subpath: str) -> str:
        """Read a text artifact as UTF-8, replacing undecodable bytes."""
        target = self._resolve(subpath)
        if not target.is_file():
            raise FileNotFoundError(f"Not a file: {subpath}")
        return target.read_text(encoding="utf-8", errors="replace")

    def size_kb(self, subpath: str) -> float:
        """On-disk size in kilobytes, rounded to 2 decimals."""
        return bytes_to_kb(self._resolve(subpath).stat().st_size)

    def list_assets(self, subdir: str) -> list[str]:
        """File names directly inside ``subdir``, sorted, minus ignored entries.

        Sub-directories are skipped.
        """
        target = self._resolve(subdir)
        if not target.is_dir():
            raise NotADirectoryError(f"Not a directory: {subdir}")

        names: list[str] = []
        for child in sorted(target.iterdir()):
            if not child.is_file():
                continue
            rel = child.relative_to(self.root)
            if self._is_ignored(rel):
                logger.debug("Skipping ignored asset %s", rel)
                continue
            names.append(child.name)
        return names
