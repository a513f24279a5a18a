"""Configuration schema — validates perfaudit.yml."""

from pathlib import Path

from pydantic import BaseModel, model_validator


class AuditConfig(BaseModel):
    """Top-level configuration loaded from perfaudit.yml.

    ``file_thresholds`` and ``asset_thresholds`` extend (and may override
    entries of) the built-in ideal-size tables; values are kilobytes.
    """

    # Required
    target_path: str

    # Optional metadata
    site_name: str = ""

    # Artifacts, relative to target_path
    entry_html: str = "index.html"
    stylesheet: str = "styles.css"
    test_pages: list[str] = ["integration-test.html", "test-responsive.html"]
    assets_dir: str = "assets"

    # Gitignore-style patterns for asset files that should not be inventoried
    asset_ignore: list[str] = []

    # Threshold table extensions (KB)
    file_thresholds: dict[str, float] = {}
    asset_thresholds: dict[str, float] = {}

    # Output
    output_path: str = "performance-report.json"

    @property
    def scanned_files(self) -> list[str]:
        """Artifacts subject to file-size analysis, in scan order, without duplicates."""
        names: list[str] = []
        for name in (self.entry_html, self.stylesheet, *self.test_pages):
            if name and name not in names:
                names.append(name)
        return names

    @model_validator(mode="after")
    def check_target_path_exists(self) -> "AuditConfig":
        if not Path(self.target_path).is_dir():
            raise ValueError(f"target_path is not a directory: {self.target_path}")
        return self

    @model_validator(mode="after")
    def check_thresholds_positive(self) -> "AuditConfig":
        for table_name in ("file_thresholds", "asset_thresholds"):
            for key, value in getattr(self, table_name).items():
                if value <= 0:
                    raise ValueError(f"{table_name}[{key!r}] must be positive, got {value}")
        return self

    @model_validator(mode="after")
    def normalize_asset_extensions(self) -> "AuditConfig":
        # Asset thresholds are keyed by lower-cased extension with a leading dot.
        self.asset_thresholds = {
            (k if k.startswith(".") else f".{k}").lower(): v
            for k, v in self.asset_thresholds.items()
        }
        return self
