"""YAML config loader — reads perfaudit.yml into AuditConfig."""

from pathlib import Path

import yaml

from perfaudit.schemas.config import AuditConfig


def load_config(path: str | Path) -> AuditConfig:
    """Load and validate an audit config file.

    Raises ``FileNotFoundError`` if the path doesn't exist and
    ``pydantic.ValidationError`` if the YAML content is invalid.
    A relative ``target_path`` is resolved against the config file's directory.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    raw = yaml.safe_load(path.read_text())
    if not isinstance(raw, dict):
        raise ValueError(f"Config file must be a YAML mapping, got {type(raw).__name__}")

    # YAML loads lists with only commented-out items as None; normalize to empty list.
    for key in ("test_pages", "asset_ignore"):
        if key in raw:
            if raw[key] is None:
                raw[key] = []
            elif isinstance(raw[key], list):
                raw[key] = [item for item in raw[key] if item]
    for key in ("file_thresholds", "asset_thresholds"):
        if key in raw and raw[key] is None:
            raw[key] = {}

    target = raw.get("target_path", ".")
    if target is not None and not Path(str(target)).is_absolute():
        raw["target_path"] = str((path.parent / str(target)).resolve())

    return AuditConfig(**raw)
