"""Asset inventory analyzer — per-extension size verdicts and totals."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from pathlib import PurePath

from perfaudit.analyzers.sizes import (
    ASSET_THRESHOLDS,
    DEFAULT_ASSET_THRESHOLD,
    classify,
    merged_thresholds,
    round_kb,
)
from perfaudit.schemas.metrics import AssetInventory, AssetRecord

logger = logging.getLogger(__name__)


def asset_extension(name: str) -> str:
    """Lower-cased extension including the leading dot.

    "" for names without a dot and for dotfiles; a trailing dot ("photo.") gives ".".
    """
    base = PurePath(name).name
    dot = base.rfind(".")
    if dot <= 0 or not base.strip("."):
        return ""
    return base[dot:].lower()


def analyze_assets(
    asset_names: Iterable[str],
    size_lookup: Callable[[str], float],
    thresholds: Mapping[str, float] | None = None,
) -> AssetInventory:
    """Classify every asset in listing order and aggregate the total size.

    The total is rounded once, after summing, rather than per item.
    """
    table = merged_thresholds(ASSET_THRESHOLDS, thresholds)
    records: list[AssetRecord] = []
    total = 0.0
    for name in asset_names:
        ext = asset_extension(name)
        size_kb = size_lookup(name)
        verdict = classify(ext, size_kb, table, default=DEFAULT_ASSET_THRESHOLD)
        logger.debug("%s: %sKB - %s", name, size_kb, verdict.value)
        records.append(AssetRecord(name=name, size_kb=size_kb, extension=ext, verdict=verdict))
        total += size_kb

    return AssetInventory(
        records=records,
        total_count=len(records),
        total_size_kb=round_kb(total) if records else 0,
    )
