"""Size classification — maps a measured size to a three-level verdict.

Thresholds are "ideal" sizes in kilobytes. Anything at or under the threshold is
good, anything up to 1.5x the threshold is a warning, and the rest needs work.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable, Mapping

from perfaudit.errors import InvalidInput
from perfaudit.schemas.metrics import FileSizeRecord, SizeVerdict

logger = logging.getLogger(__name__)

WARNING_MULTIPLIER = 1.5

# Ideal size per scanned page/stylesheet (KB)
FILE_THRESHOLDS: dict[str, float] = {
    "index.html": 100,
    "styles.css": 50,
    "integration-test.html": 150,
    "test-responsive.html": 30,
}
DEFAULT_FILE_THRESHOLD = 50.0

# Ideal size per asset extension (KB)
ASSET_THRESHOLDS: dict[str, float] = {
    ".gif": 2000,
    ".png": 500,
    ".jpg": 300,
    ".jpeg": 300,
    ".webp": 200,
}
DEFAULT_ASSET_THRESHOLD = 500.0


def round_kb(value: float) -> float:
    """Round to 2 decimals, halves away from zero (matches browser tooling output)."""
    return math.floor(value * 100 + 0.5) / 100


def bytes_to_kb(num_bytes: int) -> float:
    return round_kb(num_bytes / 1024)


def merged_thresholds(base: Mapping[str, float], extra: Mapping[str, float] | None) -> dict[str, float]:
    """Return ``base`` extended with ``extra``; entries in ``extra`` win."""
    table = dict(base)
    if extra:
        table.update(extra)
    return table


def classify(
    category: str,
    size_kb: float,
    thresholds: Mapping[str, float] | None = None,
    *,
    default: float = DEFAULT_FILE_THRESHOLD,
) -> SizeVerdict:
    """Classify ``size_kb`` against the threshold for ``category``.

    ``thresholds`` defaults to the file table. Unknown categories use ``default``.
    Raises :class:`InvalidInput` for negative or non-finite sizes.
    """
    if isinstance(size_kb, bool) or not isinstance(size_kb, (int, float)):
        raise InvalidInput(f"size for {category!r} must be a number, got {size_kb!r}")
    if not math.isfinite(size_kb) or size_kb < 0:
        raise InvalidInput(f"size for {category!r} must be a non-negative finite number, got {size_kb}")

    table = FILE_THRESHOLDS if thresholds is None else thresholds
    limit = table.get(category, default)

    if size_kb <= limit:
        return SizeVerdict.GOOD
    if size_kb <= limit * WARNING_MULTIPLIER:
        return SizeVerdict.WARNING
    return SizeVerdict.NEEDS_IMPROVEMENT


def analyze_file_sizes(
    names: Iterable[str],
    size_lookup: Callable[[str], float],
    thresholds: Mapping[str, float] | None = None,
) -> list[FileSizeRecord]:
    """Build a :class:`FileSizeRecord` for each artifact name, in order."""
    table = merged_thresholds(FILE_THRESHOLDS, thresholds)
    records: list[FileSizeRecord] = []
    for name in names:
        size_kb = size_lookup(name)
        verdict = classify(name, size_kb, table, default=DEFAULT_FILE_THRESHOLD)
        logger.debug("%s: %sKB - %s", name, size_kb, verdict.value)
        records.append(FileSizeRecord(name=name, size_kb=size_kb, verdict=verdict))
    return records
