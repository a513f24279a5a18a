"""Pydantic models for the per-artifact analyzer outputs."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, NonNegativeFloat, NonNegativeInt, model_validator


class SizeVerdict(str, Enum):
    """Three-level verdict for a measured size against its ideal threshold."""

    GOOD = "good"
    WARNING = "warning"
    NEEDS_IMPROVEMENT = "needs_improvement"

    @property
    def label(self) -> str:
        return {
            SizeVerdict.GOOD: "✅ Good",
            SizeVerdict.WARNING: "⚠️ Warning",
            SizeVerdict.NEEDS_IMPROVEMENT: "❌ Needs improvement",
        }[self]


class FileSizeRecord(BaseModel):
    """Size and verdict for one scanned page or stylesheet."""

    model_config = ConfigDict(frozen=True)

    name: str
    size_kb: NonNegativeFloat
    verdict: SizeVerdict


class StylesheetMetrics(BaseModel):
    """Pattern counts for a stylesheet."""

    model_config = ConfigDict(frozen=True)

    total_lines: NonNegativeInt = 0
    total_rules: NonNegativeInt = 0
    media_query_count: NonNegativeInt = 0
    keyframe_count: NonNegativeInt = 0
    will_change_count: NonNegativeInt = 0
    transform_count: NonNegativeInt = 0
    animation_count: NonNegativeInt = 0
    transition_count: NonNegativeInt = 0
    complex_selector_count: NonNegativeInt = 0
    important_count: NonNegativeInt = 0


class ScriptMetrics(BaseModel):
    """Pattern counts summed over every embedded <script> block of a page."""

    model_config = ConfigDict(frozen=True)

    total_lines: NonNegativeInt = 0
    event_listener_count: NonNegativeInt = 0
    set_timeout_count: NonNegativeInt = 0
    set_interval_count: NonNegativeInt = 0
    animation_frame_count: NonNegativeInt = 0
    dom_query_count: NonNegativeInt = 0
    script_block_count: NonNegativeInt = 0


class AssetRecord(BaseModel):
    """A single file from the asset directory."""

    model_config = ConfigDict(frozen=True)

    name: str
    size_kb: NonNegativeFloat
    extension: str = ""  # lower-cased, with leading dot; "" when the name has none
    verdict: SizeVerdict


class AssetInventory(BaseModel):
    """All asset records plus their aggregate size."""

    model_config = ConfigDict(frozen=True)

    records: list[AssetRecord] = []
    total_count: NonNegativeInt = 0
    total_size_kb: NonNegativeFloat = 0

    @model_validator(mode="after")
    def check_count_matches_records(self) -> "AssetInventory":
        if self.total_count != len(self.records):
            raise ValueError(
                f"total_count ({self.total_count}) does not match number of records ({len(self.records)})"
            )
        return self
