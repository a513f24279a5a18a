"""Recommendation and final report models."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

from perfaudit.schemas.metrics import (
    AssetInventory,
    FileSizeRecord,
    ScriptMetrics,
    StylesheetMetrics,
)


class Category(str, Enum):
    STYLESHEET = "stylesheet"
    SCRIPT = "script"
    ASSET = "asset"

    @property
    def label(self) -> str:
        return {
            Category.STYLESHEET: "CSS",
            Category.SCRIPT: "JavaScript",
            Category.ASSET: "Assets",
        }[self]


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# Presentation order for grouped recommendations.
PRIORITY_ORDER = (Priority.HIGH, Priority.MEDIUM, Priority.LOW)


class Recommendation(BaseModel):
    """A single improvement suggestion produced by a recommendation rule."""

    model_config = ConfigDict(frozen=True)

    category: Category
    priority: Priority
    message: str


class SummaryCounts(BaseModel):
    """Tallies shown in the report header."""

    model_config = ConfigDict(frozen=True)

    total_files: NonNegativeInt = 0
    total_recommendations: NonNegativeInt = 0
    high_priority: NonNegativeInt = 0
    medium_priority: NonNegativeInt = 0
    low_priority: NonNegativeInt = 0


class AuditReport(BaseModel):
    """The complete output of one audit run.

    ``stylesheet``, ``script`` and ``assets`` are ``None`` when the matching
    artifact was missing and its analyzer never ran.
    """

    model_config = ConfigDict(frozen=True)

    generated_at: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    score: int = Field(ge=0, le=100)
    summary: SummaryCounts = SummaryCounts()
    file_records: list[FileSizeRecord] = []
    stylesheet: StylesheetMetrics | None = None
    script: ScriptMetrics | None = None
    assets: AssetInventory | None = None
    recommendations: list[Recommendation] = []

    def grouped_recommendations(self) -> list[tuple[Priority, list[Recommendation]]]:
        """Recommendations grouped high → medium → low, keeping insertion order per group.

        Empty groups are omitted.
        """
        groups: list[tuple[Priority, list[Recommendation]]] = []
        for priority in PRIORITY_ORDER:
            recs = [r for r in self.recommendations if r.priority == priority]
            if recs:
                groups.append((priority, recs))
        return groups
