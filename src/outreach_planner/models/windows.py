"""
Outreach Window Models

Derived records produced by the aggregation engine:
- OutreachWindow: contiguous, classified span of the planning horizon
- SignalOverlap: intersection of two significant signals

Both are value objects. Cleanup and scenario transforms build new records
with model_copy() instead of mutating existing ones.
"""

from datetime import datetime, timedelta
from enum import Enum
from typing import List

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field

from .signals import ConfidenceLevel, ImpactLevel


class WindowType(str, Enum):
    """Outreach window classification, ordered safer < caution < high_disruption."""
    SAFER = "safer"
    CAUTION = "caution"
    HIGH_DISRUPTION = "high_disruption"

    @property
    def priority(self) -> int:
        return _WINDOW_PRIORITY[self]


_WINDOW_PRIORITY = {
    WindowType.SAFER: 0,
    WindowType.CAUTION: 1,
    WindowType.HIGH_DISRUPTION: 2,
}


class OutreachWindow(BaseModel):
    """
    A contiguous time period with consistent outreach conditions.

    Every window carries a plain-language explanation and a conservative
    confidence summary (the lowest confidence among its driver signals).
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Window identifier")
    window_type: WindowType = Field(..., description="Window classification")
    start: AwareDatetime = Field(..., description="Window start")
    end: AwareDatetime = Field(..., description="Window end")
    driver_signal_ids: List[str] = Field(default_factory=list, description="Signals behind the classification")
    plain_language_why: str = Field(..., description="Why the window is classified this way")
    confidence_summary: ConfidenceLevel = Field(..., description="Lowest confidence among driver signals")
    suggested_approach: str = Field(..., description="Non-prescriptive coordination guidance")
    impact_score: int = Field(default=0, ge=0, description="Maximum bucket score within the window")
    is_speculative: bool = Field(default=False, description="Produced by a what-if scenario")

    @property
    def duration(self) -> timedelta:
        return self.end - self.start


class SignalOverlap(BaseModel):
    """A period where two disruptive signals coincide."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Overlap identifier")
    start: AwareDatetime = Field(..., description="Intersection start")
    end: AwareDatetime = Field(..., description="Intersection end")
    signal_ids: List[str] = Field(..., min_length=2, max_length=2, description="The two overlapping signals")
    why_it_matters: str = Field(..., description="Plain-language explanation")
    combined_impact: ImpactLevel = Field(..., description="Impact derived from both signals' weights")

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def covers(self, instant: datetime) -> bool:
        return self.start <= instant < self.end
