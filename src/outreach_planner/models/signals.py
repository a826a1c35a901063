"""
Temporal Signal Models

This module contains Pydantic models for the activity signals consumed by the planner:
- TemporalSignal: A time-bounded record of institutional or environmental activity
- TimeRange: Timezone-aware interval with ordering validation
- GeographyHint: Optional, neighborhood-level context (never used in computation)

Signals describe institutional rhythms, never individuals. Impact is framed as
effect on outreach timing suitability, not personal risk.
"""

from datetime import datetime, timedelta
from enum import Enum
from typing import Dict, List, Optional

import pytz
from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, field_validator, model_validator


class SignalCategory(str, Enum):
    """Temporal signal category enumeration."""
    SANITATION_CYCLE = "sanitation_cycle"          # Regular cleanup schedules
    PUBLIC_EVENT = "public_event"                  # Permitted events
    SHELTER_INTAKE_HOURS = "shelter_intake_hours"  # Shelter availability windows
    TRANSIT_DISRUPTION = "transit_disruption"      # Service changes affecting mobility
    SERVICE_BOTTLENECK = "service_bottleneck"      # Known capacity constraints


class ImpactLevel(str, Enum):
    """Effect of a signal on outreach timing suitability."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ConfidenceLevel(str, Enum):
    """Reliability of the data behind a signal."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TimeRange(BaseModel):
    """Timezone-qualified interval. Start must precede end."""

    model_config = ConfigDict(frozen=True)

    start: AwareDatetime = Field(..., description="Interval start (inclusive)")
    end: AwareDatetime = Field(..., description="Interval end (exclusive)")
    timezone: str = Field(default="America/Los_Angeles", description="IANA display timezone name")

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        try:
            pytz.timezone(value)
        except pytz.UnknownTimeZoneError:
            raise ValueError(f"Unknown IANA timezone: {value}")
        return value

    @model_validator(mode="after")
    def validate_ordering(self) -> "TimeRange":
        if self.start >= self.end:
            raise ValueError(f"Time range start {self.start.isoformat()} must precede end {self.end.isoformat()}")
        return self

    @property
    def duration(self) -> timedelta:
        return self.end - self.start


class GeographyHint(BaseModel):
    """Generalized neighborhood-level context for a signal."""

    model_config = ConfigDict(frozen=True)

    neighborhood: str = Field(default="Koreatown")
    description: Optional[str] = None


class TemporalSignal(BaseModel):
    """
    A fact about institutional or environmental activity.

    Signals are produced and validated by the signal store and are immutable
    afterwards; the aggregation engine only reads and groups them.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Stable signal identifier")
    category: SignalCategory = Field(..., description="Category of temporal activity")
    source: str = Field(default="", description="Data source name")
    time_range: TimeRange = Field(..., description="When this signal is active")
    impact_level: ImpactLevel = Field(..., description="Effect on outreach timing suitability")
    confidence_level: ConfidenceLevel = Field(..., description="Reliability of the data")
    description: str = Field(..., description="Brief factual description")
    interpretation_notes: str = Field(default="", description="Context for service providers")
    latency_hours: float = Field(..., ge=0, description="How stale the data is, in hours")
    is_simulated: bool = Field(default=False, description="Whether the data is synthetic")
    geography_hint: Optional[GeographyHint] = None
    related_signal_ids: List[str] = Field(default_factory=list)

    @property
    def start(self) -> datetime:
        return self.time_range.start

    @property
    def end(self) -> datetime:
        return self.time_range.end

    def overlaps(self, start: datetime, end: datetime) -> bool:
        """Open-interval overlap: touching endpoints do not count."""
        return self.start < end and self.end > start


CATEGORY_INFO: Dict[SignalCategory, Dict[str, str]] = {
    SignalCategory.SANITATION_CYCLE: {
        "label": "Sanitation Cycle",
        "description": "Scheduled cleanup activities that may affect area access",
        "short": "SAN",
    },
    SignalCategory.PUBLIC_EVENT: {
        "label": "Public Event",
        "description": "Permitted events that may increase activity and restrict areas",
        "short": "EVT",
    },
    SignalCategory.SHELTER_INTAKE_HOURS: {
        "label": "Shelter Intake",
        "description": "Shelter availability windows for referrals",
        "short": "SHL",
    },
    SignalCategory.TRANSIT_DISRUPTION: {
        "label": "Transit Disruption",
        "description": "Service changes affecting mobility options",
        "short": "TRN",
    },
    SignalCategory.SERVICE_BOTTLENECK: {
        "label": "Service Bottleneck",
        "description": "Known capacity constraints at service points",
        "short": "BTL",
    },
}

IMPACT_LEVEL_INFO: Dict[ImpactLevel, Dict[str, str]] = {
    ImpactLevel.LOW: {"label": "Low Impact", "description": "Minor effect on outreach timing"},
    ImpactLevel.MEDIUM: {"label": "Medium Impact", "description": "Consider timing adjustments"},
    ImpactLevel.HIGH: {"label": "High Impact", "description": "Significant timing considerations"},
}
