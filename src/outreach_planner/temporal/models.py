"""
Temporal Aggregation Models

Configuration injected into the bucket scorer, window merger, overlap detector
and scenario transformer. Weighting tables live here instead of module-level
constants so alternate weighting schemes can be substituted per call.
"""

from datetime import timedelta
from typing import Dict, FrozenSet

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..models.signals import ImpactLevel
from ..models.windows import WindowType


class AggregationConfiguration(BaseModel):
    """Weights, thresholds and durations used by the aggregation engine"""

    model_config = ConfigDict(
        frozen=True,
        json_encoders={
            timedelta: lambda td: td.total_seconds(),
        }
    )

    # Scoring
    impact_weights: Dict[ImpactLevel, int] = Field(
        default_factory=lambda: {
            ImpactLevel.LOW: 1,
            ImpactLevel.MEDIUM: 2,
            ImpactLevel.HIGH: 3,
        },
        description="Weight contributed by each impact level"
    )
    safer_threshold: int = Field(default=1, description="Scores at or below are safer")
    caution_threshold: int = Field(default=2, description="Scores at or below are caution")

    # Bucketing and cleanup
    bucket_duration: timedelta = Field(default=timedelta(hours=1), description="Width of a scoring bucket")
    min_window_duration: timedelta = Field(default=timedelta(hours=2), description="Shorter windows are absorbed")

    # Overlaps
    overlap_impact_levels: FrozenSet[ImpactLevel] = Field(
        default=frozenset({ImpactLevel.MEDIUM, ImpactLevel.HIGH}),
        description="Impact levels considered for overlap detection"
    )
    combined_high_threshold: int = Field(default=5, description="Pair weight sum for high combined impact")
    combined_medium_threshold: int = Field(default=3, description="Pair weight sum for medium combined impact")

    # Explanations
    explanation_signal_limit: int = Field(default=3, ge=1, description="Signal descriptions listed per window")

    @field_validator("impact_weights")
    @classmethod
    def validate_weights(cls, value: Dict[ImpactLevel, int]) -> Dict[ImpactLevel, int]:
        missing = [level.value for level in ImpactLevel if level not in value]
        if missing:
            raise ValueError(f"Missing impact weights for: {', '.join(missing)}")
        if any(weight < 0 for weight in value.values()):
            raise ValueError("Impact weights must be non-negative")
        return value

    @field_validator("bucket_duration")
    @classmethod
    def validate_bucket_duration(cls, value: timedelta) -> timedelta:
        if value <= timedelta(0):
            raise ValueError(f"Bucket duration must be positive, got {value}")
        return value

    @model_validator(mode="after")
    def validate_thresholds(self) -> "AggregationConfiguration":
        if self.safer_threshold > self.caution_threshold:
            raise ValueError(
                f"safer_threshold ({self.safer_threshold}) must not exceed "
                f"caution_threshold ({self.caution_threshold})"
            )
        if self.combined_medium_threshold > self.combined_high_threshold:
            raise ValueError("combined_medium_threshold must not exceed combined_high_threshold")
        return self

    def weight_for(self, impact: ImpactLevel) -> int:
        return self.impact_weights[impact]

    def classify(self, score: int) -> WindowType:
        """Map a bucket score onto a window type"""
        if score <= self.safer_threshold:
            return WindowType.SAFER
        if score <= self.caution_threshold:
            return WindowType.CAUTION
        return WindowType.HIGH_DISRUPTION

    def combined_impact(self, a: ImpactLevel, b: ImpactLevel) -> ImpactLevel:
        """Impact level of two coinciding signals, from the sum of their weights"""
        combined = self.weight_for(a) + self.weight_for(b)
        if combined >= self.combined_high_threshold:
            return ImpactLevel.HIGH
        if combined >= self.combined_medium_threshold:
            return ImpactLevel.MEDIUM
        return ImpactLevel.LOW


class ScenarioProfile(BaseModel):
    """A named speculative adjustment for what-if exploration"""

    model_config = ConfigDict(frozen=True)

    tag: str = Field(..., min_length=1, description="Scenario identifier")
    compression_factor: float = Field(..., gt=0.0, lt=1.0, description="Multiplier applied to safer window durations")
    description: str = Field(..., description="Human-readable scenario description")


DEFAULT_SCENARIO_TAG = "major_event"

# Scenario shown when a caller asks for scenario mode without naming one
REQUESTED_SCENARIO_TAG = "olympics"

BUILTIN_SCENARIOS: Dict[str, ScenarioProfile] = {
    "olympics": ScenarioProfile(
        tag="olympics",
        compression_factor=0.7,
        description="LA 2028 Olympics preparation period",
    ),
    "major_event": ScenarioProfile(
        tag="major_event",
        compression_factor=0.8,
        description="Generic major event scenario",
    ),
}

SCENARIO_ALIASES: Dict[str, str] = {
    "majorEvent": "major_event",
    "major-event": "major_event",
}
