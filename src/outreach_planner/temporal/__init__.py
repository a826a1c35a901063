"""
Outreach Planner Temporal Package

Temporal signal aggregation engine:
- Bucket scoring over a fixed-width partition of the horizon
- Run-length window merge with fragmentation cleanup
- Pairwise overlap detection between impactful signals
- Speculative scenario transforms for what-if planning

Every component is a pure, synchronous transformation over immutable inputs.
"""

from .engine import (
    apply_scenario_mode,
    compute_outreach_windows,
    find_signal_overlaps,
)
from .merger import WindowMerger, aggregate_confidence, explain_window, suggest_approach
from .models import (
    BUILTIN_SCENARIOS,
    DEFAULT_SCENARIO_TAG,
    REQUESTED_SCENARIO_TAG,
    AggregationConfiguration,
    ScenarioProfile,
)
from .overlaps import OverlapDetector
from .scenario import ScenarioTransformer
from .scorer import Bucket, BucketScorer

__all__ = [
    "apply_scenario_mode",
    "compute_outreach_windows",
    "find_signal_overlaps",
    "AggregationConfiguration",
    "ScenarioProfile",
    "BUILTIN_SCENARIOS",
    "DEFAULT_SCENARIO_TAG",
    "REQUESTED_SCENARIO_TAG",
    "Bucket",
    "BucketScorer",
    "WindowMerger",
    "OverlapDetector",
    "ScenarioTransformer",
    "aggregate_confidence",
    "explain_window",
    "suggest_approach",
]
