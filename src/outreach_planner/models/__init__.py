"""
Data models for the Outreach Planner.

This package contains Pydantic models for:
- Temporal signals supplied by the signal store
- Outreach windows and signal overlaps derived by the aggregation engine
"""

from .signals import (
    CATEGORY_INFO,
    IMPACT_LEVEL_INFO,
    ConfidenceLevel,
    GeographyHint,
    ImpactLevel,
    SignalCategory,
    TemporalSignal,
    TimeRange,
)
from .windows import (
    OutreachWindow,
    SignalOverlap,
    WindowType,
)

__all__ = [
    # Signals
    "CATEGORY_INFO",
    "IMPACT_LEVEL_INFO",
    "ConfidenceLevel",
    "GeographyHint",
    "ImpactLevel",
    "SignalCategory",
    "TemporalSignal",
    "TimeRange",

    # Windows
    "OutreachWindow",
    "SignalOverlap",
    "WindowType",
]
