"""
Outreach Planner: Temporal Signal Aggregation for Outreach Timing

Turns time-bounded activity signals (cleanup cycles, permitted events, shelter
intake hours, transit disruptions, service bottlenecks) into a continuous
partition of a planning horizon into safer / caution / high-disruption windows,
plus the moments where significant signals coincide.
"""

__version__ = "0.1.0"
__author__ = "Outreach Planner Team"
__description__ = "Temporal signal aggregation for outreach window planning"

# Package-level imports for convenience
from .config import Config
from .logger import get_logger
from .temporal import (
    apply_scenario_mode,
    compute_outreach_windows,
    find_signal_overlaps,
)

__all__ = [
    "Config",
    "get_logger",
    "compute_outreach_windows",
    "find_signal_overlaps",
    "apply_scenario_mode",
    "__version__",
]
