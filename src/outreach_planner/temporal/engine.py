"""
Temporal Aggregation Engine

Pure entry points used by the planner and CLI:
- compute_outreach_windows: signals + horizon -> classified windows
- find_signal_overlaps: signals -> pairwise overlaps
- apply_scenario_mode: windows + scenario tag -> speculative windows

None of these keep state between calls; concurrent callers only need their own
input snapshots.
"""

from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

from .merger import WindowMerger
from .models import AggregationConfiguration, ScenarioProfile
from .overlaps import OverlapDetector
from .scenario import ScenarioTransformer
from .scorer import BucketScorer
from ..models.signals import TemporalSignal
from ..models.windows import OutreachWindow, SignalOverlap


def compute_outreach_windows(signals: Sequence[TemporalSignal],
                             horizon_days: float = 14,
                             now: Optional[datetime] = None,
                             config: Optional[AggregationConfiguration] = None) -> List[OutreachWindow]:
    """
    Partition [now, now + horizon_days) into outreach windows.

    Args:
        signals: Read-only, already-validated signals
        horizon_days: Horizon length; non-positive values yield no windows
        now: Horizon start. Captured once from the wall clock (UTC) when omitted
        config: Weighting and threshold configuration

    Returns:
        Time-ordered, contiguous windows
    """
    config = config or AggregationConfiguration()
    if now is None:
        now = datetime.now(timezone.utc)

    buckets = BucketScorer(config).build_buckets(signals, horizon_days, now)
    return WindowMerger(config).merge(buckets)


def find_signal_overlaps(signals: Sequence[TemporalSignal],
                         config: Optional[AggregationConfiguration] = None) -> List[SignalOverlap]:
    """Pairwise overlaps among medium/high impact signals, sorted by start"""
    return OverlapDetector(config or AggregationConfiguration()).detect(signals)


def apply_scenario_mode(windows: Sequence[OutreachWindow],
                        scenario_tag: Optional[str],
                        profiles: Optional[Dict[str, ScenarioProfile]] = None,
                        default_tag: Optional[str] = None) -> List[OutreachWindow]:
    """
    Speculative copy of the windows; unknown tags use the default scenario.

    The default is `default_tag` when given, otherwise major_event, otherwise
    the first supplied profile.
    """
    return ScenarioTransformer(profiles, default_tag).apply(windows, scenario_tag)
