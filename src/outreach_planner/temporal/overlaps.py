"""
Overlap Detector

Finds every pair of impactful signals whose time ranges intersect. Runs
independently of the bucket/window computation.

The pairwise scan is quadratic in the number of impactful signals, which is
fine for tens to low hundreds of signals. A sweep over start-sorted intervals
would replace it if signal volume grows.
"""

import logging
from typing import List, Optional, Sequence, Set

from .models import AggregationConfiguration
from ..models.signals import TemporalSignal
from ..models.windows import SignalOverlap


class OverlapDetector:
    """Detects coinciding medium/high impact signals"""

    def __init__(self, config: AggregationConfiguration):
        self.config = config
        self.logger = logging.getLogger(__name__)

    def impactful(self, signals: Sequence[TemporalSignal]) -> List[TemporalSignal]:
        """Signals significant enough to matter in combination"""
        return [s for s in signals if s.impact_level in self.config.overlap_impact_levels]

    def detect(self, signals: Sequence[TemporalSignal]) -> List[SignalOverlap]:
        """Return one overlap per intersecting unordered pair, sorted by start"""
        candidates = self.impactful(signals)
        overlaps: List[SignalOverlap] = []
        processed_pairs: Set[str] = set()

        for i, signal_a in enumerate(candidates):
            for signal_b in candidates[i + 1:]:
                if signal_a.id == signal_b.id:
                    continue

                pair_key = "|".join(sorted((signal_a.id, signal_b.id)))
                if pair_key in processed_pairs:
                    continue

                overlap = self._analyze_signal_pair(signal_a, signal_b)
                if overlap:
                    processed_pairs.add(pair_key)
                    overlaps.append(overlap)

        # sorted() is stable, so equal starts keep scan order
        overlaps = sorted(overlaps, key=lambda overlap: overlap.start)
        self.logger.debug(f"Found {len(overlaps)} overlaps among {len(candidates)} impactful signals")
        return overlaps

    def _analyze_signal_pair(self, signal_a: TemporalSignal, signal_b: TemporalSignal) -> Optional[SignalOverlap]:
        if not signal_a.overlaps(signal_b.start, signal_b.end):
            return None

        return SignalOverlap(
            id=f"overlap-{signal_a.id}-{signal_b.id}",
            start=max(signal_a.start, signal_b.start),
            end=min(signal_a.end, signal_b.end),
            signal_ids=[signal_a.id, signal_b.id],
            why_it_matters=(
                f'Two significant signals overlap: "{signal_a.description}" and "{signal_b.description}". '
                "When multiple disruptive factors coincide, the combined effect on outreach "
                "effectiveness is greater than each alone. Consider proactive coordination."
            ),
            combined_impact=self.config.combined_impact(signal_a.impact_level, signal_b.impact_level),
        )
