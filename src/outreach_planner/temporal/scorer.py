"""
Bucket Scorer

Partitions a planning horizon into fixed-width buckets and scores each bucket
by the summed impact weight of the signals active during it.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, List, Sequence, Tuple

from .models import AggregationConfiguration
from ..models.signals import TemporalSignal


@dataclass(frozen=True)
class Bucket:
    """Ephemeral scoring slice, discarded after window merging"""
    start: datetime
    end: datetime
    score: int
    signals: Tuple[TemporalSignal, ...] = ()


class BucketScorer:
    """Builds scored buckets covering exactly [now, now + horizon)"""

    def __init__(self, config: AggregationConfiguration):
        self.config = config
        self.logger = logging.getLogger(__name__)

    def score(self, signals: Iterable[TemporalSignal]) -> int:
        """Sum of impact weights for a set of signals"""
        return sum(self.config.weight_for(signal.impact_level) for signal in signals)

    def active_signals(self, signals: Sequence[TemporalSignal], start: datetime, end: datetime) -> Tuple[TemporalSignal, ...]:
        """Signals whose range intersects [start, end) under open-interval semantics"""
        return tuple(signal for signal in signals if signal.overlaps(start, end))

    def build_buckets(self,
                      signals: Sequence[TemporalSignal],
                      horizon_days: float,
                      now: datetime) -> List[Bucket]:
        """
        Build the ordered bucket sequence for a horizon.

        Args:
            signals: Read-only signal snapshot
            horizon_days: Horizon length in days; non-positive yields no buckets
            now: Horizon start, evaluated once by the caller

        Returns:
            Contiguous buckets in time order
        """
        if horizon_days <= 0:
            self.logger.debug(f"Non-positive horizon ({horizon_days} days), no buckets built")
            return []

        width = self.config.bucket_duration
        horizon_end = now + timedelta(days=horizon_days)
        buckets: List[Bucket] = []

        bucket_start = now
        while bucket_start < horizon_end:
            # Final bucket is clipped so buckets never run past the horizon
            bucket_end = min(bucket_start + width, horizon_end)
            active = self.active_signals(signals, bucket_start, bucket_end)
            buckets.append(Bucket(
                start=bucket_start,
                end=bucket_end,
                score=self.score(active),
                signals=active,
            ))
            bucket_start = bucket_end

        self.logger.debug(f"Built {len(buckets)} buckets over {horizon_days} days from {len(signals)} signals")
        return buckets
