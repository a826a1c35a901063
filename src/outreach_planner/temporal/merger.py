"""
Window Merger

Converts the scored bucket sequence into a minimal ordered list of typed,
explained outreach windows:

1. Classify each bucket by score (safer / caution / high_disruption)
2. Run-length merge consecutive buckets of the same type
3. Absorb windows shorter than the minimum duration into their predecessor

The explanation and approach texts are template based and deterministic.
This is a planning aid, not a predictive model.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Sequence

from .models import AggregationConfiguration
from .scorer import Bucket
from ..models.signals import ConfidenceLevel, TemporalSignal
from ..models.windows import OutreachWindow, WindowType


NEUTRAL_EXPLANATION = (
    "No significant signals affecting this time period. "
    "Standard outreach conditions expected."
)

SUGGESTED_APPROACHES: Dict[WindowType, str] = {
    WindowType.SAFER: (
        "Standard outreach approach. Good time for relationship-building, "
        "needs assessment, and service connections."
    ),
    WindowType.CAUTION: (
        "Consider morning or late afternoon timing. Coordinate with partner organizations. "
        "Have alternative locations ready for conversations."
    ),
    WindowType.HIGH_DISRUPTION: (
        "Focus on proactive outreach 24-48 hours before this period. Share information about "
        "what's coming. Connect people with services they may need."
    ),
}

# Lower rank is more conservative
_CONFIDENCE_RANK = {
    ConfidenceLevel.LOW: 0,
    ConfidenceLevel.MEDIUM: 1,
    ConfidenceLevel.HIGH: 2,
}


def aggregate_confidence(signals: Iterable[TemporalSignal]) -> ConfidenceLevel:
    """Lowest confidence among signals; low when there are none"""
    levels = [signal.confidence_level for signal in signals]
    if not levels:
        return ConfidenceLevel.LOW
    return min(levels, key=_CONFIDENCE_RANK.__getitem__)


def more_conservative(a: ConfidenceLevel, b: ConfidenceLevel) -> ConfidenceLevel:
    return a if _CONFIDENCE_RANK[a] <= _CONFIDENCE_RANK[b] else b


def explain_window(window_type: WindowType, driver_signals: Sequence[TemporalSignal], limit: int = 3) -> str:
    """Plain-language explanation listing up to `limit` driver descriptions"""
    if not driver_signals:
        return NEUTRAL_EXPLANATION

    descriptions = "; ".join(signal.description.lower() for signal in driver_signals[:limit])

    if window_type == WindowType.SAFER:
        return (
            f"Low-impact signals ({descriptions}). "
            "Generally good conditions for outreach with minor considerations."
        )
    if window_type == WindowType.CAUTION:
        return (
            f"Moderate activity expected: {descriptions}. "
            "Outreach is feasible but may require adjusted timing or approach."
        )
    return (
        f"Multiple or high-impact signals: {descriptions}. "
        "Consider alternative timing or proactive coordination before this period."
    )


def suggest_approach(window_type: WindowType) -> str:
    return SUGGESTED_APPROACHES[window_type]


@dataclass
class _WindowAccumulator:
    """Run of consecutive same-type buckets being merged"""
    window_type: WindowType
    start: datetime
    end: datetime
    max_score: int
    # Insertion-ordered set keyed by signal id
    signals: Dict[str, TemporalSignal] = field(default_factory=dict)

    def extend(self, bucket: Bucket):
        self.end = bucket.end
        self.max_score = max(self.max_score, bucket.score)
        for signal in bucket.signals:
            self.signals.setdefault(signal.id, signal)


class WindowMerger:
    """Merges scored buckets into outreach windows"""

    def __init__(self, config: AggregationConfiguration):
        self.config = config
        self.logger = logging.getLogger(__name__)

    def merge(self, buckets: Sequence[Bucket]) -> List[OutreachWindow]:
        """Run-length merge buckets, then clean up fragmented windows"""
        windows = self.merge_runs(buckets)
        cleaned = self.absorb_short_windows(windows)
        self.logger.debug(f"Merged {len(buckets)} buckets into {len(windows)} windows, {len(cleaned)} after cleanup")
        return cleaned

    def merge_runs(self, buckets: Sequence[Bucket]) -> List[OutreachWindow]:
        """Collapse consecutive buckets that share a window type"""
        windows: List[OutreachWindow] = []
        current: Optional[_WindowAccumulator] = None

        for bucket in buckets:
            bucket_type = self.config.classify(bucket.score)

            if current is not None and current.window_type == bucket_type:
                current.extend(bucket)
                continue

            if current is not None:
                windows.append(self._materialize(current, len(windows) + 1))

            current = _WindowAccumulator(
                window_type=bucket_type,
                start=bucket.start,
                end=bucket.end,
                max_score=bucket.score,
            )
            for signal in bucket.signals:
                current.signals.setdefault(signal.id, signal)

        if current is not None:
            windows.append(self._materialize(current, len(windows) + 1))

        return windows

    def absorb_short_windows(self, windows: Sequence[OutreachWindow]) -> List[OutreachWindow]:
        """
        Absorb windows shorter than the minimum duration into their predecessor.

        The absorbed window's type and texts replace the predecessor's only when
        its type ranks strictly higher (safer < caution < high_disruption).
        Neighbors left with the same type are coalesced.
        """
        merged: List[OutreachWindow] = []

        for window in windows:
            if merged and window.duration < self.config.min_window_duration:
                merged[-1] = self._absorb(merged[-1], window)
            else:
                merged.append(window)

            while len(merged) >= 2 and merged[-2].window_type == merged[-1].window_type:
                tail = merged.pop()
                merged[-1] = self._absorb(merged[-1], tail)

        return merged

    def _absorb(self, previous: OutreachWindow, window: OutreachWindow) -> OutreachWindow:
        update = {
            "end": window.end,
            "driver_signal_ids": list(dict.fromkeys(previous.driver_signal_ids + window.driver_signal_ids)),
            "impact_score": max(previous.impact_score, window.impact_score),
            "confidence_summary": more_conservative(previous.confidence_summary, window.confidence_summary),
        }
        if window.window_type.priority > previous.window_type.priority:
            update.update({
                "window_type": window.window_type,
                "plain_language_why": window.plain_language_why,
                "suggested_approach": window.suggested_approach,
            })
        return previous.model_copy(update=update)

    def _materialize(self, accumulator: _WindowAccumulator, ordinal: int) -> OutreachWindow:
        drivers = list(accumulator.signals.values())
        return OutreachWindow(
            id=f"window-{ordinal}",
            window_type=accumulator.window_type,
            start=accumulator.start,
            end=accumulator.end,
            driver_signal_ids=[signal.id for signal in drivers],
            plain_language_why=explain_window(
                accumulator.window_type, drivers, self.config.explanation_signal_limit
            ),
            confidence_summary=aggregate_confidence(drivers),
            suggested_approach=suggest_approach(accumulator.window_type),
            impact_score=accumulator.max_score,
        )
