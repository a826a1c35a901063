"""
Signal Store

Read-only holder for an already-validated signal snapshot. Record validation
(range ordering, enum membership, non-negative latency) happens here, through
the pydantic models, before signals ever reach the aggregation engine.
"""

import json
import logging
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple, Union

from pydantic import TypeAdapter

from ..models.signals import ImpactLevel, SignalCategory, TemporalSignal


_SIGNAL_LIST = TypeAdapter(List[TemporalSignal])


class SignalStore:
    """Immutable, ordered set of temporal signals with simple queries"""

    def __init__(self, signals: Iterable[TemporalSignal] = ()):
        self._signals: Tuple[TemporalSignal, ...] = tuple(signals)
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_records(cls, records: List[Dict[str, Any]]) -> "SignalStore":
        """Validate raw dictionaries into signals"""
        return cls(_SIGNAL_LIST.validate_python(records))

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "SignalStore":
        """Load a JSON array of signal records from disk"""
        path = Path(path)
        with path.open("r", encoding="utf-8") as handle:
            records = json.load(handle)
        if not isinstance(records, list):
            raise ValueError(f"Expected a JSON array of signals in {path}, got {type(records).__name__}")

        store = cls.from_records(records)
        store.logger.info(f"Loaded {len(store)} signals from {path}")
        return store

    def __len__(self) -> int:
        return len(self._signals)

    def __iter__(self):
        return iter(self._signals)

    def all(self) -> List[TemporalSignal]:
        return list(self._signals)

    def by_category(self, category: SignalCategory) -> List[TemporalSignal]:
        return [s for s in self._signals if s.category == category]

    def by_impact(self, level: ImpactLevel) -> List[TemporalSignal]:
        return [s for s in self._signals if s.impact_level == level]

    def in_range(self, start: datetime, end: datetime) -> List[TemporalSignal]:
        """Signals touching [start, end]; inclusive at both ends"""
        return [s for s in self._signals if s.start <= end and s.end >= start]

    def in_horizon(self, now: datetime, horizon_days: float) -> List[TemporalSignal]:
        """Signals relevant to a planning horizon starting at now"""
        return self.in_range(now, now + timedelta(days=horizon_days))

    def sorted_by_start(self) -> List[TemporalSignal]:
        return sorted(self._signals, key=lambda s: s.start)

    def minimum_latency_hours(self, default: float = 24) -> float:
        """Freshest data latency across the store, or default when empty"""
        if not self._signals:
            return default
        return min(s.latency_hours for s in self._signals)

    def contains_simulated(self) -> bool:
        return any(s.is_simulated for s in self._signals)

    def filter(self, **criteria) -> "SignalStore":
        """
        Narrow the store by category and/or impact.

        Args:
            category: Optional SignalCategory to keep
            impact: Optional ImpactLevel to keep

        Returns:
            New store holding the matching signals
        """
        unknown = set(criteria) - {"category", "impact"}
        if unknown:
            raise ValueError(f"Unsupported filter criteria: {', '.join(sorted(unknown))}")

        signals = self._signals
        category = criteria.get("category")
        impact = criteria.get("impact")
        if category is not None:
            signals = tuple(s for s in signals if s.category == category)
        if impact is not None:
            signals = tuple(s for s in signals if s.impact_level == impact)
        return SignalStore(signals)
