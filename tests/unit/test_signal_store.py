"""
Test suite for the Signal Store and the simulated catalog.
"""

import json
from datetime import timedelta

import pytest
from pydantic import ValidationError

from outreach_planner.models.signals import ImpactLevel, SignalCategory
from outreach_planner.signals.simulated import TEMPORAL_DATA_DISCLAIMER, build_simulated_signals
from outreach_planner.signals.store import SignalStore


def signal_record(signal_id="rec-1", start="2026-01-06T08:00:00Z", end="2026-01-06T12:00:00Z",
                  impact="high"):
    return {
        "id": signal_id,
        "category": "sanitation_cycle",
        "source": "LA Sanitation (Simulated)",
        "time_range": {"start": start, "end": end},
        "impact_level": impact,
        "confidence_level": "high",
        "description": "Scheduled cleanup",
        "latency_hours": 24,
        "is_simulated": True,
    }


class TestSignalStoreLoading:
    """Test record validation on the way into the store"""

    def test_from_records(self):
        """Test raw dictionaries become validated signals"""
        store = SignalStore.from_records([signal_record("a"), signal_record("b", impact="low")])

        assert len(store) == 2
        assert [s.id for s in store] == ["a", "b"]
        assert store.all()[1].impact_level == ImpactLevel.LOW

    def test_inverted_range_rejected(self):
        """Test records whose start is not before end fail validation"""
        with pytest.raises(ValidationError):
            SignalStore.from_records([signal_record(start="2026-01-06T12:00:00Z", end="2026-01-06T08:00:00Z")])

    def test_unknown_impact_rejected(self):
        """Test unknown enum values fail validation"""
        with pytest.raises(ValidationError):
            SignalStore.from_records([signal_record(impact="catastrophic")])

    def test_from_json(self, tmp_path):
        """Test loading a JSON array from disk"""
        path = tmp_path / "signals.json"
        path.write_text(json.dumps([signal_record("a"), signal_record("b")]))

        store = SignalStore.from_json(path)

        assert [s.id for s in store] == ["a", "b"]

    def test_from_json_requires_array(self, tmp_path):
        """Test a JSON object instead of an array is rejected"""
        path = tmp_path / "signals.json"
        path.write_text(json.dumps(signal_record()))

        with pytest.raises(ValueError):
            SignalStore.from_json(path)


class TestSignalStoreQueries:
    """Test store filtering and metadata queries"""

    def test_by_category_and_impact(self, simulated_store):
        """Test category and impact lookups"""
        sanitation = simulated_store.by_category(SignalCategory.SANITATION_CYCLE)
        high = simulated_store.by_impact(ImpactLevel.HIGH)

        assert [s.id for s in sanitation] == ["san-001", "san-002", "san-003"]
        assert all(s.impact_level == ImpactLevel.HIGH for s in high)

    def test_filter_combines_criteria(self, simulated_store):
        """Test filter narrows by category and impact together"""
        filtered = simulated_store.filter(category=SignalCategory.SANITATION_CYCLE, impact=ImpactLevel.HIGH)

        assert [s.id for s in filtered] == ["san-001", "san-002"]

    def test_filter_ignores_none(self, simulated_store):
        """Test None criteria keep everything"""
        assert len(simulated_store.filter(category=None, impact=None)) == len(simulated_store)

    def test_filter_rejects_unknown_criteria(self, simulated_store):
        """Test unsupported filter keys raise"""
        with pytest.raises(ValueError):
            simulated_store.filter(neighborhood="Koreatown")

    def test_in_horizon_is_inclusive(self, now, make_signal):
        """Test signals touching either horizon edge are kept"""
        store = SignalStore([
            make_signal("ends-at-now", -4, 0),
            make_signal("starts-at-end", 24, 30),
            make_signal("past", -10, -5),
            make_signal("future", 30, 40),
        ])

        assert [s.id for s in store.in_horizon(now, 1)] == ["ends-at-now", "starts-at-end"]

    def test_sorted_by_start(self, make_signal):
        """Test chronological ordering"""
        store = SignalStore([make_signal("b", 5, 6), make_signal("a", 1, 2)])

        assert [s.id for s in store.sorted_by_start()] == ["a", "b"]

    def test_latency_and_simulated_flags(self, make_signal):
        """Test freshness and simulated-data metadata"""
        store = SignalStore([
            make_signal("a", 0, 1, latency_hours=72, is_simulated=False),
            make_signal("b", 0, 1, latency_hours=48, is_simulated=False),
        ])

        assert store.minimum_latency_hours() == 48
        assert store.contains_simulated() is False
        assert SignalStore().minimum_latency_hours() == 24
        assert SignalStore().contains_simulated() is False


class TestSimulatedCatalog:
    """Test the bundled fictional signals"""

    def test_catalog_shape(self, now):
        """Test twelve simulated signals with unique ids"""
        signals = build_simulated_signals(now)

        assert len(signals) == 12
        assert len({s.id for s in signals}) == 12
        assert all(s.is_simulated for s in signals)
        assert {s.category for s in signals} == set(SignalCategory)

    def test_catalog_is_delayed(self, now):
        """Test every record carries at least 24 hours of latency"""
        assert all(s.latency_hours >= 24 for s in build_simulated_signals(now))

    def test_catalog_timed_from_reference(self, now):
        """Test times are relative to the reference instant"""
        shifted = build_simulated_signals(now + timedelta(days=1))
        base = build_simulated_signals(now)

        assert [s.start - b.start for s, b in zip(shifted, base)] == [timedelta(days=1)] * 12

    def test_disclaimer_mentions_simulated_data(self):
        """Test the disclaimer states the data is simulated and delayed"""
        assert "SIMULATED" in TEMPORAL_DATA_DISCLAIMER
        assert "24 hours delayed" in TEMPORAL_DATA_DISCLAIMER
