"""
Test suite for the Overlap Detector.

Tests pairwise intersection, impact filtering, combined impact and ordering.
"""

from datetime import timedelta

import pytest

from outreach_planner.models.signals import ImpactLevel
from outreach_planner.temporal.engine import find_signal_overlaps
from outreach_planner.temporal.models import AggregationConfiguration
from outreach_planner.temporal.overlaps import OverlapDetector


@pytest.fixture
def detector() -> OverlapDetector:
    return OverlapDetector(AggregationConfiguration())


class TestOverlapDetection:
    """Test overlap records produced for intersecting pairs"""

    def test_medium_high_pair(self, now, make_signal):
        """Test medium [24,28) and high [26,30) give one high overlap on [26,28)"""
        signals = [
            make_signal("A", 24, 28, impact=ImpactLevel.MEDIUM, description="Transit closure"),
            make_signal("B", 26, 30, impact=ImpactLevel.HIGH, description="Street cleanup"),
        ]
        overlaps = find_signal_overlaps(signals)

        assert len(overlaps) == 1
        overlap = overlaps[0]
        assert overlap.id == "overlap-A-B"
        assert overlap.signal_ids == ["A", "B"]
        assert overlap.combined_impact == ImpactLevel.HIGH
        assert overlap.start == now + timedelta(hours=26)
        assert overlap.end == now + timedelta(hours=28)
        assert '"Transit closure" and "Street cleanup"' in overlap.why_it_matters
        assert overlap.why_it_matters.endswith("Consider proactive coordination.")

    def test_low_impact_excluded(self, detector, make_signal):
        """Test a low-impact signal never pairs, even with a high one"""
        signals = [
            make_signal("low", 0, 10, impact=ImpactLevel.LOW),
            make_signal("high", 0, 10, impact=ImpactLevel.HIGH),
        ]
        assert detector.detect(signals) == []

    @pytest.mark.parametrize("impact_a,impact_b,expected", [
        (ImpactLevel.MEDIUM, ImpactLevel.MEDIUM, ImpactLevel.MEDIUM),
        (ImpactLevel.MEDIUM, ImpactLevel.HIGH, ImpactLevel.HIGH),
        (ImpactLevel.HIGH, ImpactLevel.HIGH, ImpactLevel.HIGH),
    ])
    def test_combined_impact(self, detector, make_signal, impact_a, impact_b, expected):
        """Test combined impact from the weight sum"""
        signals = [
            make_signal("a", 0, 4, impact=impact_a),
            make_signal("b", 2, 6, impact=impact_b),
        ]
        assert detector.detect(signals)[0].combined_impact == expected

    def test_abutting_signals_do_not_overlap(self, detector, make_signal):
        """Test half-open ranges that only touch are not overlaps"""
        signals = [
            make_signal("a", 0, 5, impact=ImpactLevel.HIGH),
            make_signal("b", 5, 10, impact=ImpactLevel.HIGH),
        ]
        assert detector.detect(signals) == []

    def test_contained_signal(self, detector, make_signal, now):
        """Test an enclosed range intersects on its own extent"""
        signals = [
            make_signal("outer", 0, 48, impact=ImpactLevel.MEDIUM),
            make_signal("inner", 10, 12, impact=ImpactLevel.MEDIUM),
        ]
        overlap = detector.detect(signals)[0]

        assert overlap.start == now + timedelta(hours=10)
        assert overlap.end == now + timedelta(hours=12)

    def test_every_pair_reported_once(self, detector, make_signal):
        """Test three mutually overlapping signals give three overlaps"""
        signals = [
            make_signal("a", 0, 10, impact=ImpactLevel.HIGH),
            make_signal("b", 1, 10, impact=ImpactLevel.HIGH),
            make_signal("c", 2, 10, impact=ImpactLevel.MEDIUM),
        ]
        overlaps = detector.detect(signals)

        pairs = {frozenset(o.signal_ids) for o in overlaps}
        assert len(overlaps) == 3
        assert pairs == {frozenset({"a", "b"}), frozenset({"a", "c"}), frozenset({"b", "c"})}

    def test_duplicate_ids_not_paired(self, detector, make_signal):
        """Test the same signal listed twice does not overlap itself"""
        signal = make_signal("dup", 0, 10, impact=ImpactLevel.HIGH)
        other = make_signal("other", 5, 15, impact=ImpactLevel.HIGH)

        overlaps = detector.detect([signal, signal, other])

        assert [o.signal_ids for o in overlaps] == [["dup", "other"]]

    def test_sorted_by_start(self, detector, make_signal, now):
        """Test overlaps are ordered by intersection start"""
        signals = [
            make_signal("late-a", 50, 60, impact=ImpactLevel.HIGH),
            make_signal("late-b", 55, 65, impact=ImpactLevel.HIGH),
            make_signal("early-a", 0, 10, impact=ImpactLevel.MEDIUM),
            make_signal("early-b", 5, 15, impact=ImpactLevel.MEDIUM),
        ]
        overlaps = detector.detect(signals)

        assert [o.id for o in overlaps] == ["overlap-early-a-early-b", "overlap-late-a-late-b"]
        assert overlaps[0].start == now + timedelta(hours=5)

    def test_idempotent(self, detector, simulated_signals):
        """Test repeated detection gives identical, identically ordered results"""
        first = detector.detect(simulated_signals)
        second = detector.detect(simulated_signals)

        assert first == second
        assert [o.start for o in first] == sorted(o.start for o in first)

    def test_simulated_catalog_excludes_low_signals(self, detector, simulated_signals):
        """Test no overlap in the catalog involves a low-impact signal"""
        low_ids = {s.id for s in simulated_signals if s.impact_level == ImpactLevel.LOW}
        overlaps = detector.detect(simulated_signals)

        assert overlaps
        assert all(not (set(o.signal_ids) & low_ids) for o in overlaps)

    def test_empty_input(self, detector):
        """Test no signals gives no overlaps"""
        assert detector.detect([]) == []

    def test_configurable_impact_levels(self, make_signal):
        """Test low-impact signals can be opted into overlap detection"""
        config = AggregationConfiguration(
            overlap_impact_levels=frozenset({ImpactLevel.LOW, ImpactLevel.MEDIUM, ImpactLevel.HIGH})
        )
        signals = [
            make_signal("low-a", 0, 4, impact=ImpactLevel.LOW),
            make_signal("low-b", 2, 6, impact=ImpactLevel.LOW),
        ]
        overlaps = OverlapDetector(config).detect(signals)

        assert len(overlaps) == 1
        assert overlaps[0].combined_impact == ImpactLevel.LOW
