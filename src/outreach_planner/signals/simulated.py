"""
Simulated signal catalog.

Fictional data shaped like LA civic datasets (sanitation schedules, event
permits, shelter intake hours, transit advisories, partner capacity reports).
Every record is marked simulated and timed relative to an explicit reference
instant so demo output is reproducible.
"""

from datetime import datetime, timedelta
from typing import List, Optional

from ..models.signals import (
    ConfidenceLevel,
    GeographyHint,
    ImpactLevel,
    SignalCategory,
    TemporalSignal,
    TimeRange,
)


TEMPORAL_DATA_DISCLAIMER = """
This planner displays SIMULATED and DELAYED data for demonstration purposes.
It is designed for temporal planning by housing/homelessness outreach organizations.

THIS TOOL DOES NOT:
- Track individuals or their locations
- Show real-time law enforcement activity
- Predict individual displacement events
- Provide enforcement guidance
- Replace direct community engagement

Data should inform coordination and planning, not drive reactive responses.
All signals are at least 24 hours delayed by design.
""".strip()


def _time_range(reference: datetime, start_hours: float, duration_hours: float) -> TimeRange:
    start = reference + timedelta(hours=start_hours)
    return TimeRange(start=start, end=start + timedelta(hours=duration_hours))


def _hint(description: Optional[str]) -> Optional[GeographyHint]:
    return GeographyHint(description=description) if description else None


def _signal(reference: datetime, signal_id: str, category: SignalCategory, source: str,
            start_hours: float, duration_hours: float, impact: ImpactLevel,
            confidence: ConfidenceLevel, description: str, notes: str,
            latency_hours: float, area: Optional[str] = None) -> TemporalSignal:
    return TemporalSignal(
        id=signal_id,
        category=category,
        source=source,
        time_range=_time_range(reference, start_hours, duration_hours),
        impact_level=impact,
        confidence_level=confidence,
        description=description,
        interpretation_notes=notes,
        latency_hours=latency_hours,
        is_simulated=True,
        geography_hint=_hint(area),
    )


def build_simulated_signals(reference: datetime) -> List[TemporalSignal]:
    """Build the demo catalog relative to a timezone-aware reference instant"""
    return [
        # Sanitation cycles
        _signal(
            reference, "san-001", SignalCategory.SANITATION_CYCLE, "LA Sanitation (Simulated)",
            48, 4, ImpactLevel.HIGH, ConfidenceLevel.HIGH,
            "Scheduled cleanup: Vermont Ave corridor, 6am-10am",
            "Cleanup periods typically see increased institutional activity. Consider conducting "
            "outreach 24-48 hours before to connect with individuals who may need to relocate "
            "temporarily. This is a coordination opportunity, not an emergency.",
            24, "Vermont Ave between Wilshire and 6th",
        ),
        _signal(
            reference, "san-002", SignalCategory.SANITATION_CYCLE, "LA Sanitation (Simulated)",
            72, 6, ImpactLevel.HIGH, ConfidenceLevel.HIGH,
            "Scheduled cleanup: Wilshire Blvd corridor, 7am-1pm",
            "Major corridor cleanup. High-traffic commercial area typically sees coordination "
            "between multiple service providers. Good time for joint outreach the day before.",
            24, "Wilshire Blvd, Western to Vermont",
        ),
        _signal(
            reference, "san-003", SignalCategory.SANITATION_CYCLE, "LA Sanitation (Simulated)",
            120, 3, ImpactLevel.MEDIUM, ConfidenceLevel.MEDIUM,
            "Scheduled cleanup: Normandie residential blocks",
            "Residential area cleanup. Lower intensity than commercial corridors. Standard "
            "outreach timing should work well.",
            48, "Normandie Ave residential area",
        ),
        # Public events
        _signal(
            reference, "evt-001", SignalCategory.PUBLIC_EVENT, "FilmLA (Simulated)",
            96, 72, ImpactLevel.MEDIUM, ConfidenceLevel.HIGH,
            "Film production: 3-day permit, Wilshire commercial district",
            "Film productions typically request clear sidewalks in their permit area. Security "
            "presence increases. Consider outreach to nearby areas 48 hours before to help people "
            "prepare if needed. This is routine city activity.",
            48, "Wilshire Blvd commercial area",
        ),
        _signal(
            reference, "evt-002", SignalCategory.PUBLIC_EVENT, "LA Special Events (Simulated)",
            168, 12, ImpactLevel.HIGH, ConfidenceLevel.MEDIUM,
            "Community festival: K-Town Night Market",
            "Large community event with security perimeter. Outreach in the immediate area will be "
            "difficult during event hours. Event periphery can be a good opportunity for service "
            "visibility. Plan outreach for day before or morning after.",
            72, "6th St between Western and Normandie",
        ),
        _signal(
            reference, "evt-003", SignalCategory.PUBLIC_EVENT, "Olympics Planning (Simulated)",
            720, 336, ImpactLevel.HIGH, ConfidenceLevel.LOW,
            "SPECULATIVE: Olympics-related activity period (2028 prep)",
            "SPECULATIVE SIGNAL: Based on historical patterns for major international events. "
            "Actual dates and areas TBD. Use for long-range planning discussions only. Monitor "
            "official announcements.",
            168, "General Koreatown area (speculative)",
        ),
        # Shelter intake
        _signal(
            reference, "shl-001", SignalCategory.SHELTER_INTAKE_HOURS, "LAHSA (Simulated)",
            24, 4, ImpactLevel.LOW, ConfidenceLevel.HIGH,
            "Shelter intake window: Downtown facility, 2pm-6pm",
            "POSITIVE SIGNAL: Shelter intake hours are a good time for outreach that includes "
            "referrals. Coordinate with case managers who can facilitate warm handoffs.",
            24,
        ),
        _signal(
            reference, "shl-002", SignalCategory.SHELTER_INTAKE_HOURS, "LAHSA (Simulated)",
            48, 3, ImpactLevel.LOW, ConfidenceLevel.MEDIUM,
            "Shelter intake window: K-Town bridge housing, 3pm-6pm",
            "POSITIVE SIGNAL: Local bridge housing intake. Transport barriers are reduced for "
            "Koreatown outreach. Confirm availability before making referrals.",
            24, "Bridge housing facility",
        ),
        # Transit
        _signal(
            reference, "trn-001", SignalCategory.TRANSIT_DISRUPTION, "LA Metro (Simulated)",
            12, 48, ImpactLevel.MEDIUM, ConfidenceLevel.HIGH,
            "Purple Line: Wilshire/Western station closure, weekend maintenance",
            "Station closure affects mobility for everyone in the area. Some individuals may be "
            "less mobile; consider this when planning outreach timing. Also affects team travel.",
            24, "Near Wilshire/Western Metro station",
        ),
        _signal(
            reference, "trn-002", SignalCategory.TRANSIT_DISRUPTION, "LA Metro (Simulated)",
            240, 72, ImpactLevel.LOW, ConfidenceLevel.MEDIUM,
            "Bus route detour: Line 20 on Wilshire, construction-related",
            "Minor route change. May affect some individuals' routines. Generally not significant "
            "for outreach planning.",
            48, "Wilshire corridor",
        ),
        # Service bottlenecks
        _signal(
            reference, "btl-001", SignalCategory.SERVICE_BOTTLENECK,
            "Coalition Partner Reports (Simulated)",
            0, 168, ImpactLevel.MEDIUM, ConfidenceLevel.LOW,
            "Elevated demand: Downtown service hub, morning hours",
            "PATTERN SIGNAL: Morning hours at downtown service hubs are seeing higher demand than "
            "capacity. Consider afternoon outreach or alternative service referrals.",
            72,
        ),
        _signal(
            reference, "btl-002", SignalCategory.SERVICE_BOTTLENECK,
            "Coalition Partner Reports (Simulated)",
            48, 24, ImpactLevel.HIGH, ConfidenceLevel.MEDIUM,
            "Service gap: K-Town meal program closed for renovation",
            "A regular meal service in Koreatown will be temporarily unavailable. Coordinate with "
            "alternative meal programs and share this information during outreach.",
            24, "Near Olympic/Vermont",
        ),
    ]
