"""
Planner response assembly.

Thin glue between the signal store and the aggregation engine. Builds the
response payloads (signals, windows, scenario windows) together with the
metadata that must accompany them: generation time, horizon, data freshness
and the disclaimer. Every builder takes an explicit reference instant.
"""

import logging
from datetime import datetime, timedelta
from typing import List, Optional

from pydantic import AwareDatetime, BaseModel, Field

from .models.signals import ImpactLevel, SignalCategory, TemporalSignal
from .models.windows import OutreachWindow, SignalOverlap
from .signals.simulated import TEMPORAL_DATA_DISCLAIMER
from .signals.store import SignalStore
from .temporal.engine import compute_outreach_windows, find_signal_overlaps
from .temporal.models import REQUESTED_SCENARIO_TAG, AggregationConfiguration
from .temporal.scenario import ScenarioTransformer

logger = logging.getLogger(__name__)


SCENARIO_DISCLAIMER = """
ADDITIONAL SCENARIO DISCLAIMER:
This scenario mode shows HYPOTHETICAL adjustments to outreach windows.
Actual event timing, locations, and impacts will differ significantly.
Use only for long-range planning discussions and capacity exercises.
""".strip()


class TimeHorizon(BaseModel):
    """Span covered by a response"""

    start: AwareDatetime
    end: AwareDatetime


class SignalsMeta(BaseModel):
    """Metadata accompanying every signal listing"""

    generated_at: AwareDatetime = Field(..., description="When this response was generated")
    count: int = Field(..., ge=0)
    minimum_latency_hours: float = Field(..., ge=0, description="Freshest data latency")
    contains_simulated_data: bool
    time_horizon: TimeHorizon
    disclaimer: str


class SignalsResponse(BaseModel):
    signals: List[TemporalSignal]
    meta: SignalsMeta


class WindowsMeta(BaseModel):
    generated_at: AwareDatetime
    time_horizon: TimeHorizon
    disclaimer: str
    scenario: Optional[str] = Field(default=None, description="Scenario tag for speculative responses")


class WindowsResponse(BaseModel):
    """Outreach windows and overlaps for a horizon"""

    windows: List[OutreachWindow]
    overlaps: List[SignalOverlap]
    meta: WindowsMeta


def _horizon(now: datetime, horizon_days: float) -> TimeHorizon:
    return TimeHorizon(start=now, end=now + timedelta(days=max(horizon_days, 0)))


def build_signals_response(store: SignalStore,
                           now: datetime,
                           horizon_days: float = 14,
                           category: Optional[SignalCategory] = None,
                           impact: Optional[ImpactLevel] = None) -> SignalsResponse:
    """List signals in the horizon, optionally filtered, sorted by start"""
    horizon_store = SignalStore(store.filter(category=category, impact=impact).in_horizon(now, horizon_days))
    signals = horizon_store.sorted_by_start()

    logger.debug(f"Listing {len(signals)} of {len(store)} signals for {horizon_days} day horizon")
    return SignalsResponse(
        signals=signals,
        meta=SignalsMeta(
            generated_at=now,
            count=len(signals),
            minimum_latency_hours=horizon_store.minimum_latency_hours(),
            contains_simulated_data=horizon_store.contains_simulated(),
            time_horizon=_horizon(now, horizon_days),
            disclaimer=TEMPORAL_DATA_DISCLAIMER,
        ),
    )


def build_windows_response(store: SignalStore,
                           now: datetime,
                           horizon_days: float = 14,
                           config: Optional[AggregationConfiguration] = None) -> WindowsResponse:
    """Compute windows and overlaps over the signals relevant to the horizon"""
    signals = store.in_horizon(now, horizon_days)
    windows = compute_outreach_windows(signals, horizon_days, now=now, config=config)
    overlaps = find_signal_overlaps(signals, config=config)

    logger.info(f"Computed {len(windows)} windows and {len(overlaps)} overlaps from {len(signals)} signals")
    return WindowsResponse(
        windows=windows,
        overlaps=overlaps,
        meta=WindowsMeta(
            generated_at=now,
            time_horizon=_horizon(now, horizon_days),
            disclaimer=TEMPORAL_DATA_DISCLAIMER,
        ),
    )


def build_scenario_response(store: SignalStore,
                            now: datetime,
                            horizon_days: float = 14,
                            scenario_tag: Optional[str] = None,
                            config: Optional[AggregationConfiguration] = None,
                            transformer: Optional[ScenarioTransformer] = None) -> WindowsResponse:
    """Base windows run through a speculative scenario, with labeled overlaps"""
    transformer = transformer or ScenarioTransformer()
    profile = transformer.resolve(scenario_tag or REQUESTED_SCENARIO_TAG)
    base = build_windows_response(store, now, horizon_days, config=config)

    disclaimer = "\n\n".join([
        f"SPECULATIVE SCENARIO: {profile.description}",
        TEMPORAL_DATA_DISCLAIMER,
        SCENARIO_DISCLAIMER,
    ])

    return WindowsResponse(
        windows=transformer.apply(base.windows, profile.tag),
        overlaps=transformer.annotate_overlaps(base.overlaps),
        meta=WindowsMeta(
            generated_at=now,
            time_horizon=base.meta.time_horizon,
            disclaimer=disclaimer,
            scenario=profile.tag,
        ),
    )
