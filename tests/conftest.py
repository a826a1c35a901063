"""
Pytest configuration and fixtures for Outreach Planner tests.
"""

import os
from datetime import datetime, timedelta, timezone
from typing import Callable, Generator, List, Optional
from unittest.mock import patch

import pytest

from outreach_planner.config import Config
from outreach_planner.models.signals import (
    ConfidenceLevel,
    ImpactLevel,
    SignalCategory,
    TemporalSignal,
    TimeRange,
)
from outreach_planner.models.windows import OutreachWindow, WindowType
from outreach_planner.signals.simulated import build_simulated_signals
from outreach_planner.signals.store import SignalStore
from outreach_planner.temporal.merger import suggest_approach


REFERENCE_NOW = datetime(2026, 1, 5, 8, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    """Fixed horizon start so every computation is reproducible."""
    return REFERENCE_NOW


@pytest.fixture
def make_signal(now: datetime) -> Callable[..., TemporalSignal]:
    """Factory for signals timed in hours relative to the reference instant."""

    def _make(
        signal_id: str,
        start_hours: float,
        end_hours: float,
        impact: ImpactLevel = ImpactLevel.MEDIUM,
        confidence: ConfidenceLevel = ConfidenceLevel.HIGH,
        description: Optional[str] = None,
        category: SignalCategory = SignalCategory.PUBLIC_EVENT,
        latency_hours: float = 24,
        is_simulated: bool = True,
    ) -> TemporalSignal:
        return TemporalSignal(
            id=signal_id,
            category=category,
            source="Test Source",
            time_range=TimeRange(
                start=now + timedelta(hours=start_hours),
                end=now + timedelta(hours=end_hours),
            ),
            impact_level=impact,
            confidence_level=confidence,
            description=description or f"Signal {signal_id} Description",
            interpretation_notes="Test notes",
            latency_hours=latency_hours,
            is_simulated=is_simulated,
        )

    return _make


@pytest.fixture
def make_window(now: datetime) -> Callable[..., OutreachWindow]:
    """Factory for windows timed in hours relative to the reference instant."""

    def _make(
        window_id: str,
        window_type: WindowType,
        start_hours: float,
        end_hours: float,
        driver_signal_ids: Optional[List[str]] = None,
        why: str = "Base explanation.",
    ) -> OutreachWindow:
        return OutreachWindow(
            id=window_id,
            window_type=window_type,
            start=now + timedelta(hours=start_hours),
            end=now + timedelta(hours=end_hours),
            driver_signal_ids=driver_signal_ids or [],
            plain_language_why=why,
            confidence_summary=ConfidenceLevel.MEDIUM,
            suggested_approach=suggest_approach(window_type),
            impact_score=0,
        )

    return _make


@pytest.fixture
def simulated_signals(now: datetime) -> List[TemporalSignal]:
    return build_simulated_signals(now)


@pytest.fixture
def simulated_store(simulated_signals: List[TemporalSignal]) -> SignalStore:
    return SignalStore(simulated_signals)


@pytest.fixture
def mock_env_vars() -> Generator[dict, None, None]:
    """Mock environment variables for testing."""
    test_env = {
        "PLANNER_HORIZON_DAYS": "7",
        "PLANNER_SCENARIO": "major_event",
        "PLANNER_BUCKET_HOURS": "1",
        "PLANNER_MIN_WINDOW_HOURS": "3",
        "LOG_LEVEL": "DEBUG",
        "LOG_FILE_PATH": "",
    }

    with patch.dict(os.environ, test_env, clear=False):
        yield test_env


@pytest.fixture
def test_config(mock_env_vars: dict) -> Config:
    """Create a test configuration instance."""
    return Config.load_from_env()
