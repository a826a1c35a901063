"""
Scenario Transformer

Applies a named speculative adjustment to an already-computed window list for
what-if exploration. Output is clearly labeled SPECULATIVE; it is for planning
exercises, not prediction. Input windows are never modified.
"""

import logging
from typing import Dict, List, Optional, Sequence

from .models import (
    BUILTIN_SCENARIOS,
    DEFAULT_SCENARIO_TAG,
    SCENARIO_ALIASES,
    ScenarioProfile,
)
from ..models.windows import OutreachWindow, SignalOverlap, WindowType


SPECULATIVE_PREFIX = "SPECULATIVE: "
ID_PREFIX = "scenario-"

SAFER_WHY_SUFFIX = "During major events, available windows compress due to increased institutional activity."
SAFER_APPROACH_SUFFIX = "Consider pre-event outreach to maximize available time."
CAUTION_WHY_SUFFIX = "Major events typically increase impact of existing signals."
CAUTION_APPROACH = "Focus resources on pre-event and post-event windows rather than during."
OVERLAP_SUFFIX = "During major events, overlapping signals have compounded effects."


class ScenarioTransformer:
    """Builds speculative copies of outreach windows and overlaps"""

    def __init__(self,
                 profiles: Optional[Dict[str, ScenarioProfile]] = None,
                 default_tag: Optional[str] = None):
        self.profiles = dict(profiles) if profiles is not None else dict(BUILTIN_SCENARIOS)
        if not self.profiles:
            raise ValueError("At least one scenario profile is required")

        # Without an explicit default, prefer the built-in default, else the first profile
        if default_tag is None:
            default_tag = DEFAULT_SCENARIO_TAG if DEFAULT_SCENARIO_TAG in self.profiles else next(iter(self.profiles))
        if default_tag not in self.profiles:
            raise ValueError(f"Default scenario '{default_tag}' is not a known profile")
        self.default_tag = default_tag
        self.logger = logging.getLogger(__name__)

    def resolve(self, tag: Optional[str]) -> ScenarioProfile:
        """Look up a scenario, falling back to the default profile for unknown tags"""
        key = SCENARIO_ALIASES.get(tag, tag) if tag else None
        if key in self.profiles:
            return self.profiles[key]

        self.logger.warning(f"Unknown scenario '{tag}', using '{self.default_tag}'")
        return self.profiles[self.default_tag]

    def apply(self, windows: Sequence[OutreachWindow], tag: Optional[str]) -> List[OutreachWindow]:
        """Return speculative copies of the windows under the given scenario"""
        profile = self.resolve(tag)
        transformed = [self._transform(window, profile) for window in windows]
        self.logger.debug(f"Applied scenario '{profile.tag}' to {len(transformed)} windows")
        return transformed

    def annotate_overlaps(self, overlaps: Sequence[SignalOverlap]) -> List[SignalOverlap]:
        """Label overlaps as speculative without changing their ranges"""
        return [
            overlap.model_copy(update={
                "id": f"{ID_PREFIX}{overlap.id}",
                "why_it_matters": f"{SPECULATIVE_PREFIX}{overlap.why_it_matters} {OVERLAP_SUFFIX}",
                "signal_ids": list(overlap.signal_ids),
            })
            for overlap in overlaps
        ]

    def _transform(self, window: OutreachWindow, profile: ScenarioProfile) -> OutreachWindow:
        # model_copy is shallow; copy the list so outputs never share it with inputs
        update = {
            "id": f"{ID_PREFIX}{window.id}",
            "is_speculative": True,
            "driver_signal_ids": list(window.driver_signal_ids),
        }

        if window.window_type == WindowType.SAFER:
            update.update({
                "end": window.start + window.duration * profile.compression_factor,
                "plain_language_why": f"{SPECULATIVE_PREFIX}{window.plain_language_why} {SAFER_WHY_SUFFIX}",
                "suggested_approach": f"{SPECULATIVE_PREFIX}{window.suggested_approach} {SAFER_APPROACH_SUFFIX}",
            })
        elif window.window_type == WindowType.CAUTION:
            update.update({
                "window_type": WindowType.HIGH_DISRUPTION,
                "plain_language_why": f"{SPECULATIVE_PREFIX}{window.plain_language_why} {CAUTION_WHY_SUFFIX}",
                "suggested_approach": f"{SPECULATIVE_PREFIX}{CAUTION_APPROACH}",
            })
        else:
            update["plain_language_why"] = f"{SPECULATIVE_PREFIX}{window.plain_language_why}"

        return window.model_copy(update=update)
