"""
Signal store and simulated signal catalog.
"""

from .simulated import TEMPORAL_DATA_DISCLAIMER, build_simulated_signals
from .store import SignalStore

__all__ = [
    "SignalStore",
    "build_simulated_signals",
    "TEMPORAL_DATA_DISCLAIMER",
]
