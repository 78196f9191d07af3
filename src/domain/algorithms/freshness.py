from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

RECENT_WINDOW_S = 300.0
ACTIVE_WINDOW_S = 600.0


class Freshness(str, Enum):
    RECENT = "recent"
    ACTIVE = "active"
    STALE = "stale"


@dataclass(frozen=True, slots=True)
class FreshnessPolicy:
    """Single source of truth for how old a reading may be before it counts as stale.

    - RECENT: age <= recent_window_s
    - ACTIVE: recent_window_s < age <= active_window_s
    - STALE:  age > active_window_s

    Negative ages (device clock ahead of ours) count as RECENT.
    """

    recent_window_s: float = RECENT_WINDOW_S
    active_window_s: float = ACTIVE_WINDOW_S

    def __post_init__(self) -> None:
        if self.recent_window_s <= 0 or self.active_window_s < self.recent_window_s:
            raise ValueError(
                "Freshness windows must satisfy 0 < recent_window_s <= active_window_s"
            )

    def classify(self, age_s: float) -> Freshness:
        if age_s <= self.recent_window_s:
            return Freshness.RECENT
        if age_s <= self.active_window_s:
            return Freshness.ACTIVE
        return Freshness.STALE

    def age_s(self, captured_at: datetime, now: datetime) -> float:
        return (now - captured_at).total_seconds()

    def is_live(self, freshness: Freshness) -> bool:
        return freshness is not Freshness.STALE


DEFAULT_POLICY = FreshnessPolicy()


def classify(age_s: float) -> Freshness:
    return DEFAULT_POLICY.classify(age_s)
