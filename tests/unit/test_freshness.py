from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from src.domain.algorithms.freshness import Freshness, FreshnessPolicy, classify


@pytest.mark.parametrize(
    ("age_s", "expected"),
    [
        (0, Freshness.RECENT),
        (299, Freshness.RECENT),
        (300, Freshness.RECENT),
        (301, Freshness.ACTIVE),
        (600, Freshness.ACTIVE),
        (601, Freshness.STALE),
        (86_400, Freshness.STALE),
    ],
)
def test_classify_boundaries(age_s: float, expected: Freshness) -> None:
    assert classify(age_s) is expected


def test_negative_age_counts_as_recent() -> None:
    assert classify(-30) is Freshness.RECENT


def test_custom_windows() -> None:
    policy = FreshnessPolicy(recent_window_s=60, active_window_s=120)
    assert policy.classify(61) is Freshness.ACTIVE
    assert policy.classify(121) is Freshness.STALE
    assert not policy.is_live(Freshness.STALE)
    assert policy.is_live(Freshness.ACTIVE)


def test_age_is_measured_from_capture_time() -> None:
    policy = FreshnessPolicy()
    now = datetime(2025, 9, 1, 8, 10, tzinfo=timezone.utc)
    assert policy.age_s(now - timedelta(minutes=10), now) == 600.0


@pytest.mark.parametrize(("recent", "active"), [(0, 600), (300, 200)])
def test_invalid_windows_are_rejected(recent: float, active: float) -> None:
    with pytest.raises(ValueError):
        FreshnessPolicy(recent_window_s=recent, active_window_s=active)
