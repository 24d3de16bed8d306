from datetime import datetime, timedelta, timezone

import pytest

from demo_seed.enrichment import (
    SUMMARY_ENDINGS,
    SUMMARY_MIDDLES,
    ai_summary_timestamp,
    generate_ai_risk_score,
    generate_ai_summary,
)
from demo_seed.random_source import RandomSource


def test_summary_is_built_from_three_parts(rng):
    summary = generate_ai_summary("Conflict of Interest", "high", rng)
    assert any(middle in summary for middle in SUMMARY_MIDDLES)
    assert summary.endswith(SUMMARY_ENDINGS)
    assert "{" not in summary


def test_summary_mentions_category_or_severity():
    rng = RandomSource(4)
    seen = set()
    for _ in range(60):
        summary = generate_ai_summary("Theft", "medium", rng)
        seen.add(summary.split(".")[0])
    assert seen == {
        "Moderate theft report",
        "Report involving potential theft concerns",
        "Theft allegation requiring investigation",
    }


@pytest.mark.parametrize("severity, low, high", [("high", 70, 95), ("medium", 40, 70), ("low", 15, 45)])
def test_risk_score_bands(severity, low, high):
    rng = RandomSource(9)
    scores = [generate_ai_risk_score(severity, "Policy Violation", rng) for _ in range(200)]
    assert min(scores) >= low
    assert max(scores) <= high


def test_sensitive_categories_score_higher_and_cap_at_100():
    rng = RandomSource(12)
    scores = [generate_ai_risk_score("high", "Harassment", rng) for _ in range(300)]
    assert min(scores) >= 75
    assert max(scores) == 100

    fraud = [generate_ai_risk_score("low", "Fraud", RandomSource(seed)) for seed in range(50)]
    assert min(fraud) >= 20


def test_summary_timestamp_follows_creation(rng):
    created_at = datetime(2025, 6, 1, 9, 0, tzinfo=timezone.utc)
    for _ in range(50):
        stamp = ai_summary_timestamp(created_at, rng)
        assert timedelta(hours=1) <= stamp - created_at <= timedelta(hours=8)
        assert stamp.tzinfo is not None
