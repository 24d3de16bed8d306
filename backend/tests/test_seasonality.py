from datetime import date

import pytest

from demo_seed.random_source import RandomSource
from demo_seed.utils.seasonality import (
    LOW_PERIODS,
    SPIKE_PERIODS,
    SeasonalityPeriod,
    apply_seasonality,
    format_seasonality_period,
    generate_historical_date,
    generate_seasonal_historical_date,
    get_all_seasonality_periods,
    get_seasonality_multiplier,
    is_date_in_period,
)


@pytest.mark.parametrize(
    "day, expected",
    [
        (date(2025, 1, 15), (1.4, "post_holiday")),
        (date(2025, 3, 31), (1.3, "q1_reorg")),
        (date(2025, 7, 20), (1.25, "midyear_review")),
        (date(2025, 8, 10), (0.7, "summer_lull")),
        (date(2025, 12, 25), (0.5, "holiday_break")),
        (date(2025, 5, 5), (1.0, None)),
    ],
)
def test_multiplier_lookup(day, expected):
    assert get_seasonality_multiplier(day) == expected


def test_period_wrapping_the_new_year():
    period = SeasonalityPeriod(12, 21, 1, 5, 0.5, "winter_break", kind="low")
    assert is_date_in_period(date(2025, 12, 30), period)
    assert is_date_in_period(date(2026, 1, 3), period)
    assert not is_date_in_period(date(2026, 1, 6), period)
    assert not is_date_in_period(date(2025, 12, 20), period)


def test_spike_dates_are_kept(rng):
    for _ in range(20):
        assert apply_seasonality(date(2025, 9, 10), rng) == (date(2025, 9, 10), "policy_changes")


def test_lull_dates_move_into_a_spike_or_stay():
    rng = RandomSource(7)
    spike_reasons = {period.reason for period in SPIKE_PERIODS}
    moved = 0
    for _ in range(200):
        result, reason = apply_seasonality(date(2024, 12, 26), rng)
        if result != date(2024, 12, 26):
            moved += 1
            assert reason in spike_reasons
            assert get_seasonality_multiplier(result)[0] > 1.0
    # Con un multiplicador de 0.5 cerca de la mitad de las fechas se desplaza
    assert 60 < moved < 140


def test_shifted_dates_never_pass_the_reference():
    rng = RandomSource(3)
    reference = date(2026, 2, 2)
    for _ in range(300):
        result, _ = apply_seasonality(date(2025, 12, 28), rng, earliest=date(2023, 2, 3), latest=reference)
        assert date(2023, 2, 3) <= result <= reference


def test_historical_dates_stay_in_window(rng):
    reference = date(2026, 2, 2)
    for _ in range(200):
        value = generate_historical_date(rng, reference, 3)
        assert date(2023, 2, 3) <= value <= reference


def test_business_days_only_skips_weekends():
    rng = RandomSource(11)
    reference = date(2026, 2, 2)
    for _ in range(200):
        value, _ = generate_seasonal_historical_date(rng, reference, 2, business_days_only=True)
        assert value.weekday() < 5
        assert value <= reference


def test_seasonal_dates_cluster_in_spikes():
    rng = RandomSource(20260202)
    reference = date(2026, 2, 2)
    counts = {"spike": 0, "lull": 0}
    for _ in range(2000):
        value, _ = generate_seasonal_historical_date(rng, reference, 3)
        multiplier, _ = get_seasonality_multiplier(value)
        if multiplier > 1.0:
            counts["spike"] += 1
        elif multiplier < 1.0:
            counts["lull"] += 1
    assert counts["spike"] > 3 * counts["lull"]


def test_period_listing_and_formatting():
    periods = get_all_seasonality_periods()
    assert len(periods) == len(SPIKE_PERIODS) + len(LOW_PERIODS)
    assert [period.multiplier for period in periods] == sorted((p.multiplier for p in periods), reverse=True)
    assert format_seasonality_period(SPIKE_PERIODS[0]) == "Jan 2 - Feb 15: post_holiday (1.4x)"
    assert format_seasonality_period(LOW_PERIODS[1]) == "Dec 21 - Dec 31: holiday_break (0.5x)"
