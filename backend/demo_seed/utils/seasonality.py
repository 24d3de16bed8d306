"""Seasonal clustering of report dates.

Compliance hotlines are busier after holidays, during reorganisations and
around review cycles, and quieter in the summer and over the year-end break.
Dates drawn uniformly over the history window are nudged towards those
patterns: dates inside a spike are kept, dates inside a lull are kept with
probability equal to the lull multiplier and otherwise moved into the first
two weeks of a random spike.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Optional, Sequence, Tuple

from ..random_source import RandomSource


BASE_MULTIPLIER = 1.0
SPIKE_SHIFT_DAYS = 14
RECENT_WINDOW_DAYS = 365
MONTH_ABBREVIATIONS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


@dataclass(frozen=True)
class SeasonalityPeriod:
    start_month: int
    start_day: int
    end_month: int
    end_day: int
    multiplier: float
    reason: str
    kind: str = "spike"


SPIKE_PERIODS: Tuple[SeasonalityPeriod, ...] = (
    SeasonalityPeriod(1, 2, 2, 15, 1.4, "post_holiday"),
    SeasonalityPeriod(3, 1, 3, 31, 1.3, "q1_reorg"),
    SeasonalityPeriod(6, 15, 7, 31, 1.25, "midyear_review"),
    SeasonalityPeriod(9, 1, 9, 30, 1.35, "policy_changes"),
    SeasonalityPeriod(11, 15, 12, 20, 1.2, "yearend_stress"),
)

LOW_PERIODS: Tuple[SeasonalityPeriod, ...] = (
    SeasonalityPeriod(7, 1, 8, 15, 0.7, "summer_lull", kind="low"),
    SeasonalityPeriod(12, 21, 12, 31, 0.5, "holiday_break", kind="low"),
)


def is_date_in_period(value: date, period: SeasonalityPeriod) -> bool:
    start = (period.start_month, period.start_day)
    end = (period.end_month, period.end_day)
    current = (value.month, value.day)
    # Periodos que cruzan el fin de año (p. ej. 21 dic - 5 ene)
    if end < start:
        return current >= start or current <= end
    return start <= current <= end


def get_seasonality_multiplier(
    value: date,
    spikes: Sequence[SeasonalityPeriod] = SPIKE_PERIODS,
    lows: Sequence[SeasonalityPeriod] = LOW_PERIODS,
) -> Tuple[float, Optional[str]]:
    """Return ``(multiplier, reason)``; spikes win over overlapping lulls."""
    for period in spikes:
        if is_date_in_period(value, period):
            return period.multiplier, period.reason
    for period in lows:
        if is_date_in_period(value, period):
            return period.multiplier, period.reason
    return BASE_MULTIPLIER, None


def apply_seasonality(
    value: date,
    rng: RandomSource,
    earliest: Optional[date] = None,
    latest: Optional[date] = None,
) -> Tuple[date, Optional[str]]:
    multiplier, reason = get_seasonality_multiplier(value)
    if multiplier >= BASE_MULTIPLIER:
        return value, reason
    if rng.chance(multiplier / BASE_MULTIPLIER):
        return value, reason

    spike = rng.pick_random(SPIKE_PERIODS)
    shifted = date(value.year, spike.start_month, spike.start_day + rng.random_int(0, SPIKE_SHIFT_DAYS - 1))
    if latest is not None and shifted > latest:
        shifted = shifted.replace(year=shifted.year - 1)
    if (latest is not None and shifted > latest) or (earliest is not None and shifted < earliest):
        return value, reason
    return shifted, spike.reason


def generate_historical_date(
    rng: RandomSource,
    reference: date,
    years: int,
    recent_bias: float = 0.3,
) -> date:
    """Uniform date over ``years`` of history, biased towards the last year."""
    history_start = reference - timedelta(days=365 * max(1, years))
    if rng.chance(recent_bias):
        recent_start = max(history_start, reference - timedelta(days=RECENT_WINDOW_DAYS))
        return rng.date_between(recent_start, reference)
    return rng.date_between(history_start, reference)


def generate_seasonal_historical_date(
    rng: RandomSource,
    reference: date,
    years: int,
    recent_bias: float = 0.3,
    business_days_only: bool = False,
) -> Tuple[date, Optional[str]]:
    history_start = reference - timedelta(days=365 * max(1, years))
    base = generate_historical_date(rng, reference, years, recent_bias)
    result, reason = apply_seasonality(base, rng, earliest=history_start, latest=reference)
    if business_days_only:
        weekday = result.weekday()
        if weekday == 6:
            result = result + timedelta(days=1)
        elif weekday == 5:
            result = result - timedelta(days=1)
        if result > reference:
            result = result - timedelta(days=3)
    return result, reason


def get_all_seasonality_periods() -> List[SeasonalityPeriod]:
    return sorted(SPIKE_PERIODS + LOW_PERIODS, key=lambda period: period.multiplier, reverse=True)


def format_seasonality_period(period: SeasonalityPeriod) -> str:
    start = MONTH_ABBREVIATIONS[period.start_month - 1]
    end = MONTH_ABBREVIATIONS[period.end_month - 1]
    return (
        f"{start} {period.start_day} - {end} {period.end_day}: "
        f"{period.reason} ({period.multiplier:g}x)"
    )
