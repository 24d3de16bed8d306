from collections import Counter
from datetime import date, datetime, timedelta, timezone

import pytest

from demo_seed.random_source import RandomSource, format_long_date, format_month_day


def _draws(source: RandomSource):
    return [
        source.random_int(1, 100),
        round(source.random_float(0.0, 1.0), 12),
        source.pick_random(["a", "b", "c", "d"]),
        source.chance(0.5),
        source.shuffle([1, 2, 3, 4, 5]),
        source.sample(list(range(20)), 5),
        source.weighted_random([("x", 0.2), ("y", 0.8)]),
        source.full_name(),
        source.lorem_words(2),
        source.uuid(),
    ]


def test_same_seed_same_sequence():
    assert _draws(RandomSource(42)) == _draws(RandomSource(42))


def test_different_offsets_give_different_streams():
    base = RandomSource(20260202)
    activity = base.derive(5000)
    hotspots = RandomSource.for_offset(20260202, 5100)
    assert activity.seed == 20265202
    assert hotspots.seed == 20265302
    assert [activity.random_int(0, 10**6) for _ in range(5)] != [hotspots.random_int(0, 10**6) for _ in range(5)]


def test_reseed_restarts_the_stream():
    source = RandomSource(7)
    first = [source.random_int(0, 1000) for _ in range(10)]
    source.reseed(7)
    assert [source.random_int(0, 1000) for _ in range(10)] == first


def test_random_int_is_inclusive(rng):
    values = {rng.random_int(2, 4) for _ in range(300)}
    assert values == {2, 3, 4}
    assert rng.random_int(5, 5) == 5


def test_random_float_within_bounds(rng):
    for _ in range(100):
        value = rng.random_float(1.5, 2.5)
        assert 1.5 <= value <= 2.5


def test_pick_random_rejects_empty(rng):
    with pytest.raises(ValueError):
        rng.pick_random([])


def test_chance_extremes(rng):
    assert not any(rng.chance(0) for _ in range(50))
    assert all(rng.chance(1) for _ in range(50))


def test_shuffle_returns_copy(rng):
    items = [1, 2, 3, 4, 5, 6]
    shuffled = rng.shuffle(items)
    assert items == [1, 2, 3, 4, 5, 6]
    assert sorted(shuffled) == items


def test_sample_is_capped_and_distinct(rng):
    picked = rng.sample(["a", "b", "c"], 10)
    assert sorted(picked) == ["a", "b", "c"]
    assert rng.sample(["a", "b"], 0) == []


def test_weighted_random_follows_weights(rng):
    counts = Counter(rng.weighted_random([("closed", 90), ("open", 10)]) for _ in range(2000))
    assert counts["closed"] > counts["open"] * 4


def test_weighted_random_zero_weights_falls_back_to_last(rng):
    assert rng.weighted_random([("a", 0), ("b", 0)]) == "b"
    with pytest.raises(ValueError):
        rng.weighted_random([])


def test_dates_stay_before_reference(rng):
    reference = date(2026, 2, 2)
    for _ in range(50):
        assert rng.recent_date(30, reference) < reference
        assert rng.past_date(1, reference) < reference


def test_date_formatting():
    assert format_month_day(date(2026, 3, 3)) == "March 3"
    assert format_long_date(date(2026, 3, 3)) == "March 3, 2026"


def test_datetime_between_stays_in_range(rng):
    start = datetime(2025, 1, 1, 8, 0, tzinfo=timezone.utc)
    end = start + timedelta(hours=6)
    for _ in range(100):
        value = rng.datetime_between(start, end)
        assert start <= value <= end
    assert rng.datetime_between(end, start) == end
