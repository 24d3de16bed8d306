"""Deterministic random provider shared by every generator of a seeding run.

A :class:`RandomSource` is created once per run (or per sub-generator via
:meth:`RandomSource.derive`) and passed explicitly to the functions that need
it. There is no module level random state: the same seed and the same call
sequence always produce the same demo dataset.
"""

from __future__ import annotations

import random
from datetime import date, datetime, timedelta
from typing import List, MutableSequence, Sequence, Tuple, TypeVar

from faker import Faker


T = TypeVar("T")

DEFAULT_LOCALE = "en_US"


class RandomSource:
    """Seeded wrapper around :class:`random.Random` and a Faker instance."""

    def __init__(self, seed: int, locale: str = DEFAULT_LOCALE) -> None:
        self._locale = locale
        self._faker = Faker(locale)
        self.reseed(seed)

    @classmethod
    def for_offset(cls, master_seed: int, offset: int, locale: str = DEFAULT_LOCALE) -> "RandomSource":
        return cls(master_seed + offset, locale=locale)

    @property
    def seed(self) -> int:
        return self._seed

    def reseed(self, seed: int) -> None:
        self._seed = int(seed)
        self._rng = random.Random(self._seed)
        self._faker.seed_instance(self._seed)

    def derive(self, offset: int) -> "RandomSource":
        """Return an independent source seeded with ``seed + offset``."""
        return RandomSource(self._seed + offset, locale=self._locale)

    # ------------------------------------------------------------------
    # Primitive draws
    # ------------------------------------------------------------------
    def random_int(self, minimum: int, maximum: int) -> int:
        if minimum > maximum:
            minimum, maximum = maximum, minimum
        return self._rng.randint(minimum, maximum)

    def random_float(self, minimum: float, maximum: float) -> float:
        return self._rng.uniform(minimum, maximum)

    def pick_random(self, items: Sequence[T]) -> T:
        if not items:
            raise ValueError("pick_random() requires a non-empty sequence")
        return items[self._rng.randrange(len(items))]

    def chance(self, probability: float) -> bool:
        if probability <= 0:
            return False
        if probability >= 1:
            return True
        return self._rng.random() < probability

    def shuffle(self, items: Sequence[T]) -> List[T]:
        shuffled: MutableSequence[T] = list(items)
        self._rng.shuffle(shuffled)
        return list(shuffled)

    def sample(self, items: Sequence[T], count: int) -> List[T]:
        size = max(0, min(count, len(items)))
        return self._rng.sample(list(items), size)

    def weighted_random(self, options: Sequence[Tuple[T, float]]) -> T:
        """Roulette selection over ``(value, weight)`` pairs.

        Weights do not need to add up to one. When floating point rounding
        leaves the roll past the last cumulative bound the last option wins.
        """
        if not options:
            raise ValueError("weighted_random() requires at least one option")
        total = sum(max(0.0, float(weight)) for _, weight in options)
        if total <= 0:
            return options[-1][0]
        roll = self._rng.random() * total
        cumulative = 0.0
        for value, weight in options:
            cumulative += max(0.0, float(weight))
            if roll < cumulative:
                return value
        return options[-1][0]

    # ------------------------------------------------------------------
    # Dates relative to a fixed reference point
    # ------------------------------------------------------------------
    def recent_date(self, days: int, reference: date) -> date:
        return reference - timedelta(days=self.random_int(1, max(1, days)))

    def past_date(self, years: int, reference: date) -> date:
        return reference - timedelta(days=self.random_int(1, max(1, years) * 365))

    def date_between(self, start: date, end: date) -> date:
        span = (end - start).days
        return start + timedelta(days=self.random_int(0, max(span, 0)))

    def datetime_between(self, start: datetime, end: datetime) -> datetime:
        """Uniform instant in ``[start, end]``; ``start`` when the range is empty."""
        span = (end - start).total_seconds()
        if span <= 0:
            return start
        return start + timedelta(seconds=self._rng.random() * span)

    # ------------------------------------------------------------------
    # Faker backed text
    # ------------------------------------------------------------------
    def lorem_words(self, count: int = 2) -> str:
        return " ".join(self._faker.words(nb=count))

    def lorem_sentence(self) -> str:
        return self._faker.sentence()

    def lorem_paragraphs(self, count: int = 1) -> str:
        return "\n\n".join(self._faker.paragraphs(nb=count))

    def full_name(self) -> str:
        return self._faker.name()

    def first_last_name(self) -> Tuple[str, str]:
        return self._faker.first_name(), self._faker.last_name()

    def uuid(self) -> str:
        return str(self._faker.uuid4())


def format_month_day(value: date) -> str:
    """Render ``date(2026, 3, 3)`` as ``"March 3"``."""
    return f"{value.strftime('%B')} {value.day}"


def format_long_date(value: date) -> str:
    """Render ``date(2026, 3, 3)`` as ``"March 3, 2026"``."""
    return f"{format_month_day(value)}, {value.year}"
