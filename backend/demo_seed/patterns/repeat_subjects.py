"""Repeat subjects: employees named as the subject of several reports."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from ..pools import PoolEntry, create_pool, mark_assigned, request_assignment
from ..random_source import RandomSource


# Categorías de conducta donde suelen concentrarse los reincidentes
BEHAVIOURAL_CATEGORIES = ("harassment", "discrimination", "retaliation", "workplace_violence")


def create_repeat_subject_pool(
    employee_ids: Sequence[str],
    rng: RandomSource,
    pool_size: int = 50,
    quota_range: Tuple[int, int] = (2, 5),
    categories: Optional[Sequence[str]] = None,
) -> List[PoolEntry]:
    universe = list(categories) if categories else list(BEHAVIOURAL_CATEGORIES)
    preferred = [code for code in BEHAVIOURAL_CATEGORIES if code in universe]
    return create_pool(
        employee_ids,
        pool_size,
        quota_range,
        rng,
        tag_universe=universe,
        preferred_tags=preferred,
    )


def get_repeat_subject(pool: Sequence[PoolEntry], category: Optional[str] = None) -> Optional[PoolEntry]:
    return request_assignment(pool, category)


def mark_subject_assigned(pool: Sequence[PoolEntry], employee_id: str, *, strict: bool = False) -> Optional[PoolEntry]:
    return mark_assigned(pool, employee_id, strict=strict)
