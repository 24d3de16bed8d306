"""Manager hotspots: a handful of managers whose teams generate a cluster of reports."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from ..pools import PoolEntry, create_pool, mark_assigned, request_assignment
from ..random_source import RandomSource


MANAGEMENT_CATEGORIES = ("harassment", "retaliation", "discrimination", "policy_violation")


def create_manager_hotspots(
    manager_ids: Sequence[str],
    rng: RandomSource,
    count: int = 15,
    quota_range: Tuple[int, int] = (5, 10),
    categories: Optional[Sequence[str]] = None,
) -> List[PoolEntry]:
    universe = list(categories) if categories else list(MANAGEMENT_CATEGORIES)
    preferred = [code for code in MANAGEMENT_CATEGORIES if code in universe]
    return create_pool(
        manager_ids,
        count,
        quota_range,
        rng,
        tag_universe=universe,
        preferred_tags=preferred,
    )


def get_hotspot_for_assignment(pool: Sequence[PoolEntry], category: Optional[str] = None) -> Optional[PoolEntry]:
    """Hotspot whose team should own the next case, preferring a category match."""
    return request_assignment(pool, category)


def mark_hotspot_assigned(pool: Sequence[PoolEntry], manager_id: str, *, strict: bool = False) -> Optional[PoolEntry]:
    return mark_assigned(pool, manager_id, strict=strict)
