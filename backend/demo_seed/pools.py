"""Quota pools used to make the same people show up across many generated cases."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .exceptions import PoolQuotaExceededError, UnknownPoolMemberError
from .random_source import RandomSource


FIRST_MATCH = "first_match"
MOST_REMAINING = "most_remaining"
STRATEGIES = (FIRST_MATCH, MOST_REMAINING)


@dataclass
class PoolEntry:
    member_id: str
    target_quota: int
    current_count: int = 0
    affinity_tags: Tuple[str, ...] = ()

    @property
    def remaining(self) -> int:
        return max(0, self.target_quota - self.current_count)

    @property
    def exhausted(self) -> bool:
        return self.current_count >= self.target_quota


@dataclass
class PoolStats:
    members: int = 0
    capacity: int = 0
    assigned: int = 0
    exhausted: int = 0
    by_member: Dict[str, int] = field(default_factory=dict)


def _draw_affinity_tags(
    rng: RandomSource,
    tag_universe: Sequence[str],
    preferred_tags: Sequence[str],
    tag_count_range: Tuple[int, int],
    preferred_bias: float,
) -> Tuple[str, ...]:
    wanted = rng.random_int(*tag_count_range)
    wanted = min(wanted, len(set(tag_universe) | set(preferred_tags)))
    tags: List[str] = []
    attempts = 0
    # Sesgo hacia el subconjunto preferido para agrupar afinidades
    while len(tags) < wanted and attempts < wanted * 10:
        attempts += 1
        source = preferred_tags if preferred_tags and rng.chance(preferred_bias) else tag_universe
        tag = rng.pick_random(source)
        if tag not in tags:
            tags.append(tag)
    return tuple(tags)


def create_pool(
    candidate_ids: Sequence[str],
    pool_size: int,
    quota_range: Tuple[int, int],
    rng: RandomSource,
    *,
    tag_universe: Optional[Sequence[str]] = None,
    preferred_tags: Optional[Sequence[str]] = None,
    tag_count_range: Tuple[int, int] = (1, 3),
    preferred_bias: float = 0.6,
) -> List[PoolEntry]:
    """Pick ``min(pool_size, len(candidate_ids))`` distinct members and give each a quota.

    Quotas are drawn uniformly from the inclusive ``quota_range``. When a tag
    universe is given every member also gets 1-3 affinity tags, drawn from
    ``preferred_tags`` with probability ``preferred_bias`` and from the whole
    universe otherwise.
    """
    low, high = quota_range
    if low < 0 or high < low:
        raise ValueError(f"Invalid quota range {quota_range!r}")

    unique_candidates = list(dict.fromkeys(candidate_ids))
    members = rng.sample(unique_candidates, pool_size)

    pool: List[PoolEntry] = []
    for member_id in members:
        quota = rng.random_int(low, high)
        tags: Tuple[str, ...] = ()
        if tag_universe:
            tags = _draw_affinity_tags(
                rng,
                list(tag_universe),
                list(preferred_tags or ()),
                tag_count_range,
                preferred_bias,
            )
        pool.append(PoolEntry(member_id=member_id, target_quota=quota, affinity_tags=tags))
    return pool


def _find(pool: Iterable[PoolEntry], member_id: str) -> Optional[PoolEntry]:
    for entry in pool:
        if entry.member_id == member_id:
            return entry
    return None


def _pick(candidates: List[PoolEntry], strategy: str) -> Optional[PoolEntry]:
    if not candidates:
        return None
    if strategy == MOST_REMAINING:
        # max() devuelve el primero en caso de empate, se conserva el orden del pool
        return max(candidates, key=lambda entry: entry.remaining)
    return candidates[0]


def request_assignment(
    pool: Sequence[PoolEntry],
    affinity_tag: Optional[str] = None,
    *,
    strategy: str = FIRST_MATCH,
) -> Optional[PoolEntry]:
    """Return the entry that should take the next assignment, or ``None``.

    With ``affinity_tag`` the first available entry carrying that tag wins;
    without one, or when no tagged entry has quota left, the first available
    entry in pool order is returned. Exhausted entries are never returned.
    ``strategy="most_remaining"`` picks the entry with the most remaining
    quota among the same candidates instead of the first one.
    """
    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown strategy '{strategy}'")

    available = [entry for entry in pool if not entry.exhausted]
    if affinity_tag is not None:
        tagged = [entry for entry in available if affinity_tag in entry.affinity_tags]
        match = _pick(tagged, strategy)
        if match is not None:
            return match
    return _pick(available, strategy)


def mark_assigned(pool: Sequence[PoolEntry], member_id: str, *, strict: bool = False) -> Optional[PoolEntry]:
    entry = _find(pool, member_id)
    if entry is None:
        if strict:
            raise UnknownPoolMemberError(member_id)
        return None
    if entry.exhausted:
        if strict:
            raise PoolQuotaExceededError(member_id, entry.target_quota)
        return entry
    entry.current_count += 1
    return entry


def is_pool_member(pool: Sequence[PoolEntry], member_id: str) -> bool:
    return _find(pool, member_id) is not None


def remaining_quota(pool: Sequence[PoolEntry], member_id: str) -> int:
    entry = _find(pool, member_id)
    return entry.remaining if entry is not None else 0


def total_capacity(pool: Sequence[PoolEntry]) -> int:
    return sum(entry.target_quota for entry in pool)


def pool_stats(pool: Sequence[PoolEntry]) -> PoolStats:
    stats = PoolStats()
    for entry in pool:
        stats.members += 1
        stats.capacity += entry.target_quota
        stats.assigned += entry.current_count
        if entry.exhausted:
            stats.exhausted += 1
        stats.by_member[entry.member_id] = entry.current_count
    return stats
