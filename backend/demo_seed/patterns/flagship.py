"""Flagship cases: queries over the curated set and their timeline."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import List, Optional, Sequence, Tuple

from ..data.flagship_cases import FLAGSHIP_CASES, FlagshipCase
from ..random_source import RandomSource
from ..templating import normalize_category_key
from ..utils.datetimes import at_utc
from ..utils.numbers import round_half_up


CLOSED_PADDING_DAYS = (5, 30)
OPEN_AGE_DAYS = (1, 14)
AI_SUMMARY_DELAY_HOURS = (1, 4)
BUSINESS_HOURS = (8, 18)


@dataclass
class FlagshipStats:
    total: int
    open: int
    closed: int
    with_escalation: int
    with_external_party: int
    avg_risk_score: int


@dataclass(frozen=True)
class FlagshipTimeline:
    created_at: datetime
    closed_at: Optional[datetime]
    ai_summary_generated_at: datetime


def get_flagship_cases_by_status(status: str, cases: Sequence[FlagshipCase] = FLAGSHIP_CASES) -> List[FlagshipCase]:
    return [case for case in cases if case.status == status.lower()]


def get_flagship_cases_by_category(category: str, cases: Sequence[FlagshipCase] = FLAGSHIP_CASES) -> List[FlagshipCase]:
    return [case for case in cases if case.category.lower() == category.lower()]


def get_flagship_cases_with_external_party(cases: Sequence[FlagshipCase] = FLAGSHIP_CASES) -> List[FlagshipCase]:
    return [case for case in cases if case.has_external_party]


def get_escalated_flagship_cases(cases: Sequence[FlagshipCase] = FLAGSHIP_CASES) -> List[FlagshipCase]:
    return [case for case in cases if case.has_escalation]


def get_flagship_stats(cases: Sequence[FlagshipCase] = FLAGSHIP_CASES) -> FlagshipStats:
    total = len(cases)
    return FlagshipStats(
        total=total,
        open=sum(1 for case in cases if case.status in ("new", "open")),
        closed=sum(1 for case in cases if case.status == "closed"),
        with_escalation=sum(1 for case in cases if case.has_escalation),
        with_external_party=sum(1 for case in cases if case.has_external_party),
        avg_risk_score=round_half_up(sum(case.ai_risk_score for case in cases) / total) if total else 0,
    )


def resolve_flagship_category(flagship: FlagshipCase, categories: Sequence[Tuple[str, str]]) -> Optional[str]:
    """Pick the category code for ``flagship`` from ``(code, name)`` pairs.

    Matches the display name first, then the normalised key against the code.
    Unknown categories fall back to the first configured one.
    """
    if not categories:
        return None
    wanted = flagship.category.lower()
    for code, name in categories:
        if name.lower() == wanted:
            return code
    key = normalize_category_key(flagship.category)
    for code, _ in categories:
        if code == key:
            return code
    return categories[0][0]


def plan_flagship_timeline(flagship: FlagshipCase, rng: RandomSource, reference: date) -> FlagshipTimeline:
    moment = at_utc(reference) + timedelta(hours=rng.random_int(*BUSINESS_HOURS))
    if flagship.status == "closed":
        created_at = moment - timedelta(days=flagship.duration_days + rng.random_int(*CLOSED_PADDING_DAYS))
        closed_at: Optional[datetime] = created_at + timedelta(days=flagship.duration_days)
    else:
        created_at = moment - timedelta(days=rng.random_int(*OPEN_AGE_DAYS))
        closed_at = None
    return FlagshipTimeline(
        created_at=created_at,
        closed_at=closed_at,
        ai_summary_generated_at=created_at + timedelta(hours=rng.random_int(*AI_SUMMARY_DELAY_HOURS)),
    )
