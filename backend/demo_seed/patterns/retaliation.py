"""Retaliation follow-ups linked to earlier closed cases.

Each chain ties an original case to a follow-up report filed 30-90 days
later by the original reporter (or a witness). Chains are planned before the
follow-up cases exist; ``follow_up_case_id`` is filled in once the case is
created.
"""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from ..exceptions import ChainAlreadyFulfilledError, UnknownChainError
from ..random_source import RandomSource
from ..templating import replace_placeholders
from ..utils.datetimes import as_utc, at_utc
from ..utils.numbers import round_half_up


DEFAULT_RETALIATION_TYPE = "performance_review"
DELAY_RANGE_DAYS = (30, 90)
YEARS_RANGE = (2, 7)
REPORTER_LINK_RATE = 0.8


@dataclass(frozen=True)
class RetaliationTypeConfig:
    weight: float
    narratives: Tuple[str, ...]


RETALIATION_TYPES: "OrderedDict[str, RetaliationTypeConfig]" = OrderedDict(
    [
        (
            "performance_review",
            RetaliationTypeConfig(
                0.25,
                (
                    "Shortly after my report, I received my first negative performance review in {years} years.",
                    'My performance rating dropped from "exceeds expectations" to "needs improvement" without explanation.',
                    "My manager started documenting minor issues that were never mentioned before my complaint.",
                    "I was placed on a Performance Improvement Plan within weeks of my report.",
                ),
            ),
        ),
        (
            "schedule_change",
            RetaliationTypeConfig(
                0.15,
                (
                    "My schedule was changed to the least desirable shift immediately after I filed my report.",
                    "I was moved from day shift to night shift despite having the most seniority.",
                    'My approved vacation time was revoked citing "business needs" right after my complaint.',
                    "I was suddenly required to work weekends when I had been exempt for {years} years.",
                ),
            ),
        ),
        (
            "role_reduction",
            RetaliationTypeConfig(
                0.15,
                (
                    "My responsibilities were significantly reduced after I participated in the investigation.",
                    "I was removed from key projects without explanation following my complaint.",
                    "My team was reassigned to another manager, leaving me with no direct reports.",
                    'Client-facing duties were taken away from me citing vague "concerns."',
                ),
            ),
        ),
        (
            "exclusion",
            RetaliationTypeConfig(
                0.15,
                (
                    "Since filing my report, I have been excluded from meetings I previously attended.",
                    "Team communications that included me before my complaint now exclude me.",
                    "I'm no longer invited to team lunches or social events.",
                    "Important information is being shared with everyone except me.",
                ),
            ),
        ),
        (
            "hostile_behavior",
            RetaliationTypeConfig(
                0.12,
                (
                    "The subject of my original complaint has been openly hostile since learning of my report.",
                    "My manager has been giving me the silent treatment since the investigation.",
                    "Colleagues who used to be friendly are now cold and dismissive.",
                    'I overheard comments about being a "troublemaker" after my complaint.',
                ),
            ),
        ),
        (
            "termination_threat",
            RetaliationTypeConfig(
                0.08,
                (
                    'My manager implied my position may be "eliminated" shortly after I filed my report.',
                    'I was told to "watch my back" following my participation in the investigation.',
                    'References were made to "budget constraints" affecting my role after my complaint.',
                    'I was warned that "whistleblowers" rarely last long at this company.',
                ),
            ),
        ),
        (
            "transfer",
            RetaliationTypeConfig(
                0.05,
                (
                    "I was told I would be transferred to a less desirable location after my report.",
                    "My request for transfer was denied, but now I'm being forced to relocate.",
                    "I was moved to a different department away from my established career path.",
                    "The transfer offer came with a significant pay reduction.",
                ),
            ),
        ),
        (
            "workload_increase",
            RetaliationTypeConfig(
                0.05,
                (
                    "My workload has doubled since I filed my complaint while my colleagues remain unchanged.",
                    "I'm being assigned impossible deadlines that set me up for failure.",
                    "Additional responsibilities were piled on me without corresponding support.",
                    "I was given a project with an unrealistic timeline immediately after my report.",
                ),
            ),
        ),
    ]
)


@dataclass
class RetaliationChain:
    original_case_id: str
    retaliation_type: str
    days_after_original: int
    link_type: str  # "reporter" o "witness"
    narrative_snippet: str
    follow_up_case_id: Optional[str] = None
    linked_employee_id: Optional[str] = None

    @property
    def fulfilled(self) -> bool:
        return bool(self.follow_up_case_id)


@dataclass
class RetaliationStats:
    total: int = 0
    fulfilled: int = 0
    by_type: Dict[str, int] = field(default_factory=dict)
    avg_days_after: int = 0


@dataclass(frozen=True)
class RetaliationCaseDetails:
    created_at: datetime
    details: str
    severity: str
    custom_fields: Dict[str, Any]


def select_retaliation_type(rng: RandomSource) -> str:
    """Cumulative-probability roulette over the declared type weights."""
    roll = rng.random_float(0.0, 1.0)
    cumulative = 0.0
    for retaliation_type, config in RETALIATION_TYPES.items():
        cumulative += config.weight
        if roll < cumulative:
            return retaliation_type
    return DEFAULT_RETALIATION_TYPE


def generate_retaliation_narrative(retaliation_type: str, rng: RandomSource) -> str:
    config = RETALIATION_TYPES.get(retaliation_type) or RETALIATION_TYPES[DEFAULT_RETALIATION_TYPE]
    template = rng.pick_random(config.narratives)
    return replace_placeholders(
        template,
        {"years": lambda: str(rng.random_int(*YEARS_RANGE))},
        rng,
    )


def create_chains(
    origin_ids: Sequence[str],
    rng: RandomSource,
    target_count: int = 50,
) -> List[RetaliationChain]:
    """Plan up to ``target_count`` follow-ups over distinct original cases."""
    if not origin_ids:
        return []

    chains: List[RetaliationChain] = []
    for original_case_id in rng.sample(list(dict.fromkeys(origin_ids)), target_count):
        retaliation_type = select_retaliation_type(rng)
        days_after = rng.random_int(*DELAY_RANGE_DAYS)
        link_type = "reporter" if rng.chance(REPORTER_LINK_RATE) else "witness"
        chains.append(
            RetaliationChain(
                original_case_id=original_case_id,
                retaliation_type=retaliation_type,
                days_after_original=days_after,
                link_type=link_type,
                narrative_snippet=generate_retaliation_narrative(retaliation_type, rng),
            )
        )
    return chains


def get_chain_for_case(chains: Sequence[RetaliationChain], original_case_id: str) -> Optional[RetaliationChain]:
    for chain in chains:
        if chain.original_case_id == original_case_id:
            return chain
    return None


def unfulfilled_chains(chains: Sequence[RetaliationChain]) -> List[RetaliationChain]:
    return [chain for chain in chains if not chain.fulfilled]


def fulfill_chain(
    chains: Sequence[RetaliationChain],
    original_case_id: str,
    follow_up_case_id: str,
    *,
    overwrite: bool = False,
    strict: bool = False,
) -> Optional[RetaliationChain]:
    """Record the follow-up case for the chain starting at ``original_case_id``.

    A chain is fulfilled at most once; a second call raises
    :class:`ChainAlreadyFulfilledError` unless ``overwrite`` is set. Unknown
    origins are ignored (``None``) unless ``strict`` is set.
    """
    chain = get_chain_for_case(chains, original_case_id)
    if chain is None:
        if strict:
            raise UnknownChainError(original_case_id)
        return None
    if chain.fulfilled and not overwrite and chain.follow_up_case_id != follow_up_case_id:
        raise ChainAlreadyFulfilledError(original_case_id, chain.follow_up_case_id)
    chain.follow_up_case_id = follow_up_case_id
    return chain


def retaliation_stats(chains: Sequence[RetaliationChain]) -> RetaliationStats:
    by_type = {retaliation_type: 0 for retaliation_type in RETALIATION_TYPES}
    total_days = 0
    for chain in chains:
        by_type[chain.retaliation_type] = by_type.get(chain.retaliation_type, 0) + 1
        total_days += chain.days_after_original
    return RetaliationStats(
        total=len(chains),
        fulfilled=sum(1 for chain in chains if chain.fulfilled),
        by_type=by_type,
        avg_days_after=round_half_up(total_days / len(chains)) if chains else 0,
    )


def generate_retaliation_case_details(
    chain: RetaliationChain,
    original_case_date: Union[date, datetime],
) -> RetaliationCaseDetails:
    if not isinstance(original_case_date, datetime):
        original_case_date = at_utc(original_case_date)
    else:
        original_case_date = as_utc(original_case_date)
    created_at = original_case_date + timedelta(days=chain.days_after_original)

    opener = (
        "I am filing this report because I believe I am experiencing retaliation for my previous complaint."
    )
    case_reference = (
        "My original report (case reference number available on request) was filed approximately "
        f"{chain.days_after_original} days ago."
    )
    details = (
        f"{opener}\n\n{case_reference}\n\n{chain.narrative_snippet}\n\n"
        "I request that this be treated as a retaliation complaint and investigated accordingly."
    )
    severity = "high" if chain.retaliation_type == "termination_threat" else "medium"

    return RetaliationCaseDetails(
        created_at=created_at,
        details=details,
        severity=severity,
        custom_fields={
            "is_retaliation": True,
            "retaliation_type": chain.retaliation_type,
            "original_case_id": chain.original_case_id,
            "days_after_original": chain.days_after_original,
            "link_type": chain.link_type,
        },
    )
