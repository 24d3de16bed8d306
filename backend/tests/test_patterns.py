from datetime import date, datetime, timedelta, timezone

import pytest

from demo_seed.data.flagship_cases import FLAGSHIP_CASES
from demo_seed.exceptions import ChainAlreadyFulfilledError, UnknownChainError
from demo_seed.patterns import (
    BEHAVIOURAL_CATEGORIES,
    RETALIATION_TYPES,
    RetaliationChain,
    create_chains,
    create_manager_hotspots,
    create_repeat_subject_pool,
    fulfill_chain,
    generate_retaliation_case_details,
    generate_retaliation_narrative,
    get_chain_for_case,
    get_escalated_flagship_cases,
    get_flagship_cases_by_category,
    get_flagship_cases_by_status,
    get_flagship_cases_with_external_party,
    get_flagship_stats,
    get_hotspot_for_assignment,
    get_repeat_subject,
    mark_hotspot_assigned,
    mark_subject_assigned,
    plan_flagship_timeline,
    resolve_flagship_category,
    retaliation_stats,
    select_retaliation_type,
    unfulfilled_chains,
)
from demo_seed.random_source import RandomSource


ORIGINS = [f"CASE-2025-{index:05d}" for index in range(1, 101)]


def _chain(origin="CASE-1", retaliation_type="exclusion", days=45):
    return RetaliationChain(
        original_case_id=origin,
        retaliation_type=retaliation_type,
        days_after_original=days,
        link_type="reporter",
        narrative_snippet="Something happened.",
    )


def test_repeat_subject_pool_prefers_behavioural_tags(rng):
    employees = [f"EMP-{index:06d}" for index in range(1, 201)]
    pool = create_repeat_subject_pool(employees, rng, pool_size=20)
    assert len(pool) == 20
    for entry in pool:
        assert 2 <= entry.target_quota <= 5
        assert set(entry.affinity_tags) <= set(BEHAVIOURAL_CATEGORIES)

    subject = get_repeat_subject(pool, "harassment")
    assert subject is not None
    before = subject.current_count
    mark_subject_assigned(pool, subject.member_id)
    assert subject.current_count == before + 1


def test_manager_hotspots_fill_their_quota(rng):
    managers = [f"EMP-{index:06d}" for index in range(1, 31)]
    hotspots = create_manager_hotspots(managers, rng, count=3, quota_range=(5, 10))
    capacity = sum(entry.target_quota for entry in hotspots)
    assigned = 0
    while True:
        hotspot = get_hotspot_for_assignment(hotspots, "retaliation")
        if hotspot is None:
            break
        mark_hotspot_assigned(hotspots, hotspot.member_id)
        assigned += 1
    assert assigned == capacity
    assert 15 <= capacity <= 30


def test_select_retaliation_type_uses_known_types(rng):
    seen = {select_retaliation_type(rng) for _ in range(500)}
    assert seen <= set(RETALIATION_TYPES)
    assert "performance_review" in seen


def test_retaliation_narrative_has_no_tokens(rng):
    for retaliation_type in list(RETALIATION_TYPES) + ["not_a_type"]:
        for _ in range(10):
            narrative = generate_retaliation_narrative(retaliation_type, rng)
            assert "{" not in narrative


def test_create_chains_targets_distinct_origins(rng):
    chains = create_chains(ORIGINS, rng, target_count=50)
    assert len(chains) == 50
    assert len({chain.original_case_id for chain in chains}) == 50
    for chain in chains:
        assert 30 <= chain.days_after_original <= 90
        assert chain.link_type in ("reporter", "witness")
        assert chain.retaliation_type in RETALIATION_TYPES
        assert not chain.fulfilled


def test_create_chains_caps_at_available_origins(rng):
    assert len(create_chains(ORIGINS[:5], rng, target_count=50)) == 5
    assert create_chains([], rng) == []


def test_create_chains_is_reproducible():
    first = create_chains(ORIGINS, RandomSource(5200), target_count=10)
    second = create_chains(ORIGINS, RandomSource(5200), target_count=10)
    assert first == second


def test_fulfill_and_query_chains():
    chains = [_chain("CASE-1"), _chain("CASE-2")]
    assert get_chain_for_case(chains, "CASE-3") is None

    chain = fulfill_chain(chains, "CASE-1", "RET-1")
    assert chain.follow_up_case_id == "RET-1"
    assert unfulfilled_chains(chains) == [chains[1]]

    # Repetir el mismo vínculo es idempotente
    assert fulfill_chain(chains, "CASE-1", "RET-1") is chain


def test_double_fulfil_requires_overwrite():
    chains = [_chain("CASE-1")]
    fulfill_chain(chains, "CASE-1", "RET-1")
    with pytest.raises(ChainAlreadyFulfilledError):
        fulfill_chain(chains, "CASE-1", "RET-2")
    assert chains[0].follow_up_case_id == "RET-1"

    fulfill_chain(chains, "CASE-1", "RET-2", overwrite=True)
    assert chains[0].follow_up_case_id == "RET-2"


def test_fulfil_unknown_origin():
    chains = [_chain("CASE-1")]
    assert fulfill_chain(chains, "CASE-404", "RET-1") is None
    with pytest.raises(UnknownChainError):
        fulfill_chain(chains, "CASE-404", "RET-1", strict=True)


def test_retaliation_stats():
    chains = [_chain("A", "exclusion", 30), _chain("B", "exclusion", 60), _chain("C", "transfer", 91)]
    fulfill_chain(chains, "A", "RET-A")
    stats = retaliation_stats(chains)
    assert stats.total == 3
    assert stats.fulfilled == 1
    assert stats.by_type["exclusion"] == 2
    assert stats.by_type["transfer"] == 1
    assert stats.by_type["performance_review"] == 0
    assert stats.avg_days_after == 60

    empty = retaliation_stats([])
    assert empty.total == 0
    assert empty.avg_days_after == 0


def test_retaliation_average_delay_rounds_half_up():
    chains = [_chain("A", "exclusion", 30), _chain("B", "transfer", 31)]
    assert retaliation_stats(chains).avg_days_after == 31


def test_case_details_from_naive_datetime_are_utc():
    closed_at = datetime(2025, 3, 1, 14, 30)
    details = generate_retaliation_case_details(_chain("CASE-1", "exclusion", 30), closed_at)
    assert details.created_at == datetime(2025, 3, 31, 14, 30, tzinfo=timezone.utc)
    assert details.created_at.tzinfo is not None


def test_case_details_for_follow_up():
    details = generate_retaliation_case_details(_chain("CASE-1", "termination_threat", 40), date(2025, 1, 1))
    assert details.created_at == datetime(2025, 2, 10, tzinfo=timezone.utc)
    assert details.severity == "high"
    assert "40 days ago" in details.details
    assert "Something happened." in details.details
    assert details.custom_fields["original_case_id"] == "CASE-1"
    assert details.custom_fields["is_retaliation"] is True

    medium = generate_retaliation_case_details(_chain("CASE-2", "exclusion", 30), datetime(2025, 1, 1, 9, 30))
    assert medium.severity == "medium"
    assert medium.created_at == datetime(2025, 1, 31, 9, 30, tzinfo=timezone.utc)


def test_flagship_queries():
    assert len(FLAGSHIP_CASES) == 10
    assert len({case.reference_number for case in FLAGSHIP_CASES}) == 10
    assert [case.name for case in get_flagship_cases_by_category("financial misconduct")] == [
        "Q3 Financial Irregularities",
        "Executive Expense Report",
    ]
    assert len(get_flagship_cases_by_status("CLOSED")) == 6
    assert len(get_flagship_cases_with_external_party()) == 6
    assert len(get_escalated_flagship_cases()) == 10

    stats = get_flagship_stats()
    assert (stats.total, stats.open, stats.closed) == (10, 4, 6)
    assert stats.with_external_party == 6
    assert stats.avg_risk_score == 89


def test_flagship_category_resolution():
    categories = [("harassment", "Harassment"), ("financial_misconduct", "Fraud"), ("safety", "Safety Violation")]
    by_name = {case.name: case for case in FLAGSHIP_CASES}
    assert resolve_flagship_category(by_name["Vendor Kickback Scheme"], categories) == "financial_misconduct"
    assert resolve_flagship_category(by_name["Q3 Financial Irregularities"], categories) == "financial_misconduct"
    assert resolve_flagship_category(by_name["Manufacturing Safety Incident"], categories) == "safety"
    # Sin coincidencia se usa la primera categoría configurada
    assert resolve_flagship_category(by_name["Workplace Violence Threat"], categories) == "harassment"
    assert resolve_flagship_category(by_name["Workplace Violence Threat"], []) is None


def test_flagship_timeline(rng):
    reference = date(2026, 2, 2)
    end_of_reference = datetime(2026, 2, 2, 23, 59, 59, tzinfo=timezone.utc)
    for flagship in FLAGSHIP_CASES:
        timeline = plan_flagship_timeline(flagship, rng, reference)
        assert timeline.created_at.tzinfo is not None
        assert timeline.created_at <= end_of_reference
        hours = (timeline.ai_summary_generated_at - timeline.created_at).total_seconds() / 3600
        assert 1 <= hours <= 4
        if flagship.status == "closed":
            assert timeline.closed_at - timeline.created_at == timedelta(days=flagship.duration_days)
            assert timeline.closed_at <= end_of_reference - timedelta(days=4)
        else:
            assert timeline.closed_at is None
