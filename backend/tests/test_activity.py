import json
from datetime import datetime, timedelta, timezone

import pytest

from demo_seed.activity import (
    COMPLIANCE_OFFICER,
    INVESTIGATOR,
    TRIAGE_LEAD,
    CaseTimeline,
    StaffMember,
    build_compliance_staff,
    format_template,
    generate_case_activities,
    summarize_actions,
)
from demo_seed.random_source import RandomSource


REFERENCE = datetime(2026, 2, 2, 23, 59, tzinfo=timezone.utc)
EMPLOYEES = [(index, f"Employee {index}") for index in range(1, 41)]


@pytest.fixture()
def staff():
    return build_compliance_staff(EMPLOYEES, RandomSource(1))


def _closed_case(reference_number="CASE-2025-00042"):
    created_at = datetime(2025, 6, 1, 10, 0, tzinfo=timezone.utc)
    return CaseTimeline(
        case_id=42,
        reference_number=reference_number,
        status="closed",
        created_at=created_at,
        closed_at=created_at + timedelta(days=40),
    )


def test_staff_fills_fixed_roles_first(staff):
    roles = [member.role for member in staff]
    assert roles[:4] == [COMPLIANCE_OFFICER, "system_admin", TRIAGE_LEAD, TRIAGE_LEAD]
    assert set(roles[4:]) == {INVESTIGATOR}
    assert len(staff) == 12
    assert len({member.employee_id for member in staff}) == 12


def test_small_organisations_get_a_smaller_team():
    staff = build_compliance_staff(EMPLOYEES[:3], RandomSource(1))
    assert [member.role for member in staff] == [COMPLIANCE_OFFICER, "system_admin", TRIAGE_LEAD]


def test_format_template_replaces_every_occurrence():
    assert format_template("{a} and {a} by {b}", {"a": "x", "b": "y"}) == "x and x by y"


def test_closed_case_timeline(staff):
    case = _closed_case()
    entries = generate_case_activities(case, staff, RandomSource(5), REFERENCE)

    assert entries[0]["action"] == "created"
    assert entries[0]["created_at"] == case.created_at
    assert entries[0]["action_description"] == "Case CASE-2025-00042 created from intake"
    assert [entry["activity_key"] for entry in entries] == [
        f"CASE-2025-00042:{index:03d}" for index in range(1, len(entries) + 1)
    ]
    moments = [entry["created_at"] for entry in entries]
    assert moments == sorted(moments)
    assert all(case.created_at <= moment <= case.closed_at for moment in moments)

    status_changes = [json.loads(entry["changes"]) for entry in entries if entry["action"] == "status_changed"]
    assert {"status": {"old": "new", "new": "open"}} in status_changes
    assert {"status": {"old": "open", "new": "closed"}} in status_changes


def test_new_cases_are_never_assigned_or_transitioned(staff):
    rng = RandomSource(8)
    created_at = datetime(2026, 1, 30, 9, 0, tzinfo=timezone.utc)
    for index in range(50):
        case = CaseTimeline(index, f"CASE-2026-{index:05d}", "new", created_at)
        actions = summarize_actions(generate_case_activities(case, staff, rng, REFERENCE))
        assert actions["created"] == 1
        assert "assigned" not in actions
        assert "status_changed" not in actions
        # Sin cierre, ninguna entrada pasa de la fecha de referencia
        for entry in generate_case_activities(case, staff, rng, REFERENCE):
            assert entry["created_at"] <= REFERENCE


def test_actor_types_and_request_metadata(staff):
    rng = RandomSource(13)
    entries = []
    for index in range(200):
        entries.extend(generate_case_activities(_closed_case(f"CASE-2025-{index:05d}"), staff, rng, REFERENCE))

    actions = summarize_actions(entries)
    assert actions["created"] == 200
    for action in ("ai_enrichment", "assigned", "note_added", "priority_changed"):
        assert actions[action] > 0

    names = {member.name for member in staff}
    for entry in entries:
        assert entry["request_id"]
        if entry["actor_type"] == "user":
            assert entry["actor_name"] in names
            assert entry["ip_address"].split(".")[0] in {"10", "172", "192"}
            assert entry["user_agent"].startswith("Mozilla/5.0")
        elif entry["actor_type"] == "ai":
            assert entry["actor_name"] == "Claude AI"
            assert json.loads(entry["context"])["modelVersion"] == "claude-3-opus"
            assert entry["action_category"] == "ai"
        else:
            assert entry["actor_name"] == "System"
            assert entry["action"] == "sla_warning"
            assert entry["ip_address"] is None


def test_priority_changes_move_upwards(staff):
    rng = RandomSource(21)
    levels = ["LOW", "MEDIUM", "HIGH", "CRITICAL"]
    changes = []
    for index in range(300):
        for entry in generate_case_activities(_closed_case(f"CASE-2025-{index:05d}"), staff, rng, REFERENCE):
            if entry["action"] == "priority_changed":
                changes.append(json.loads(entry["changes"])["priority"])
    assert changes
    for change in changes:
        assert levels.index(change["new"]) > levels.index(change["old"])


def test_timeline_is_reproducible(staff):
    case = _closed_case()
    first = generate_case_activities(case, staff, RandomSource(99), REFERENCE)
    second = generate_case_activities(case, staff, RandomSource(99), REFERENCE)
    assert first == second


def test_no_staff_means_no_activity():
    assert generate_case_activities(_closed_case(), [], RandomSource(1), REFERENCE) == []


def test_missing_roles_fall_back_to_whole_team():
    staff = [StaffMember(employee_id=7, name="Solo Analyst", role=INVESTIGATOR)]
    rng = RandomSource(2)
    for index in range(40):
        for entry in generate_case_activities(_closed_case(f"CASE-2025-{index:05d}"), staff, rng, REFERENCE):
            if entry["actor_type"] == "user":
                assert entry["actor_employee_id"] == 7
