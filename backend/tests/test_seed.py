from datetime import timedelta, timezone

from sqlmodel import Session, select

from demo_seed.db import build_engine, init_db
from demo_seed.models import Activity, Category, CaseStatusEnum, ComplianceCase, Employee
from demo_seed.seed import RETALIATION_MIN_AGE_DAYS, activity_stats, ensure_demo_data, verify_demo_data
from demo_seed.utils.datetimes import as_utc, at_utc, end_of_day_utc


def test_ensure_demo_data_populates_every_table(session, small_settings):
    summary = ensure_demo_data(session, small_settings)

    assert summary.categories == len(small_settings.categories)
    assert summary.employees == 120
    assert summary.cases == 150
    assert summary.created == {
        "categories": len(small_settings.categories),
        "employees": 120,
        "cases": 150,
        "retaliation_cases": summary.retaliation_cases,
        "activities": summary.activities,
    }
    assert 0 < summary.retaliation_cases <= small_settings.volumes.retaliation_chains

    report = verify_demo_data(session)
    assert report.employees == 120
    assert report.cases == 150 + summary.retaliation_cases
    assert report.open_cases + report.closed_cases == report.cases
    assert report.retaliation_cases == summary.retaliation_cases
    assert report.linked_retaliation_cases == summary.retaliation_cases
    assert report.repeat_subject_cases == summary.repeat_subject_cases
    assert report.hotspot_cases == summary.hotspot_cases


def test_seeding_is_idempotent(session, small_settings):
    first = ensure_demo_data(session, small_settings)
    second = ensure_demo_data(session, small_settings)

    assert second.created == {
        "categories": 0,
        "employees": 0,
        "cases": 0,
        "retaliation_cases": 0,
        "activities": 0,
    }
    assert second.activities == first.activities
    assert second.cases == first.cases
    report = verify_demo_data(session)
    assert report.cases == 150 + first.retaliation_cases


def test_same_seed_produces_same_records(small_settings, tmp_path):
    def _snapshot(name):
        engine = build_engine(f"sqlite:///{tmp_path / name}", echo=False)
        init_db(engine)
        with Session(engine) as session:
            ensure_demo_data(session, small_settings)
            cases = session.exec(select(ComplianceCase).order_by(ComplianceCase.reference_number)).all()
            rows = [(case.reference_number, case.status, case.details, case.created_at) for case in cases]
        engine.dispose()
        return rows

    assert _snapshot("a.db") == _snapshot("b.db")


def test_employee_hierarchy(session, small_settings):
    ensure_demo_data(session, small_settings)
    employees = session.exec(select(Employee)).all()
    by_id = {employee.id: employee for employee in employees}

    ceo = next(employee for employee in employees if employee.employee_number == "EMP-000001")
    assert ceo.job_level == "C-Suite"
    assert ceo.manager_id is None

    for employee in employees:
        assert employee.email.endswith("@acme.example.com")
        if employee.manager_id is not None:
            assert employee.manager_id in by_id
            assert employee.manager_id != employee.id


def test_case_invariants(session, small_settings):
    ensure_demo_data(session, small_settings)
    reference = end_of_day_utc(small_settings.current_date)
    categories = {category.id for category in session.exec(select(Category)).all()}

    cases = session.exec(select(ComplianceCase)).all()
    for case in cases:
        assert case.category_id in categories
        assert "{" not in case.details
        assert as_utc(case.created_at) <= reference
        if case.status == CaseStatusEnum.closed:
            assert case.closed_at is not None
            assert as_utc(case.closed_at) >= as_utc(case.created_at)
            assert as_utc(case.closed_at) <= reference
        if not case.is_retaliation:
            assert case.reference_number.startswith("CASE-")


def test_retaliation_cases_link_to_old_closed_cases(session, small_settings):
    ensure_demo_data(session, small_settings)
    retaliation_category = session.exec(select(Category).where(Category.code == "retaliation")).one()
    cutoff = at_utc(small_settings.current_date - timedelta(days=RETALIATION_MIN_AGE_DAYS))

    follow_ups = session.exec(select(ComplianceCase).where(ComplianceCase.is_retaliation == True)).all()  # noqa: E712
    assert follow_ups
    originals = set()
    for follow_up in follow_ups:
        original = session.get(ComplianceCase, follow_up.original_case_id)
        assert original is not None
        assert original.status == CaseStatusEnum.closed
        assert as_utc(original.closed_at) <= cutoff
        assert 30 <= follow_up.days_after_original <= 90
        expected = as_utc(original.closed_at) + timedelta(days=follow_up.days_after_original)
        assert as_utc(follow_up.created_at) == expected
        assert follow_up.category_id == retaliation_category.id
        assert follow_up.reference_number.startswith("RET-")
        assert "retaliation" in follow_up.tag_list
        originals.add(original.id)
    assert len(originals) == len(follow_ups)


def test_different_seed_changes_output(session, small_settings, tmp_path):
    ensure_demo_data(session, small_settings)
    statement = select(Employee).order_by(Employee.employee_number)
    baseline = [employee.full_name for employee in session.exec(statement).all()]

    other_settings = small_settings.model_copy(update={"master_seed": 1234})
    engine = build_engine(f"sqlite:///{tmp_path / 'other.db'}", echo=False)
    init_db(engine)
    with Session(engine) as other_session:
        ensure_demo_data(other_session, other_settings)
        names = [employee.full_name for employee in other_session.exec(statement).all()]
    engine.dispose()
    assert len(names) == len(baseline)
    assert names != baseline


def test_new_case_rows_default_to_aware_timestamps():
    case = ComplianceCase(reference_number="CASE-2026-99999", details="Short report.")
    assert case.created_at.tzinfo is not None
    assert case.created_at.utcoffset() == timedelta(0)


def test_seeded_timestamps_round_trip_as_utc(session, small_settings):
    ensure_demo_data(session, small_settings)
    cases = session.exec(select(ComplianceCase)).all()
    assert cases
    for case in cases:
        created_at = as_utc(case.created_at)
        assert created_at.tzinfo == timezone.utc
        assert case.ai_summary
        assert 0 <= case.ai_risk_score <= 100
        assert as_utc(case.ai_summary_generated_at) > created_at


def test_flagship_cases_are_stored_first(session, small_settings):
    summary = ensure_demo_data(session, small_settings)
    assert summary.flagship_cases == 10

    flagships = session.exec(select(ComplianceCase).where(ComplianceCase.tags.contains("flagship"))).all()
    by_reference = {case.reference_number: case for case in flagships}
    assert len(by_reference) == 10

    chicago = by_reference["CASE-2026-CHI-0001"]
    assert chicago.summary == "The Chicago Warehouse Incident"
    assert chicago.ai_risk_score == 85
    assert chicago.status == CaseStatusEnum.open
    assert chicago.closed_at is None

    kickback = by_reference["CASE-2025-FRD-0001"]
    assert kickback.status == CaseStatusEnum.closed
    assert as_utc(kickback.closed_at) - as_utc(kickback.created_at) == timedelta(days=89)
    assert kickback.complexity == "complex"

    report = verify_demo_data(session)
    assert report.flagship_cases == 10
    assert report.ai_enriched_cases == report.cases
    # Los casos regulares continúan la numeración después de los insignia
    regular = [case.reference_number for case in session.exec(select(ComplianceCase)).all()]
    assert not any(reference.endswith("-00001") for reference in regular if reference.startswith("CASE-2"))


def test_flagship_volume_is_capped_by_case_target(session, small_settings):
    tiny = small_settings.model_copy(
        update={"volumes": small_settings.volumes.model_copy(update={"cases": 4, "retaliation_chains": 0})}
    )
    summary = ensure_demo_data(session, tiny)
    assert summary.flagship_cases == 4
    assert summary.cases == 4


def test_activity_timelines_stay_within_case_lifetime(session, small_settings):
    summary = ensure_demo_data(session, small_settings)
    cases = {case.id: case for case in session.exec(select(ComplianceCase)).all()}
    activities = session.exec(select(Activity)).all()

    assert summary.activities == len(activities) > 0
    reference = end_of_day_utc(small_settings.current_date)
    created_per_case = {}
    for activity in activities:
        case = cases[activity.case_id]
        moment = as_utc(activity.created_at)
        assert moment >= as_utc(case.created_at)
        assert moment <= (as_utc(case.closed_at) if case.closed_at else reference)
        assert activity.activity_key.startswith(f"{case.reference_number}:")
        if activity.action == "created":
            created_per_case[case.id] = created_per_case.get(case.id, 0) + 1
        if activity.actor_type == "system":
            assert activity.actor_employee_id is None
            assert activity.ip_address is None
    assert created_per_case == {case_id: 1 for case_id in cases}

    stats = activity_stats(session)
    assert stats.total == len(activities)
    assert stats.by_entity_type == {"case": len(activities)}
    assert stats.by_action_category["create"] >= len(cases)
    assert sum(stats.by_actor_type.values()) == len(activities)
    assert verify_demo_data(session).activities == len(activities)


def test_closed_cases_log_their_closure(session, small_settings):
    ensure_demo_data(session, small_settings)
    closed = session.exec(select(ComplianceCase).where(ComplianceCase.status == CaseStatusEnum.closed)).all()
    closures = session.exec(select(Activity).where(Activity.action == "status_changed")).all()
    closing_cases = {activity.case_id for activity in closures if '"new": "closed"' in (activity.changes or "")}
    assert closing_cases == {case.id for case in closed}
