from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from typing import Any, Dict, List, Optional, Sequence, Type

from sqlalchemy import func
from sqlmodel import Session, SQLModel, select

from . import db
from .config import (
    ACTIVITY_SEED_OFFSET,
    CASE_SEED_OFFSET,
    EMPLOYEE_SEED_OFFSET,
    MANAGER_HOTSPOT_SEED_OFFSET,
    NARRATIVE_SEED_OFFSET,
    REPEAT_SUBJECT_SEED_OFFSET,
    RETALIATION_SEED_OFFSET,
    Settings,
    settings as default_settings,
)
from .activity import CaseTimeline, build_compliance_staff, generate_case_activities, summarize_actions
from .data.flagship_cases import FLAGSHIP_CASES
from .data.narrative_templates import build_placeholder_values
from .enrichment import ai_summary_timestamp, generate_ai_risk_score, generate_ai_summary
from .models import (
    Activity,
    Category,
    CaseStatusEnum,
    ComplianceCase,
    Employee,
)
from .patterns import (
    create_chains,
    create_manager_hotspots,
    create_repeat_subject_pool,
    fulfill_chain,
    generate_retaliation_case_details,
    get_hotspot_for_assignment,
    get_repeat_subject,
    mark_hotspot_assigned,
    mark_subject_assigned,
    plan_flagship_timeline,
    resolve_flagship_category,
    retaliation_stats,
)
from .pools import PoolEntry, pool_stats
from .random_source import RandomSource
from .templating import generate_minimal_narrative, generate_narrative, generate_unicode_narrative
from .utils.datetimes import as_utc, at_utc, end_of_day_utc
from .utils.seasonality import generate_seasonal_historical_date


logger = logging.getLogger(__name__)

PROGRESS_EVERY = 500
SUMMARY_LENGTH = 200
LEVEL_RANK = {"IC": 0, "Manager": 1, "Director": 2, "VP": 3, "SVP": 4, "C-Suite": 5}
PRIORITY_TO_SEVERITY = {"critical": "high", "high": "high", "medium": "medium", "low": "low"}
# Solo casos cerrados hace al menos este número de días pueden originar represalias
RETALIATION_MIN_AGE_DAYS = 90
UNICODE_NARRATIVE_RATE = 0.01
MINIMAL_NARRATIVE_RATE = 0.005


@dataclass
class SeedSummary:
    categories: int = 0
    employees: int = 0
    cases: int = 0
    retaliation_cases: int = 0
    created: Dict[str, int] = field(default_factory=dict)
    repeat_subject_cases: int = 0
    hotspot_cases: int = 0
    retaliation_by_type: Dict[str, int] = field(default_factory=dict)
    avg_retaliation_delay_days: int = 0
    flagship_cases: int = 0
    activities: int = 0
    activities_by_action: Dict[str, int] = field(default_factory=dict)


@dataclass
class DemoPatterns:
    repeat_subjects: List[PoolEntry]
    manager_hotspots: List[PoolEntry]


def ensure_demo_data(
    session: Optional[Session] = None,
    seed_settings: Optional[Settings] = None,
    *,
    strict: Optional[bool] = None,
) -> SeedSummary:
    """Populate the demo tenant with deterministic categories, employees and cases.

    Every step is idempotent: records are keyed by their natural identifier and
    existing rows are left untouched, so re-running after a failure is safe.
    """
    cfg = seed_settings or default_settings
    strict_mode = cfg.strict_mode if strict is None else strict
    owns_session = session is None
    session = session or Session(db.engine)
    summary = SeedSummary()
    try:
        logger.info("Seeding demo data (master seed %s, reference date %s)", cfg.master_seed, cfg.current_date)
        category_map = _ensure_categories(session, cfg, summary)
        employee_plan = _ensure_employees(session, cfg, summary)
        patterns = _build_patterns(employee_plan, cfg)
        case_plan = _ensure_cases(session, cfg, category_map, employee_plan, patterns, summary, strict_mode)
        _ensure_retaliation_cases(session, cfg, category_map, case_plan, summary, strict_mode)
        _ensure_activity(session, cfg, summary)

        summary.repeat_subject_cases = pool_stats(patterns.repeat_subjects).assigned
        summary.hotspot_cases = pool_stats(patterns.manager_hotspots).assigned
        logger.info(
            "Demo data ready: %s categories, %s employees, %s cases (%s retaliation follow-ups), %s activities",
            summary.categories,
            summary.employees,
            summary.cases,
            summary.retaliation_cases,
            summary.activities,
        )
        return summary
    finally:
        if owns_session:
            session.close()


def _persist_in_batches(
    session: Session,
    model: Type[SQLModel],
    records: Sequence[Dict[str, Any]],
    key_field: str,
    batch_size: int,
) -> int:
    """Insert the records whose natural key is not stored yet, one commit per chunk."""
    key_column = getattr(model, key_field)
    existing = set(session.exec(select(key_column)).all())
    pending = [item for item in records if item[key_field] not in existing]
    for start in range(0, len(pending), batch_size):
        chunk = pending[start:start + batch_size]
        session.add_all([model(**item) for item in chunk])
        session.commit()
        logger.debug("Stored %s %s rows (%s/%s)", len(chunk), model.__name__, start + len(chunk), len(pending))
    return len(pending)


def _load_map(session: Session, model: Type[SQLModel], key_field: str) -> Dict[str, Any]:
    return {getattr(row, key_field): row for row in session.exec(select(model)).all()}


def _ensure_categories(session: Session, cfg: Settings, summary: SeedSummary) -> Dict[str, Category]:
    records = [
        {
            "code": item.code,
            "name": item.name,
            "weight": item.weight,
            "anonymous_rate": item.anonymous_rate,
        }
        for item in cfg.categories
    ]
    created = _persist_in_batches(session, Category, records, "code", cfg.batch_size)
    summary.created["categories"] = created
    mapping = _load_map(session, Category, "code")
    summary.categories = len(mapping)
    logger.info("Categories: %s stored, %s new", len(mapping), created)
    return mapping


def _employee_email(first_name: str, last_name: str, index: int) -> str:
    local = f"{first_name}.{last_name}".lower().replace(" ", "").replace("'", "")
    return f"{local}.{index}@acme.example.com"


def _ensure_employees(session: Session, cfg: Settings, summary: SeedSummary) -> List[Dict[str, Any]]:
    rng = RandomSource.for_offset(cfg.master_seed, EMPLOYEE_SEED_OFFSET)
    org = cfg.organization
    divisions = [(item.value, item.weight) for item in org.divisions]
    regions = [(item.value, item.weight) for item in org.region_weights]
    levels = [(item.value, item.weight) for item in org.job_levels]

    plan: List[Dict[str, Any]] = []
    for index in range(1, cfg.volumes.employees + 1):
        first_name, last_name = rng.first_last_name()
        region = rng.weighted_random(regions)
        # El primer empleado siempre es el CEO para garantizar una raíz jerárquica
        job_level = "C-Suite" if index == 1 else rng.weighted_random(levels)
        plan.append(
            {
                "employee_number": f"EMP-{index:06d}",
                "email": _employee_email(first_name, last_name, index),
                "full_name": f"{first_name} {last_name}",
                "division": rng.weighted_random(divisions),
                "region": region,
                "city": rng.pick_random(org.cities_by_region[region]),
                "job_level": job_level,
            }
        )

    _plan_reporting_lines(plan, rng)

    created = _persist_in_batches(
        session,
        Employee,
        [{key: value for key, value in item.items() if key != "manager_number"} for item in plan],
        "employee_number",
        cfg.batch_size,
    )
    employees = _load_map(session, Employee, "employee_number")
    _link_managers(session, plan, employees, cfg.batch_size)

    summary.created["employees"] = created
    summary.employees = len(employees)
    for item in plan:
        item["id"] = employees[item["employee_number"]].id
    logger.info("Employees: %s stored, %s new", len(employees), created)
    return plan


def _plan_reporting_lines(plan: List[Dict[str, Any]], rng: RandomSource) -> None:
    by_rank: Dict[int, List[Dict[str, Any]]] = {}
    for item in plan:
        by_rank.setdefault(LEVEL_RANK[item["job_level"]], []).append(item)

    for item in plan:
        rank = LEVEL_RANK[item["job_level"]]
        item["manager_number"] = None
        for higher in range(rank + 1, max(LEVEL_RANK.values()) + 1):
            candidates = by_rank.get(higher) or []
            if not candidates:
                continue
            same_division = [c for c in candidates if c["division"] == item["division"]]
            manager = rng.pick_random(same_division or candidates)
            item["manager_number"] = manager["employee_number"]
            break


def _link_managers(
    session: Session,
    plan: Sequence[Dict[str, Any]],
    employees: Dict[str, Employee],
    batch_size: int,
) -> None:
    dirty = 0
    for item in plan:
        manager_number = item.get("manager_number")
        if not manager_number:
            continue
        employee = employees[item["employee_number"]]
        manager = employees.get(manager_number)
        if manager is None or employee.manager_id is not None:
            continue
        employee.manager_id = manager.id
        session.add(employee)
        dirty += 1
        if dirty % batch_size == 0:
            session.commit()
    if dirty:
        session.commit()


def _build_patterns(employee_plan: Sequence[Dict[str, Any]], cfg: Settings) -> DemoPatterns:
    category_codes = [item.code for item in cfg.categories]
    employee_numbers = [item["employee_number"] for item in employee_plan if item["job_level"] == "IC"]
    manager_numbers = [item["employee_number"] for item in employee_plan if item["job_level"] == "Manager"]

    repeat_subjects = create_repeat_subject_pool(
        employee_numbers,
        RandomSource.for_offset(cfg.master_seed, REPEAT_SUBJECT_SEED_OFFSET),
        pool_size=cfg.volumes.repeat_subjects,
        categories=category_codes,
    )
    manager_hotspots = create_manager_hotspots(
        manager_numbers,
        RandomSource.for_offset(cfg.master_seed, MANAGER_HOTSPOT_SEED_OFFSET),
        count=cfg.volumes.hotspot_managers,
        categories=category_codes,
    )
    logger.info(
        "Patterns: %s repeat subjects (capacity %s), %s hotspot managers (capacity %s)",
        len(repeat_subjects),
        pool_stats(repeat_subjects).capacity,
        len(manager_hotspots),
        pool_stats(manager_hotspots).capacity,
    )
    return DemoPatterns(repeat_subjects=repeat_subjects, manager_hotspots=manager_hotspots)


def _at_random_time(day: date, rng: RandomSource) -> datetime:
    return at_utc(day, time(rng.random_int(7, 19), rng.random_int(0, 59)))


def _plan_flagship_cases(
    cfg: Settings,
    rng: RandomSource,
    limit: int,
) -> List[Dict[str, Any]]:
    categories = [(item.code, item.name) for item in cfg.categories]
    plan: List[Dict[str, Any]] = []
    for flagship in FLAGSHIP_CASES[:limit]:
        timeline = plan_flagship_timeline(flagship, rng, cfg.current_date)
        plan.append(
            {
                "reference_number": flagship.reference_number,
                "status": flagship.status,
                "priority": "high",
                "severity": flagship.severity,
                "complexity": "complex" if flagship.investigation_count > 1 else "medium",
                "category_code": resolve_flagship_category(flagship, categories),
                "subject_number": None,
                "manager_number": None,
                "reporter_anonymous": "Anonymous" in flagship.name,
                "details": flagship.narrative,
                "summary": flagship.name,
                "tags": ",".join(["flagship", flagship.category.lower()]),
                "ai_summary": flagship.ai_summary,
                "ai_summary_generated_at": timeline.ai_summary_generated_at,
                "ai_risk_score": flagship.ai_risk_score,
                "created_at": timeline.created_at,
                "closed_at": timeline.closed_at,
            }
        )
    return plan


def _ensure_cases(
    session: Session,
    cfg: Settings,
    category_map: Dict[str, Category],
    employee_plan: Sequence[Dict[str, Any]],
    patterns: DemoPatterns,
    summary: SeedSummary,
    strict: bool,
) -> List[Dict[str, Any]]:
    rng = RandomSource.for_offset(cfg.master_seed, CASE_SEED_OFFSET)
    narrative_rng = RandomSource.for_offset(cfg.master_seed, NARRATIVE_SEED_OFFSET)
    placeholder_values = build_placeholder_values(narrative_rng, cfg.current_date)
    dist = cfg.case_distributions
    reference = cfg.current_date

    statuses = [(item.value, item.weight) for item in dist.status]
    priorities = [(item.value, item.weight) for item in dist.priority]
    complexities = [(item.value, item.weight) for item in dist.complexity]
    categories = cfg.category_weights()
    category_rates = {item.code: item.anonymous_rate for item in cfg.categories}
    category_names = {item.code: item.name for item in cfg.categories}
    employees_by_number = {item["employee_number"]: item for item in employee_plan}
    employee_numbers = list(employees_by_number)

    target = cfg.volumes.cases
    # Los casos insignia se guardan primero y cuentan dentro del volumen total
    plan = _plan_flagship_cases(cfg, rng, target)
    summary.flagship_cases = len(plan)
    logger.info("Generating %s cases (%s flagship)...", target, len(plan))
    for index in range(len(plan) + 1, target + 1):
        if index % PROGRESS_EVERY == 0:
            logger.info("  Progress: %s/%s cases generated", index, target)

        category_code = rng.weighted_random(categories)
        status = rng.weighted_random(statuses)
        priority = rng.weighted_random(priorities)
        complexity = rng.weighted_random(complexities)

        if status == CaseStatusEnum.closed.value:
            created_day, _ = generate_seasonal_historical_date(rng, reference, cfg.history_years)
        else:
            created_day = rng.recent_date(90, reference)
        created_at = _at_random_time(created_day, rng)

        closed_at = None
        if status == CaseStatusEnum.closed.value:
            low, high = dist.duration_days.get(complexity, (5, 15))
            closed_at = created_at + timedelta(days=rng.random_int(low, high))
            # Un cierre nunca puede quedar en el futuro respecto a la fecha de referencia
            if closed_at.date() > reference:
                closed_at = max(created_at, _at_random_time(reference - timedelta(days=rng.random_int(1, 30)), rng))

        tags: List[str] = []
        if rng.chance(UNICODE_NARRATIVE_RATE):
            details = generate_unicode_narrative(narrative_rng)
            anonymity_rate = category_rates.get(category_code, 0.4)
            tags.append("edge-case")
        elif rng.chance(MINIMAL_NARRATIVE_RATE):
            details = generate_minimal_narrative()
            anonymity_rate = 0.0
            tags.append("edge-case")
        else:
            result = generate_narrative(
                category_code,
                narrative_rng,
                values=placeholder_values,
                reference_date=reference,
            )
            details = result.narrative
            anonymity_rate = result.suggested_anonymity_rate

        subject_number = None
        if rng.chance(dist.repeat_subject_rate):
            repeat_subject = get_repeat_subject(patterns.repeat_subjects, category_code)
            if repeat_subject is not None:
                mark_subject_assigned(patterns.repeat_subjects, repeat_subject.member_id, strict=strict)
                subject_number = repeat_subject.member_id
                tags.append("repeat-subject")
        if subject_number is None and employee_numbers:
            subject_number = rng.pick_random(employee_numbers)

        manager_number = None
        hotspot = get_hotspot_for_assignment(patterns.manager_hotspots, category_code)
        if hotspot is not None:
            mark_hotspot_assigned(patterns.manager_hotspots, hotspot.member_id, strict=strict)
            manager_number = hotspot.member_id
            tags.append("hotspot-team")
        elif subject_number is not None:
            manager_number = employees_by_number[subject_number].get("manager_number")

        if priority == "critical":
            tags.append("critical")
        if complexity == "complex":
            tags.append("complex")

        severity = PRIORITY_TO_SEVERITY[priority]
        category_name = category_names.get(category_code, category_code)
        plan.append(
            {
                "reference_number": f"CASE-{created_at.year}-{index:05d}",
                "status": status,
                "priority": priority,
                "severity": severity,
                "complexity": complexity,
                "category_code": category_code,
                "subject_number": subject_number,
                "manager_number": manager_number,
                "reporter_anonymous": rng.chance(anonymity_rate),
                "details": details,
                "summary": details[: SUMMARY_LENGTH - 3] + "..." if len(details) > SUMMARY_LENGTH else None,
                "tags": ",".join(tags),
                "ai_summary": generate_ai_summary(category_name, severity, rng),
                "ai_summary_generated_at": ai_summary_timestamp(created_at, rng),
                "ai_risk_score": generate_ai_risk_score(severity, category_name, rng),
                "created_at": created_at,
                "closed_at": closed_at,
            }
        )

    employee_ids = {item["employee_number"]: item["id"] for item in employee_plan}
    records = [_case_record(item, category_map, employee_ids) for item in plan]
    created = _persist_in_batches(session, ComplianceCase, records, "reference_number", cfg.batch_size)

    summary.created["cases"] = created
    summary.cases = len(plan)
    logger.info("Cases: %s generated, %s new", len(plan), created)
    return plan


def _case_record(
    item: Dict[str, Any],
    category_map: Dict[str, Category],
    employee_ids: Dict[str, Optional[int]],
) -> Dict[str, Any]:
    category = category_map.get(item["category_code"])
    return {
        "reference_number": item["reference_number"],
        "status": item["status"],
        "priority": item["priority"],
        "severity": item["severity"],
        "complexity": item["complexity"],
        "category_id": category.id if category else None,
        "subject_employee_id": employee_ids.get(item["subject_number"]),
        "manager_employee_id": employee_ids.get(item["manager_number"]),
        "reporter_anonymous": item["reporter_anonymous"],
        "details": item["details"],
        "summary": item["summary"],
        "tags": item["tags"],
        "ai_summary": item.get("ai_summary"),
        "ai_summary_generated_at": item.get("ai_summary_generated_at"),
        "ai_risk_score": item.get("ai_risk_score"),
        "created_at": item["created_at"],
        "closed_at": item["closed_at"],
    }


def _ensure_retaliation_cases(
    session: Session,
    cfg: Settings,
    category_map: Dict[str, Category],
    case_plan: Sequence[Dict[str, Any]],
    summary: SeedSummary,
    strict: bool,
) -> None:
    rng = RandomSource.for_offset(cfg.master_seed, RETALIATION_SEED_OFFSET)
    cutoff = at_utc(cfg.current_date - timedelta(days=RETALIATION_MIN_AGE_DAYS))
    eligible = [
        item["reference_number"]
        for item in case_plan
        if item["status"] == CaseStatusEnum.closed.value and item["closed_at"] and item["closed_at"] <= cutoff
    ]
    chains = create_chains(eligible, rng, target_count=cfg.volumes.retaliation_chains)
    if not chains:
        logger.info("Retaliation: no eligible closed cases")
        return

    cases_by_reference = {item["reference_number"]: item for item in case_plan}
    stored_cases = _load_map(session, ComplianceCase, "reference_number")
    employees = _load_map(session, Employee, "employee_number")
    retaliation_category = category_map.get("retaliation")
    retaliation_name = retaliation_category.name if retaliation_category else "Retaliation"

    records: List[Dict[str, Any]] = []
    for index, chain in enumerate(chains, start=1):
        original = cases_by_reference[chain.original_case_id]
        case_details = generate_retaliation_case_details(chain, original["closed_at"])
        subject = employees.get(original["subject_number"]) if original["subject_number"] else None
        chain.linked_employee_id = original["subject_number"]
        reference_number = f"RET-{case_details.created_at.year}-{index:05d}"
        records.append(
            {
                "reference_number": reference_number,
                "status": CaseStatusEnum.open.value,
                "priority": "high" if case_details.severity == "high" else "medium",
                "severity": case_details.severity,
                "complexity": "medium",
                "category_id": retaliation_category.id if retaliation_category else None,
                "subject_employee_id": subject.id if subject else None,
                "manager_employee_id": stored_cases[chain.original_case_id].manager_employee_id,
                "reporter_anonymous": rng.chance(retaliation_category.anonymous_rate if retaliation_category else 0.8),
                "details": case_details.details,
                "summary": None,
                "tags": "retaliation",
                "is_retaliation": True,
                "original_case_id": stored_cases[chain.original_case_id].id,
                "retaliation_type": chain.retaliation_type,
                "days_after_original": chain.days_after_original,
                "link_type": chain.link_type,
                "ai_summary": generate_ai_summary(retaliation_name, case_details.severity, rng),
                "ai_summary_generated_at": ai_summary_timestamp(case_details.created_at, rng),
                "ai_risk_score": generate_ai_risk_score(case_details.severity, retaliation_name, rng),
                "created_at": case_details.created_at,
            }
        )

    created = _persist_in_batches(session, ComplianceCase, records, "reference_number", cfg.batch_size)
    for chain, record in zip(chains, records):
        fulfill_chain(chains, chain.original_case_id, record["reference_number"], strict=strict)

    stats = retaliation_stats(chains)
    summary.created["retaliation_cases"] = created
    summary.retaliation_cases = stats.fulfilled
    summary.retaliation_by_type = stats.by_type
    summary.avg_retaliation_delay_days = stats.avg_days_after
    logger.info(
        "Retaliation: %s chains, %s new follow-ups, average delay %s days",
        stats.total,
        created,
        stats.avg_days_after,
    )


def _ensure_activity(session: Session, cfg: Settings, summary: SeedSummary) -> None:
    rng = RandomSource.for_offset(cfg.master_seed, ACTIVITY_SEED_OFFSET)
    employees = session.exec(select(Employee).order_by(Employee.employee_number)).all()
    cases = session.exec(
        select(ComplianceCase).order_by(ComplianceCase.created_at, ComplianceCase.reference_number)
    ).all()
    staff = build_compliance_staff([(employee.id, employee.full_name) for employee in employees], rng)
    if not cases or not staff:
        logger.info("Activity: no cases or staff found, skipping timelines")
        summary.created["activities"] = 0
        return

    reference = end_of_day_utc(cfg.current_date)
    records: List[Dict[str, Any]] = []
    logger.info("Generating activity timelines for %s cases...", len(cases))
    for index, case in enumerate(cases, start=1):
        if index % PROGRESS_EVERY == 0:
            logger.info("  Progress: %s/%s cases processed", index, len(cases))
        timeline = CaseTimeline(
            case_id=case.id,
            reference_number=case.reference_number,
            status=CaseStatusEnum(case.status).value,
            created_at=as_utc(case.created_at),
            closed_at=as_utc(case.closed_at),
        )
        records.extend(generate_case_activities(timeline, staff, rng, reference))

    created = _persist_in_batches(session, Activity, records, "activity_key", cfg.batch_size)
    summary.created["activities"] = created
    summary.activities = len(records)
    summary.activities_by_action = summarize_actions(records)
    logger.info("Activity: %s timeline entries, %s new", len(records), created)


@dataclass
class ActivityStats:
    total: int = 0
    by_entity_type: Dict[str, int] = field(default_factory=dict)
    by_action_category: Dict[str, int] = field(default_factory=dict)
    by_actor_type: Dict[str, int] = field(default_factory=dict)


def activity_stats(session: Session) -> ActivityStats:
    def _grouped(column: Any) -> Dict[str, int]:
        rows = session.exec(select(column, func.count()).group_by(column)).all()
        return {getattr(key, "value", key): int(count) for key, count in rows}

    return ActivityStats(
        total=int(session.exec(select(func.count()).select_from(Activity)).one()),
        by_entity_type=_grouped(Activity.entity_type),
        by_action_category=_grouped(Activity.action_category),
        by_actor_type=_grouped(Activity.actor_type),
    )


@dataclass
class DemoDataReport:
    categories: int
    employees: int
    cases: int
    open_cases: int
    closed_cases: int
    repeat_subject_cases: int
    hotspot_cases: int
    retaliation_cases: int
    linked_retaliation_cases: int
    flagship_cases: int
    ai_enriched_cases: int
    activities: int


def verify_demo_data(session: Session) -> DemoDataReport:
    """Count what is stored so a seeding run can be checked at a glance."""

    def _count(model: Type[SQLModel], *conditions: Any) -> int:
        statement = select(func.count()).select_from(model)
        for condition in conditions:
            statement = statement.where(condition)
        return int(session.exec(statement).one())

    return DemoDataReport(
        categories=_count(Category),
        employees=_count(Employee),
        cases=_count(ComplianceCase),
        open_cases=_count(ComplianceCase, ComplianceCase.status != CaseStatusEnum.closed),
        closed_cases=_count(ComplianceCase, ComplianceCase.status == CaseStatusEnum.closed),
        repeat_subject_cases=_count(ComplianceCase, ComplianceCase.tags.contains("repeat-subject")),
        hotspot_cases=_count(ComplianceCase, ComplianceCase.tags.contains("hotspot-team")),
        retaliation_cases=_count(ComplianceCase, ComplianceCase.is_retaliation == True),  # noqa: E712
        linked_retaliation_cases=_count(
            ComplianceCase,
            ComplianceCase.is_retaliation == True,  # noqa: E712
            ComplianceCase.original_case_id.is_not(None),
        ),
        flagship_cases=_count(ComplianceCase, ComplianceCase.tags.contains("flagship")),
        ai_enriched_cases=_count(ComplianceCase, ComplianceCase.ai_summary.is_not(None)),
        activities=_count(Activity),
    )
