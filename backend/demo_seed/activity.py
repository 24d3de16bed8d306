"""Audit timeline entries that make each demo case look lived-in.

Every case gets a "created" entry; most also get AI enrichment, assignment,
status transitions and notes, and a few get priority changes, CCO
escalations or SLA warnings. All timestamps fall between the case creation
and its closure (or the reference date for cases still open).
"""

from __future__ import annotations

import json
from collections import Counter
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .enrichment import AI_ACTOR_NAME, AI_MODEL_VERSION
from .random_source import RandomSource


COMPLIANCE_OFFICER = "compliance_officer"
SYSTEM_ADMIN = "system_admin"
TRIAGE_LEAD = "triage_lead"
INVESTIGATOR = "investigator"
STAFF_ROLES = (COMPLIANCE_OFFICER, SYSTEM_ADMIN, TRIAGE_LEAD, TRIAGE_LEAD)
DEFAULT_STAFF_SIZE = 12

AI_ENRICHMENT_RATE = 0.8
ASSIGNMENT_RATE = 0.9
PRIORITY_CHANGE_RATE = 0.1
NOTE_RATE = 0.5
CCO_ESCALATION_RATE = 0.04
SLA_WARNING_RATE = 0.06

STATUS_CHANGE_TEMPLATES = {
    "new": (
        "Case created and awaiting triage",
        "New case received via intake",
        "Case entered into system",
    ),
    "open": (
        "{actor} opened case for investigation",
        "{actor} moved case to active status",
        "Case assigned and investigation initiated by {actor}",
    ),
    "closed": (
        "{actor} closed case with findings documented",
        "Investigation complete, case closed by {actor}",
        "{actor} marked case as resolved",
        "Case closure approved by {actor}",
    ),
}

ASSIGNMENT_TEMPLATES = (
    "{actor} assigned case to {assignee} for investigation",
    "{actor} transferred case ownership to {assignee}",
    "Case reassigned from {previousAssignee} to {assignee} by {actor}",
    "{actor} delegated case handling to {assignee}",
)

PRIORITY_LEVELS = ("LOW", "MEDIUM", "HIGH", "CRITICAL")

PRIORITY_CHANGE_TEMPLATES = (
    "{actor} escalated priority from {oldPriority} to {newPriority} due to {reason}",
    "Priority changed to {newPriority} by {actor}",
    "{actor} updated case priority: {oldPriority} to {newPriority}",
)

PRIORITY_REASONS = (
    "regulatory concern",
    "executive involvement",
    "media exposure risk",
    "pattern detection",
    "SLA compliance",
    "witness availability",
    "retaliation risk",
    "legal guidance",
)

NOTE_TEMPLATES = (
    "{actor} added investigation note",
    "Case note recorded by {actor}",
    "{actor} documented interview findings",
    "{actor} added update to case timeline",
    "Evidence review notes added by {actor}",
    "{actor} recorded witness statement summary",
)

CCO_ESCALATION_TEMPLATES = (
    "{actor} escalated case to CCO for executive review",
    "Case flagged for CCO attention by {actor}",
    "{actor} requested CCO involvement due to severity",
    "Executive escalation initiated by {actor}",
)

SLA_WARNING_TEMPLATES = (
    "[SYSTEM] SLA warning: Case approaching {days}-day deadline",
    "[SYSTEM] Automated alert: SLA compliance at risk",
    "[SYSTEM] Case deadline warning - {days} days remaining",
    "[SYSTEM] SLA threshold approaching for case resolution",
)

AI_SUMMARY_TEMPLATES = (
    "[AI] Generated case summary from intake details",
    "[AI] Risk assessment completed with confidence score {score}%",
    "[AI] Category suggestion: {category} (confidence: {score}%)",
    "[AI] Similar case patterns identified",
)

IP_PREFIXES = ("10.0", "172.16", "192.168")
USER_AGENTS = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:121.0) Gecko/20100101 Firefox/121.0",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.2 Safari/605.1.15",
)


@dataclass(frozen=True)
class StaffMember:
    employee_id: Optional[int]
    name: str
    role: str


@dataclass(frozen=True)
class CaseTimeline:
    case_id: Optional[int]
    reference_number: str
    status: str
    created_at: datetime
    closed_at: Optional[datetime] = None


def build_compliance_staff(
    employees: Sequence[Tuple[Optional[int], str]],
    rng: RandomSource,
    size: int = DEFAULT_STAFF_SIZE,
) -> List[StaffMember]:
    """Sample the compliance team from ``(employee_id, full_name)`` pairs.

    The first picks fill the fixed roles (one CCO, one admin, two triage
    leads); everyone else is an investigator.
    """
    staff: List[StaffMember] = []
    for index, (employee_id, name) in enumerate(rng.sample(list(employees), size)):
        role = STAFF_ROLES[index] if index < len(STAFF_ROLES) else INVESTIGATOR
        staff.append(StaffMember(employee_id=employee_id, name=name, role=role))
    return staff


def format_template(template: str, replacements: Dict[str, str]) -> str:
    result = template
    for key, value in replacements.items():
        result = result.replace("{" + key + "}", value)
    return result


def _with_roles(staff: Sequence[StaffMember], *roles: str) -> List[StaffMember]:
    # Si ningún miembro tiene el rol pedido se usa el equipo completo
    matching = [member for member in staff if member.role in roles]
    return matching or list(staff)


def _to_json(value: Optional[Dict[str, Any]]) -> Optional[str]:
    if value is None:
        return None
    return json.dumps(value, sort_keys=True)


def _ip_address(rng: RandomSource) -> str:
    return f"{rng.pick_random(IP_PREFIXES)}.{rng.random_int(0, 255)}.{rng.random_int(1, 254)}"


class _TimelineBuilder:
    def __init__(self, case: CaseTimeline, rng: RandomSource, end: datetime) -> None:
        self.case = case
        self.rng = rng
        self.end = max(end, case.created_at)
        self.entries: List[Dict[str, Any]] = []

    def clamp(self, moment: datetime) -> datetime:
        return min(max(moment, self.case.created_at), self.end)

    def between(self, start: datetime) -> datetime:
        return self.clamp(self.rng.datetime_between(self.clamp(start), self.end))

    def add(
        self,
        moment: datetime,
        action: str,
        action_category: str,
        description: str,
        actor: Optional[StaffMember] = None,
        actor_type: str = "user",
        actor_name: Optional[str] = None,
        changes: Optional[Dict[str, Any]] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        is_user = actor_type == "user"
        self.entries.append(
            {
                "case_id": self.case.case_id,
                "entity_type": "case",
                "action": action,
                "action_category": action_category,
                "action_description": description,
                "actor_type": actor_type,
                "actor_name": actor.name if actor else actor_name,
                "actor_employee_id": actor.employee_id if actor else None,
                "changes": _to_json(changes),
                "context": _to_json(context),
                "ip_address": _ip_address(self.rng) if is_user else None,
                "user_agent": self.rng.pick_random(USER_AGENTS) if is_user else None,
                "request_id": self.rng.uuid(),
                "created_at": self.clamp(moment),
            }
        )


def generate_case_activities(
    case: CaseTimeline,
    staff: Sequence[StaffMember],
    rng: RandomSource,
    reference: datetime,
) -> List[Dict[str, Any]]:
    """Return the timeline entries of one case ordered by time.

    Each entry carries an ``activity_key`` of the form
    ``"<reference_number>:<sequence>"`` so reseeding never duplicates rows.
    """
    if not staff:
        return []
    builder = _TimelineBuilder(case, rng, case.closed_at or reference)
    created_at = case.created_at

    creator = rng.pick_random(staff)
    builder.add(
        created_at,
        "created",
        "create",
        f"Case {case.reference_number} created from intake",
        actor=creator,
        context={"referenceNumber": case.reference_number},
    )

    if rng.chance(AI_ENRICHMENT_RATE):
        score = rng.random_int(60, 95)
        builder.add(
            created_at + timedelta(hours=rng.random_int(1, 4)),
            "ai_enrichment",
            "ai",
            format_template(
                rng.pick_random(AI_SUMMARY_TEMPLATES),
                {"score": str(score), "category": "Policy Violation"},
            ),
            actor_type="ai",
            actor_name=AI_ACTOR_NAME,
            context={"modelVersion": AI_MODEL_VERSION, "confidenceScore": score},
        )

    if rng.chance(ASSIGNMENT_RATE) and case.status != "new":
        actor = rng.pick_random(_with_roles(staff, TRIAGE_LEAD, COMPLIANCE_OFFICER, SYSTEM_ADMIN))
        assignee = rng.pick_random(_with_roles(staff, INVESTIGATOR, COMPLIANCE_OFFICER))
        builder.add(
            created_at + timedelta(hours=rng.random_int(2, 24)),
            "assigned",
            "update",
            format_template(
                rng.pick_random(ASSIGNMENT_TEMPLATES),
                {"actor": actor.name, "assignee": assignee.name, "previousAssignee": "Unassigned"},
            ),
            actor=actor,
            changes={"assignedToId": {"old": None, "new": assignee.employee_id}},
            context={"assigneeName": assignee.name},
        )

    if case.status in ("open", "closed"):
        _add_status_change(builder, staff, created_at + timedelta(hours=rng.random_int(4, 48)), "new", "open")
        if case.status == "closed" and case.closed_at is not None:
            _add_status_change(builder, staff, case.closed_at, "open", "closed")

    if rng.chance(PRIORITY_CHANGE_RATE):
        actor = rng.pick_random(staff)
        old_index = rng.random_int(0, 2)
        new_index = min(old_index + rng.random_int(1, 2), len(PRIORITY_LEVELS) - 1)
        old_priority = PRIORITY_LEVELS[old_index]
        new_priority = PRIORITY_LEVELS[new_index]
        reason = rng.pick_random(PRIORITY_REASONS)
        builder.add(
            builder.between(created_at + timedelta(days=1)),
            "priority_changed",
            "update",
            format_template(
                rng.pick_random(PRIORITY_CHANGE_TEMPLATES),
                {"actor": actor.name, "oldPriority": old_priority, "newPriority": new_priority, "reason": reason},
            ),
            actor=actor,
            changes={"priority": {"old": old_priority, "new": new_priority}},
            context={"reason": reason},
        )

    if rng.chance(NOTE_RATE):
        note_start = created_at + timedelta(days=1)
        note_dates = sorted(
            builder.between(note_start) + timedelta(minutes=rng.random_int(-60, 60))
            for _ in range(rng.random_int(1, 3))
        )
        for note_date in note_dates:
            actor = rng.pick_random(staff)
            builder.add(
                note_date,
                "note_added",
                "create",
                format_template(rng.pick_random(NOTE_TEMPLATES), {"actor": actor.name}),
                actor=actor,
                context={"noteType": "investigation_note"},
            )

    if rng.chance(CCO_ESCALATION_RATE):
        actor = rng.pick_random(_with_roles(staff, INVESTIGATOR, TRIAGE_LEAD, COMPLIANCE_OFFICER))
        cco = next((member for member in staff if member.role == COMPLIANCE_OFFICER), None) or rng.pick_random(staff)
        builder.add(
            builder.between(created_at + timedelta(days=2)),
            "cco_escalated",
            "update",
            format_template(rng.pick_random(CCO_ESCALATION_TEMPLATES), {"actor": actor.name}),
            actor=actor,
            changes={
                "escalatedToCco": {"old": False, "new": True},
                "ccoUserId": {"old": None, "new": cco.employee_id},
            },
            context={"ccoName": cco.name, "reason": "Executive attention required"},
        )

    if rng.chance(SLA_WARNING_RATE):
        days_remaining = rng.random_int(3, 7)
        builder.add(
            builder.between(created_at + timedelta(days=20)),
            "sla_warning",
            "system",
            format_template(rng.pick_random(SLA_WARNING_TEMPLATES), {"days": str(days_remaining)}),
            actor_type="system",
            actor_name="System",
            context={"daysRemaining": days_remaining, "slaType": "case_resolution"},
        )

    entries = sorted(builder.entries, key=lambda entry: entry["created_at"])
    for sequence, entry in enumerate(entries, start=1):
        entry["activity_key"] = f"{case.reference_number}:{sequence:03d}"
    return entries


def _add_status_change(
    builder: _TimelineBuilder,
    staff: Sequence[StaffMember],
    moment: datetime,
    old_status: str,
    new_status: str,
) -> None:
    actor = builder.rng.pick_random(staff)
    templates = STATUS_CHANGE_TEMPLATES.get(new_status) or STATUS_CHANGE_TEMPLATES["open"]
    builder.add(
        moment,
        "status_changed",
        "update",
        format_template(builder.rng.pick_random(templates), {"actor": actor.name}),
        actor=actor,
        changes={"status": {"old": old_status, "new": new_status}},
    )


def summarize_actions(entries: Sequence[Dict[str, Any]]) -> Dict[str, int]:
    return dict(Counter(entry["action"] for entry in entries))
