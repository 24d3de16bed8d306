"""Curated, named cases used in product walkthroughs.

They are stored first, count towards the case volume and keep fixed
reference numbers so a demo script can point at them directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class FlagshipCase:
    name: str
    category: str
    severity: str
    status: str
    narrative: str
    ai_summary: str
    ai_risk_score: int
    duration_days: int
    reference_prefix: str
    investigation_count: int = 1
    has_escalation: bool = True
    external_party_type: Optional[str] = None
    outcome: Optional[str] = None
    demo_points: Tuple[str, ...] = ()

    @property
    def has_external_party(self) -> bool:
        return self.external_party_type is not None

    @property
    def reference_number(self) -> str:
        return f"{self.reference_prefix}-0001"


FLAGSHIP_CASES: Tuple[FlagshipCase, ...] = (
    FlagshipCase(
        name="The Chicago Warehouse Incident",
        category="Harassment",
        severity="high",
        status="open",
        narrative=(
            "On January 15th, a third-shift warehouse supervisor was reported for creating a hostile work "
            "environment through repeated intimidation tactics.\n\n"
            "Multiple employees reported that supervisor Marcus Reynolds regularly uses profanity and aggressive "
            "language when addressing floor workers. On the date in question, Reynolds allegedly threw a clipboard "
            "at the wall near an employee after a shipping error was discovered.\n\n"
            "Three employees have independently filed reports describing similar behavior. One employee stated, "
            "\"I've worked here for 8 years and have never felt unsafe until Reynolds transferred from the Dallas "
            "facility.\"\n\n"
            "The reports indicate this behavior has been escalating since the Q4 productivity push began. Witnesses "
            "include the night security officer and two team leads.\n\n"
            "This incident follows two prior verbal complaints that were handled informally by the regional HR "
            "manager with no documented resolution."
        ),
        ai_summary=(
            "High-severity harassment case involving warehouse supervisor. Pattern of escalating hostile behavior "
            "with multiple independent reports. Prior informal complaints went unresolved. Recommend immediate "
            "intervention and comprehensive investigation."
        ),
        ai_risk_score=85,
        duration_days=0,
        reference_prefix="CASE-2026-CHI",
        demo_points=(
            "Multiple independent reporters corroborating same pattern",
            "Prior complaint history showing escalation",
            "AI identified severity escalation pattern",
            "Real-time collaboration on investigation notes",
        ),
    ),
    FlagshipCase(
        name="Q3 Financial Irregularities",
        category="Financial Misconduct",
        severity="high",
        status="closed",
        narrative=(
            "During routine quarterly reconciliation, the internal audit team discovered discrepancies in expense "
            "reports submitted by Regional Sales Director Patricia Hendricks.\n\n"
            "Over the past 18 months, Hendricks submitted approximately $127,000 in expense reports that cannot be "
            "verified against actual business activities. Specific concerns include:\n\n"
            "1. Multiple high-dollar client dinners with no attendee documentation\n"
            "2. Hotel stays in cities with no scheduled meetings\n"
            "3. Conference registrations for events that records show were attended by other employees\n"
            "4. Recurring charges at a resort that does not match any approved vendor list\n\n"
            "Initial review of credit card statements reveals a pattern where personal expenses may have been "
            "intermixed with legitimate business expenses. The total questionable amount represents roughly 40% of "
            "Hendricks' expense claims during this period.\n\n"
            "Hendricks is a 12-year employee with no prior disciplinary issues and consistently exceeds sales "
            "targets. The discrepancies were only discovered due to a new expense audit protocol implemented in Q3.\n\n"
            "Legal counsel has been engaged due to the dollar amount involved."
        ),
        ai_summary=(
            "Significant expense fraud investigation involving $127K in unverified claims over 18 months. Pattern "
            "analysis reveals consistent misuse of expense system. Legal counsel engaged. High-performing employee "
            "with no prior issues - unusual profile requires thorough documentation."
        ),
        ai_risk_score=92,
        duration_days=67,
        reference_prefix="CASE-2025-FIN",
        investigation_count=2,
        external_party_type="legal",
        outcome="substantiated",
        demo_points=(
            "Complex financial investigation with document analysis",
            "Dual investigation tracks (HR and Legal)",
            "CCO escalation and board notification",
            "Pattern detection across 18-month timeframe",
        ),
    ),
    FlagshipCase(
        name="Executive Expense Report",
        category="Financial Misconduct",
        severity="high",
        status="open",
        narrative=(
            "An anonymous reporter in the executive admin pool has raised concerns about expense practices by the "
            "SVP of Marketing, Jonathan Park.\n\n"
            "The reporter states they process expense reports and have noticed that Park routinely submits personal "
            "expenses including:\n"
            "- Family vacation flights coded as \"conference travel\"\n"
            "- Spouse's spa treatments at hotels during business trips\n"
            "- Holiday gifts for personal contacts coded as \"client appreciation\"\n\n"
            "The reporter estimates this has occurred consistently for at least two years and amounts to \"tens of "
            "thousands of dollars.\"\n\n"
            "The reporter is fearful of retaliation given Park's seniority and close relationship with the CEO. They "
            "specifically request anonymity be maintained and express concern that \"nothing will be done because "
            "he's an executive.\"\n\n"
            "Attached to the report are three expense reports with highlighted entries the reporter believes are "
            "personal."
        ),
        ai_summary=(
            "Anonymous report alleging executive expense fraud by SVP Marketing. Reporter provides specific examples "
            "and documentary evidence. High retaliation concern noted. Sensitive investigation requiring executive "
            "oversight and strict confidentiality controls."
        ),
        ai_risk_score=88,
        duration_days=0,
        reference_prefix="CASE-2026-EXP",
        demo_points=(
            "Anonymous reporting with document attachments",
            "Executive-level subject requiring special handling",
            "Reporter concerns about retaliation documented",
            "Audit trail of who accessed sensitive case",
        ),
    ),
    FlagshipCase(
        name="Manufacturing Safety Incident",
        category="Safety",
        severity="high",
        status="closed",
        narrative=(
            "On December 3rd at approximately 2:15 PM, a serious safety incident occurred at the Denver "
            "manufacturing facility when employee Kevin Martinez suffered a hand injury on the metal stamping press "
            "in Bay 4.\n\n"
            "Investigation revealed that the safety interlock on the press had been deliberately bypassed using a "
            "metal shim. When interviewed, floor workers indicated this was a \"common practice\" to meet production "
            "quotas. Supervisor Janet Williams was allegedly aware of this practice and had verbally approved it.\n\n"
            "Martinez required surgery and will be out for an estimated 8 weeks. OSHA notification was made within "
            "required timeframes.\n\n"
            "Further investigation discovered:\n"
            "- Three other presses with bypassed safety interlocks\n"
            "- No documented safety inspection in 4 months (policy requires monthly)\n"
            "- Training records show 12 employees never completed press safety certification\n\n"
            "A review of production records shows Bay 4 consistently exceeded quotas by 15-20% since Q2, coinciding "
            "with when Williams was promoted to supervisor.\n\n"
            "External safety consultant has been engaged for comprehensive audit."
        ),
        ai_summary=(
            "Critical safety incident with systemic failures. Deliberately bypassed equipment safeguards, supervisor "
            "knowledge/approval, and training gaps. OSHA reportable injury. Pattern suggests production pressure "
            "overriding safety culture. Regulatory exposure significant."
        ),
        ai_risk_score=95,
        duration_days=45,
        reference_prefix="CASE-2025-SAF",
        investigation_count=2,
        external_party_type="regulator",
        outcome="substantiated",
        demo_points=(
            "OSHA-reportable incident with regulatory involvement",
            "Systemic issues uncovered beyond initial incident",
            "Multiple root causes identified",
            "Remediation tracking and verification",
        ),
    ),
    FlagshipCase(
        name="Healthcare Data Breach",
        category="Data Privacy",
        severity="high",
        status="closed",
        narrative=(
            "The IT Security team identified unauthorized access to patient records in the Charlotte hospital "
            "system on January 8th.\n\n"
            "Analysis of access logs revealed that Dr. Sarah Chen accessed medical records for 47 patients who were "
            "not under her care. These access events occurred over a 3-month period, primarily during evening "
            "hours.\n\n"
            "Cross-referencing the accessed records revealed that:\n"
            "- 31 of the patients were employees of Acme Corporation\n"
            "- 16 were family members of Acme employees\n"
            "- Several records accessed just before employees went on medical leave\n\n"
            "When confronted, Dr. Chen initially claimed the accesses were for \"legitimate research purposes\" but "
            "could not provide documentation of any approved research protocol.\n\n"
            "This constitutes a potential HIPAA violation affecting up to 47 individuals. Legal counsel and the "
            "Privacy Officer have been engaged. Regulatory notification timeline is being assessed.\n\n"
            "Dr. Chen has been placed on administrative leave pending investigation completion."
        ),
        ai_summary=(
            "HIPAA violation involving unauthorized PHI access. 47 patient records accessed without legitimate "
            "purpose. Pattern suggests deliberate snooping, possibly related to employment decisions. Regulatory "
            "notification required. Administrative leave implemented."
        ),
        ai_risk_score=93,
        duration_days=38,
        reference_prefix="CASE-2026-HIP",
        external_party_type="regulator",
        outcome="substantiated",
        demo_points=(
            "Healthcare compliance and HIPAA handling",
            "IT forensics and access log analysis",
            "Regulatory notification workflow",
            "Administrative action tracking",
        ),
    ),
    FlagshipCase(
        name="Systematic Discrimination Pattern",
        category="Discrimination",
        severity="high",
        status="open",
        narrative=(
            "A class of seven female engineers in the Software Development department have collectively filed a "
            "discrimination complaint.\n\n"
            "The complaint alleges that Director of Engineering Robert Thompson has systematically passed over "
            "qualified female candidates for promotion, given lower performance ratings to female team members, and "
            "made comments creating a hostile work environment.\n\n"
            "Specific allegations include:\n"
            "- Five promotion cycles where male candidates with less experience were selected\n"
            "- Performance review analysis showing female engineers rated 0.7 points lower on average\n"
            "- Comments in meetings such as \"technical leadership isn't really suited for women\"\n"
            "- Exclusion of female engineers from high-visibility projects\n\n"
            "The reporters have compiled documentation including:\n"
            "- Promotion decision records for the past 3 years\n"
            "- Performance rating comparisons\n"
            "- Email threads with discriminatory comments\n"
            "- Testimony from two male engineers corroborating the pattern\n\n"
            "One of the reporters has indicated she is consulting with an employment attorney.\n\n"
            "Given the number of reporters and systematic nature of allegations, this has been flagged for "
            "executive review."
        ),
        ai_summary=(
            "Systematic gender discrimination allegation from seven female engineers. Documented pattern of "
            "promotion bias, rating disparities, and hostile comments. Strong documentary evidence provided. Legal "
            "exposure high due to class nature and external counsel engagement."
        ),
        ai_risk_score=91,
        duration_days=0,
        reference_prefix="CASE-2026-DIS",
        external_party_type="legal",
        demo_points=(
            "Multi-reporter coordinated complaint",
            "Statistical pattern analysis",
            "Documentary evidence management",
            "Litigation hold and preservation",
        ),
    ),
    FlagshipCase(
        name="Vendor Kickback Scheme",
        category="Fraud",
        severity="high",
        status="closed",
        narrative=(
            "The internal audit team has uncovered evidence of a potential kickback arrangement between Procurement "
            "Manager David Wilson and IT vendor TechServe Solutions.\n\n"
            "Over the past two years, TechServe has been awarded 14 contracts totaling $2.3 million. Analysis "
            "revealed:\n"
            "- TechServe's bids were consistently 5-10% higher than competitors\n"
            "- Wilson overruled lower bids citing \"quality concerns\" without documentation\n"
            "- TechServe was added to the approved vendor list by Wilson without standard vetting\n\n"
            "A forensic review of Wilson's personal finances (conducted with legal oversight after reasonable "
            "suspicion was established) found:\n"
            "- Unexplained deposits totaling $89,000 over 24 months\n"
            "- Two vacations that coincide with TechServe contract awards\n"
            "- A vehicle purchase shortly after the largest contract was signed\n\n"
            "TechServe's CEO, Michael Reeves, is Wilson's former college roommate - a relationship that was not "
            "disclosed as required by the conflict of interest policy.\n\n"
            "The FBI has been contacted due to the dollar amounts involved and potential wire fraud implications."
        ),
        ai_summary=(
            "Complex fraud investigation involving $2.3M in vendor contracts and $89K in suspected kickbacks. "
            "Undisclosed personal relationship, documented bid manipulation, and financial anomalies. FBI engaged "
            "due to federal implications. Comprehensive forensic and financial analysis completed."
        ),
        ai_risk_score=97,
        duration_days=89,
        reference_prefix="CASE-2025-FRD",
        investigation_count=2,
        external_party_type="law_enforcement",
        outcome="substantiated",
        demo_points=(
            "Law enforcement coordination",
            "Financial forensics integration",
            "Conflict of interest policy violation",
            "Multi-year pattern analysis",
        ),
    ),
    FlagshipCase(
        name="Workplace Violence Threat",
        category="Workplace Violence",
        severity="high",
        status="closed",
        narrative=(
            "On January 20th at 4:45 PM, Security received an urgent report that warehouse employee James Mitchell "
            "made threatening statements toward his supervisor and coworkers.\n\n"
            "According to witnesses, Mitchell became agitated during a team meeting about schedule changes and "
            "stated:\n"
            "- \"You'll all regret this\"\n"
            "- \"I know where everyone parks\"\n"
            "- \"This isn't over\"\n\n"
            "Mitchell then left the building abruptly. One witness reported Mitchell mentioned \"his gun "
            "collection\" during a conversation last week.\n\n"
            "Supervisor Sarah Park reported that Mitchell has been increasingly hostile since being passed over for "
            "a team lead position in December. Previous incidents include:\n"
            "- Slamming doors and kicking equipment\n"
            "- Heated argument with a coworker (informal verbal warning issued)\n"
            "- Complaints about \"unfair treatment\" to anyone who would listen\n\n"
            "Mitchell was removed from the premises by security and informed not to return pending investigation. "
            "Building security has been enhanced with additional patrols.\n\n"
            "Threat assessment team has been convened. Local police have been notified."
        ),
        ai_summary=(
            "Credible workplace violence threat requiring immediate intervention. Employee made specific threatening "
            "statements, pattern of escalating hostility, and references to weapons. Law enforcement notified, "
            "employee removed from premises, enhanced security implemented. Threat assessment critical priority."
        ),
        ai_risk_score=98,
        duration_days=12,
        reference_prefix="CASE-2026-WPV",
        external_party_type="law_enforcement",
        outcome="substantiated",
        demo_points=(
            "Urgent threat response workflow",
            "Security coordination",
            "Law enforcement notification",
            "Threat assessment team activation",
        ),
    ),
    FlagshipCase(
        name="COI Disclosure - Board Member",
        category="Conflict of Interest",
        severity="medium",
        status="closed",
        narrative=(
            "Board member Eleanor Vance has submitted a proactive conflict of interest disclosure regarding her "
            "spouse's recent appointment.\n\n"
            "Disclosure details:\n"
            "- Dr. William Vance was appointed Chief Medical Officer at HealthFirst Systems\n"
            "- HealthFirst is one of Acme's largest healthcare clients (8% of Healthcare Division revenue)\n"
            "- The appointment was effective January 1st\n"
            "- Eleanor learned of the appointment in December but delayed disclosure \"due to the holidays\"\n\n"
            "Current conflicts identified:\n"
            "- Eleanor chairs the Client Relations Committee which oversees HealthFirst account\n"
            "- Eleanor has voting rights on contract renewals including the upcoming HealthFirst renewal\n"
            "- Eleanor receives detailed financial briefings that include HealthFirst performance data\n\n"
            "Eleanor proposes to recuse from HealthFirst-related matters but requests guidance on scope.\n\n"
            "This disclosure requires Board review and documentation of mitigation measures. General Counsel has "
            "been consulted."
        ),
        ai_summary=(
            "Board-level conflict of interest disclosure regarding spouse appointment at major client. Proactive "
            "disclosure, though delayed. Multiple conflict touchpoints identified. Requires formal recusal framework "
            "and Board documentation. Standard COI management with elevated stakeholder sensitivity."
        ),
        ai_risk_score=65,
        duration_days=21,
        reference_prefix="CASE-2026-COI",
        outcome="substantiated",
        demo_points=(
            "Board-level disclosure handling",
            "COI management framework",
            "Recusal documentation",
            "Proactive disclosure workflow",
        ),
    ),
    FlagshipCase(
        name="Retaliation After Safety Report",
        category="Retaliation",
        severity="high",
        status="open",
        narrative=(
            "Employee Michael Torres filed this complaint alleging retaliation for his previous safety report "
            "(CASE-2025-SAF-001, \"Bay 4 Press Incident\").\n\n"
            "Torres was one of the whistleblowers in the original investigation. Since that case was closed:\n"
            "- His shift was changed from days to nights (effective January 6)\n"
            "- He was moved from Bay 2 (his preferred assignment for 5 years) to Bay 6\n"
            "- His overtime hours were reduced from an average of 10 per week to zero\n"
            "- His most recent performance review dropped from \"meets expectations\" to \"needs improvement\"\n\n"
            "Torres states his supervisor, now-promoted Janet Williams (formerly of Bay 4), told him \"People who "
            "cause problems get treated like problems.\"\n\n"
            "Torres has provided:\n"
            "- His work schedule showing the changes\n"
            "- Overtime records before and after his testimony\n"
            "- Performance review documents\n"
            "- Text messages from coworkers expressing concern about his treatment\n\n"
            "This case has been flagged as high-priority given it involves retaliation for protected activity."
        ),
        ai_summary=(
            "Retaliation complaint from safety whistleblower. Multiple adverse employment actions documented "
            "following protected activity. Direct statement from supervisor suggests retaliatory intent. Case "
            "linked to prior substantiated safety investigation. High legal exposure."
        ),
        ai_risk_score=89,
        duration_days=0,
        reference_prefix="CASE-2026-RET",
        demo_points=(
            "Case-to-case linkage",
            "Protected activity retaliation tracking",
            "Temporal pattern analysis",
            "Witness statement correlation",
        ),
    ),
)
