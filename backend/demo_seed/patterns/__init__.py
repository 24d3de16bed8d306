from .flagship import (
    FlagshipStats,
    FlagshipTimeline,
    get_escalated_flagship_cases,
    get_flagship_cases_by_category,
    get_flagship_cases_by_status,
    get_flagship_cases_with_external_party,
    get_flagship_stats,
    plan_flagship_timeline,
    resolve_flagship_category,
)
from .manager_hotspots import (
    MANAGEMENT_CATEGORIES,
    create_manager_hotspots,
    get_hotspot_for_assignment,
    mark_hotspot_assigned,
)
from .repeat_subjects import (
    BEHAVIOURAL_CATEGORIES,
    create_repeat_subject_pool,
    get_repeat_subject,
    mark_subject_assigned,
)
from .retaliation import (
    RETALIATION_TYPES,
    RetaliationCaseDetails,
    RetaliationChain,
    RetaliationStats,
    create_chains,
    fulfill_chain,
    generate_retaliation_case_details,
    generate_retaliation_narrative,
    get_chain_for_case,
    retaliation_stats,
    select_retaliation_type,
    unfulfilled_chains,
)

__all__ = [
    "BEHAVIOURAL_CATEGORIES",
    "FlagshipStats",
    "FlagshipTimeline",
    "MANAGEMENT_CATEGORIES",
    "RETALIATION_TYPES",
    "RetaliationCaseDetails",
    "RetaliationChain",
    "RetaliationStats",
    "create_chains",
    "create_manager_hotspots",
    "create_repeat_subject_pool",
    "fulfill_chain",
    "generate_retaliation_case_details",
    "generate_retaliation_narrative",
    "get_escalated_flagship_cases",
    "get_flagship_cases_by_category",
    "get_flagship_cases_by_status",
    "get_flagship_cases_with_external_party",
    "get_flagship_stats",
    "get_chain_for_case",
    "get_hotspot_for_assignment",
    "get_repeat_subject",
    "mark_hotspot_assigned",
    "mark_subject_assigned",
    "plan_flagship_timeline",
    "resolve_flagship_category",
    "retaliation_stats",
    "select_retaliation_type",
    "unfulfilled_chains",
]
