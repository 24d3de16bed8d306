"""Canned AI triage output attached to generated cases."""

from __future__ import annotations

from datetime import datetime, timedelta

from .random_source import RandomSource


AI_MODEL_VERSION = "claude-3-opus"
AI_ACTOR_NAME = "Claude AI"

SEVERITY_TEXT = {
    "high": "High-severity",
    "medium": "Moderate",
    "low": "Low-priority",
}

SUMMARY_MIDDLES = (
    "Multiple factors indicate thorough review warranted.",
    "Pattern analysis suggests this may require immediate attention.",
    "Initial assessment indicates standard investigation protocol applies.",
    "Preliminary review suggests straightforward investigation path.",
    "Risk indicators warrant comprehensive investigation approach.",
)

SUMMARY_ENDINGS = (
    "Recommend standard investigation timeline.",
    "Prioritize based on organizational risk factors.",
    "Consider witness interviews and documentation review.",
    "Follow established investigation procedures.",
    "Monitor for potential related reports.",
)

RISK_SCORE_RANGES = {
    "high": (70, 95),
    "medium": (40, 70),
    "low": (15, 45),
}
HIGH_RISK_KEYWORDS = ("harassment", "discrimination", "retaliation", "fraud")
HIGH_RISK_BONUS = (5, 15)
MAX_RISK_SCORE = 100


def generate_ai_summary(category_name: str, severity: str, rng: RandomSource) -> str:
    severity_text = SEVERITY_TEXT.get(severity, SEVERITY_TEXT["low"])
    prefixes = (
        f"{severity_text} {category_name.lower()} report.",
        f"Report involving potential {category_name.lower()} concerns.",
        f"{category_name} allegation requiring investigation.",
    )
    return " ".join(
        (rng.pick_random(prefixes), rng.pick_random(SUMMARY_MIDDLES), rng.pick_random(SUMMARY_ENDINGS))
    )


def generate_ai_risk_score(severity: str, category_name: str, rng: RandomSource) -> int:
    """Score in 0-100: a severity band plus a bonus for sensitive categories."""
    score = rng.random_int(*RISK_SCORE_RANGES.get(severity, RISK_SCORE_RANGES["low"]))
    lowered = category_name.lower()
    if any(keyword in lowered for keyword in HIGH_RISK_KEYWORDS):
        score = min(MAX_RISK_SCORE, score + rng.random_int(*HIGH_RISK_BONUS))
    return score


def ai_summary_timestamp(created_at: datetime, rng: RandomSource, max_hours: int = 8) -> datetime:
    return created_at + timedelta(hours=rng.random_int(1, max_hours))
