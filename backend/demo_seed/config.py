from pydantic import BaseModel, Field
import os
from datetime import date
from pathlib import Path
from typing import List, Optional, Tuple

from dotenv import load_dotenv


_ROOT_DIR = Path(__file__).resolve().parents[2]
load_dotenv(_ROOT_DIR / ".env")
load_dotenv()  # fallback to current working directory


# Offsets sumados a la semilla maestra para separar los flujos aleatorios
EMPLOYEE_SEED_OFFSET = 400
CASE_SEED_OFFSET = 3000
NARRATIVE_SEED_OFFSET = 4000
ACTIVITY_SEED_OFFSET = 5000
REPEAT_SUBJECT_SEED_OFFSET = 5050
MANAGER_HOTSPOT_SEED_OFFSET = 5100
RETALIATION_SEED_OFFSET = 5200


def _normalize_env(value: Optional[str], default: str) -> str:
    if value is None:
        return default
    cleaned = value.strip().lower()
    return cleaned or default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    normalized = raw.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return default


def _env_int(name: str, default: int, minimum: int = 0) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= minimum else default


def _env_date(name: str, default: date) -> date:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return date.fromisoformat(raw.strip())
    except ValueError:
        return default


class WeightedValue(BaseModel):
    value: str
    weight: float


class CategoryConfig(BaseModel):
    code: str
    name: str
    weight: float
    anonymous_rate: float  # más alto en categorías sensibles como acoso


class Volumes(BaseModel):
    employees: int = 2000
    cases: int = 450
    repeat_subjects: int = 50
    hotspot_managers: int = 15
    retaliation_chains: int = 50


def _load_volumes() -> Volumes:
    return Volumes(
        employees=_env_int("SEED_EMPLOYEES", 2000, minimum=1),
        cases=_env_int("SEED_CASES", 450),
        repeat_subjects=_env_int("SEED_REPEAT_SUBJECTS", 50),
        hotspot_managers=_env_int("SEED_HOTSPOT_MANAGERS", 15),
        retaliation_chains=_env_int("SEED_RETALIATION_CHAINS", 50),
    )


def _default_categories() -> List[CategoryConfig]:
    return [
        CategoryConfig(code="harassment", name="Harassment", weight=0.2, anonymous_rate=0.7),
        CategoryConfig(code="discrimination", name="Discrimination", weight=0.15, anonymous_rate=0.65),
        CategoryConfig(code="financial_misconduct", name="Fraud", weight=0.12, anonymous_rate=0.5),
        CategoryConfig(code="conflict_of_interest", name="Conflict of Interest", weight=0.1, anonymous_rate=0.3),
        CategoryConfig(code="safety", name="Safety Violation", weight=0.1, anonymous_rate=0.35),
        CategoryConfig(code="policy_violation", name="Policy Violation", weight=0.1, anonymous_rate=0.25),
        CategoryConfig(code="theft", name="Theft", weight=0.08, anonymous_rate=0.45),
        CategoryConfig(code="retaliation", name="Retaliation", weight=0.07, anonymous_rate=0.8),
        CategoryConfig(code="data_privacy", name="Data Privacy", weight=0.05, anonymous_rate=0.4),
        CategoryConfig(code="rfi", name="Other", weight=0.03, anonymous_rate=0.3),
    ]


class OrganizationConfig(BaseModel):
    divisions: List[WeightedValue] = Field(
        default_factory=lambda: [
            WeightedValue(value="Healthcare", weight=0.5),
            WeightedValue(value="Technology", weight=0.2),
            WeightedValue(value="Retail", weight=0.2),
            WeightedValue(value="Energy", weight=0.1),
        ]
    )
    job_levels: List[WeightedValue] = Field(
        default_factory=lambda: [
            WeightedValue(value="IC", weight=0.7),
            WeightedValue(value="Manager", weight=0.15),
            WeightedValue(value="Director", weight=0.08),
            WeightedValue(value="VP", weight=0.04),
            WeightedValue(value="SVP", weight=0.02),
            WeightedValue(value="C-Suite", weight=0.01),
        ]
    )
    cities_by_region: dict = Field(
        default_factory=lambda: {
            "US": [
                "New York", "Chicago", "Los Angeles", "Houston", "Phoenix", "Charlotte", "Dallas",
                "San Francisco", "Seattle", "Denver", "Atlanta", "Boston", "Miami",
            ],
            "EMEA": [
                "London", "Paris", "Frankfurt", "Amsterdam", "Dublin", "Madrid", "Milan",
                "Stockholm", "Warsaw", "Zurich",
            ],
            "APAC": [
                "Tokyo", "Singapore", "Hong Kong", "Sydney", "Mumbai", "Shanghai", "Seoul",
                "Bangalore", "Melbourne", "Manila",
            ],
        }
    )
    region_weights: List[WeightedValue] = Field(
        default_factory=lambda: [
            WeightedValue(value="US", weight=0.6),
            WeightedValue(value="EMEA", weight=0.25),
            WeightedValue(value="APAC", weight=0.15),
        ]
    )


class CaseDistributions(BaseModel):
    status: List[WeightedValue] = Field(
        default_factory=lambda: [
            WeightedValue(value="new", weight=3),
            WeightedValue(value="open", weight=7),
            WeightedValue(value="closed", weight=90),
        ]
    )
    priority: List[WeightedValue] = Field(
        default_factory=lambda: [
            WeightedValue(value="critical", weight=2),
            WeightedValue(value="high", weight=8),
            WeightedValue(value="medium", weight=30),
            WeightedValue(value="low", weight=60),
        ]
    )
    complexity: List[WeightedValue] = Field(
        default_factory=lambda: [
            WeightedValue(value="simple", weight=60),
            WeightedValue(value="medium", weight=30),
            WeightedValue(value="complex", weight=10),
        ]
    )
    # Días de duración para casos cerrados según complejidad
    duration_days: dict = Field(
        default_factory=lambda: {
            "simple": (2, 4),
            "medium": (7, 21),
            "complex": (30, 90),
        }
    )
    repeat_subject_rate: float = 0.10


class Settings(BaseModel):
    app_name: str = "Acme Compliance Demo"
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./demo.db")
    debug: bool = _env_bool("DEBUG", False)
    environment: str = _normalize_env(os.getenv("APP_ENV") or os.getenv("ENVIRONMENT"), "dev")
    log_level: str = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
    master_seed: int = _env_int("SEED_MASTER_SEED", 20260202)
    # Fecha de referencia fija para todo el histórico (no es "hoy")
    current_date: date = _env_date("SEED_CURRENT_DATE", date(2026, 2, 2))
    history_years: int = _env_int("SEED_HISTORY_YEARS", 3, minimum=1)
    batch_size: int = _env_int("SEED_BATCH_SIZE", 100, minimum=1)
    strict_mode: bool = _env_bool("SEED_STRICT_MODE", False)
    volumes: Volumes = Field(default_factory=_load_volumes)
    organization: OrganizationConfig = Field(default_factory=OrganizationConfig)
    categories: List[CategoryConfig] = Field(default_factory=_default_categories)
    case_distributions: CaseDistributions = Field(default_factory=CaseDistributions)

    @property
    def is_production(self) -> bool:
        return self.environment in {"prod", "production"}

    def category_weights(self) -> List[Tuple[str, float]]:
        return [(item.code, item.weight) for item in self.categories]


settings = Settings()
