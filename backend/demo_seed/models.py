from datetime import datetime
from typing import List, Optional
from enum import Enum
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field

from .utils.datetimes import utc_now


# Enums del dominio de cumplimiento
class CaseStatusEnum(str, Enum):
    new = "new"
    open = "open"
    closed = "closed"


class PriorityEnum(str, Enum):
    critical = "critical"
    high = "high"
    medium = "medium"
    low = "low"


class SeverityEnum(str, Enum):
    high = "high"
    medium = "medium"
    low = "low"


class ComplexityEnum(str, Enum):
    simple = "simple"
    medium = "medium"
    complex = "complex"


class LinkTypeEnum(str, Enum):
    reporter = "reporter"
    witness = "witness"


class Category(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    code: str = Field(index=True, unique=True)
    name: str
    weight: float = Field(default=0.0)
    anonymous_rate: float = Field(default=0.4)


class Employee(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    employee_number: str = Field(index=True, unique=True)
    email: str = Field(index=True, unique=True)
    full_name: str
    division: str = Field(index=True)
    region: str
    city: str
    job_level: str = Field(index=True)  # IC, Manager, Director, VP, SVP, C-Suite
    manager_id: Optional[int] = Field(default=None, foreign_key="employee.id", sa_column_kwargs={"nullable": True})


class ComplianceCase(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    reference_number: str = Field(index=True, unique=True)
    status: CaseStatusEnum = Field(default=CaseStatusEnum.new, index=True)
    priority: PriorityEnum = Field(default=PriorityEnum.low)
    severity: SeverityEnum = Field(default=SeverityEnum.low)
    complexity: ComplexityEnum = Field(default=ComplexityEnum.simple)
    category_id: Optional[int] = Field(default=None, foreign_key="category.id", index=True)
    subject_employee_id: Optional[int] = Field(default=None, foreign_key="employee.id", index=True)
    manager_employee_id: Optional[int] = Field(default=None, foreign_key="employee.id", index=True)
    reporter_anonymous: bool = Field(default=False)
    details: str
    summary: Optional[str] = None
    tags: str = Field(default="", description="Etiquetas separadas por comas")
    # Vinculación de represalias con el caso original
    is_retaliation: bool = Field(default=False, index=True)
    original_case_id: Optional[int] = Field(
        default=None, foreign_key="compliancecase.id", sa_column_kwargs={"nullable": True}
    )
    retaliation_type: Optional[str] = None
    days_after_original: Optional[int] = None
    link_type: Optional[LinkTypeEnum] = Field(default=None, sa_column_kwargs={"nullable": True})
    ai_summary: Optional[str] = None
    ai_summary_generated_at: Optional[datetime] = Field(
        default=None, sa_type=DateTime(timezone=True), sa_column_kwargs={"nullable": True}
    )
    ai_risk_score: Optional[int] = Field(default=None, sa_column_kwargs={"nullable": True})
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True), nullable=False)
    closed_at: Optional[datetime] = Field(
        default=None, sa_type=DateTime(timezone=True), sa_column_kwargs={"nullable": True}
    )

    @property
    def tag_list(self) -> List[str]:
        return [tag for tag in self.tags.split(",") if tag]


class ActivityCategoryEnum(str, Enum):
    create = "create"
    update = "update"
    system = "system"
    ai = "ai"


class ActorTypeEnum(str, Enum):
    user = "user"
    system = "system"
    ai = "ai"


class Activity(SQLModel, table=True):
    """Entrada de la línea de tiempo de un caso (auditoría)."""

    id: Optional[int] = Field(default=None, primary_key=True)
    activity_key: str = Field(index=True, unique=True)
    case_id: Optional[int] = Field(default=None, foreign_key="compliancecase.id", index=True)
    entity_type: str = Field(default="case", index=True)
    action: str = Field(index=True)
    action_category: ActivityCategoryEnum = Field(default=ActivityCategoryEnum.update, index=True)
    action_description: str
    actor_type: ActorTypeEnum = Field(default=ActorTypeEnum.user, index=True)
    actor_name: Optional[str] = None
    actor_employee_id: Optional[int] = Field(
        default=None, foreign_key="employee.id", sa_column_kwargs={"nullable": True}
    )
    # JSON serializado como texto
    changes: Optional[str] = None
    context: Optional[str] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    request_id: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True), nullable=False)
