from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from schemas.recovery_objectives import RecoveryObjectiveOut


class ProcessCriticality(str, Enum):
    critical = "critical"
    high = "high"
    medium = "medium"
    low = "low"


class ProcessBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    department: str | None = None
    description: str | None = None
    criticality: ProcessCriticality = ProcessCriticality.medium
    owner: str | None = None
    status: str = "draft"


class ProcessCreate(ProcessBase):
    pass


class ProcessUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    department: str | None = None
    description: str | None = None
    criticality: ProcessCriticality | None = None
    owner: str | None = None
    status: str | None = None

    @field_validator("name", "criticality", "status")
    @classmethod
    def reject_null(cls, value):
        # Omit the field to leave it unchanged; these columns are NOT NULL.
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class ProcessSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    department: str | None
    criticality: str
    status: str


class ProcessOut(ProcessSummary):
    description: str | None
    owner: str | None
    created_at: datetime
    updated_at: datetime
    recovery_objective: RecoveryObjectiveOut | None = None


class RecoveryObjectiveDetailOut(RecoveryObjectiveOut):
    process: ProcessSummary
