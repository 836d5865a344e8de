import math
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

DIMENSIONS = (
    "financial",
    "operational",
    "reputational",
    "legal",
    "health",
    "environmental",
)


class TimelineSample(BaseModel):
    """
    One observation in a disruption timeline. The six named dimensions default
    to 0; any other numeric field the caller sends is kept as an extra dimension.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    time_offset: float = Field(..., alias="timeOffset")  # hours from onset
    time_label: str = Field("", alias="timeLabel")
    financial: float = 0.0
    operational: float = 0.0
    reputational: float = 0.0
    legal: float = 0.0
    health: float = 0.0
    environmental: float = 0.0

    def dimension_values(self) -> dict[str, float]:
        values = {name: getattr(self, name) for name in DIMENSIONS}
        for name, value in (self.model_extra or {}).items():
            # Non-numeric extras score 0.
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                try:
                    values[name] = float(value)
                except OverflowError:
                    values[name] = math.inf if value > 0 else -math.inf
            else:
                values[name] = 0.0
        return values


class RecoveryObjectiveResult(BaseModel):
    mtpd: int
    rto: int
    rpo: float


class RecalculateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    timeline_data: list[TimelineSample] = Field(..., alias="timelineData")
    impact_threshold: float | None = Field(None, alias="impactThreshold")


class RecoveryObjectiveOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    process_id: str
    mtpd: int
    rto: int
    rpo: float
    mbco: bool
    impact_threshold: float
    recovery_strategy: str
    strategy_notes: str | None
    created_at: datetime
    updated_at: datetime
