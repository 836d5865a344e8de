from schemas.processes import (
    ProcessCreate,
    ProcessCriticality,
    ProcessOut,
    ProcessSummary,
    ProcessUpdate,
    RecoveryObjectiveDetailOut,
)
from schemas.recovery_objectives import (
    RecalculateRequest,
    RecoveryObjectiveOut,
    RecoveryObjectiveResult,
    TimelineSample,
)

__all__ = [
    "ProcessCriticality",
    "ProcessCreate",
    "ProcessUpdate",
    "ProcessSummary",
    "ProcessOut",
    "TimelineSample",
    "RecoveryObjectiveResult",
    "RecalculateRequest",
    "RecoveryObjectiveOut",
    "RecoveryObjectiveDetailOut",
]
