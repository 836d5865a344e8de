from models.process import Process
from models.recovery_objective import RecoveryObjective

__all__ = ["Process", "RecoveryObjective"]
