"""
Recovery objectives (MTPD / RTO / RPO) from a disruption impact timeline.
The calculator is pure and deterministic; recalculate_for_process upserts the
one RecoveryObjective row a process owns.
"""
import logging
import math
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from core.config import DEFAULT_IMPACT_THRESHOLD
from models.process import Process
from models.recovery_objective import RecoveryObjective
from schemas.processes import ProcessCriticality
from schemas.recovery_objectives import RecoveryObjectiveResult, TimelineSample
from services.processes import ProcessNotFoundError, get_process

logger = logging.getLogger(__name__)

MTPD_CEILING_HOURS = 72
CRITICALITY_MTPD_CAPS = {
    ProcessCriticality.critical.value: 8,
    ProcessCriticality.high.value: 16,
}
SEVERE_IMPACT = 3.5
MODERATE_IMPACT = 2.5
MIN_RTO_HOURS = 1
MIN_RPO_HOURS = 0.5
MIN_MTPD_HOURS = 1
MBCO_MTPD_HOURS = 4
# Largest offset an MTPD hour count can hold in the INTEGER column.
MAX_TIME_OFFSET_HOURS = 2**31 - 1
DEFAULT_RECOVERY_STRATEGY = "warm_standby"


class InvalidInputError(ValueError):
    """Timeline or threshold cannot produce a meaningful result."""


def max_dimension_value(sample: TimelineSample) -> float:
    """Highest impact score in one sample; 0 when every dimension is 0."""
    return max([0.0, *sample.dimension_values().values()])


def _validate(timeline: Sequence[TimelineSample], impact_threshold: float) -> None:
    if not timeline:
        raise InvalidInputError("timeline must contain at least one sample")
    if not math.isfinite(impact_threshold) or impact_threshold < 0:
        raise InvalidInputError(
            f"impact_threshold must be a finite non-negative number, got {impact_threshold}"
        )
    for sample in timeline:
        if not math.isfinite(sample.time_offset) or sample.time_offset < 0:
            raise InvalidInputError(
                f"timeOffset must be a finite non-negative number, got {sample.time_offset}"
            )
        if sample.time_offset > MAX_TIME_OFFSET_HOURS:
            raise InvalidInputError(
                f"timeOffset must be at most {MAX_TIME_OFFSET_HOURS} hours, got {sample.time_offset}"
            )
        for name, value in sample.dimension_values().items():
            if not math.isfinite(value) or value < 0:
                raise InvalidInputError(
                    f"{name} at timeOffset {sample.time_offset} must be a finite "
                    f"non-negative number, got {value}"
                )


def _rto_fraction(max_impact: float) -> float:
    if max_impact > SEVERE_IMPACT:
        return 0.5
    if max_impact > MODERATE_IMPACT:
        return 0.65
    return 0.8


def _rpo_fraction(max_impact: float) -> float:
    return 0.5 if max_impact > SEVERE_IMPACT else 0.75


def compute_recovery_objectives(
    criticality: ProcessCriticality | str,
    timeline: Sequence[TimelineSample],
    impact_threshold: float = DEFAULT_IMPACT_THRESHOLD,
) -> RecoveryObjectiveResult:
    """
    MTPD is the offset of the first sample whose worst dimension reaches
    impact_threshold (72h if none does), capped by criticality. RTO and RPO are
    fractions of MTPD and RTO picked by the peak impact over the whole timeline.

    Samples are sorted by timeOffset before scanning, so callers need not
    pre-sort. Raises InvalidInputError on an empty timeline, non-finite or
    negative values, an offset past MAX_TIME_OFFSET_HOURS, or a negative threshold.
    """
    _validate(timeline, impact_threshold)
    return _compute(criticality, timeline, impact_threshold)


def _compute(
    criticality: ProcessCriticality | str,
    timeline: Sequence[TimelineSample],
    impact_threshold: float,
) -> RecoveryObjectiveResult:
    criticality = _criticality_value(criticality)
    ordered = sorted(timeline, key=lambda s: s.time_offset)

    mtpd = MTPD_CEILING_HOURS
    for sample in ordered:
        if max_dimension_value(sample) >= impact_threshold:
            mtpd = math.floor(sample.time_offset)
            break

    cap = CRITICALITY_MTPD_CAPS.get(criticality)
    if cap is not None:
        mtpd = min(mtpd, cap)

    # Peak over the whole timeline, not just up to the crossing.
    max_impact = max(max_dimension_value(s) for s in ordered)

    rto = max(MIN_RTO_HOURS, math.floor(mtpd * _rto_fraction(max_impact)))
    rpo = max(MIN_RPO_HOURS, math.floor(rto * _rpo_fraction(max_impact) * 10) / 10)

    return RecoveryObjectiveResult(mtpd=max(MIN_MTPD_HOURS, mtpd), rto=rto, rpo=rpo)


def requires_mbco(criticality: ProcessCriticality | str, mtpd: int) -> bool:
    """Minimum business continuity objective applies to critical or very short-MTPD processes."""
    return (
        _criticality_value(criticality) == ProcessCriticality.critical.value
        or mtpd <= MBCO_MTPD_HOURS
    )


def _criticality_value(criticality: ProcessCriticality | str) -> str:
    if isinstance(criticality, ProcessCriticality):
        return criticality.value
    return str(criticality)


def list_recovery_objectives(db: Session) -> list[RecoveryObjective]:
    stmt = (
        select(RecoveryObjective)
        .options(selectinload(RecoveryObjective.process))
        .order_by(RecoveryObjective.id)
    )
    return list(db.scalars(stmt).all())


def get_recovery_objective(db: Session, process_id: str) -> RecoveryObjective | None:
    stmt = (
        select(RecoveryObjective)
        .options(selectinload(RecoveryObjective.process))
        .where(RecoveryObjective.process_id == process_id)
    )
    return db.scalar(stmt)


def upsert_recovery_objective(
    process: Process,
    result: RecoveryObjectiveResult,
    impact_threshold: float,
) -> RecoveryObjective:
    """Overwrite the process's recovery objective with result, creating it if absent. No commit."""
    mbco = requires_mbco(process.criticality, result.mtpd)
    objective = process.recovery_objective
    if objective is None:
        objective = RecoveryObjective(
            process_id=process.id,
            recovery_strategy=DEFAULT_RECOVERY_STRATEGY,
            strategy_notes=(
                f"Calculated recovery strategy for {process.name} based on temporal analysis"
            ),
        )
        process.recovery_objective = objective
    objective.mtpd = result.mtpd
    objective.rto = result.rto
    objective.rpo = result.rpo
    objective.mbco = mbco
    objective.impact_threshold = impact_threshold
    return objective


def recalculate_for_process(
    db: Session,
    process_id: str,
    timeline: Sequence[TimelineSample],
    impact_threshold: float | None = None,
) -> RecoveryObjective:
    """
    Run the calculator for one process and persist the result.
    Input is validated before the process lookup, so bad input is an
    InvalidInputError even for an unknown process. Raises ProcessNotFoundError
    or InvalidInputError; nothing is written on error.
    """
    if impact_threshold is None:
        impact_threshold = DEFAULT_IMPACT_THRESHOLD
    _validate(timeline, impact_threshold)
    process = get_process(db, process_id)
    if process is None:
        raise ProcessNotFoundError(process_id)

    result = _compute(process.criticality, timeline, impact_threshold)
    objective = upsert_recovery_objective(process, result, impact_threshold)
    db.commit()
    db.refresh(objective)
    logger.info(
        "Recalculated recovery objectives for process %s: mtpd=%s rto=%s rpo=%s mbco=%s",
        process_id,
        objective.mtpd,
        objective.rto,
        objective.rpo,
        objective.mbco,
    )
    return objective
