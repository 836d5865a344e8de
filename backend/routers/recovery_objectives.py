import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from db.deps import get_db
from schemas.processes import RecoveryObjectiveDetailOut
from schemas.recovery_objectives import RecalculateRequest
from services.processes import ProcessNotFoundError
from services.recovery_objectives import (
    InvalidInputError,
    get_recovery_objective,
    list_recovery_objectives,
    recalculate_for_process,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=list[RecoveryObjectiveDetailOut])
def get_recovery_objectives(db: Session = Depends(get_db)):
    return list_recovery_objectives(db)


@router.get("/process/{process_id}", response_model=RecoveryObjectiveDetailOut)
def get_process_recovery_objective(process_id: str, db: Session = Depends(get_db)):
    objective = get_recovery_objective(db, process_id)
    if objective is None:
        raise HTTPException(404, detail="Recovery objective not found for process")
    return objective


@router.post("/calculate/{process_id}", response_model=RecoveryObjectiveDetailOut)
def calculate_recovery_objective(
    process_id: str,
    body: RecalculateRequest,
    db: Session = Depends(get_db),
):
    try:
        return recalculate_for_process(
            db,
            process_id,
            body.timeline_data,
            impact_threshold=body.impact_threshold,
        )
    except InvalidInputError as exc:
        logger.warning("Rejected recalculation for process %s: %s", process_id, exc)
        raise HTTPException(400, detail=str(exc))
    except ProcessNotFoundError as exc:
        logger.warning("%s", exc)
        raise HTTPException(404, detail="Process not found")
