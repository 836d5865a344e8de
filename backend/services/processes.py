"""
Business process registry. Each process carries the criticality the recovery
objective calculator caps MTPD with.
"""
import logging

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from models.process import Process
from schemas.processes import ProcessCreate, ProcessUpdate

logger = logging.getLogger(__name__)


class ProcessNotFoundError(LookupError):
    def __init__(self, process_id: str) -> None:
        super().__init__(f"Process not found: {process_id}")
        self.process_id = process_id


def list_processes(db: Session) -> list[Process]:
    stmt = (
        select(Process)
        .options(selectinload(Process.recovery_objective))
        .order_by(Process.name)
    )
    return list(db.scalars(stmt).all())


def get_process(db: Session, process_id: str) -> Process | None:
    stmt = (
        select(Process)
        .options(selectinload(Process.recovery_objective))
        .where(Process.id == process_id)
    )
    return db.scalar(stmt)


def create_process(db: Session, data: ProcessCreate) -> Process:
    process = Process(**data.model_dump(mode="json"))
    db.add(process)
    db.commit()
    db.refresh(process)
    logger.info("Created process %s (%s, %s)", process.id, process.name, process.criticality)
    return process


def update_process(db: Session, process_id: str, data: ProcessUpdate) -> Process:
    """Apply only the fields present in the request. Stored objectives are not recalculated."""
    process = get_process(db, process_id)
    if process is None:
        raise ProcessNotFoundError(process_id)
    for field, value in data.model_dump(mode="json", exclude_unset=True).items():
        setattr(process, field, value)
    db.commit()
    db.refresh(process)
    return process


def delete_process(db: Session, process_id: str) -> None:
    process = get_process(db, process_id)
    if process is None:
        raise ProcessNotFoundError(process_id)
    db.delete(process)
    db.commit()
    logger.info("Deleted process %s", process_id)
