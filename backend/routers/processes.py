import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from db.deps import get_db
from schemas.processes import ProcessCreate, ProcessOut, ProcessUpdate
from services.processes import (
    ProcessNotFoundError,
    create_process,
    delete_process,
    get_process,
    list_processes,
    update_process,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _not_found(exc: ProcessNotFoundError) -> HTTPException:
    logger.warning("%s", exc)
    return HTTPException(404, detail="Process not found")


@router.get("/", response_model=list[ProcessOut])
def get_processes(db: Session = Depends(get_db)):
    return list_processes(db)


@router.get("/{process_id}", response_model=ProcessOut)
def get_single_process(process_id: str, db: Session = Depends(get_db)):
    process = get_process(db, process_id)
    if process is None:
        raise _not_found(ProcessNotFoundError(process_id))
    return process


@router.post("/", response_model=ProcessOut, status_code=status.HTTP_201_CREATED)
def post_process(body: ProcessCreate, db: Session = Depends(get_db)):
    return create_process(db, body)


@router.put("/{process_id}", response_model=ProcessOut)
def put_process(process_id: str, body: ProcessUpdate, db: Session = Depends(get_db)):
    try:
        return update_process(db, process_id, body)
    except ProcessNotFoundError as exc:
        raise _not_found(exc)


@router.delete("/{process_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_process(process_id: str, db: Session = Depends(get_db)):
    try:
        delete_process(db, process_id)
    except ProcessNotFoundError as exc:
        raise _not_found(exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
