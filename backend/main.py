import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import select

from core.config import DEMO_MODE, LOG_LEVEL
from db.base import Base
from db.session import SessionLocal, engine
from models import Process
from routers.processes import router as processes_router
from routers.recovery_objectives import router as recovery_objectives_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="BCMS API")


@app.on_event("startup")
def startup() -> None:
    if not DEMO_MODE:
        return
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if db.scalar(select(Process.id).limit(1)) is None:
            from core.mock_data import seed_demo_data

            logger.info("Seeding demo processes")
            seed_demo_data(db)
    finally:
        db.close()

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(processes_router, prefix="/api/processes")
app.include_router(recovery_objectives_router, prefix="/api/recovery-objectives")


@app.get("/healthz")
def healthz():
    return {"ok": True}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
