from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db.base import Base
from models.process import _utcnow

if TYPE_CHECKING:
    from models.process import Process


class RecoveryObjective(Base):
    """One row per process; recalculation overwrites it in place."""

    __tablename__ = "recovery_objective"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    process_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("process.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    mtpd: Mapped[int] = mapped_column(Integer, nullable=False)
    rto: Mapped[int] = mapped_column(Integer, nullable=False)
    rpo: Mapped[float] = mapped_column(Float, nullable=False)
    mbco: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    impact_threshold: Mapped[float] = mapped_column(Float, nullable=False)
    recovery_strategy: Mapped[str] = mapped_column(
        String(64), nullable=False, default="warm_standby"
    )
    strategy_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), index=True, nullable=False, default=_utcnow, onupdate=_utcnow
    )

    process: Mapped["Process"] = relationship(back_populates="recovery_objective")
