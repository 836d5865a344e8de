"""
Deterministic mock data for demo mode.

- 12 business processes across departments with fixed criticalities.
- One disruption timeline per process at 0h, 1h, 4h, 8h, 1d, 2d, 3d. Each impact
  dimension ramps toward a per-process peak on a 0-5 scale:
  impact = peak * (1 - exp(-hours / ramp)).
- Recovery objectives are calculated from those timelines with the default threshold.
"""
import math

from sqlalchemy.orm import Session

from core.config import DEFAULT_IMPACT_THRESHOLD
from models import Process
from schemas.recovery_objectives import DIMENSIONS, TimelineSample
from services.recovery_objectives import compute_recovery_objectives, upsert_recovery_objective

DEMO_OWNER = "Operations Manager"
DEMO_STATUS = "approved"
TIMELINE_POINTS = [
    (0, "0h"),
    (1, "1h"),
    (4, "4h"),
    (8, "8h"),
    (24, "1d"),
    (48, "2d"),
    (72, "3d"),
]

PROCESSES = [
    ("Customer Support", "Customer Service", "Handling customer inquiries and support tickets", "critical"),
    ("Order Processing", "Operations", "Processing and fulfilling customer orders", "critical"),
    ("Payment Processing", "Finance", "Processing payments and financial transactions", "critical"),
    ("Data Analytics", "IT", "Analyzing business data and generating reports", "high"),
    ("Email Communication", "Communications", "Sending and receiving business emails", "high"),
    ("Inventory Management", "Operations", "Managing product inventory and stock levels", "high"),
    ("Human Resources", "Administration", "Managing employee records and HR functions", "medium"),
    ("Cloud Infrastructure", "IT", "Managing cloud-based systems and services", "critical"),
    ("Website & Portal", "IT", "Operating the main website and customer portal", "critical"),
    ("Financial Reporting", "Finance", "Preparing financial reports and compliance documents", "medium"),
    ("Production Manufacturing", "Operations", "Manufacturing and quality control processes", "high"),
    ("Legal & Compliance", "Legal", "Managing legal compliance and regulatory requirements", "medium"),
]


def _impact(process_idx: int, dim_idx: int, hours: float) -> float:
    """Deterministic: ramps from 0 toward a 1.5-5.0 peak; faster ramp for lower indexes."""
    peak = 1.5 + ((process_idx * 3 + dim_idx) % 8) * 0.5
    ramp = 4.0 + 6.0 * (process_idx % 5)
    return round(peak * (1 - math.exp(-hours / ramp)), 1)


def demo_timeline(process_idx: int) -> list[TimelineSample]:
    return [
        TimelineSample(
            time_offset=hours,
            time_label=label,
            **{dim: _impact(process_idx, dim_idx, hours) for dim_idx, dim in enumerate(DIMENSIONS)},
        )
        for hours, label in TIMELINE_POINTS
    ]


def seed_demo_data(db: Session) -> None:
    """Insert demo processes with calculated recovery objectives. Idempotent only if table empty."""
    for idx, (name, department, description, criticality) in enumerate(PROCESSES):
        process = Process(
            name=name,
            department=department,
            description=description,
            criticality=criticality,
            owner=DEMO_OWNER,
            status=DEMO_STATUS,
        )
        db.add(process)
        db.flush()

        result = compute_recovery_objectives(
            criticality, demo_timeline(idx), DEFAULT_IMPACT_THRESHOLD
        )
        upsert_recovery_objective(process, result, DEFAULT_IMPACT_THRESHOLD)
    db.commit()
