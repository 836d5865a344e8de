from core.mock_data import PROCESSES, TIMELINE_POINTS, demo_timeline, seed_demo_data
from models import Process


def test_demo_timeline_is_deterministic_and_ordered():
    first = demo_timeline(3)

    assert first == demo_timeline(3)
    assert [s.time_offset for s in first] == [hours for hours, _ in TIMELINE_POINTS]
    assert all(0 <= v <= 5 for s in first for v in s.dimension_values().values())


def test_seed_calculates_objective_for_every_process(db):
    seed_demo_data(db)

    processes = db.query(Process).all()
    assert len(processes) == len(PROCESSES)
    for process in processes:
        objective = process.recovery_objective
        assert objective is not None
        assert objective.mtpd >= 1
        assert objective.rto >= 1
        assert objective.rpo >= 0.5
        if process.criticality == "critical":
            assert objective.mtpd <= 8
            assert objective.mbco is True
        if process.criticality == "high":
            assert objective.mtpd <= 16
