from models import Process, RecoveryObjective


def test_create_and_get_process(client):
    resp = client.post(
        "/api/processes/",
        json={
            "name": "Cloud Infrastructure",
            "department": "IT",
            "criticality": "critical",
            "owner": "Operations Manager",
        },
    )

    assert resp.status_code == 201
    created = resp.json()
    assert created["criticality"] == "critical"
    assert created["status"] == "draft"
    assert created["recovery_objective"] is None

    fetched = client.get(f"/api/processes/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["name"] == "Cloud Infrastructure"


def test_create_rejects_unknown_criticality(client):
    resp = client.post("/api/processes/", json={"name": "Payroll", "criticality": "urgent"})

    assert resp.status_code == 422


def test_list_includes_recovery_objective(client, make_process):
    process = make_process(name="Website & Portal", criticality="critical")
    make_process(name="Data Analytics", criticality="high")
    client.post(
        f"/api/recovery-objectives/calculate/{process.id}",
        json={"timelineData": [{"timeOffset": 0, "operational": 4}]},
    )

    listed = client.get("/api/processes/").json()

    by_name = {p["name"]: p for p in listed}
    assert by_name["Website & Portal"]["recovery_objective"]["mtpd"] == 1
    assert by_name["Data Analytics"]["recovery_objective"] is None


def test_update_process_partial(client, make_process):
    process = make_process(name="Inventory Management", criticality="medium", owner="Ops")

    resp = client.put(f"/api/processes/{process.id}", json={"criticality": "high"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["criticality"] == "high"
    assert body["owner"] == "Ops"


def test_update_unknown_process_is_404(client):
    resp = client.put("/api/processes/missing", json={"status": "approved"})

    assert resp.status_code == 404


def test_get_unknown_process_is_404(client):
    assert client.get("/api/processes/missing").status_code == 404


def test_delete_cascades_to_recovery_objective(client, db, make_process):
    process = make_process()
    client.post(
        f"/api/recovery-objectives/calculate/{process.id}",
        json={"timelineData": [{"timeOffset": 4, "financial": 3}]},
    )

    resp = client.delete(f"/api/processes/{process.id}")

    assert resp.status_code == 204
    assert db.query(Process).count() == 0
    assert db.query(RecoveryObjective).count() == 0
    assert client.delete(f"/api/processes/{process.id}").status_code == 404


def test_healthz(client):
    assert client.get("/healthz").json() == {"ok": True}


def test_update_rejects_null_for_required_fields(client, db, make_process):
    process = make_process(name="Financial Reporting", criticality="medium")

    for field in ("name", "criticality", "status"):
        resp = client.put(f"/api/processes/{process.id}", json={field: None})
        assert resp.status_code == 422

    db.refresh(process)
    assert process.name == "Financial Reporting"
    assert process.status == "draft"


def test_update_allows_null_for_optional_fields(client, make_process):
    process = make_process(owner="Finance Lead")

    resp = client.put(f"/api/processes/{process.id}", json={"owner": None})

    assert resp.status_code == 200
    assert resp.json()["owner"] is None
