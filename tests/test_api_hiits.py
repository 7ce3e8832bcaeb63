# tests/test_api_hiits.py

import pytest
from seefit import create_app, db
from seefit.cli.seed import seed_default_hiits

QUICK_BLAST_ID = "5d51f171-afbf-4885-91e3-83f0cc72499d"
TABATA_ID = "6bddceaa-8c75-4946-84df-38a4f2abbe79"
TEST_HIIT_ID = "test-uuid-1234-5678-abcdefabcdef"


@pytest.fixture
def app(tmp_path):
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "SEEFIT_PROGRESS_FILE": str(tmp_path / "progress.json"),
    })
    with app.app_context():
        db.create_all()
        seed_default_hiits(db.session)
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def create_test_hiit(client, hiit_id=TEST_HIIT_ID):
    return client.post("/hiits", json={
        "hiit_id": hiit_id,
        "name": "Test HIIT",
        "description": "A test HIIT workout",
        "type": "custom",
    })


# ---------- GET /hiits ----------

def test_list_hiits_returns_defaults(client):
    resp = client.get("/hiits")
    assert resp.status_code == 200
    data = resp.get_json()
    assert isinstance(data, list)
    defaults = [h for h in data if h["type"] == "default"]
    assert len(defaults) == 8
    assert set(data[0].keys()) == {"hiits_id", "name", "description", "type"}


def test_list_hiits_known_names(client):
    names = [h["name"] for h in client.get("/hiits").get_json()]
    for expected in ("HIIT Quick Blast", "Tabata Torch", "Power Plyo HIIT", "Cardio Crusher"):
        assert expected in names


# ---------- POST /hiits ----------

def test_create_hiit_persists(client):
    resp = create_test_hiit(client)
    assert resp.status_code == 200
    assert resp.get_json()["hiits_id"] == TEST_HIIT_ID

    data = client.get("/hiits").get_json()
    created = next(h for h in data if h["hiits_id"] == TEST_HIIT_ID)
    assert created["name"] == "Test HIIT"
    assert created["description"] == "A test HIIT workout"
    assert created["type"] == "custom"
    assert len(data) == 9


def test_create_hiit_defaults_type_to_custom(client):
    resp = client.post("/hiits", json={"hiit_id": "x-1", "name": "N", "description": "D"})
    assert resp.status_code == 200
    assert resp.get_json()["type"] == "custom"


def test_create_hiit_duplicate_id_conflict(client):
    create_test_hiit(client)
    resp = create_test_hiit(client)
    assert resp.status_code == 409
    assert resp.get_json()["error"] == "AlreadyExists"


def test_create_hiit_validation(client):
    resp = client.post("/hiits", json={"hiit_id": "x-2", "name": "   ", "description": "D", "type": "custom"})
    assert resp.status_code == 422
    body = resp.get_json()
    assert body["error"] == "ValidationError"
    assert "name" in body["fields"]

    resp = client.post("/hiits", json={"hiit_id": "x-3", "name": "N", "description": "D", "type": "otro"})
    assert resp.status_code == 422
    assert "type" in resp.get_json()["fields"]

    # nada se insertó
    assert len(client.get("/hiits").get_json()) == 8


@pytest.mark.parametrize("field, value", [
    ("name", 123),
    ("description", {"a": 1}),
    ("hiit_id", 42),
    ("type", ["custom"]),
])
def test_create_hiit_rejects_non_string_values(client, field, value):
    body = {"hiit_id": "x-4", "name": "N", "description": "D", "type": "custom"}
    body[field] = value
    resp = client.post("/hiits", json=body)
    assert resp.status_code == 422
    payload = resp.get_json()
    assert payload["error"] == "ValidationError"
    assert field in payload["fields"]
    assert len(client.get("/hiits").get_json()) == 8


def test_create_hiit_requires_json(client):
    resp = client.post("/hiits", data={"hiit_id": "x", "name": "N", "description": "D"})
    assert resp.status_code == 415


# ---------- GET /hiits/<id> ----------

def test_get_hiit_by_id(client):
    resp = client.get(f"/hiits/{QUICK_BLAST_ID}")
    assert resp.status_code == 200
    assert resp.get_json()["name"] == "HIIT Quick Blast"

    resp = client.get("/hiits/non-existent-id")
    assert resp.status_code == 404
    assert resp.get_json()["error"] == "NotFound"


# ---------- GET /exercise ----------

def test_list_exercises(client):
    resp = client.get("/exercise")
    assert resp.status_code == 200
    data = resp.get_json()
    assert len(data) == 32
    assert set(data[0].keys()) == {
        "exercise_id", "name", "description", "exercise_duration", "rest_duration", "hiit_id"
    }
    hiit_ids = {e["hiit_id"] for e in data}
    assert QUICK_BLAST_ID in hiit_ids
    assert TABATA_ID in hiit_ids
    assert all(e["exercise_duration"] > 0 and e["rest_duration"] > 0 for e in data)


def test_list_exercises_filtered_by_hiit(client):
    data = client.get(f"/exercise?hiit_id={QUICK_BLAST_ID}").get_json()
    assert [e["name"] for e in data] == ["Jumping Jacks", "High Knees", "Burpees", "Mountain Climbers"]


# ---------- POST /exercise ----------

def test_add_exercises_to_hiit(client):
    create_test_hiit(client)
    resp = client.post("/exercise", json={
        "name": "Test Pushups",
        "description": "A test exercise",
        "exercise_duration": 30,
        "rest_duration": 15,
        "hiit_id": TEST_HIIT_ID,
    })
    assert resp.status_code == 200
    resp = client.post("/exercise", json={
        "name": "Test Squats",
        "description": "Another test exercise",
        "exercise_duration": 45,
        "rest_duration": 20,
        "hiit_id": TEST_HIIT_ID,
    })
    assert resp.status_code == 200

    data = client.get("/exercise").get_json()
    mine = [e for e in data if e["hiit_id"] == TEST_HIIT_ID]
    assert [e["name"] for e in mine] == ["Test Pushups", "Test Squats"]
    pushups = mine[0]
    assert pushups["exercise_duration"] == 30
    assert pushups["rest_duration"] == 15


def test_add_exercise_zero_duration_rejected(client):
    resp = client.post("/exercise", json={
        "name": "Zero",
        "description": "No time",
        "exercise_duration": 0,
        "rest_duration": 15,
        "hiit_id": QUICK_BLAST_ID,
    })
    assert resp.status_code == 422
    assert "exercise_duration" in resp.get_json()["fields"]
    assert len(client.get("/exercise").get_json()) == 32


@pytest.mark.parametrize("field, value", [
    ("exercise_duration", 30.9),
    ("exercise_duration", True),
    ("rest_duration", "15"),
    ("name", 7),
    ("description", ["x"]),
])
def test_add_exercise_rejects_wrong_json_types(client, field, value):
    body = {
        "name": "Typed",
        "description": "Type check",
        "exercise_duration": 30,
        "rest_duration": 15,
        "hiit_id": QUICK_BLAST_ID,
    }
    body[field] = value
    resp = client.post("/exercise", json=body)
    assert resp.status_code == 422
    assert field in resp.get_json()["fields"]
    assert len(client.get("/exercise").get_json()) == 32


def test_add_exercise_unknown_hiit_allowed(client):
    # No hay integridad referencial: se guarda igualmente
    resp = client.post("/exercise", json={
        "name": "Orphan",
        "description": "No parent",
        "exercise_duration": 10,
        "rest_duration": 5,
        "hiit_id": "does-not-exist",
    })
    assert resp.status_code == 200
    assert resp.get_json()["hiit_id"] == "does-not-exist"


# ---------- DELETE /hiits/<id> ----------

def test_delete_hiit_idempotent(client):
    create_test_hiit(client)
    resp = client.delete(f"/hiits/{TEST_HIIT_ID}")
    assert resp.status_code == 204
    assert all(h["hiits_id"] != TEST_HIIT_ID for h in client.get("/hiits").get_json())

    resp = client.delete(f"/hiits/{TEST_HIIT_ID}")
    assert resp.status_code == 204
    resp = client.delete("/hiits/non-existent-id")
    assert resp.status_code == 204


def test_delete_hiit_removes_its_exercises(client):
    create_test_hiit(client)
    client.post("/exercise", json={
        "name": "Test Pushups", "description": "A test exercise",
        "exercise_duration": 30, "rest_duration": 15, "hiit_id": TEST_HIIT_ID,
    })
    client.delete(f"/hiits/{TEST_HIIT_ID}")
    assert client.get(f"/exercise?hiit_id={TEST_HIIT_ID}").get_json() == []


# ---------- Integridad de las HIITs por defecto ----------

def test_default_hiits_have_four_exercises(client):
    hiits = client.get("/hiits").get_json()
    exercises = client.get("/exercise").get_json()
    for hiit in (h for h in hiits if h["type"] == "default"):
        own = [e for e in exercises if e["hiit_id"] == hiit["hiits_id"]]
        assert len(own) == 4
        assert hiit["name"]
        assert hiit["description"]


# ---------- SPA y healthcheck ----------

def test_spa_shell(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "html" in resp.headers["Content-Type"]

    resp = client.get("/app/anything/")
    assert resp.status_code == 200
    assert "html" in resp.headers["Content-Type"]


def test_healthz(client):
    resp = client.get("/healthz")
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok"}


# ---------- BD no disponible ----------

def test_storage_unavailable_maps_to_503(client):
    db.session.remove()
    db.drop_all()

    resp = client.get("/hiits")
    assert resp.status_code == 503
    body = resp.get_json()
    assert body["error"] == "StorageUnavailable"

    resp = client.get("/exercise")
    assert resp.status_code == 503


def test_run_module_exposes_app():
    import run

    assert "hiits_api" in run.app.blueprints
    assert "/healthz" in {r.rule for r in run.app.url_map.iter_rules()}
