import asyncio
from uuid import uuid4

from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select

from core.database import AsyncSessionLocal, Base, engine
from models.progress import Score


def _create_child(client, first_name="Emma", level="débutant"):
    response = client.post("/api/children/", json={"first_name": first_name, "level": level})
    assert response.status_code == 200
    return response.json()


def _submit(client, child_id, score, elapsed, level="débutant", max_score=10):
    return client.post("/api/scores/", json={
        "child_id": child_id,
        "level": level,
        "score": score,
        "max_score": max_score,
        "elapsed_time": elapsed,
    })


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_levels(client):
    response = client.get("/api/exercises/levels")
    assert response.status_code == 200
    assert [lvl["name"] for lvl in response.json()] == ["débutant", "intermédiaire", "expert"]


def test_generate_exercises(client):
    response = client.post("/api/exercises/generate", json={"level": "débutant", "count": 5})
    assert response.status_code == 200
    body = response.json()
    assert len(body) == 5
    for exercise in body:
        assert exercise["type"] == "QCM"
        assert exercise["level"] == "débutant"
        assert len(exercise["options"]) == 3
        assert exercise["options"].count(exercise["correctAnswer"]) == 1


def test_generate_defaults_to_session_size(client):
    response = client.post("/api/exercises/generate", json={"level": "expert"})
    assert response.status_code == 200
    assert len(response.json()) == 20


def test_generate_is_reproducible_with_seed(client):
    payload = {"level": "intermédiaire", "count": 8, "seed": 11}
    first = client.post("/api/exercises/generate", json=payload).json()
    second = client.post("/api/exercises/generate", json=payload).json()
    assert [e["sentence"] for e in first] == [e["sentence"] for e in second]


def test_generate_and_persist(client):
    response = client.post("/api/exercises/generate", json={"level": "expert", "count": 3, "persist": True})
    assert response.status_code == 200
    assert len(response.json()) == 3


def test_generate_rejects_bad_input(client):
    response = client.post("/api/exercises/generate", json={"level": "facile", "count": 5})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "E2005_INVALID_CHOICE"

    response = client.post("/api/exercises/generate", json={"level": "débutant", "count": -1})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "E2000_VALIDATION_GENERIC"

    response = client.post("/api/exercises/generate", json={"level": "débutant", "count": 1000})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "E2003_OUT_OF_RANGE"


def test_children(client):
    child = _create_child(client, "  Hugo ", "expert")
    assert child["first_name"] == "Hugo"
    assert child["level"] == "expert"

    fetched = client.get(f"/api/children/{child['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["id"] == child["id"]

    listed = client.get("/api/children/").json()
    assert child["id"] in [c["id"] for c in listed]


def test_unknown_child(client):
    response = client.get(f"/api/children/{uuid4()}")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "E4010_NOT_FOUND"


def test_best_score_flow(client):
    child_id = _create_child(client)["id"]

    missing = client.get("/api/scores/best", params={"child_id": child_id, "level": "débutant"})
    assert missing.status_code == 404

    first = _submit(client, child_id, score=6, elapsed=80.0).json()
    assert first["isNewRecord"] is True
    assert first["best"]["score"] == 6

    slower = _submit(client, child_id, score=6, elapsed=95.0).json()
    assert slower["isNewRecord"] is False
    assert slower["best"]["elapsedTime"] == 80.0

    faster = _submit(client, child_id, score=6, elapsed=70.0).json()
    assert faster["isNewRecord"] is True

    lower = _submit(client, child_id, score=5, elapsed=10.0).json()
    assert lower["isNewRecord"] is False

    higher = _submit(client, child_id, score=9, elapsed=200.0).json()
    assert higher["isNewRecord"] is True

    best = client.get("/api/scores/best", params={"child_id": child_id, "level": "débutant"}).json()
    assert best["score"] == 9
    assert best["maxScore"] == 10
    assert best["formattedTime"] == "03:20"


def test_records_are_kept_per_level(client):
    child_id = _create_child(client, "Léa")["id"]
    assert _submit(client, child_id, score=9, elapsed=30.0).json()["isNewRecord"]
    assert _submit(client, child_id, score=2, elapsed=30.0, level="expert").json()["isNewRecord"]


def test_score_validation(client):
    child_id = _create_child(client, "Jade")["id"]

    too_high = _submit(client, child_id, score=11, elapsed=10.0)
    assert too_high.status_code == 400
    assert too_high.json()["error"]["code"] == "E2003_OUT_OF_RANGE"

    bad_level = _submit(client, child_id, score=3, elapsed=10.0, level="facile")
    assert bad_level.status_code == 400

    unknown = _submit(client, str(uuid4()), score=3, elapsed=10.0)
    assert unknown.status_code == 404


def test_languages(client):
    languages = client.get("/api/languages/").json()
    assert languages == [{"code": "fr", "name": "French", "nativeName": "Français"}]

    grammar = client.get("/api/languages/fr/grammar").json()
    assert grammar["hasElision"] is True
    assert {verb["label"] for verb in grammar["verbs"]} == {"avoir", "être", "aller"}
    avoir = next(v for v in grammar["verbs"] if v["id"] == "avoir")
    assert avoir["paradigm"][0] == {"pronoun": "je", "form": "ai"}

    assert client.get("/api/languages/xx/grammar").status_code == 404


def test_correlation_id_is_echoed(client):
    response = client.get("/health", headers={"X-Correlation-ID": "abc-123"})
    assert response.headers.get("X-Correlation-ID") == "abc-123"


def test_concurrent_submissions_keep_a_single_record():
    from main import app

    async def scenario():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        try:
            async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http:
                child = await http.post("/api/children/", json={"first_name": "Inès"})
                child_id = child.json()["id"]
                runs = [(4, 50.0), (7, 90.0), (7, 60.0), (2, 10.0)]
                responses = await asyncio.gather(*(
                    http.post("/api/scores/", json={
                        "child_id": child_id,
                        "level": "débutant",
                        "score": score,
                        "max_score": 10,
                        "elapsed_time": elapsed,
                    })
                    for score, elapsed in runs
                ))
                best = await http.get("/api/scores/best", params={"child_id": child_id, "level": "débutant"})

            async with AsyncSessionLocal() as session:
                rows = await session.scalar(
                    select(func.count()).select_from(Score).where(Score.child_id == child_id, Score.level == "débutant")
                )
            return responses, best.json(), rows
        finally:
            await engine.dispose()

    responses, best, rows = asyncio.run(scenario())

    assert all(r.status_code == 200 for r in responses)
    assert rows == 1
    assert (best["score"], best["elapsedTime"]) == (7, 60.0)


def test_equal_score_keeps_faster_run(client):
    child_id = _create_child(client, "Chloé")["id"]
    assert _submit(client, child_id, score=8, elapsed=40.0).json()["isNewRecord"]
    assert not _submit(client, child_id, score=8, elapsed=40.0).json()["isNewRecord"]
    assert _submit(client, child_id, score=8, elapsed=35.5).json()["isNewRecord"]

    best = client.get("/api/scores/best", params={"child_id": child_id, "level": "débutant"}).json()
    assert best["elapsedTime"] == 35.5
