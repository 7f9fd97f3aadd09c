def test_create_and_get_quiz(client):
    resp = client.post("/api/quiz/", json={"name": "Geo", "description": "Geography basics"})
    assert resp.status_code == 201
    assert resp.json() == {"id": 1, "name": "Geo", "description": "Geography basics"}

    resp = client.get("/api/quiz/1")
    assert resp.status_code == 200
    assert resp.json() == {"id": 1, "name": "Geo", "description": "Geography basics"}


def test_get_quiz_not_found(client):
    resp = client.get("/api/quiz/5")
    assert resp.status_code == 404
    assert resp.json() == {"status": "failure", "reason": "no rows in result set"}


def test_get_quiz_non_numeric_is_not_found(client):
    resp = client.get("/api/quiz/abc")
    assert resp.status_code == 404
    assert resp.json()["reason"] == "no rows in result set"


def test_create_quiz_missing_field(client):
    resp = client.post("/api/quiz/", json={"name": "Geo"})
    assert resp.status_code == 400
    assert resp.json() == {
        "status": "failure",
        "explaination": "name and description fields are required",
    }


def test_create_quiz_wrong_type(client):
    resp = client.post("/api/quiz/", json={"name": 3, "description": "d"})
    assert resp.status_code == 400
    body = resp.json()
    assert body["status"] == "failure"
    assert body["explaination"].startswith("Invalid Input: ")


def test_create_quiz_malformed_json(client):
    resp = client.post(
        "/api/quiz/", content=b"{not json", headers={"Content-Type": "application/json"}
    )
    assert resp.status_code == 400
    assert resp.json()["explaination"].startswith("Invalid Input: ")


def test_create_quiz_storage_error(client):
    client.app.state.store.execute("DROP TABLE quiz")
    resp = client.post("/api/quiz/", json={"name": "Geo", "description": "Geography basics"})
    assert resp.status_code == 400
    assert resp.json() == {"status": "failure", "explaination": "no such table: quiz"}
