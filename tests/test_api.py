from fastapi.testclient import TestClient


WORKSHOP = {"name": "Workshop", "dateRange": "01/01", "hoursLoad": 10, "dayCount": 2}


def test_end_to_end_attendance_flow(client):
    response = client.post("/api/events", json=WORKSHOP)
    assert response.status_code == 200
    assert response.json()["id"] == 1

    response = client.post("/api/participants", json={"eventId": 1, "name": "Ana", "nationalId": "123"})
    assert response.status_code == 200
    assert response.json()["id"] == 1

    response = client.put("/api/participants/1/attendance", json={"attendance": [True, False]})
    assert response.status_code == 200
    assert response.json()["updatedId"] == 1

    rows = client.get("/api/participants").json()
    assert len(rows) == 1
    assert rows[0]["eventName"] == "Workshop"
    assert rows[0]["attendance"] == [True, False]
    assert rows[0]["nationalId"] == "123"
    assert rows[0]["eventId"] == 1


def test_list_events_uses_camel_case(client):
    client.post("/api/events", json={**WORKSHOP, "content": "Tópicos"})
    events = client.get("/api/events").json()
    assert len(events) == 1
    event = events[0]
    assert event["dateRange"] == "01/01"
    assert event["hoursLoad"] == 10
    assert event["dayCount"] == 2
    assert event["content"] == "Tópicos"
    assert "createdAt" in event


def test_create_event_missing_field_is_400(client):
    body = dict(WORKSHOP)
    del body["dayCount"]
    response = client.post("/api/events", json=body)
    assert response.status_code == 400
    assert response.json()["error"] == "ValidationError"
    assert "dayCount" in response.json()["message"]
    assert client.get("/api/events").json() == []


def test_malformed_field_type_is_400(client):
    response = client.post("/api/events", json={**WORKSHOP, "hoursLoad": "ten"})
    assert response.status_code == 400
    assert response.json()["error"] == "ValidationError"


def test_attendance_must_be_an_array(client):
    client.post("/api/events", json=WORKSHOP)
    client.post(
        "/api/participants",
        json={"eventId": 1, "name": "Ana", "nationalId": "123", "attendance": [True]},
    )
    for payload in ({"attendance": 5}, {"attendance": {"a": 1}}, {}):
        response = client.put("/api/participants/1/attendance", json=payload)
        assert response.status_code == 400
        assert response.json()["error"] == "ValidationError"
    assert client.get("/api/participants").json()[0]["attendance"] == [True]


def test_delete_unknown_ids_succeed(client):
    client.post("/api/events", json=WORKSHOP)
    before = client.get("/api/events").json()

    response = client.delete("/api/events/99")
    assert response.status_code == 200
    assert response.json()["deletedId"] == 99

    response = client.delete("/api/participants/99")
    assert response.status_code == 200
    assert response.json()["deletedId"] == 99

    assert client.get("/api/events").json() == before


def test_deleting_event_keeps_participants(client):
    client.post("/api/events", json=WORKSHOP)
    client.post("/api/participants", json={"eventId": 1, "name": "Ana", "nationalId": "123"})
    client.delete("/api/events/1")
    rows = client.get("/api/participants").json()
    assert len(rows) == 1
    assert rows[0]["eventName"] is None


def test_login(client):
    response = client.post("/api/login", json={"username": "coronelvivida", "password": "educacao@2024"})
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["user"]["role"] == "admin"
    assert body["token"].startswith("token-")


def test_login_failures(client):
    response = client.post("/api/login", json={"username": "coronelvivida", "password": "nope"})
    assert response.status_code == 401
    assert response.json()["success"] is False
    assert response.json()["error"] == "AuthenticationError"

    response = client.post("/api/login", json={"username": "coronelvivida"})
    assert response.status_code == 400


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "OK"
    assert body["storageMode"] == "volatile"
    assert "timestamp" in body and "message" in body


def test_health_reports_closed_database(client, app):
    app.state.db.close()
    response = client.get("/api/health")
    assert response.status_code == 503
    assert response.json()["status"] == "ERROR"


def test_unknown_route_lists_available_routes(client):
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
    body = response.json()
    assert body["error"] == "NotFoundError"
    assert body["path"] == "/api/nothing-here"
    assert body["method"] == "GET"
    assert "GET /api/events" in body["availableRoutes"]
    assert "PUT /api/participants/{participant_id}/attendance" in body["availableRoutes"]


def test_corrupt_attendance_is_500(client, app):
    client.post("/api/events", json=WORKSHOP)
    client.post("/api/participants", json={"eventId": 1, "name": "Ana", "nationalId": "123"})
    with app.state.db.cursor() as cursor:
        cursor.execute("UPDATE participants SET attendance = 'oops' WHERE id = 1")
    response = client.get("/api/participants")
    assert response.status_code == 500
    assert response.json()["error"] == "CorruptDataError"


def test_unhandled_error_is_generic_500(app):
    @app.get("/boom")
    async def boom():
        raise RuntimeError("kaboom")

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/boom")
    assert response.status_code == 500
    assert response.json() == {"error": "InternalServerError", "message": "Something went wrong"}


def test_root_and_favicon(client):
    body = client.get("/").json()
    assert body["status"] == "Online"
    assert body["endpoints"]["events"]["list"] == "GET /api/events"
    assert client.get("/favicon.ico").status_code == 204


HUGE_ID = 99999999999999999999


def test_nan_attendance_is_rejected(client):
    client.post("/api/events", json=WORKSHOP)
    client.post(
        "/api/participants",
        json={"eventId": 1, "name": "Ana", "nationalId": "123", "attendance": [True]},
    )
    response = client.put(
        "/api/participants/1/attendance",
        content='{"attendance": [NaN]}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "ValidationError"
    assert client.get("/api/participants").json()[0]["attendance"] == [True]


def test_out_of_range_ids(client):
    client.post("/api/events", json=WORKSHOP)
    client.post("/api/participants", json={"eventId": 1, "name": "Ana", "nationalId": "123"})

    response = client.delete(f"/api/events/{HUGE_ID}")
    assert response.status_code == 200
    assert response.json()["deletedId"] == HUGE_ID

    response = client.delete(f"/api/participants/{HUGE_ID}")
    assert response.status_code == 200
    assert response.json()["deletedId"] == HUGE_ID

    response = client.put(f"/api/participants/{HUGE_ID}/attendance", json={"attendance": [True]})
    assert response.status_code == 200
    assert response.json()["updatedId"] == HUGE_ID

    assert len(client.get("/api/events").json()) == 1
    assert client.get("/api/participants").json()[0]["attendance"] == []


def test_out_of_range_fields_are_400(client):
    response = client.post("/api/events", json={**WORKSHOP, "hoursLoad": HUGE_ID})
    assert response.status_code == 400
    assert response.json()["error"] == "ValidationError"

    response = client.post(
        "/api/participants", json={"eventId": HUGE_ID, "name": "Ana", "nationalId": "123"}
    )
    assert response.status_code == 400
    assert response.json()["error"] == "ValidationError"


def test_event_id_zero_is_400(client):
    response = client.post("/api/participants", json={"eventId": 0, "name": "Ana", "nationalId": "123"})
    assert response.status_code == 400
    assert "eventId" in response.json()["message"]


def test_unsupported_method_lists_available_routes(client):
    response = client.patch("/api/events", json={})
    assert response.status_code == 404
    body = response.json()
    assert body["error"] == "NotFoundError"
    assert body["method"] == "PATCH"
    assert "POST /api/events" in body["availableRoutes"]
