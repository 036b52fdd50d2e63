from __future__ import annotations


def _create_employee(client, name="Ann", email="a@x.com", **extra):
    resp = client.post("/api/employees", json={"name": name, "email": email, **extra})
    assert resp.status_code == 201
    return resp.get_json()


def test_employee_crud_flow(client):
    ann = _create_employee(client, department="IT")
    assert ann["id"] == 1
    assert ann["createdAt"].endswith("Z")

    resp = client.put(f"/api/employees/{ann['id']}", json={"position": "Lead"})
    assert resp.status_code == 200
    assert resp.get_json()["department"] == "IT"
    assert resp.get_json()["position"] == "Lead"

    assert client.get("/api/employees/1").get_json()["name"] == "Ann"
    assert client.delete("/api/employees/1").status_code == 204
    assert client.get("/api/employees/1").status_code == 404
    assert client.delete("/api/employees/1").status_code == 404


def test_invalid_ids_are_bad_requests(client):
    assert client.get("/api/employees/abc").get_json() == {"message": "Invalid employee id"}
    assert client.get("/api/employees/0").status_code == 400
    assert client.delete("/api/tasks/-3").status_code == 400


def test_superscript_digits_are_not_ids(client):
    assert client.get("/api/employees/\u00b2").status_code == 400

    resp = client.post("/api/tasks", json={"title": "t", "employeeId": "\u00b2"})
    assert resp.status_code == 400
    assert set(resp.get_json()["errors"]) == {"employeeId"}


def test_create_employee_validation_errors(client):
    resp = client.post("/api/employees", json={"name": ""})
    body = resp.get_json()

    assert resp.status_code == 400
    assert body["message"] == "Invalid employee data"
    assert set(body["errors"]) == {"name", "email"}


def test_duplicate_email_is_conflict(client):
    _create_employee(client)
    resp = client.post("/api/employees", json={"name": "Other", "email": "a@x.com"})
    assert resp.status_code == 409


def test_task_flow_and_dashboard(client):
    ann = _create_employee(client)
    _create_employee(client, name="Bob", email="b@x.com")

    resp = client.post("/api/tasks", json={"title": "Write report", "employeeId": ann["id"], "priority": "high"})
    assert resp.status_code == 201
    task = resp.get_json()
    assert task["status"] == "pending"
    assert task["dueDate"] is None

    stats = client.get("/api/dashboard").get_json()
    assert stats["totalTasks"] == 1
    assert stats["completionRate"] == 0
    assert stats["tasksByPriority"] == {"high": 1, "medium": 0, "low": 0}
    assert stats["tasksByEmployee"] == [
        {"employeeId": 1, "employeeName": "Ann", "taskCount": 1},
        {"employeeId": 2, "employeeName": "Bob", "taskCount": 0},
    ]

    resp = client.post(f"/api/tasks/{task['id']}/toggle")
    assert resp.get_json()["status"] == "completed"
    assert client.get("/api/dashboard").get_json()["completionRate"] == 100


def test_task_for_missing_employee_is_conflict(client):
    resp = client.post("/api/tasks", json={"title": "Orphan", "employeeId": 999})
    assert resp.status_code == 409
    assert client.get("/api/tasks").get_json() == []


def test_due_date_update_semantics(client):
    task = client.post("/api/tasks", json={"title": "t", "dueDate": "2025-06-01T12:00:00Z"}).get_json()
    assert task["dueDate"] == "2025-06-01T12:00:00Z"

    kept = client.put(f"/api/tasks/{task['id']}", json={"title": "renamed"}).get_json()
    assert kept["dueDate"] == "2025-06-01T12:00:00Z"

    resp = client.put(f"/api/tasks/{task['id']}", json={"dueDate": "whenever"})
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Invalid dueDate"
    assert client.get(f"/api/tasks/{task['id']}").get_json()["dueDate"] == "2025-06-01T12:00:00Z"

    cleared = client.put(f"/api/tasks/{task['id']}", json={"dueDate": None}).get_json()
    assert cleared["dueDate"] is None


def test_task_list_filters(client):
    ann = _create_employee(client)
    client.post("/api/tasks", json={"title": "a", "employeeId": ann["id"]})
    client.post("/api/tasks", json={"title": "b", "employeeId": ann["id"], "status": "completed"})
    client.post("/api/tasks", json={"title": "c", "status": "completed"})

    titles = lambda resp: [t["title"] for t in resp.get_json()]

    assert titles(client.get("/api/tasks")) == ["a", "b", "c"]
    assert titles(client.get("/api/tasks?employeeId=1")) == ["a", "b"]
    assert titles(client.get("/api/tasks?employee_id=1&status=completed")) == ["b"]
    assert titles(client.get("/api/tasks?status=completed")) == ["b", "c"]
    assert client.get("/api/tasks?status=finished").status_code == 400


def test_deleting_employee_removes_their_tasks(client):
    ann = _create_employee(client)
    client.post("/api/tasks", json={"title": "a", "employeeId": ann["id"]})
    client.post("/api/tasks", json={"title": "b", "employeeId": ann["id"]})

    assert client.delete(f"/api/employees/{ann['id']}").status_code == 204
    assert client.get("/api/tasks").get_json() == []
    assert client.get("/api/dashboard").get_json()["totalTasks"] == 0


def test_missing_task_is_not_found(client):
    assert client.get("/api/tasks/9").status_code == 404
    assert client.put("/api/tasks/9", json={"title": "x"}).status_code == 404
    assert client.post("/api/tasks/9/toggle").status_code == 404


def test_unknown_route_is_json_404(client):
    resp = client.get("/api/nothing-here")
    assert resp.status_code == 404
    assert "message" in resp.get_json()
