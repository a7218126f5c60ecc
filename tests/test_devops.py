"""Tests for the class listing routes: /devops and /devops-count."""


def test_list_returns_seeded_students_in_order(client, seeded):
    resp = client.get("/devops")
    assert resp.status_code == 200
    assert resp.json() == seeded


def test_count_on_fresh_roster(client):
    resp = client.get("/devops-count")
    assert resp.status_code == 200
    assert resp.json() == 4


def test_count_matches_list_after_additions(client):
    for class_id in (10, 11, 12):
        client.post("/students", json={"classId": class_id, "name": f"Student {class_id}", "gender": "female"})
        listed = client.get("/devops").json()
        assert client.get("/devops-count").json() == len(listed)
    assert len(listed) == 7


def test_count_unchanged_by_rejected_additions(client):
    client.post("/students", json={"classId": 1, "name": "Copy", "gender": "male"})
    client.post("/students", json={"name": "No Id", "gender": "male"})
    assert client.get("/devops-count").json() == len(client.get("/devops").json()) == 4


def test_list_reflects_new_student_at_end(client, new_student, seeded):
    client.post("/students", json=new_student)
    students = client.get("/devops").json()
    assert students[-1] == new_student
    assert students[:4] == seeded
