"""Course listing."""


def test_list_courses_sorted_by_cycle_then_name(client, seed_courses):
    resp = client.get("/api/courses")
    assert resp.status_code == 200
    names = [c["name"] for c in resp.json()]
    assert names == ["Introduction to Programming", "Algorithms", "Data Structures"]


def test_list_courses_filtered_by_cycle(client, seed_courses):
    resp = client.get("/api/courses?cycle=3")
    assert resp.status_code == 200
    data = resp.json()
    assert {c["code"] for c in data} == {"IS-121", "IS-122"}
    assert all(c["cycle"] == 3 for c in data)


def test_list_courses_empty_cycle(client, seed_courses):
    resp = client.get("/api/courses?cycle=9")
    assert resp.status_code == 200
    assert resp.json() == []
