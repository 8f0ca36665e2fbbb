def create(client, name, url):
    res = client.post("/api/departments", json={"name": name, "url": url})
    assert res.status_code == 200
    return res.json()


def test_list_empty(client):
    res = client.get("/api/departments")
    assert res.status_code == 200
    assert res.json() == []


def test_cardiology_scenario(client):
    res = client.post("/api/departments", json={"name": "Cardiology", "url": "/cardiology"})
    assert res.status_code == 200
    assert res.json() == {"id": 1, "name": "Cardiology", "url": "/cardiology"}

    res = client.get("/api/departments")
    assert res.json() == [{"id": 1, "name": "Cardiology", "url": "/cardiology"}]

    res = client.put("/api/departments/1", json={"name": "Cardiology Dept", "url": "/cardio"})
    assert res.status_code == 200
    assert res.json() == {"id": 1, "name": "Cardiology Dept", "url": "/cardio"}

    res = client.delete("/api/departments/1")
    assert res.status_code == 200
    assert res.json() == {"success": True}

    assert client.get("/api/departments").json() == []


def test_create_assigns_unique_ids(client):
    first = create(client, "Neurology", "https://example.org/neuro")
    second = create(client, "Oncology", "https://example.org/onco")

    assert first["id"] != second["id"]
    listed = client.get("/api/departments").json()
    assert first in listed
    assert second in listed


def test_ids_are_not_reused_after_delete(client):
    first = create(client, "Radiology", "/radiology")
    client.delete(f"/api/departments/{first['id']}")

    second = create(client, "Radiology", "/radiology")
    assert second["id"] > first["id"]


def test_update_changes_name_and_url_only(client):
    dept = create(client, "Pediatrics", "/peds")
    other = create(client, "Surgery", "/surgery")

    res = client.put(
        f"/api/departments/{dept['id']}",
        json={"id": 999, "name": "Paediatrics", "url": "/paeds"},
    )
    assert res.status_code == 200
    assert res.json() == {"id": dept["id"], "name": "Paediatrics", "url": "/paeds"}

    listed = client.get("/api/departments").json()
    assert {"id": dept["id"], "name": "Paediatrics", "url": "/paeds"} in listed
    assert other in listed
    assert len(listed) == 2


def test_delete_removes_record(client):
    keep = create(client, "Dermatology", "/derm")
    gone = create(client, "Urology", "/uro")

    res = client.delete(f"/api/departments/{gone['id']}")
    assert res.json() == {"success": True}

    ids = [d["id"] for d in client.get("/api/departments").json()]
    assert ids == [keep["id"]]


def test_list_orders_by_binary_collation(client):
    for name in ("Banana", "apple", "Cherry"):
        create(client, name, f"/{name.lower()}")

    names = [d["name"] for d in client.get("/api/departments").json()]
    assert names == ["Banana", "Cherry", "apple"]


def test_surrounding_whitespace_is_stripped(client):
    dept = create(client, "  Emergency ", " /er ")
    assert dept["name"] == "Emergency"
    assert dept["url"] == "/er"


def test_health(client):
    res = client.get("/api/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


def test_trailing_slash_redirects_to_collection(client):
    dept = create(client, "Cardiology", "/cardiology")

    res = client.get("/api/departments/", follow_redirects=False)
    assert res.status_code == 307
    assert res.headers["location"] == "http://testserver/api/departments"

    assert client.get("/api/departments/").json() == [dept]


def test_trailing_slash_keeps_method_and_body(client):
    res = client.post("/api/departments/", json={"name": "Oncology", "url": "/onco"})
    assert res.status_code == 200
    dept = res.json()
    assert dept["name"] == "Oncology"

    res = client.put(f"/api/departments/{dept['id']}/", json={"name": "Oncology", "url": "/oncology"})
    assert res.status_code == 200
    assert res.json()["url"] == "/oncology"

    res = client.delete(f"/api/departments/{dept['id']}/")
    assert res.json() == {"success": True}
    assert client.get("/api/departments").json() == []


def test_cors_preflight_allows_dev_origin(client):
    res = client.options(
        "/api/departments",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == "http://localhost:5173"


def test_cors_rejects_unknown_origin(client):
    res = client.options(
        "/api/departments",
        headers={
            "Origin": "http://evil.example",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert res.status_code == 400
    assert "access-control-allow-origin" not in res.headers
