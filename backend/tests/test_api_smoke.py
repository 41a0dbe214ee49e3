def test_root_ok(client):
    r = client.get("/")
    assert r.status_code == 200
    data = r.json()
    assert "message" in data


def test_create_and_list_weight(client):
    payload = {"date": "2025-01-01", "pounds": 182.4}
    cr = client.post("/api/v1/weights", json=payload)
    assert cr.status_code == 201, cr.text
    entry = cr.json()
    assert entry["id"] > 0
    assert entry["created_at"] == entry["updated_at"]

    # list within range
    lr = client.get("/api/v1/weights", params={"start_date": "2024-12-30", "end_date": "2025-01-02"})
    assert lr.status_code == 200
    arr = lr.json()["weights"]
    assert any(w["date"] == "2025-01-01" and w["pounds"] == 182.4 for w in arr)


def test_cors_allows_configured_origin(client):
    r = client.options(
        "/api/v1/weights",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "http://localhost:3000"
