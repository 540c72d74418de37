def test_performer_crud(client):
    resp = client.post("/performers", json={"name": "Ariana Grande", "image_uri": "ari.jpg"})
    assert resp.status_code == 201
    performer = resp.json()
    assert performer == {"id": 1, "name": "Ariana Grande", "image_uri": "ari.jpg"}

    assert client.get("/performers/1").json() == performer

    resp = client.put("/performers/1", json={"image_uri": "ari2.jpg"})
    assert resp.status_code == 200
    assert resp.json() == {"id": 1, "name": "Ariana Grande", "image_uri": "ari2.jpg"}

    assert client.delete("/performers/1").status_code == 204
    assert client.get("/performers/1").status_code == 404


def test_list_performers_in_id_order(client):
    for name in ("Lorde", "Coldplay", "Abba"):
        client.post("/performers", json={"name": name})

    names = [p["name"] for p in client.get("/performers").json()]
    assert names == ["Lorde", "Coldplay", "Abba"]
    assert [p["name"] for p in client.get("/performers", params={"limit": 1, "offset": 1}).json()] == ["Coldplay"]


def test_image_uri_can_be_cleared(client):
    client.post("/performers", json={"name": "Lorde", "image_uri": "lorde.jpg"})
    resp = client.put("/performers/1", json={"image_uri": None})
    assert resp.json()["image_uri"] is None


def test_missing_performer(client):
    assert client.get("/performers/5").status_code == 404
    assert client.put("/performers/5", json={"name": "x"}).status_code == 404
    assert client.delete("/performers/5").status_code == 404
