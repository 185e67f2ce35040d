def test_validation_error_envelope(client, register, login):
    register("alice")
    headers = login("alice")

    res = client.post("/api/v1/users/change-password", content="not json", headers={
        **headers,
        "Content-Type": "application/json",
    })

    body = res.json()
    assert res.status_code == 400
    assert body["success"] is False
    assert body["data"] is None
    assert body["statusCode"] == 400
    assert body["message"] == "Invalid request"
    assert body["errors"]
    assert set(body["errors"][0]) == {"loc", "msg", "type"}


def test_unknown_route_uses_envelope(client):
    res = client.get("/api/v1/nope")
    assert res.status_code == 404
    assert res.json()["success"] is False
    assert res.json()["message"] == "Not Found"
