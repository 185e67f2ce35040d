"""
Video routes: publishing, listing, watching and maintenance.
"""

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


def test_publish_stores_media(client, register, login, publish):
    alice = register("alice")
    headers = login("alice")

    video = publish(headers, title="  First upload ")

    assert video["title"] == "First upload"
    assert video["ownerId"] == alice["id"]
    assert video["isPublished"] is True
    assert video["duration"] == 12.5
    assert video["views"] == 0
    assert client.get(video["videoFile"]).status_code == 200
    assert client.get(video["thumbnail"]).status_code == 200


def test_publish_requires_files_and_title(client, register, login):
    register("alice")
    headers = login("alice")

    no_files = client.post("/api/v1/videos", data={"title": "x"}, headers=headers)
    assert no_files.status_code == 400

    no_title = client.post(
        "/api/v1/videos",
        data={"description": "d"},
        files={
            "videoFile": ("clip.mp4", b"data", "video/mp4"),
            "thumbnail": ("t.png", PNG, "image/png"),
        },
        headers=headers,
    )
    assert no_title.status_code == 400


def test_publish_requires_auth(client):
    assert client.post("/api/v1/videos", data={"title": "x"}).status_code == 401


def test_list_paginates_published_only(client, register, login, publish):
    register("alice")
    headers = login("alice")
    for i in range(3):
        publish(headers, title=f"Video {i}")
    publish(headers, title="Hidden draft", isPublished="false")

    res = client.get("/api/v1/videos", params={"limit": 2, "page": 2}, headers=headers)

    assert res.status_code == 200
    data = res.json()["data"]
    assert data["count"] == 3
    assert data["page"] == 2
    assert data["limit"] == 2
    assert [v["title"] for v in data["videos"]] == ["Video 0"]
    assert data["videos"][0]["owner"]["userName"] == "alice"


def test_list_rejects_out_of_range_page(client, register, login):
    register("alice")
    headers = login("alice")

    res = client.get("/api/v1/videos", params={"page": "10000000000000000000"}, headers=headers)

    assert res.status_code == 400
    assert res.json()["message"] == "Page is out of range"
    assert res.json()["success"] is False


def test_list_query_sort_and_owner(client, register, login, publish):
    alice = register("alice")
    register("bob")
    alice_headers = login("alice")
    bob_headers = login("bob")
    publish(alice_headers, title="Banana bread")
    publish(alice_headers, title="Apple pie")
    publish(bob_headers, title="Apple crumble")

    res = client.get(
        "/api/v1/videos",
        params={"query": "apple", "sortBy": "title", "sortType": "asc"},
        headers=bob_headers,
    )
    assert [v["title"] for v in res.json()["data"]["videos"]] == ["Apple crumble", "Apple pie"]

    res = client.get("/api/v1/videos", params={"userId": alice["id"]}, headers=bob_headers)
    assert res.json()["data"]["count"] == 2

    bad = client.get("/api/v1/videos", params={"sortBy": "password"}, headers=bob_headers)
    assert bad.status_code == 400


def test_get_counts_view_and_records_history(client, register, login, publish):
    register("alice")
    register("bob")
    video = publish(login("alice"))
    bob = login("bob")

    first = client.get(f"/api/v1/videos/{video['id']}", headers=bob)
    second = client.get(f"/api/v1/videos/{video['id']}", headers=bob)

    assert first.json()["data"]["views"] == 1
    assert second.json()["data"]["views"] == 2
    assert second.json()["data"]["owner"]["userName"] == "alice"
    assert second.json()["data"]["likes"] == 0

    history = client.get("/api/v1/users/watch-history", headers=bob).json()["data"]
    assert [h["video"]["id"] for h in history] == [video["id"]]

    removed = client.patch(f"/api/v1/users/watch-history/{video['id']}", headers=bob)
    assert removed.json()["data"] == {"removed": 1}
    assert client.get("/api/v1/users/watch-history", headers=bob).json()["data"] == []


def test_clear_watch_history(client, register, login, publish):
    register("alice")
    headers = login("alice")
    for title in ("one", "two"):
        video = publish(headers, title=title)
        client.get(f"/api/v1/videos/{video['id']}", headers=headers)

    assert len(client.get("/api/v1/users/watch-history", headers=headers).json()["data"]) == 2

    cleared = client.patch("/api/v1/users/watch-history", headers=headers)
    assert cleared.status_code == 200
    assert client.get("/api/v1/users/watch-history", headers=headers).json()["data"] == []


def test_drafts_visible_to_owner_only(client, register, login, publish):
    register("alice")
    register("bob")
    alice = login("alice")
    draft = publish(alice, title="Secret", isPublished="false")
    bob = login("bob")

    assert client.get(f"/api/v1/videos/{draft['id']}", headers=alice).status_code == 200
    assert client.get(f"/api/v1/videos/{draft['id']}", headers=bob).status_code == 403


def test_history_drops_videos_unpublished_later(client, register, login, publish):
    register("alice")
    register("bob")
    alice = login("alice")
    video = publish(alice)
    bob = login("bob")
    client.get(f"/api/v1/videos/{video['id']}", headers=bob)

    client.patch(f"/api/v1/videos/toggle/publish/{video['id']}", headers=alice)

    assert client.get("/api/v1/users/watch-history", headers=bob).json()["data"] == []


def test_get_bad_ids(client, register, login):
    register("alice")
    headers = login("alice")

    assert client.get("/api/v1/videos/not-a-uuid", headers=headers).status_code == 400
    missing = client.get("/api/v1/videos/00000000-0000-0000-0000-000000000000", headers=headers)
    assert missing.status_code == 404
    assert missing.json()["message"] == "Video not found"


def test_update_and_ownership(client, register, login, publish):
    register("alice")
    register("bob")
    alice = login("alice")
    video = publish(alice)
    bob = login("bob")

    forbidden = client.patch(f"/api/v1/videos/{video['id']}", data={"title": "mine"}, headers=bob)
    assert forbidden.status_code == 403

    res = client.patch(
        f"/api/v1/videos/{video['id']}",
        data={"title": "Renamed", "description": "new"},
        files={"thumbnail": ("new.png", PNG, "image/png")},
        headers=alice,
    )
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["title"] == "Renamed"
    assert data["thumbnail"] != video["thumbnail"]
    assert client.get(video["thumbnail"]).status_code == 404


def test_toggle_publish(client, register, login, publish):
    register("alice")
    alice = login("alice")
    video = publish(alice)

    flipped = client.patch(f"/api/v1/videos/toggle/publish/{video['id']}", headers=alice)
    assert flipped.json()["data"]["isPublished"] is False

    explicit = client.patch(
        f"/api/v1/videos/toggle/publish/{video['id']}",
        json={"isPublished": False},
        headers=alice,
    )
    assert explicit.json()["data"]["isPublished"] is False


def test_delete_removes_media(client, register, login, publish):
    register("alice")
    register("bob")
    alice = login("alice")
    video = publish(alice)
    bob = login("bob")

    assert client.delete(f"/api/v1/videos/{video['id']}", headers=bob).status_code == 403

    res = client.delete(f"/api/v1/videos/{video['id']}", headers=alice)
    assert res.status_code == 200
    assert client.get(f"/api/v1/videos/{video['id']}", headers=alice).status_code == 404
    assert client.get(video["videoFile"]).status_code == 404
