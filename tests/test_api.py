import uuid


def create_user(client, username):
    resp = client.post("/users/", json={"username": username, "avatar_url": f"https://cdn.test/{username}.png"})
    assert resp.status_code == 201
    return resp.json()["data"]["uid"]


def publish(client, owner_id, title, description="", duration=30):
    resp = client.post(
        "/video/publish-video",
        headers={"X-User-Id": owner_id},
        json={
            "title": title,
            "description": description,
            "duration": duration,
            "video_file_url": f"https://cdn.test/{title}.mp4",
            "thumbnail_url": f"https://cdn.test/{title}.jpg",
        },
    )
    assert resp.status_code == 201
    return resp.json()["data"]["vid"]


def test_like_unlike_then_empty_feed(client):
    owner = create_user(client, "owner")
    actor = create_user(client, "actor")
    vid = publish(client, owner, "clip")
    headers = {"X-User-Id": actor}

    liked = client.post(f"/like/toggle-video-like/{vid}", headers=headers)
    assert liked.status_code == 201
    body = liked.json()
    assert body["success"] is True
    assert body["statusCode"] == 201
    assert body["data"]["liked"] is True

    feed = client.get("/like/get-liked-videos", headers=headers)
    assert feed.status_code == 200
    assert feed.json()["data"][0]["video_owner_username"] == "owner"

    unliked = client.post(f"/like/toggle-video-like/{vid}", headers=headers)
    assert unliked.status_code == 200
    assert unliked.json()["data"]["liked"] is False

    empty = client.get("/like/get-liked-videos", headers=headers)
    assert empty.status_code == 404
    assert empty.json()["success"] is False


def test_toggle_comment_and_tweet(client):
    owner = create_user(client, "owner")
    headers = {"X-User-Id": owner}
    vid = publish(client, owner, "clip")
    cid = client.post("/comments/", headers=headers, json={"video_id": vid, "content": "first!"}).json()["data"]["cid"]
    tid = client.post("/tweets/", headers=headers, json={"content": "new upload"}).json()["data"]["tid"]

    assert client.post(f"/like/toggle-comment-like/{cid}", headers=headers).status_code == 201
    assert client.post(f"/like/toggle-tweet-like/{tid}", headers=headers).status_code == 201
    assert client.post(f"/like/toggle-tweet-like/{tid}", headers=headers).status_code == 200


def test_toggle_errors(client):
    headers = {"X-User-Id": str(uuid.uuid4())}

    bad = client.post("/like/toggle-video-like/not-an-id", headers=headers)
    assert bad.status_code == 400
    assert bad.json()["statusCode"] == 400

    blank = client.post("/like/toggle-comment-like/%20", headers=headers)
    assert blank.status_code == 400

    missing = client.post(f"/like/toggle-tweet-like/{uuid.uuid4()}", headers=headers)
    assert missing.status_code == 404

    anonymous = client.post(f"/like/toggle-video-like/{uuid.uuid4()}")
    assert anonymous.status_code == 401


def test_discovery_by_owner_and_search_text(client):
    alice = create_user(client, "alice")
    bob = create_user(client, "bob")
    publish(client, alice, "Cat nap")
    publish(client, alice, "Dog walk", description="with the CAT watching")
    publish(client, alice, "Bird song")
    publish(client, bob, "cat tricks")
    headers = {"X-User-Id": bob}

    resp = client.get("/video/get-all-videos", headers=headers, params={"userId": alice, "query": "cat"})

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert {v["title"] for v in data["videos"]} == {"Cat nap", "Dog walk"}
    assert all(v["owner_id"] == alice for v in data["videos"])
    assert data["pagination"]["total_items"] == 2
    assert data["pagination"]["total_pages"] == 1


def test_discovery_sort_and_pages(client):
    owner = create_user(client, "owner")
    for i, duration in enumerate([30, 10, 20]):
        publish(client, owner, f"v{i}", duration=duration)
    headers = {"X-User-Id": owner}

    resp = client.get(
        "/video/get-all-videos",
        headers=headers,
        params={"sortBy": "duration", "sortType": "bogus", "limit": "2", "page": "1"},
    )
    data = resp.json()["data"]
    assert [v["duration"] for v in data["videos"]] == [10, 20]
    assert data["pagination"]["has_next_page"] is True

    page2 = client.get(
        "/video/get-all-videos",
        headers=headers,
        params={"sortBy": "duration", "sortType": "desc", "limit": "2", "page": "2"},
    ).json()["data"]
    assert [v["duration"] for v in page2["videos"]] == [10]
    assert page2["pagination"]["has_prev_page"] is True

    out_of_range = client.get("/video/get-all-videos", headers=headers, params={"page": "5", "limit": "2"})
    assert out_of_range.status_code == 400


def test_discovery_with_no_matches_is_not_found(client):
    owner = create_user(client, "owner")
    publish(client, owner, "something")

    resp = client.get("/video/get-all-videos", headers={"X-User-Id": owner}, params={"query": "nothing-like-this"})

    assert resp.status_code == 404


def test_discovery_rejects_malformed_owner_id(client):
    owner = create_user(client, "owner")
    publish(client, owner, "something")
    headers = {"X-User-Id": owner}

    bad = client.get("/video/get-all-videos", headers=headers, params={"userId": "not-an-id"})
    assert bad.status_code == 400
    assert bad.json()["success"] is False
    assert "userId" in bad.json()["message"]

    # 空白 userId 等于不限上传者
    blank = client.get("/video/get-all-videos", headers=headers, params={"userId": "  "})
    assert blank.status_code == 200
    assert blank.json()["data"]["pagination"]["total_items"] == 1

    upper = client.get("/video/get-all-videos", headers=headers, params={"userId": owner.upper()})
    assert upper.status_code == 200
    assert upper.json()["data"]["pagination"]["total_items"] == 1


def test_missing_actor_header_uses_envelope(client):
    resp = client.get("/like/get-liked-videos")

    assert resp.status_code == 401
    body = resp.json()
    assert body["statusCode"] == 401
    assert body["success"] is False
    assert body["data"] is None
    assert "X-User-Id" in body["message"]


def test_get_video_by_id(client):
    owner = create_user(client, "owner")
    vid = publish(client, owner, "clip")
    headers = {"X-User-Id": owner}

    found = client.get(f"/video/get-video-by-id/{vid}", headers=headers)
    assert found.status_code == 200
    assert found.json()["data"]["owner_username"] == "owner"

    assert client.get("/video/get-video-by-id/xyz", headers=headers).status_code == 400
    assert client.get(f"/video/get-video-by-id/{uuid.uuid4()}", headers=headers).status_code == 404


def test_publish_requires_existing_owner(client):
    resp = client.post(
        "/video/publish-video",
        headers={"X-User-Id": str(uuid.uuid4())},
        json={"title": "ghost", "video_file_url": "https://cdn.test/ghost.mp4"},
    )
    assert resp.status_code == 404


def test_duplicate_username_conflicts(client):
    create_user(client, "same")
    resp = client.post("/users/", json={"username": "same"})
    assert resp.status_code == 409
