"""API tests for the blog post routes."""


def _create(client, headers, **payload):
    response = client.post("/api/posts/", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_writes_require_admin_token(client, admin_headers):
    assert client.post("/api/posts/", json={"title": "Nope"}).status_code == 401
    bad = {"Authorization": "Bearer wrong"}
    assert client.post("/api/posts/", json={"title": "Nope"}, headers=bad).status_code == 401
    assert client.get("/api/posts/admin/all").status_code == 401

    post = _create(client, admin_headers, title="Allowed")
    assert client.put(f"/api/posts/{post['id']}", json={"title": "x"}).status_code == 401
    assert client.delete(f"/api/posts/{post['id']}").status_code == 401


def test_public_listing_hides_drafts_and_content(client, admin_headers):
    _create(client, admin_headers, title="Live One", content="body", published=True, tags=["python"])
    _create(client, admin_headers, title="Draft", published=False)

    listing = client.get("/api/posts/").json()
    assert listing["total"] == 1
    assert listing["page"] == 1
    assert listing["pages"] == 1
    assert listing["posts"][0]["slug"] == "live-one"
    assert "content" not in listing["posts"][0]

    assert client.get("/api/posts/", params={"tag": "rust"}).json()["total"] == 0
    assert client.get("/api/posts/", params={"search": "live"}).json()["total"] == 1

    everything = client.get("/api/posts/admin/all", headers=admin_headers).json()
    assert {post["title"] for post in everything} == {"Live One", "Draft"}


def test_read_by_slug_counts_views(client, admin_headers):
    _create(client, admin_headers, title="Counted", content="full text", published=True)

    first = client.get("/api/posts/counted").json()
    second = client.get("/api/posts/counted").json()
    assert first["content"] == "full text"
    assert (first["views"], second["views"]) == (1, 2)

    assert client.get("/api/posts/missing").status_code == 404


def test_update_and_delete(client, admin_headers):
    post = _create(client, admin_headers, title="Editable")

    response = client.put(f"/api/posts/{post['id']}", json={"published": True}, headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["published"] is True
    assert response.json()["title"] == "Editable"

    assert client.put("/api/posts/999", json={"title": "x"}, headers=admin_headers).status_code == 404

    response = client.delete(f"/api/posts/{post['id']}", headers=admin_headers)
    assert response.json() == {"message": "Post deleted successfully"}
    assert client.delete(f"/api/posts/{post['id']}", headers=admin_headers).status_code == 404


def test_validation_errors(client, admin_headers):
    _create(client, admin_headers, title="Taken")
    response = client.post("/api/posts/", json={"title": "Taken"}, headers=admin_headers)
    assert response.status_code == 400

    response = client.post("/api/posts/", json={"title": ""}, headers=admin_headers)
    assert response.status_code == 422

    response = client.get("/api/posts/", params={"page": 0})
    assert response.status_code == 422
