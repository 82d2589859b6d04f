"""User Routes — account lifecycle, batch creation and login end-to-end.

Tests cover:
    - Missing username -> 400 with errors["username"]
    - Batch creation validates every element, indexed keys, nothing stored on failure
    - Passwords never returned
    - Login success / failure, logout
"""


async def _create(client, **fields):
    body = {"username": "jdoe", "email": "jdoe@example.com", "password": "s3cretpass", **fields}
    return await client.post("/v2/user", json=body)


async def test_create_user_without_username_is_rejected(client):
    res = await client.post("/v2/user", json={"email": "jdoe@example.com"})
    assert res.status_code == 400
    body = res.json()
    assert body["title"] == "Validation failed"
    assert body["errors"]["username"] == ["'Username' must not be empty."]


async def test_create_and_get_user_without_password(client):
    res = await _create(client, firstName="John")
    assert res.status_code == 204

    res = await client.get("/v2/user/jdoe")
    assert res.status_code == 200
    body = res.json()
    assert body["username"] == "jdoe"
    assert body["firstName"] == "John"
    assert "password" not in body


async def test_get_unknown_user_is_404(client):
    res = await client.get("/v2/user/nobody")
    assert res.status_code == 404
    assert res.content == b""


async def test_create_with_array_reports_indexed_errors(client):
    res = await client.post("/v2/user/createWithArray", json=[
        {"username": "ok", "password": "longenough"},
        {"username": "", "email": "not-an-email"},
    ])
    assert res.status_code == 400
    assert set(res.json()["errors"]) == {"users[1].username", "users[1].email"}

    res = await client.get("/v2/user/ok")
    assert res.status_code == 404


async def test_create_with_list(client):
    res = await client.post("/v2/user/createWithList", json=[
        {"username": "a1"}, {"username": "b2"},
    ])
    assert res.status_code == 204
    assert (await client.get("/v2/user/b2")).status_code == 200


async def test_login_and_logout(client):
    await _create(client)

    res = await client.get("/v2/user/login", params={"username": "jdoe", "password": "s3cretpass"})
    assert res.status_code == 200
    assert res.json().startswith("logged in user session:")

    res = await client.get("/v2/user/logout")
    assert res.status_code == 200
    assert res.content == b""


async def test_login_with_wrong_password_is_404(client):
    await _create(client)
    res = await client.get("/v2/user/login", params={"username": "jdoe", "password": "nope"})
    assert res.status_code == 404


async def test_update_and_delete_user(client):
    await _create(client)

    res = await client.put("/v2/user/jdoe", json={"username": "jdoe", "phone": "555"})
    assert res.status_code == 204
    assert (await client.get("/v2/user/jdoe")).json()["phone"] == "555"

    res = await client.delete("/v2/user/jdoe")
    assert res.status_code == 204
    res = await client.delete("/v2/user/jdoe")
    assert res.status_code == 404
    assert res.content == b""


async def test_update_unknown_user_is_404(client):
    res = await client.put("/v2/user/ghost", json={"username": "ghost"})
    assert res.status_code == 404


# ─── Username collisions ─────────────────────────────────────────

async def test_create_existing_username_is_rejected(client):
    assert (await _create(client)).status_code == 204

    res = await _create(client)
    assert res.status_code == 400
    body = res.json()
    assert body["title"] == "Validation failed"
    assert body["errors"] == {"username": ["'Username' already exists."]}


async def test_batch_rejects_taken_and_repeated_usernames(client):
    await _create(client)

    res = await client.post("/v2/user/createWithList", json=[
        {"username": "fresh"}, {"username": "jdoe"}, {"username": "fresh"},
    ])
    assert res.status_code == 400
    assert set(res.json()["errors"]) == {"users[1].username", "users[2].username"}
    assert (await client.get("/v2/user/fresh")).status_code == 404


async def test_rename_to_taken_username_is_rejected(client):
    await client.post("/v2/user/createWithArray", json=[
        {"username": "a1"}, {"username": "b1"},
    ])

    res = await client.put("/v2/user/a1", json={"username": "b1"})
    assert res.status_code == 400
    assert res.json()["errors"] == {"username": ["'Username' already exists."]}
    assert (await client.get("/v2/user/a1")).status_code == 200


async def test_rename_to_free_username(client):
    await _create(client)

    res = await client.put("/v2/user/jdoe", json={"username": "john"})
    assert res.status_code == 204
    assert (await client.get("/v2/user/john")).status_code == 200
    assert (await client.get("/v2/user/jdoe")).status_code == 404
