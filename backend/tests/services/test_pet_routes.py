"""Pet Routes — end-to-end tests through the dispatcher and test DB.

Tests cover:
    - Wire enum tokens round trip through HTTP (in and out)
    - Validation errors keyed by wire field name
    - Unknown pet -> bare 404 with empty body
    - Unknown status token in a query -> 400 Bad Request before dispatch
"""

import pytest


@pytest.fixture
async def rex(client):
    res = await client.post("/v2/pet", json={
        "name": "Rex", "photoUrls": ["http://img/rex.png"],
        "tags": [{"id": 1, "name": "good-boy"}], "status": "available",
    })
    assert res.status_code == 201
    return res.json()


async def test_add_pet_returns_wire_tokens(rex):
    assert rex["status"] == "available"
    assert rex["photoUrls"] == ["http://img/rex.png"]
    assert isinstance(rex["id"], int)


async def test_get_pet_by_id(client, rex):
    res = await client.get(f"/v2/pet/{rex['id']}")
    assert res.status_code == 200
    assert res.json() == rex


async def test_get_unknown_pet_is_bare_404(client):
    res = await client.get("/v2/pet/9999")
    assert res.status_code == 404
    assert res.content == b""


async def test_add_pet_reports_every_invalid_field(client):
    res = await client.post("/v2/pet", json={"status": "sold"})
    assert res.status_code == 400
    body = res.json()
    assert body["title"] == "Validation failed"
    assert set(body["errors"]) == {"name", "photoUrls"}
    assert res.headers["content-type"].startswith("application/problem+json")


async def test_add_pet_with_unknown_status_is_bad_request(client):
    res = await client.post("/v2/pet", json={
        "name": "Rex", "photoUrls": [], "status": "adopted",
    })
    assert res.status_code == 400
    assert res.json()["title"] == "Bad Request"


async def test_update_pet(client, rex):
    res = await client.put("/v2/pet", json={**rex, "status": "pending"})
    assert res.status_code == 200
    assert res.json()["status"] == "pending"


async def test_update_unknown_pet_is_404(client):
    res = await client.put("/v2/pet", json={"id": 4242, "name": "Ghost", "photoUrls": []})
    assert res.status_code == 404


async def test_find_by_status(client, rex):
    await client.post("/v2/pet", json={"name": "Tom", "photoUrls": [], "status": "sold"})

    res = await client.get("/v2/pet/findByStatus", params={"status": "available"})
    assert res.status_code == 200
    assert [p["name"] for p in res.json()] == ["Rex"]

    res = await client.get("/v2/pet/findByStatus?status=available,sold")
    assert sorted(p["name"] for p in res.json()) == ["Rex", "Tom"]


async def test_find_by_status_accepts_variant_name(client, rex):
    res = await client.get("/v2/pet/findByStatus", params={"status": "AVAILABLE"})
    assert [p["name"] for p in res.json()] == ["Rex"]


async def test_find_by_unknown_status_is_bad_request(client):
    res = await client.get("/v2/pet/findByStatus", params={"status": "adopted"})
    assert res.status_code == 400
    body = res.json()
    assert body["title"] == "Bad Request"
    assert 'Unable to convert "adopted" to enum "PetStatus".' in body["detail"]


async def test_find_by_tags(client, rex):
    res = await client.get("/v2/pet/findByTags", params={"tags": ["good-boy", "x"]})
    assert [p["name"] for p in res.json()] == ["Rex"]

    res = await client.get("/v2/pet/findByTags", params={"tags": "cat"})
    assert res.json() == []


async def test_delete_pet(client, rex):
    res = await client.delete(f"/v2/pet/{rex['id']}", headers={"api_key": "k"})
    assert res.status_code == 204

    res = await client.delete(f"/v2/pet/{rex['id']}")
    assert res.status_code == 404
    assert res.content == b""


async def test_non_integer_pet_id_is_bad_request(client):
    res = await client.get("/v2/pet/abc")
    assert res.status_code == 400
    assert res.json()["title"] == "Bad Request"


async def test_out_of_range_path_id_is_bad_request(client):
    res = await client.get("/v2/pet/99999999999999999999999")
    assert res.status_code == 400
    assert res.json()["title"] == "Bad Request"

    res = await client.delete("/v2/pet/9223372036854775808")
    assert res.status_code == 400


async def test_largest_int64_id_is_a_plain_miss(client):
    res = await client.get("/v2/pet/9223372036854775807")
    assert res.status_code == 404


async def test_out_of_range_body_id_is_bad_request(client):
    res = await client.post("/v2/pet", json={
        "id": 2**63, "name": "Rex", "photoUrls": [],
    })
    assert res.status_code == 400
    assert res.json()["title"] == "Bad Request"
