"""Decoration → Cover → Notebook chain — relational integrity over HTTP.

Invariants:
    - Decoration type crosses the wire as "Color"/"Pattern"/"Texture"
    - A decoration backs at most one cover; a cover backs at most one notebook
    - Unknown parents are rejected with 409 CONSTRAINT_VIOLATION and nothing is written
"""

import pytest


async def _create_decoration(client, type_="Color", value="#ff0000") -> dict:
    res = await client.post(
        "/api/decorations", json={"type": type_, "value": value},
    )
    assert res.status_code == 201
    return res.json()


async def _create_cover(client, decoration_id: int, title="Moon Cover") -> dict:
    res = await client.post(
        "/api/covers", json={"title": title, "decorationId": decoration_id},
    )
    assert res.status_code == 201
    return res.json()


async def _create_user(client, username="alice") -> dict:
    res = await client.post("/api/users", json={"username": username})
    assert res.status_code == 201
    return res.json()


# ─── Decorations ─────────────────────────────────────────────────

async def test_create_decoration_returns_wire_type(client):
    res = await client.post(
        "/api/decorations", json={"type": "Color", "value": "#ff0000"},
    )
    assert res.status_code == 201
    body = res.json()
    assert body["type"] == "Color"
    assert body["value"] == "#ff0000"
    assert isinstance(body["id"], int)
    assert res.headers["location"].endswith(f"/api/decorations/{body['id']}")


@pytest.mark.parametrize("type_", ["Color", "Pattern", "Texture"])
async def test_decoration_type_round_trips(client, type_):
    created = await _create_decoration(client, type_=type_, value="pentacle")

    res = await client.get(f"/api/decorations/{created['id']}")
    assert res.status_code == 200
    assert res.json() == created


async def test_unknown_decoration_type_returns_400(client):
    res = await client.post(
        "/api/decorations", json={"type": "Sparkle", "value": "x"},
    )
    assert res.status_code == 400


async def test_get_unknown_decoration_returns_404(client):
    res = await client.get("/api/decorations/42")
    assert res.status_code == 404


# ─── Covers ──────────────────────────────────────────────────────

async def test_create_cover_with_decoration(client):
    decoration = await _create_decoration(client)

    cover = await _create_cover(client, decoration["id"])
    assert cover["title"] == "Moon Cover"
    assert cover["decorationId"] == decoration["id"]

    res = await client.get(f"/api/covers/{cover['id']}")
    assert res.json() == cover


async def test_second_cover_reusing_decoration_returns_409(client):
    decoration = await _create_decoration(client)
    await _create_cover(client, decoration["id"])

    res = await client.post(
        "/api/covers", json={"title": "Sun Cover", "decorationId": decoration["id"]},
    )
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "CONSTRAINT_VIOLATION"


async def test_cover_with_unknown_decoration_returns_409(client):
    res = await client.post(
        "/api/covers", json={"title": "Orphan", "decorationId": 77},
    )
    assert res.status_code == 409
    assert (await client.get("/api/covers/1")).status_code == 404


# ─── Notebooks ───────────────────────────────────────────────────

async def test_full_chain_creates_notebook(client):
    user = await _create_user(client)
    decoration = await _create_decoration(client)
    cover = await _create_cover(client, decoration["id"])

    res = await client.post(
        "/api/notebooks", json={"userId": user["id"], "coverId": cover["id"]},
    )
    assert res.status_code == 201
    notebook = res.json()
    assert notebook["userId"] == user["id"]
    assert notebook["coverId"] == cover["id"]
    assert res.headers["location"].endswith(f"/api/notebooks/{notebook['id']}")

    fetched = await client.get(f"/api/notebooks/{notebook['id']}")
    assert fetched.json() == notebook


async def test_notebook_with_unknown_user_is_not_written(client):
    decoration = await _create_decoration(client)
    cover = await _create_cover(client, decoration["id"])

    res = await client.post(
        "/api/notebooks", json={"userId": 999, "coverId": cover["id"]},
    )
    assert res.status_code == 409
    assert (await client.get("/api/notebooks/1")).status_code == 404


async def test_two_notebooks_cannot_share_a_cover(client):
    user = await _create_user(client)
    decoration = await _create_decoration(client)
    cover = await _create_cover(client, decoration["id"])
    payload = {"userId": user["id"], "coverId": cover["id"]}

    assert (await client.post("/api/notebooks", json=payload)).status_code == 201
    res = await client.post("/api/notebooks", json=payload)
    assert res.status_code == 409


async def test_user_may_own_many_notebooks(client):
    user = await _create_user(client)
    for title in ("Moon", "Sun"):
        decoration = await _create_decoration(client, value=title)
        cover = await _create_cover(client, decoration["id"], title=title)
        res = await client.post(
            "/api/notebooks", json={"userId": user["id"], "coverId": cover["id"]},
        )
        assert res.status_code == 201


async def test_notebook_ids_must_be_positive(client):
    res = await client.post("/api/notebooks", json={"userId": 0, "coverId": 1})
    assert res.status_code == 400


async def test_notebook_user_id_past_int4_range_returns_400(client):
    res = await client.post(
        "/api/notebooks", json={"userId": 2**31, "coverId": 1},
    )
    assert res.status_code == 400
    fields = [d["field"] for d in res.json()["error"]["details"]]
    assert fields == ["userId"]


async def test_cover_decoration_id_past_int8_range_returns_400(client):
    res = await client.post(
        "/api/covers", json={"title": "Moon", "decorationId": 2**63},
    )
    assert res.status_code == 400
