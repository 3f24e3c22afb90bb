"""Gem catalog over HTTP — create, fetch, filtered listing, search and facets.

Invariants:
    - POST derives image from name and answers 201 with a Location header
    - Listing pages by cursor; filters are case-insensitive substring matches
    - /search and /metadata/* are never routed to the fetch-by-id handler
"""

import pytest

_GEMS = [
    ("Amatista", "Purple", "Quartz", "SiO2", "Piedra de la intuicion"),
    ("Cuarzo Rosa", "Pink", "Quartz", "SiO2", "Amor propio y calma"),
    ("Ágata Azul", "Blue", "Chalcedony", "SiO2", "Serenidad 100% garantizada"),
    ("Obsidiana", "Black", "Volcanic Glass", "SiO2+MgO", "Proteccion"),
    ("Lapislázuli", "Blue", "Rock", "Na3Ca(Al3Si3O12)S", "Sabiduria"),
]


async def _create_gem(client, name, color, category, formula, description) -> dict:
    res = await client.post("/api/gems", json={
        "name": name, "color": color, "category": category,
        "chemical_formula": formula, "magical_description": description,
    })
    assert res.status_code == 201
    return res.json()


@pytest.fixture
async def catalog(client):
    return [await _create_gem(client, *gem) for gem in _GEMS]


async def test_create_gem_derives_image_and_location(client):
    gem = await _create_gem(client, *_GEMS[2])
    assert gem["image"] == "images/agata-azul.jpg"
    assert gem["magical_description"] == "Serenidad 100% garantizada"

    res = await client.get(f"/api/gems/{gem['id']}")
    assert res.status_code == 200
    assert res.json()["name"] == "Ágata Azul"


async def test_create_gem_location_header(client):
    res = await client.post("/api/gems", json={
        "name": "Jade", "color": "Green", "category": "Jadeite",
        "chemical_formula": "NaAlSi2O6", "magical_description": "Armonia",
    })
    assert res.headers["location"].endswith(f"/api/gems/{res.json()['id']}")


async def test_create_gem_missing_field_returns_400(client):
    res = await client.post("/api/gems", json={"name": "Jade"})
    assert res.status_code == 400


async def test_get_unknown_gem_returns_404(client):
    res = await client.get("/api/gems/999")
    assert res.status_code == 404
    assert res.json()["error"]["context"]["entity"] == "Gem"


async def test_get_gem_id_past_int4_range_returns_404(client):
    assert (await client.get(f"/api/gems/{2**40}")).status_code == 404


async def test_list_defaults_to_name_order(client, catalog):
    res = await client.get("/api/gems")
    assert res.status_code == 200
    body = res.json()
    assert [g["name"] for g in body["data"]] == sorted(g[0] for g in _GEMS)
    assert body["pagination"] == {
        "has_next": False, "has_previous": False,
        "next_cursor": None, "previous_cursor": None,
        "total_count": 5, "page_size": 20,
    }


async def test_list_pages_with_cursor(client, catalog):
    first = (await client.get("/api/gems", params={"limit": 2})).json()
    assert len(first["data"]) == 2
    assert first["pagination"]["next_cursor"] == "2"

    second = (await client.get(
        "/api/gems", params={"limit": 2, "cursor": "2"},
    )).json()
    assert second["pagination"]["has_previous"] is True
    assert second["pagination"]["previous_cursor"] == "0"
    assert not {g["id"] for g in first["data"]} & {g["id"] for g in second["data"]}


async def test_list_invalid_cursor_starts_at_first_page(client, catalog):
    res = await client.get("/api/gems", params={"cursor": "not-a-number"})
    assert res.status_code == 200
    assert res.json()["pagination"]["has_previous"] is False


async def test_list_huge_cursor_returns_empty_page(client, catalog):
    res = await client.get("/api/gems", params={"cursor": str(2**70)})
    assert res.status_code == 200
    assert res.json()["data"] == []


@pytest.mark.parametrize("limit", [0, 101])
async def test_list_limit_out_of_range_returns_400(client, limit):
    res = await client.get("/api/gems", params={"limit": limit})
    assert res.status_code == 400


async def test_list_filters_by_color_substring(client, catalog):
    res = await client.get("/api/gems", params={"color": "blu"})
    names = [g["name"] for g in res.json()["data"]]
    assert sorted(names) == ["Lapislázuli", "Ágata Azul"]


async def test_list_odata_filter_and_orderby(client, catalog):
    res = await client.get("/api/gems", params={
        "$filter": "category eq 'Quartz'", "$orderby": "name desc",
    })
    assert [g["name"] for g in res.json()["data"]] == ["Cuarzo Rosa", "Amatista"]


async def test_list_search_matches_description(client, catalog):
    res = await client.get("/api/gems", params={"$search": "calma"})
    assert [g["name"] for g in res.json()["data"]] == ["Cuarzo Rosa"]


async def test_list_search_treats_percent_literally(client, catalog):
    res = await client.get("/api/gems", params={"$search": "100%"})
    assert [g["name"] for g in res.json()["data"]] == ["Ágata Azul"]


async def test_search_endpoint(client, catalog):
    res = await client.get("/api/gems/search", params={"q": "quartz"})
    assert res.status_code == 200
    body = res.json()
    assert body["query"] == "quartz"
    assert body["count"] == 2


@pytest.mark.parametrize("params", [{}, {"q": ""}, {"q": "   "}])
async def test_search_without_term_returns_400(client, params):
    res = await client.get("/api/gems/search", params=params)
    assert res.status_code == 400


async def test_metadata_lists_distinct_sorted_values(client, catalog):
    colors = (await client.get("/api/gems/metadata/colors")).json()
    assert colors == {"colors": ["Black", "Blue", "Pink", "Purple"]}

    categories = (await client.get("/api/gems/metadata/categories")).json()
    assert categories["categories"][0] == "Chalcedony"

    formulas = (await client.get("/api/gems/metadata/formulas")).json()
    assert formulas["formulas"] == ["Na3Ca(Al3Si3O12)S", "SiO2", "SiO2+MgO"]
