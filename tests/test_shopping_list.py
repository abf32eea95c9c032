"""
Integration tests for the /shopping-list endpoints.

Each test gets a freshly started application whose shopping list holds
the sample items (beans, tomatoes, peppers).
"""

from test_helpers import SHOPPING_ITEM_KEYS, ids_of


def test_list_items_on_get(client):
    """
    Verifies:
    - 200 with a JSON array
    - at least one item, each carrying id, name and checked
    """
    r = client.get("/shopping-list")

    assert r.status_code == 200
    assert r.headers["content-type"].startswith("application/json")
    body = r.json()
    assert isinstance(body, list)
    assert len(body) >= 1
    for item in body:
        assert isinstance(item, dict)
        assert SHOPPING_ITEM_KEYS <= item.keys()


def test_seeded_items(client):
    r = client.get("/shopping-list")

    assert [item["name"] for item in r.json()] == ["beans", "tomatoes", "peppers"]
    assert all(item["checked"] is False for item in r.json())


def test_add_item_on_post(client):
    """
    Verifies:
    - 201 with the created item
    - the body equals the submitted fields plus the assigned id
    - the item then shows up on GET
    """
    new_item = {"name": "coffee", "checked": False}

    r = client.post("/shopping-list", json=new_item)

    assert r.status_code == 201
    body = r.json()
    assert SHOPPING_ITEM_KEYS <= body.keys()
    assert body["id"] is not None
    assert body == {**new_item, "id": body["id"]}

    listed = client.get("/shopping-list").json()
    assert body in listed


def test_post_ignores_client_id(client):
    r = client.post(
        "/shopping-list", json={"id": "mine", "name": "tea", "checked": True}
    )

    assert r.status_code == 201
    assert r.json()["id"] != "mine"


def test_update_item_on_put(client):
    """
    Verifies:
    - PUT with a full body returns 200 and the updated item
    - the change is visible on GET
    """
    update_data = {"name": "foo", "checked": True}
    update_data["id"] = client.get("/shopping-list").json()[0]["id"]

    r = client.put(f"/shopping-list/{update_data['id']}", json=update_data)

    assert r.status_code == 200
    assert r.json() == update_data
    assert update_data in client.get("/shopping-list").json()


def test_update_item_without_body_id(client):
    item_id = client.get("/shopping-list").json()[1]["id"]

    r = client.put(f"/shopping-list/{item_id}", json={"name": "roma", "checked": True})

    assert r.status_code == 200
    assert r.json() == {"id": item_id, "name": "roma", "checked": True}


def test_delete_item_on_delete(client):
    """
    Verifies:
    - DELETE answers 204 with an empty body
    - the id is gone from a subsequent GET
    """
    item_id = client.get("/shopping-list").json()[0]["id"]

    r = client.delete(f"/shopping-list/{item_id}")

    assert r.status_code == 204
    assert r.content == b""
    remaining = client.get("/shopping-list").json()
    assert item_id not in ids_of(remaining)
    assert len(remaining) == 2


def test_delete_unknown_item_is_acknowledged(client):
    r = client.delete("/shopping-list/does-not-exist")

    assert r.status_code == 204
    assert len(client.get("/shopping-list").json()) == 3


def test_empty_list_returns_empty_array(client):
    for item_id in ids_of(client.get("/shopping-list").json()):
        assert client.delete(f"/shopping-list/{item_id}").status_code == 204

    r = client.get("/shopping-list")

    assert r.status_code == 200
    assert r.json() == []
