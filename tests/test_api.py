import pytest


def test_add_item(client, store):
    response = client.post("/api/v1/add_item/1/1")

    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "message": "Menu item with item id: 1 added successfully for table with table id 1",
    }
    assert store.count_items(1) == 1


def test_add_item_to_nonexistent_table(client):
    response = client.post("/api/v1/add_item/999/1")

    assert response.status_code == 404
    assert response.json() == {
        "status": "error",
        "message": "Table not found for table id:999",
    }


def test_add_nonexistent_menu_item(client):
    response = client.post("/api/v1/add_item/1/999")

    assert response.status_code == 404
    assert response.json()["message"] == "Menu item not found for menu id: 999"


@pytest.mark.parametrize("url, label", [
    ("/api/v1/add_item/abc/1", "table ID"),
    ("/api/v1/add_item/1/abc", "item ID"),
    ("/api/v1/add_item/-1/1", "table ID"),
    ("/api/v1/get_items/x", "table ID"),
    ("/api/v1/add_item/99999999999999999999/1", "table ID"),
    ("/api/v1/add_item/1/4294967296", "item ID"),
])
def test_invalid_path_params(client, url, label):
    method = client.post if "add_item" in url else client.get
    response = method(url)

    assert response.status_code == 400
    assert response.json() == {
        "status": "error",
        "message": f"Invalid {label}. Must be a valid positive integer.",
    }


def test_remove_item(client, store):
    store.add_item(1, 2)

    response = client.delete("/api/v1/remove_item/1/2")

    assert response.status_code == 200
    assert response.json()["message"] == (
        "Menu item with item id:2 removed from table with table id:1 successfully"
    )
    assert store.count_items(1) == 0


def test_remove_item_not_ordered(client):
    response = client.delete("/api/v1/remove_item/1/2")

    assert response.status_code == 409
    assert response.json() == {
        "status": "error",
        "message": "No Menu item with menu item id:2, is found for Table with table id:1",
    }


def test_remove_item_unknown_table(client):
    response = client.delete("/api/v1/remove_item/7/1")

    assert response.status_code == 404


def test_get_items(client, store):
    store.add_item(2, 1)
    store.add_item(2, 2)

    response = client.get("/api/v1/get_items/2")

    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "data": [
            {"id": 1, "name": "Soup", "cooking_time": 5},
            {"id": 2, "name": "Bread", "cooking_time": 10},
        ],
    }


def test_get_items_empty_table(client):
    response = client.get("/api/v1/get_items/1")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "data": []}


def test_get_item(client, store):
    store.add_item(1, 1)

    response = client.get("/api/v1/get_item/1/1")

    assert response.status_code == 200
    assert response.json()["data"] == {"id": 1, "name": "Soup", "cooking_time": 5}


def test_get_item_not_ordered(client):
    response = client.get("/api/v1/get_item/1/1")

    assert response.status_code == 404
    assert response.json()["status"] == "error"


def test_get_tables(client):
    response = client.get("/api/v1/tables")

    assert response.json() == {"status": "ok", "data": [1, 2]}


def test_get_menus(client):
    response = client.get("/api/v1/menus")

    assert response.status_code == 200
    assert [item["name"] for item in response.json()["data"]] == ["Soup", "Bread"]


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "operational"
    assert data["tables"] == 2
    assert data["menu_items"] == 2


def test_openapi_docs(client):
    response = client.get("/api-doc/openapi.json")

    assert response.status_code == 200
    paths = response.json()["paths"]
    assert "/api/v1/add_item/{table_id}/{item_id}" in paths
    assert "/api/v1/menus" in paths

    assert client.get("/swagger-ui").status_code == 200

