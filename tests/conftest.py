import json

import pytest
from fastapi.testclient import TestClient

from quickcart.data.database import JsonCollection, get_carts_db, get_products_db
from quickcart.main import app

CATALOG = [
    {"id": 1, "name": "Keyboard", "price": 199.99},
    {"id": 2, "name": "Mouse", "price": 49.50},
]


@pytest.fixture
def products_db(tmp_path) -> JsonCollection:
    path = tmp_path / "products.json"
    path.write_text(json.dumps(CATALOG), encoding="utf-8")
    return JsonCollection(path)


@pytest.fixture
def carts_db(tmp_path) -> JsonCollection:
    # no file yet: the first write creates it
    return JsonCollection(tmp_path / "data" / "carts.json")


@pytest.fixture
def test_client(products_db, carts_db):
    app.dependency_overrides[get_products_db] = lambda: products_db
    app.dependency_overrides[get_carts_db] = lambda: carts_db
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
