import json

import pytest
from fastapi.testclient import TestClient

from product_catalog_api.app.core.config import Settings
from product_catalog_api.app.core.storage import ProductStore
from product_catalog_api.app.main import create_app

SAMPLE_PRODUCTS = [
    {"id": 1, "name": "Widget", "description": "a small widget"},
    {"id": 2, "name": "Gadget", "description": "Pocket GADGET, rechargeable"},
    {"id": 3, "name": "Gizmo", "description": "large widget with a stand"},
]


def write_products(path, products):
    path.write_text(json.dumps(products, indent=2), encoding="utf-8")


def read_products(path):
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "products.json"
    write_products(path, SAMPLE_PRODUCTS)
    return path


@pytest.fixture
def public_dir(tmp_path):
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_text("<h1>Products</h1>", encoding="utf-8")
    (public / "app.js").write_text("console.log('hi');", encoding="utf-8")
    return public


@pytest.fixture
def store(data_file):
    return ProductStore(data_file)


@pytest.fixture
def settings(data_file, public_dir):
    return Settings(data_file=str(data_file), public_dir=str(public_dir))


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client
