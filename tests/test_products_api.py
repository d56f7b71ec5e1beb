import logging
import os

from fastapi.testclient import TestClient

from product_catalog_api.app.core.config import Settings
from product_catalog_api.app.core.logging_config import setup_logging
from product_catalog_api.app.main import create_app
from tests.conftest import SAMPLE_PRODUCTS, read_products, write_products


def test_create_in_empty_store_assigns_id_1(client, data_file):
    write_products(data_file, [])
    response = client.post("/products", json={"description": "widget"})
    assert response.status_code == 201
    assert response.json() == {"id": 1, "description": "widget"}
    assert read_products(data_file) == [{"description": "widget", "id": 1}]


def test_create_after_gap_uses_last_id_plus_one(client, data_file):
    write_products(data_file, [{"id": 1}, {"id": 2}, {"id": 5}])
    response = client.post("/products", json={"description": "next"})
    assert response.status_code == 201
    assert response.json()["id"] == 6


def test_create_ignores_client_supplied_id(client):
    response = client.post("/products", json={"id": 1, "description": "dup"})
    assert response.status_code == 201
    assert response.json()["id"] == 4


def test_create_without_body(client):
    response = client.post("/products")
    assert response.status_code == 201
    assert response.json() == {"id": 4}


def test_create_with_non_object_body(client, data_file):
    response = client.post("/products", json=[1, 2, 3])
    assert response.status_code == 400
    assert "error" in response.json()
    assert read_products(data_file) == SAMPLE_PRODUCTS


def test_list_defaults_to_first_ten(client, data_file):
    products = [{"id": i, "description": f"item {i}"} for i in range(1, 16)]
    write_products(data_file, products)
    response = client.get("/products")
    assert response.status_code == 200
    assert response.json() == products[:10]


def test_list_search_is_case_insensitive(client):
    response = client.get("/products", params={"search": "WIDGET"})
    assert response.status_code == 200
    assert [p["id"] for p in response.json()] == [1, 3]


def test_list_second_page_of_one(client):
    response = client.get("/products", params={"page": 2, "limit": 1})
    assert response.status_code == 200
    assert response.json() == [SAMPLE_PRODUCTS[1]]


def test_list_page_out_of_range_is_empty(client):
    response = client.get("/products", params={"page": 5})
    assert response.status_code == 200
    assert response.json() == []


def test_list_malformed_numbers_fall_back_to_defaults(client):
    response = client.get("/products", params={"page": "abc", "limit": "many"})
    assert response.status_code == 200
    assert response.json() == SAMPLE_PRODUCTS


def test_list_no_match_is_empty_not_404(client):
    response = client.get("/products", params={"search": "spaceship"})
    assert response.status_code == 200
    assert response.json() == []


def test_get_one(client):
    response = client.get("/products/2")
    assert response.status_code == 200
    assert response.json() == SAMPLE_PRODUCTS[1]


def test_get_one_missing(client):
    response = client.get("/products/99")
    assert response.status_code == 404
    assert response.json() == {"error": "Product not found"}


def test_get_one_malformed_id_is_not_found(client):
    response = client.get("/products/abc")
    assert response.status_code == 404
    assert response.json() == {"error": "Product not found"}


def test_get_one_leading_digits_id(client):
    response = client.get("/products/2abc")
    assert response.status_code == 200
    assert response.json()["id"] == 2


def test_update_merges_fields(client, data_file):
    response = client.put("/products/1", json={"price": 3.5, "description": "shiny widget"})
    assert response.status_code == 200
    assert response.json() == {"id": 1, "name": "Widget", "description": "shiny widget", "price": 3.5}
    assert read_products(data_file)[0] == response.json()


def test_update_cannot_change_id(client, data_file):
    response = client.put("/products/1", json={"id": 50, "name": "Renamed"})
    assert response.status_code == 200
    assert response.json()["id"] == 1
    assert [p["id"] for p in read_products(data_file)] == [1, 2, 3]


def test_update_missing_product(client):
    response = client.put("/products/99", json={"description": "x"})
    assert response.status_code == 404
    assert response.json() == {"error": "Product not found"}


def test_delete_then_get_is_404(client, data_file):
    response = client.delete("/products/1")
    assert response.status_code == 204
    assert response.content == b""

    response = client.get("/products/1")
    assert response.status_code == 404
    assert [p["id"] for p in read_products(data_file)] == [2, 3]


def test_delete_missing_product(client):
    response = client.delete("/products/99")
    assert response.status_code == 404
    assert response.json() == {"error": "Product not found"}


def test_missing_document_is_500(tmp_path, public_dir):
    settings = Settings(data_file=str(tmp_path / "absent.json"), public_dir=str(public_dir))
    with TestClient(create_app(settings)) as client:
        for response in (
            client.get("/products"),
            client.get("/products/1"),
            client.post("/products", json={"description": "x"}),
            client.put("/products/1", json={"description": "x"}),
            client.delete("/products/1"),
        ):
            assert response.status_code == 500
            body = response.json()
            assert list(body) == ["error"]
            assert "absent.json" in body["error"]


def test_malformed_document_is_500(client, data_file):
    data_file.write_text("not json at all", encoding="utf-8")
    response = client.get("/products")
    assert response.status_code == 500
    assert "error" in response.json()


def test_index_page(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "<h1>Products</h1>" in response.text


def test_static_file(client):
    response = client.get("/app.js")
    assert response.status_code == 200
    assert "console.log" in response.text


def test_unknown_static_file_uses_error_envelope(client):
    response = client.get("/nope.txt")
    assert response.status_code == 404
    assert "error" in response.json()


def test_index_without_public_dir(tmp_path, data_file):
    settings = Settings(data_file=str(data_file), public_dir=str(tmp_path / "none"))
    with TestClient(create_app(settings)) as client:
        response = client.get("/")
        assert response.status_code == 404
        assert response.json() == {"error": "index.html not found"}
        assert client.get("/products").status_code == 200


def test_requests_are_logged(client, caplog):
    with caplog.at_level(logging.INFO, logger="product_catalog_api.requests"):
        client.get("/products", params={"page": 1})
    assert "GET /products?page=1" in caplog.text


def test_write_failure_is_500(client, data_file, tmp_path, monkeypatch):
    before = data_file.read_bytes()

    def fail_replace(src, dst):
        raise OSError(13, "Permission denied")

    monkeypatch.setattr(os, "replace", fail_replace)

    for response in (
        client.post("/products", json={"description": "x"}),
        client.put("/products/1", json={"description": "x"}),
        client.delete("/products/1"),
    ):
        assert response.status_code == 500
        assert response.json() == {"error": "[Errno 13] Permission denied"}

    assert data_file.read_bytes() == before
    assert not list(tmp_path.glob("*.tmp"))


def test_trailing_slash_routes(client, data_file):
    response = client.get("/products/")
    assert response.status_code == 200
    assert response.json() == SAMPLE_PRODUCTS

    response = client.get("/products/2/")
    assert response.status_code == 200
    assert response.json() == SAMPLE_PRODUCTS[1]

    response = client.post("/products/", json={"description": "slashed"})
    assert response.status_code == 201
    assert response.json()["id"] == 4

    response = client.put("/products/4/", json={"price": 1})
    assert response.status_code == 200
    assert response.json() == {"id": 4, "description": "slashed", "price": 1}

    response = client.delete("/products/4/")
    assert response.status_code == 204
    assert read_products(data_file) == SAMPLE_PRODUCTS


def test_setup_logging_writes_log_file(tmp_path, monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    logfile = tmp_path / "service.log"

    setup_logging("debug", str(logfile))
    try:
        assert root.level == logging.DEBUG
        logging.getLogger("product_catalog_api.test").info("hello log")
        for handler in root.handlers:
            handler.flush()
        assert "[INFO] product_catalog_api.test: hello log" in logfile.read_text(encoding="utf-8")
    finally:
        for handler in root.handlers:
            handler.close()
