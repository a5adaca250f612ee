"""Test the bookstore HTTP API."""
import json

import pytest
from fastapi.testclient import TestClient
from api.main import create_app
from patterns.domain_config import BookstoreConfig, InventoryConfig

BASE = "/api/bookstore"
CUSTOMER = {"name": "Ada", "email": "ada@example.com", "address": "1 Main St"}


@pytest.fixture
def client():
    config = BookstoreConfig(inventory=InventoryConfig(current_year=2025))
    with TestClient(create_app(config=config)) as c:
        yield c


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"


def test_list_books(client):
    body = client.get(f"{BASE}/books").json()
    assert body["count"] == 3
    assert {b["book_id"] for b in body["data"]} == {"P001", "E001", "D001"}


def test_list_books_by_kind(client):
    body = client.get(f"{BASE}/books", params={"kind": "paper"}).json()
    assert [b["book_id"] for b in body["data"]] == ["P001"]


def test_list_sellable_books(client):
    body = client.get(f"{BASE}/books", params={"sellable": "true"}).json()
    assert sorted(b["book_id"] for b in body["data"]) == ["E001", "P001"]


def test_get_missing_book(client):
    resp = client.get(f"{BASE}/books/NOPE")
    assert resp.status_code == 404
    assert resp.json()["error"] == "not_found"


def test_purchase_paper(client):
    resp = client.post(f"{BASE}/books/P001/purchase", json={"customer": CUSTOMER, "quantity": 3})
    assert resp.status_code == 200
    assert resp.json()["amount_paid"] == 135.0
    assert client.get(f"{BASE}/books/P001").json()["stock"] == 7


def test_purchase_insufficient_stock(client):
    resp = client.post(f"{BASE}/books/P001/purchase", json={"customer": CUSTOMER, "quantity": 11})
    assert resp.status_code == 409
    assert resp.json()["error"] == "insufficient_stock"
    assert client.get(f"{BASE}/books/P001").json()["stock"] == 10


def test_purchase_ebook_quantity(client):
    resp = client.post(f"{BASE}/books/E001/purchase", json={"customer": CUSTOMER, "quantity": 2})
    assert resp.status_code == 422
    assert resp.json()["error"] == "invalid_quantity"


def test_purchase_demo(client):
    resp = client.post(f"{BASE}/books/D001/purchase", json={"customer": CUSTOMER})
    assert resp.status_code == 409
    assert resp.json()["error"] == "not_for_sale"


def test_add_and_delete_book(client):
    resp = client.post(f"{BASE}/books", json={
        "kind": "ebook", "book_id": "E002", "title": "Go Fast", "author": "B",
        "year": 2024, "price": 12.0, "file_type": "EPUB",
    })
    assert resp.status_code == 201
    assert resp.json()["file_type"] == "EPUB"

    assert client.delete(f"{BASE}/books/E002").status_code == 204
    assert client.get(f"{BASE}/books/E002").status_code == 404


def test_add_invalid_book(client):
    resp = client.post(f"{BASE}/books", json={
        "kind": "paper", "book_id": "P2", "title": "T", "author": "A", "year": 2024,
        "price": 5.0, "stock": -3,
    })
    assert resp.status_code == 422
    assert resp.json()["error"] == "validation_error"


def test_add_book_unknown_kind(client):
    resp = client.post(f"{BASE}/books", json={
        "kind": "audio", "book_id": "A1", "title": "T", "author": "A", "year": 2024, "price": 5.0,
    })
    assert resp.status_code == 422
    assert resp.json()["error"] == "validation_error"
    assert "A1" not in client.app.state.inventory


def test_purchase_invalid_body(client):
    resp = client.post(f"{BASE}/books/P001/purchase", json={"quantity": 1})
    assert resp.status_code == 422
    body = resp.json()
    assert body["error"] == "validation_error"
    assert body["detail"][0]["loc"][-1] == "customer"


def test_add_book_schema_lists_variants(client):
    schema = client.get("/openapi.json").json()
    body = schema["paths"][f"{BASE}/books"]["post"]["requestBody"]
    assert "oneOf" in json.dumps(body)
    assert {"PaperBook", "EBook", "DemoBook"} <= set(schema["components"]["schemas"])


def test_restock(client):
    resp = client.post(f"{BASE}/books/P001/restock", json={"quantity": 5})
    assert resp.json()["stock"] == 15
    assert client.post(f"{BASE}/books/E001/restock", json={"quantity": 5}).status_code == 409


def test_remove_outdated_defaults(client):
    body = client.post(f"{BASE}/inventory/remove-outdated").json()
    assert body["count"] == 1
    assert body["data"][0]["book_id"] == "D001"
    assert body["current_year"] == 2025


def test_remove_outdated_explicit(client):
    body = client.post(
        f"{BASE}/inventory/remove-outdated",
        json={"max_age_years": 5, "current_year": 2025},
    ).json()
    assert sorted(b["book_id"] for b in body["data"]) == ["D001", "P001"]


def test_summary(client):
    body = client.get(f"{BASE}/inventory/summary").json()
    assert body["total_titles"] == 3
    assert body["total_units"] == 10
