# tests/test_receipts_api.py
import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.store import ScoreStore, get_store

RECEIPT = {
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [{"shortDescription": "Gatorade", "price": "2.25"}] * 4,
    "total": "9.00",
}

@pytest.fixture
def store():
    return ScoreStore()

@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()

def test_process_then_points(client, store):
    r = client.post("/receipts/process", json=RECEIPT)
    assert r.status_code == 200
    receipt_id = r.json()["id"]
    assert store.get(receipt_id) == (109, True)

    r = client.get(f"/receipts/{receipt_id}/points")
    assert r.status_code == 200
    assert r.json() == {"points": 109}

def test_each_process_call_gets_fresh_id(client, store):
    ids = {client.post("/receipts/process", json=RECEIPT).json()["id"] for _ in range(3)}
    assert len(ids) == 3
    assert len(store) == 3

def test_malformed_json_is_format_error(client, store):
    r = client.post("/receipts/process", content=b"{not json",
                    headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.text == "Invalid receipt format"
    assert len(store) == 0

def test_wrong_field_type_is_format_error(client):
    r = client.post("/receipts/process", json={**RECEIPT, "retailer": 42})
    assert r.status_code == 400
    assert r.text == "Invalid receipt format"

def test_missing_fields_are_data_errors(client):
    r = client.post("/receipts/process", json={"retailer": "Target"})
    assert r.status_code == 400
    assert r.text == "Invalid receipt data"

def test_invalid_item_is_data_error(client, store):
    bad = {**RECEIPT, "items": [{"shortDescription": "Gatorade", "price": "-2.25"}]}
    r = client.post("/receipts/process", json=bad)
    assert r.status_code == 400
    assert r.text == "Invalid receipt data"
    assert len(store) == 0

def test_unparsable_total_still_scores(client):
    r = client.post("/receipts/process", json={**RECEIPT, "total": "not-a-number"})
    assert r.status_code == 200
    points = client.get(f"/receipts/{r.json()['id']}/points").json()["points"]
    assert points == 109 - 50 - 25

def test_unknown_id_not_found(client):
    r = client.get("/receipts/does-not-exist/points")
    assert r.status_code == 404
    assert r.text == "Receipt not found"

def test_health_reports_count(client, store):
    store.put("abc", 1)
    r = client.get("/health")
    assert r.json() == {"ok": True, "receipts": 1}

def test_huge_total_still_scores(client):
    r = client.post("/receipts/process", json={**RECEIPT, "total": "1e307"})
    assert r.status_code == 200
    points = client.get(f"/receipts/{r.json()['id']}/points").json()["points"]
    assert points == 109 - 25

def test_null_values_are_data_errors(client):
    for body in ({**RECEIPT, "retailer": None}, {**RECEIPT, "items": None},
                 {**RECEIPT, "items": [None]}):
        r = client.post("/receipts/process", json=body)
        assert r.status_code == 400
        assert r.text == "Invalid receipt data"

def test_null_body_is_data_error(client):
    r = client.post("/receipts/process", content=b"null",
                    headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.text == "Invalid receipt data"
