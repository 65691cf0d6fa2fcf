import pytest

from organicchain.db import models


def _checkpoint(client, headers, order_id, **payload):
    payload.setdefault("location", "Depot 7")
    return client.post(f"/orders/{order_id}/checkpoints", json=payload, headers=headers)


def test_deliveries_list_only_active_orders(client, agent, order_factory, confirmed_order):
    order_factory()  # still pending
    r = client.get("/deliveries", headers=agent)
    assert r.status_code == 200
    items = r.json()
    assert [o["id"] for o in items] == [confirmed_order["id"]]
    assert items[0]["product"]["qr_code"]
    assert items[0]["product"]["farm"]["location"] == "Valley Road 1"


def test_checkpoint_records_transaction_and_updates_status(client, db_session, agent, confirmed_order):
    r = _checkpoint(client, agent, confirmed_order["id"], checkpoint_type="farm_pickup",
                    notes="Crates loaded", qr_scanned=True, latitude=45.5, longitude=-73.6)
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["order_status"] == "picked_up"
    assert body["checkpoint"]["blockchain_tx_id"] == body["transaction_id"]
    assert body["transaction_id"] in body["message"]

    tx = db_session.query(models.BlockchainTransaction).filter_by(transaction_id=body["transaction_id"]).one()
    assert tx.action_type == "farm_pickup"
    assert tx.location == "Depot 7"
    assert tx.metadata_json == {"notes": "Crates loaded"}
    assert str(tx.order_id) == confirmed_order["id"]


@pytest.mark.parametrize(
    "checkpoint_type, expected",
    [("warehouse", "in_transit"), ("in_transit", "in_transit"), ("customer_delivery", "delivered")],
)
def test_checkpoint_status_mapping(client, agent, confirmed_order, checkpoint_type, expected):
    r = _checkpoint(client, agent, confirmed_order["id"], checkpoint_type=checkpoint_type)
    assert r.status_code == 201, r.text
    assert r.json()["order_status"] == expected


def test_checkpoint_requires_location(client, agent, confirmed_order):
    r = _checkpoint(client, agent, confirmed_order["id"], location="  ")
    assert r.status_code == 422


def test_harvest_checkpoint_rejected(client, agent, confirmed_order):
    r = _checkpoint(client, agent, confirmed_order["id"], checkpoint_type="harvest")
    assert r.status_code == 422


def test_checkpoint_on_inactive_order(client, agent, order_factory, confirmed_order):
    pending = order_factory()
    r = _checkpoint(client, agent, pending["id"])
    assert r.status_code == 409
    _checkpoint(client, agent, confirmed_order["id"], checkpoint_type="customer_delivery")
    r = _checkpoint(client, agent, confirmed_order["id"], checkpoint_type="warehouse")
    assert r.status_code == 409


def test_checkpoints_listed_oldest_first(client, agent, customer, confirmed_order):
    for kind in ("farm_pickup", "warehouse", "customer_delivery"):
        assert _checkpoint(client, agent, confirmed_order["id"], checkpoint_type=kind).status_code == 201
    r = client.get(f"/orders/{confirmed_order['id']}/checkpoints", headers=customer)
    assert r.status_code == 200
    assert [c["checkpoint_type"] for c in r.json()] == ["farm_pickup", "warehouse", "customer_delivery"]


def test_delivery_dashboard_stats(client, agent, confirmed_order):
    _checkpoint(client, agent, confirmed_order["id"], qr_scanned=True)
    _checkpoint(client, agent, confirmed_order["id"], checkpoint_type="warehouse")
    r = client.get("/delivery", headers=agent)
    assert r.status_code == 200
    stats = r.json()["stats"]
    assert stats == {"active_deliveries": 1, "todays_checkpoints": 2, "qr_scans": 1}


def test_customers_cannot_record_checkpoints(client, customer, confirmed_order):
    r = _checkpoint(client, customer, confirmed_order["id"])
    assert r.status_code == 403


def test_verify_and_review_after_delivery(client, db_session, agent, customer, confirmed_order):
    order_id = confirmed_order["id"]
    r = client.post(f"/orders/{order_id}/reviews", json={"rating": 5}, headers=customer)
    assert r.status_code == 409

    _checkpoint(client, agent, order_id, checkpoint_type="customer_delivery")
    r = client.post(f"/orders/{order_id}/verify", headers=customer)
    assert r.status_code == 200, r.text
    assert r.json()["status"] == "verified"

    r = client.post(f"/orders/{order_id}/reviews", json={"rating": 4, "comment": "Crisp"}, headers=customer)
    assert r.status_code == 201, r.text
    review = r.json()
    tx = db_session.query(models.BlockchainTransaction).filter_by(transaction_id=review["blockchain_tx_id"]).one()
    assert tx.action_type == "review"

    r = client.post(f"/orders/{order_id}/reviews", json={"rating": 3}, headers=customer)
    assert r.status_code == 409


def test_review_rating_range(client, agent, customer, confirmed_order):
    _checkpoint(client, agent, confirmed_order["id"], checkpoint_type="customer_delivery")
    r = client.post(f"/orders/{confirmed_order['id']}/reviews", json={"rating": 6}, headers=customer)
    assert r.status_code == 422


def test_concurrent_duplicate_review_returns_409(client, db_session, agent, customer, confirmed_order, monkeypatch):
    from organicchain.db.repositories import deliveries as deliveries_repo

    order_id = confirmed_order["id"]
    _checkpoint(client, agent, order_id, checkpoint_type="customer_delivery")
    r = client.post(f"/orders/{order_id}/reviews", json={"rating": 5}, headers=customer)
    assert r.status_code == 201, r.text

    # Existence check misses the first review, as with two requests in flight
    monkeypatch.setattr(deliveries_repo, "get_review_for_order", lambda db, order_id: None)
    r = client.post(f"/orders/{order_id}/reviews", json={"rating": 2}, headers=customer)
    assert r.status_code == 409
    assert r.json()["detail"] == "Order already reviewed"
    assert db_session.query(models.Review).count() == 1

    # Session is usable after the rollback
    r = client.get(f"/orders/{order_id}", headers=customer)
    assert r.status_code == 200
