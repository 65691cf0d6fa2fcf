import uuid


def test_admin_dashboard_counts(client, admin, agent, customer, farmer, order_factory, confirmed_order):
    order_factory()
    client.post(f"/orders/{confirmed_order['id']}/checkpoints",
                json={"checkpoint_type": "customer_delivery", "location": "Front door"}, headers=agent)
    client.post(f"/orders/{confirmed_order['id']}/reviews", json={"rating": 5, "comment": "Great"}, headers=customer)

    r = client.get("/admin", headers=admin)
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["stats"]["total_orders"] == 2
    assert data["stats"]["active_deliveries"] == 0
    assert data["stats"]["completed_deliveries"] == 1
    # two harvests, one confirmation, one checkpoint, one review
    assert data["stats"]["blockchain_records"] == 5
    assert len(data["recent_orders"]) == 2
    assert len(data["recent_transactions"]) == 5
    assert data["reviews"][0]["farmer_name"] == "farmer_fred"


def test_admin_dashboard_forbidden_for_farmers(client, farmer):
    r = client.get("/admin", headers=farmer)
    assert r.status_code == 403


def test_admin_passes_role_guards(client, admin):
    r = client.get("/deliveries", headers=admin)
    assert r.status_code == 200


def test_ledger_lookup(client, product_factory):
    product = product_factory()
    r = client.get(f"/ledger/{product['blockchain_tx_id']}")
    assert r.status_code == 200
    tx = r.json()
    assert tx["action_type"] == "harvest"
    assert tx["product_id"] == product["id"]
    assert tx["metadata"]["product_name"] == "Tomatoes"


def test_ledger_unknown_transaction(client):
    assert client.get("/ledger/0x" + "0" * 64).status_code == 404
    assert client.get("/ledger/not-a-tx").status_code == 404


def test_ledger_filters(client, farmer, product_factory, order_factory):
    first = product_factory()
    product_factory(product_name="Kale")
    order = order_factory(product=first)
    client.post(f"/orders/{order['id']}/confirm", headers=farmer)

    r = client.get("/ledger", params={"product_id": first["id"]})
    assert [t["action_type"] for t in r.json()] == ["order_confirmed", "harvest"]

    r = client.get("/ledger", params={"order_id": order["id"]})
    assert [t["action_type"] for t in r.json()] == ["order_confirmed"]

    r = client.get("/ledger", params={"limit": 1})
    assert len(r.json()) == 1

    r = client.get("/ledger", params={"product_id": str(uuid.uuid4())})
    assert r.json() == []
