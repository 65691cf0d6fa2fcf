import uuid

from organicchain.db import models


def test_catalogue_is_public(client, product_factory):
    product = product_factory()
    r = client.get("/products")
    assert r.status_code == 200
    items = r.json()
    assert [p["id"] for p in items] == [product["id"]]
    assert items[0]["farm"] == {"farm_name": "Green Acres", "location": "Valley Road 1", "organic_certified": True}


def test_place_order(client, db_session, customer, product_factory):
    product = product_factory(price_per_unit=3.333)
    r = client.post(
        "/orders",
        json={"product_id": product["id"], "quantity": 3, "delivery_address": "  5 Elm Street "},
        headers=customer,
    )
    assert r.status_code == 201, r.text
    order = r.json()
    assert order["status"] == "pending"
    assert order["delivery_address"] == "5 Elm Street"
    assert order["total_price"] == round(3 * product["price_per_unit"], 2)
    assert db_session.query(models.Order).count() == 1


def test_order_without_address_inserts_nothing(client, db_session, customer, product_factory):
    product = product_factory()
    r = client.post("/orders", json={"product_id": product["id"], "quantity": 1, "delivery_address": "  "},
                    headers=customer)
    assert r.status_code == 422
    assert db_session.query(models.Order).count() == 0


def test_order_quantity_bounds(client, customer, product_factory):
    product = product_factory(quantity=5)
    r = client.post("/orders", json={"product_id": product["id"], "quantity": 0, "delivery_address": "x"},
                    headers=customer)
    assert r.status_code == 422
    r = client.post("/orders", json={"product_id": product["id"], "quantity": 6, "delivery_address": "x"},
                    headers=customer)
    assert r.status_code == 422


def test_order_unknown_product(client, customer):
    r = client.post("/orders", json={"product_id": str(uuid.uuid4()), "delivery_address": "x"}, headers=customer)
    assert r.status_code == 404


def test_customer_dashboard_and_my_orders(client, customer, order_factory):
    order = order_factory()
    r = client.get("/customer", headers=customer)
    assert r.status_code == 200
    data = r.json()
    assert len(data["products"]) == 1
    assert [o["id"] for o in data["orders"]] == [order["id"]]

    r = client.get("/orders/mine", headers=customer)
    assert r.status_code == 200
    mine = r.json()
    assert mine[0]["product"]["product_name"] == "Tomatoes"
    assert mine[0]["product"]["farm"]["farm_name"] == "Green Acres"


def test_order_is_private_to_its_customer(client, headers_for, order_factory):
    order = order_factory()
    stranger = headers_for("stranger", "customer")
    r = client.get(f"/orders/{order['id']}", headers=stranger)
    assert r.status_code == 404


def test_product_history_is_newest_first(client, farmer, product_factory, order_factory):
    product = product_factory()
    order = order_factory(product=product)
    client.post(f"/orders/{order['id']}/confirm", headers=farmer)
    r = client.get(f"/products/{product['id']}/history")
    assert r.status_code == 200
    assert [t["action_type"] for t in r.json()] == ["order_confirmed", "harvest"]


def test_history_for_unknown_product(client):
    r = client.get(f"/products/{uuid.uuid4()}/history")
    assert r.status_code == 404


def test_catalogue_paging_bounds(client, product_factory):
    product_factory()
    assert client.get("/products", params={"skip": -5}).status_code == 422
    assert client.get("/products", params={"limit": -1}).status_code == 422
    assert client.get("/products", params={"limit": 501}).status_code == 422
    r = client.get("/products", params={"skip": 0, "limit": 1})
    assert r.status_code == 200
    assert len(r.json()) == 1
