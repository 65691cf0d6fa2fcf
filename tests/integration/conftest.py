import pytest


@pytest.fixture
def farmer(headers_for):
    return headers_for("farmer_fred", "farmer")


@pytest.fixture
def customer(headers_for):
    return headers_for("customer_cara", "customer")


@pytest.fixture
def agent(headers_for):
    return headers_for("agent_ada", "delivery_agent")


@pytest.fixture
def admin(headers_for):
    return headers_for("admin_alex", "admin")


@pytest.fixture
def farm_factory(client, farmer):
    def _create(headers=None, **overrides):
        payload = {"farm_name": "Green Acres", "location": "Valley Road 1", "organic_certified": True,
                   "certification_number": "ORG-1234"}
        payload.update(overrides)
        r = client.post("/farms", json=payload, headers=headers or farmer)
        assert r.status_code == 201, r.text
        return r.json()
    return _create


@pytest.fixture
def product_factory(client, farmer, farm_factory):
    def _create(farm=None, headers=None, **overrides):
        farm = farm or farm_factory(headers=headers)
        payload = {"product_name": "Tomatoes", "quantity": 50, "unit": "kg", "price_per_unit": 2.5,
                   "harvest_date": "2026-10-01"}
        payload.update(overrides)
        r = client.post(f"/farms/{farm['id']}/products", json=payload, headers=headers or farmer)
        assert r.status_code == 201, r.text
        return r.json()
    return _create


@pytest.fixture
def order_factory(client, customer, product_factory):
    def _create(product=None, quantity=2, address="12 Market Street"):
        product = product or product_factory()
        r = client.post("/orders", json={"product_id": product["id"], "quantity": quantity,
                                         "delivery_address": address}, headers=customer)
        assert r.status_code == 201, r.text
        return r.json()
    return _create


@pytest.fixture
def confirmed_order(client, farmer, order_factory):
    order = order_factory()
    r = client.post(f"/orders/{order['id']}/confirm", headers=farmer)
    assert r.status_code == 200, r.text
    return r.json()
