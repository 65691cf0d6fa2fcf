import pytest


def _h(user: str, email: str = None):
    return {"x-auth-request-user": user, "x-auth-request-email": email or f"{user}@example.com"}


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_landing_for_guest_lists_roles(client):
    r = client.get("/")
    assert r.status_code == 200
    data = r.json()
    assert data["authenticated"] is False
    assert {o["role"] for o in data["roles"]} == {"farmer", "customer", "delivery_agent", "admin"}


def test_landing_without_role_returns_role_picker(client):
    r = client.get("/", headers=_h("newbie"))
    assert r.status_code == 200
    data = r.json()
    assert data["authenticated"] is True
    assert data["role"] is None


@pytest.mark.parametrize(
    "role, dashboard",
    [("farmer", "/farmer"), ("customer", "/customer"), ("delivery_agent", "/delivery")],
)
def test_landing_redirects_by_role(client, headers_for, role, dashboard):
    h = headers_for(f"user_{role}", role)
    r = client.get("/", headers=h, follow_redirects=False)
    assert r.status_code == 307
    assert r.headers["location"] == dashboard


def test_admin_lands_on_admin_dashboard(client, headers_for):
    h = headers_for("boss", "admin")
    r = client.get("/", headers=h, follow_redirects=False)
    assert r.status_code == 307
    assert r.headers["location"] == "/admin"


def test_me_requires_identity(client):
    r = client.get("/me")
    assert r.status_code == 401


def test_select_role_replaces_previous(client):
    h = _h("switcher")
    r = client.put("/me/role", json={"role": "farmer"}, headers=h)
    assert r.status_code == 200
    assert r.json()["role"] == "farmer"
    r = client.put("/me/role", json={"role": "customer"}, headers=h)
    assert r.status_code == 200
    body = r.json()
    assert body["role"] == "customer"
    assert body["dashboard"] == "/customer"


def test_select_admin_role_forbidden_for_regular_users(client):
    r = client.put("/me/role", json={"role": "admin"}, headers=_h("sneaky"))
    assert r.status_code == 403


def test_select_unknown_role_rejected(client):
    r = client.put("/me/role", json={"role": "pirate"}, headers=_h("pirate"))
    assert r.status_code == 422


def test_update_profile(client):
    h = _h("profiled")
    r = client.patch("/me/profile", json={"full_name": "Pat Profile", "phone": "555-0100"}, headers=h)
    assert r.status_code == 200, r.text
    assert r.json()["full_name"] == "Pat Profile"
    me = client.get("/me", headers=h).json()
    assert me["profile"]["phone"] == "555-0100"


def test_wrong_role_gets_403(client, headers_for):
    h = headers_for("cust", "customer")
    r = client.get("/farmer", headers=h)
    assert r.status_code == 403
    assert r.json()["detail"] == "Role 'customer' cannot access this resource"


def test_no_role_gets_403(client):
    r = client.get("/farmer", headers=_h("undecided"))
    assert r.status_code == 403


def test_guest_writes_are_read_only(client):
    r = client.post("/farms", json={"farm_name": "X", "location": "Y"})
    assert r.status_code == 401
    assert "Guest mode is read-only" in r.text


def test_superadmin_role_selection_sticks(client, headers_for):
    h = headers_for("boss", "admin")
    r = client.put("/me/role", json={"role": "farmer"}, headers=h)
    assert r.status_code == 200
    assert r.json()["role"] == "farmer"

    assert client.get("/me", headers=h).json()["role"] == "farmer"
    r = client.get("/", headers=h, follow_redirects=False)
    assert r.status_code == 307
    assert r.headers["location"] == "/farmer"

    # Superadmins can switch back to admin
    r = client.put("/me/role", json={"role": "admin"}, headers=h)
    assert r.status_code == 200
    assert client.get("/me", headers=h).json()["role"] == "admin"
