import pytest

from organicchain.utils.roles import (
    ROLE_ADMIN,
    ROLE_CUSTOMER,
    ROLE_DELIVERY_AGENT,
    ROLE_FARMER,
    dashboard_for_role,
    primary_role,
    role_allows,
    validate_role,
)


class TestRoleHelpers:
    def test_dashboards(self):
        assert dashboard_for_role(ROLE_FARMER) == "/farmer"
        assert dashboard_for_role(ROLE_CUSTOMER) == "/customer"
        assert dashboard_for_role(ROLE_DELIVERY_AGENT) == "/delivery"
        assert dashboard_for_role(ROLE_ADMIN) == "/admin"
        assert dashboard_for_role(None) is None
        assert dashboard_for_role("pirate") is None

    def test_primary_role_precedence(self):
        assert primary_role([ROLE_CUSTOMER, ROLE_FARMER]) == ROLE_FARMER
        assert primary_role([ROLE_CUSTOMER, ROLE_DELIVERY_AGENT]) == ROLE_DELIVERY_AGENT
        assert primary_role([ROLE_FARMER, ROLE_ADMIN]) == ROLE_ADMIN
        assert primary_role([]) is None

    def test_role_allows(self):
        assert role_allows(ROLE_FARMER, [ROLE_FARMER])
        assert not role_allows(ROLE_CUSTOMER, [ROLE_FARMER])
        assert role_allows(ROLE_ADMIN, [ROLE_FARMER])
        assert not role_allows(None, [ROLE_FARMER])

    def test_validate_role(self):
        validate_role(ROLE_FARMER)
        with pytest.raises(ValueError):
            validate_role("pirate")
