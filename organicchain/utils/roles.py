"""
Application roles and the dashboards they land on.

Central role constants so that route guards, role selection and the landing
redirect agree on one table.
"""

from typing import Dict, FrozenSet, Iterable, Optional
from enum import Enum


ROLE_ADMIN = "admin"
ROLE_FARMER = "farmer"
ROLE_CUSTOMER = "customer"
ROLE_DELIVERY_AGENT = "delivery_agent"

# Dashboard path each role is redirected to from the landing page
ROLE_DASHBOARDS: Dict[str, str] = {
    ROLE_FARMER: "/farmer",
    ROLE_CUSTOMER: "/customer",
    ROLE_DELIVERY_AGENT: "/delivery",
    ROLE_ADMIN: "/admin",
}

ALLOWED_ROLES: FrozenSet[str] = frozenset(ROLE_DASHBOARDS.keys())

# Roles a user may pick for themselves; admin is granted through ADMIN_EMAILS only
SELF_ASSIGNABLE_ROLES: FrozenSet[str] = frozenset({ROLE_FARMER, ROLE_CUSTOMER, ROLE_DELIVERY_AGENT})

# Highest precedence first, used when a user holds more than one role row
ROLE_PRECEDENCE = (ROLE_ADMIN, ROLE_FARMER, ROLE_DELIVERY_AGENT, ROLE_CUSTOMER)


class AppRole(str, Enum):
    """Enum for application roles used in schemas and validation."""
    admin = ROLE_ADMIN
    farmer = ROLE_FARMER
    customer = ROLE_CUSTOMER
    delivery_agent = ROLE_DELIVERY_AGENT


def validate_role(role: str) -> None:
    """
    Validate that a role is known.

    Raises:
        ValueError: If role is not allowed
    """
    if role not in ALLOWED_ROLES:
        raise ValueError(f"Invalid role '{role}'. Allowed roles: {sorted(ALLOWED_ROLES)}")


def dashboard_for_role(role: Optional[str]) -> Optional[str]:
    """Return the dashboard path for a role, or None for no/unknown role."""
    if not role:
        return None
    return ROLE_DASHBOARDS.get(role)


def primary_role(roles: Iterable[str]) -> Optional[str]:
    """Pick the active role out of the roles a user holds."""
    held = set(roles or [])
    for role in ROLE_PRECEDENCE:
        if role in held:
            return role
    return None


def role_allows(role: Optional[str], allowed: Iterable[str]) -> bool:
    """Return True if ``role`` may access a resource restricted to ``allowed``.

    Admin passes every role check.
    """
    if not role:
        return False
    if role == ROLE_ADMIN:
        return True
    return role in set(allowed)
