"""
Ownership checks for marketplace resources.

Key helpers:
- owns_farm(farm, current_user)
- owns_product(product, current_user)
- is_order_customer(order, current_user)
"""
from typing import Optional, Dict, Any

from organicchain.utils.roles import ROLE_ADMIN, ROLE_DELIVERY_AGENT


def _is_admin(current_user: Optional[Dict[str, Any]]) -> bool:
    if not current_user:
        return False
    return bool(current_user.get("is_superadmin")) or current_user.get("role") == ROLE_ADMIN


def owns_farm(farm, current_user: Optional[Dict[str, Any]]) -> bool:
    """Farms are managed by the farmer who registered them."""
    if farm is None or current_user is None:
        return False
    return getattr(farm, "farmer_id", None) == current_user.get("id")


def owns_product(product, current_user: Optional[Dict[str, Any]]) -> bool:
    if product is None:
        return False
    return owns_farm(getattr(product, "farm", None), current_user)


def is_order_customer(order, current_user: Optional[Dict[str, Any]]) -> bool:
    if order is None or current_user is None:
        return False
    return getattr(order, "customer_id", None) == current_user.get("id")


def can_view_order(order, current_user: Optional[Dict[str, Any]]) -> bool:
    """Customer, the farmer selling the product, delivery agents and admins may view an order."""
    if order is None or current_user is None:
        return False
    if _is_admin(current_user) or is_order_customer(order, current_user):
        return True
    if current_user.get("role") == ROLE_DELIVERY_AGENT:
        return True
    return owns_product(getattr(order, "product", None), current_user)
