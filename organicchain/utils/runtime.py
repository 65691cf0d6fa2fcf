"""
Development impersonation guard.

With ``DEV_MODE=true`` every request acts as one fixed local user, which is
only acceptable on a developer machine. The guard refuses to enable it when
``APP_BASE_URL`` names a host outside the local/whitelisted set.
"""

import os
from typing import Optional, Set, Tuple
from urllib.parse import urlparse

DEV_USER_EMAIL = "dev@localhost"
DEV_USER_NAME = "Development User"

LOCAL_HOSTS: Set[str] = {"localhost", "127.0.0.1", "::1"}


def _env_flag(name: str) -> bool:
    return os.getenv(name, "false").strip().lower() == "true"


def base_url_host(value: Optional[str]) -> Optional[str]:
    """Hostname of ``APP_BASE_URL``; bare hosts like ``market.local:8000`` are accepted."""
    value = (value or "").strip()
    if not value:
        return None
    if "://" not in value:
        value = f"http://{value}"
    return urlparse(value).hostname


def dev_mode_hosts() -> Set[str]:
    hosts = set(LOCAL_HOSTS)
    for entry in os.getenv("DEV_MODE_ALLOWED_HOSTS", "").split(","):
        if entry.strip():
            hosts.add(entry.strip().lower())
    return hosts


def dev_mode_requested() -> bool:
    return _env_flag("DEV_MODE")


def dev_mode_active() -> bool:
    """Return True when DEV_MODE is requested and permitted here.

    Raises RuntimeError for a misconfigured deployment instead of quietly
    falling back to header authentication.
    """
    if not dev_mode_requested():
        return False

    host = base_url_host(os.getenv("APP_BASE_URL"))
    if host is None:
        if not _env_flag("ALLOW_DEV_MODE") and not os.getenv("PYTEST_CURRENT_TEST"):
            raise RuntimeError(
                "DEV_MODE=true needs APP_BASE_URL pointing at a local host, "
                "or ALLOW_DEV_MODE=true to run without one."
            )
        return True

    allowed = dev_mode_hosts()
    if host.lower() not in allowed:
        raise RuntimeError(
            f"DEV_MODE=true refused for APP_BASE_URL host '{host}'. Allowed hosts: {sorted(allowed)}"
        )
    return True


def dev_identity() -> Tuple[str, str]:
    """(display name, email) of the impersonated development user."""
    return DEV_USER_NAME, DEV_USER_EMAIL
