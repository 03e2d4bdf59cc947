"""Access decisions consumed by the shows service.

Authentication itself happens elsewhere; these helpers only turn an
already-established identity and a request flag into the single boolean
the shows service understands.
"""

from __future__ import annotations


def is_authenticated_operator(user_name: str | None, admin_users: list[str]) -> bool:
    """Return ``True`` if *user_name* is one of the configured admin users."""
    if not user_name:
        return False
    return user_name.strip().casefold() in {name.casefold() for name in admin_users}


def is_privileged_bypass_request(is_authenticated: bool, disable_cache: bool) -> bool:
    """Return ``True`` when a caller may skip the shows cache.

    Both conditions are required: anonymous callers asking for a fresh
    list still get the cached one.
    """
    return is_authenticated and disable_cache
