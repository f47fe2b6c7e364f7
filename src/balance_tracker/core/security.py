"""Admin credential check."""

from typing import Any, Optional


def verify_admin_secret(candidate: Any, secret: Optional[str]) -> bool:
    """Return True when ``candidate`` is exactly the configured admin secret.

    An unset or empty secret never matches, so a missing configuration cannot
    be satisfied by an empty or absent code.
    """

    if not secret or not isinstance(candidate, str):
        return False
    return candidate == secret
