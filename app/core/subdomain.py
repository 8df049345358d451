"""
Host header parsing and subdomain validation.

Everything here is pure: no I/O, no settings, no exceptions for bad input.
"""

import re
from typing import Optional

LOCAL_HOSTNAMES = ("localhost", "127.0.0.1")

SUBDOMAIN_PATTERN = re.compile(r"^[a-z0-9]([a-z0-9-]{1,61}[a-z0-9])?$")
SUBDOMAIN_MIN_LENGTH = 3
SUBDOMAIN_MAX_LENGTH = 63

_WHITESPACE_RUN = re.compile(r"\s+")
_DISALLOWED_CHARS = re.compile(r"[^a-z0-9-]")
_EDGE_HYPHENS = re.compile(r"^-+|-+$")


def extract_subdomain(host: str) -> Optional[str]:
    """
    Extract the tenant subdomain from a Host header value.

    The value is returned verbatim (no lower-casing); browsers already send
    host names in lower case and tenant lookups match exactly.

    Args:
        host: Raw Host header, optionally with a ``:port`` suffix

    Returns:
        The leftmost label of a 3+ label host name, the token of a
        ``<token>.localhost`` development host, or None
    """
    hostname = (host or "").split(":")[0]

    if hostname in LOCAL_HOSTNAMES:
        return None

    parts = hostname.split(".")

    # Local development: acme.localhost:3000
    if len(parts) == 2 and parts[1] == "localhost":
        return parts[0] or None

    if len(parts) >= 3:
        return parts[0] or None

    return None


def is_main_domain(host: str) -> bool:
    """True when the host carries no subdomain."""
    return extract_subdomain(host) is None


def sanitize_subdomain(value: str) -> str:
    """
    Normalize user input into subdomain form.

    Lower-cases, turns whitespace runs into a hyphen, drops anything outside
    ``[a-z0-9-]`` and trims leading/trailing hyphens. Idempotent.
    """
    cleaned = _WHITESPACE_RUN.sub("-", value.lower())
    cleaned = _DISALLOWED_CHARS.sub("", cleaned)
    return _EDGE_HYPHENS.sub("", cleaned)


def is_valid_subdomain(value: str) -> bool:
    """Check pattern and the 3-63 length bounds; both must hold."""
    return (
        SUBDOMAIN_PATTERN.fullmatch(value) is not None
        and SUBDOMAIN_MIN_LENGTH <= len(value) <= SUBDOMAIN_MAX_LENGTH
    )
