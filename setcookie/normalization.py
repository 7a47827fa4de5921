import re
from ipaddress import ip_address
from typing import Any, Optional

_INVALID_NAME_CHARACTERS = re.compile(r"[=,; \t\r\n\x0b\x0c]")


def is_valid_cookie_name(name: str, reject_empty: bool = True) -> bool:
    """
    Returns a value indicating whether the given string can be used as the name
    of a cookie: it must not contain "=", ",", ";" or whitespace, and it must not
    be empty unless `reject_empty` is false.
    """
    if not isinstance(name, str):
        return False
    if name == "" and reject_empty:
        return False
    return _INVALID_NAME_CHARACTERS.search(name) is None


def _is_ip_address(value: str) -> bool:
    try:
        ip_address(value)
    except ValueError:
        return False
    return True


def normalize_domain(domain: Any = None) -> Optional[str]:
    """
    Normalizes the Domain attribute of a cookie.

    Returns None when the cookie must be valid for the current host only:
    for empty values, IP addresses and local host names (without dots, or with
    a single leading dot). Otherwise returns the domain with exactly one
    leading dot, as expected by RFC 2109 clients.
    """
    domain = "" if domain is None else str(domain)

    if domain == "":
        return None

    if _is_ip_address(domain):
        return None

    if "." not in domain or domain.rfind(".") == 0:
        return None

    if not domain.startswith("."):
        domain = "." + domain
    return domain
