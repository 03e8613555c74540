"""Client address and security header helpers."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import TypeVar

SECURITY_HEADERS = {
    "Cache-Control": "no-cache, no-store, max-age=0, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
    "X-Content-Type-Options": "nosniff",
    "Strict-Transport-Security": "max-age=31536000 ; includeSubDomains",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1",
}

_H = TypeVar("_H", bound=MutableMapping)


def _header(headers: Mapping[str, str], name: str) -> str:
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return ""


def read_user_ip(headers: Mapping[str, str], remote_ip: str) -> str:
    """Return the client address from proxy headers or the remote address, without port."""
    address = (
        _header(headers, "X-Real-Ip")
        or _header(headers, "X-Forwarded-For")
        or remote_ip
    )
    return address.split(":")[0]


def apply_security_headers(headers: _H) -> _H:
    """Set the standard security headers on ``headers`` and return it."""
    headers.update(SECURITY_HEADERS)
    return headers