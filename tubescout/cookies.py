"""Outbound cookie state shared across the requests of one search session.

The jar is handed to search() by the caller. Searches that should not share
YouTube consent/visitor cookies get their own jar.
"""

import re
from collections.abc import Iterable, Mapping
from functools import lru_cache

_COOKIE_PAIR = re.compile(r"([^=;]+)=([^;]*)")
_MAX_AGE_ZERO = re.compile(r";\s*max-age=0\s*(;|$)", re.IGNORECASE)


class CookieJar:
    """Name/value cookie store fed from Set-Cookie response headers."""

    def __init__(self, cookies: Mapping[str, str] | None = None):
        self.cookies: dict[str, str] = dict(cookies or {})

    def cookie_header_value(self) -> str:
        return "; ".join(f"{k}={v}" for k, v in self.cookies.items())

    def ingest(self, headers: Iterable[tuple[str, str]]) -> None:
        """Absorb every Set-Cookie header in headers, given as (name, value) pairs."""
        for name, value in headers:
            if name.lower() != "set-cookie":
                continue
            match = _COOKIE_PAIR.match(value)
            if not match:
                continue
            key, cookie_value = match.group(1).strip(), match.group(2).strip()
            if not cookie_value or _MAX_AGE_ZERO.search(value):
                self.cookies.pop(key, None)
            else:
                self.cookies[key] = cookie_value


@lru_cache
def default_cookie_jar() -> CookieJar:
    """Process-wide jar used when a caller does not inject one."""
    return CookieJar()
