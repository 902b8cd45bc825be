"""HTTP access to YouTube result pages.

One GET per call, no retries: a failed page aborts the search that asked for it.
"""

import logging
from dataclasses import dataclass, field
from http.cookiejar import DefaultCookiePolicy

import requests

from tubescout.config import Settings
from tubescout.exceptions import FetchError, RateLimitError

LOGGER = logging.getLogger("tubescout.http")


@dataclass
class FetchedPage:
    url: str
    text: str
    headers: list[tuple[str, str]] = field(default_factory=list)


def build_session(settings: Settings) -> requests.Session:
    """Return a requests.Session that follows at most settings.max_redirects redirects.

    The session keeps no cookies of its own: request cookies come from the
    caller's CookieJar on every hop, and Set-Cookie headers are handed back
    in FetchedPage.headers.
    """
    session = requests.Session()
    session.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))
    session.max_redirects = settings.max_redirects
    session.headers["User-Agent"] = settings.user_agent
    return session


def _response_headers(response: requests.Response) -> list[tuple[str, str]]:
    """Raw header pairs across the redirect chain, keeping repeated Set-Cookie lines apart."""
    pairs = []
    for hop in [*response.history, response]:
        pairs.extend(hop.raw.headers.iteritems())
    return pairs


def _handle_response(url: str, response: requests.Response) -> None:
    if response.status_code == 429:
        raise RateLimitError(
            f'Failed to fetch url "{url}". (YouTube rate limit hit, HTTP 429)',
            url=url,
            status_code=429,
        )
    if not 200 <= response.status_code < 300:
        raise FetchError(
            f'Failed to fetch url "{url}". (HTTP {response.status_code})',
            url=url,
            status_code=response.status_code,
        )


def fetch_page(
    http: requests.Session,
    url: str,
    headers: dict[str, str] | None = None,
    cookies: dict[str, str] | None = None,
    timeout: float | None = None,
    proxies: dict[str, str] | None = None,
) -> FetchedPage:
    """GET url and return its body text and response headers.

    cookies are sent with the request and with every redirect hop it follows.

    Raises FetchError (RateLimitError for 429) on transport failure, too many
    redirects, or a non-2xx status.
    """
    LOGGER.debug("fetching url=%s", url)
    try:
        response = http.get(url, headers=headers, cookies=cookies, timeout=timeout, proxies=proxies)
    except requests.RequestException as e:
        raise FetchError(f'Failed to fetch url "{url}". ({e})', url=url) from e
    _handle_response(url, response)
    return FetchedPage(url=url, text=response.text, headers=_response_headers(response))
