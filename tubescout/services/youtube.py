"""Paged search over the public YouTube results page.

Each page is fetched, its results section is mapped to records, and the
continuation token on the page leads to the next one. The loop stops when
the unique channel limit is reached, the page has no continuation token, or
the time ceiling runs out.
"""

import logging
from time import monotonic, sleep

import requests
from pydantic import ValidationError

from tubescout.config import Settings, get_settings
from tubescout.cookies import CookieJar, default_cookie_jar
from tubescout.exceptions import InputValidationError, SearchError
from tubescout.http_client import build_session, fetch_page
from tubescout.models.youtube import SearchOptions, SearchResult
from tubescout.services.youtube_extract import extract_contents, extract_continuation_token
from tubescout.services.youtube_mapper import map_item
from tubescout.services.youtube_urls import continuation_url, search_url, with_filter

LOGGER = logging.getLogger("tubescout.youtube")


def _validate_options(options) -> SearchOptions:
    if options is None:
        return SearchOptions()
    if isinstance(options, SearchOptions):
        return options
    if isinstance(options, dict):
        try:
            return SearchOptions.model_validate(options)
        except ValidationError as e:
            raise InputValidationError(f"Invalid search options. ({e})") from e
    raise InputValidationError.for_type("options", "object", options)


def _request_headers(settings: Settings, options: SearchOptions) -> dict[str, str]:
    headers = {"User-Agent": settings.user_agent}
    headers.update(options.request_options.headers)
    return headers


def search(
    terms: str,
    limit: int = 0,
    options: SearchOptions | dict | None = None,
    *,
    cookie_jar: CookieJar | None = None,
    http: requests.Session | None = None,
    settings: Settings | None = None,
) -> SearchResult:
    """Search YouTube for videos, channels and playlists matching terms.

    limit bounds the number of unique channel ids collected; 0 means no
    limit, in which case only the continuation tokens running out or the
    time ceiling end the search. Raises InputValidationError, FetchError or
    ParseError; a failing page aborts the whole search.

    Cookies come from cookie_jar on every request. An injected http session
    should come from build_session(), which keeps no cookie store of its own.
    """
    if not isinstance(terms, str):
        raise InputValidationError.for_type("terms", "str", terms)
    if limit is not None and (not isinstance(limit, int) or isinstance(limit, bool)):
        raise InputValidationError.for_type("limit", "int", limit)
    options = _validate_options(options)
    limit = limit or 0
    settings = settings or get_settings()
    cookie_jar = cookie_jar if cookie_jar is not None else default_cookie_jar()
    http = http or build_session(settings)
    timeout = options.request_options.timeout or settings.request_timeout

    url = with_filter(search_url(terms), options.filter_type)
    result = SearchResult()
    started = monotonic()
    page_number = 0

    while True:
        page_number += 1
        try:
            page = fetch_page(
                http,
                url,
                headers=_request_headers(settings, options),
                cookies=dict(cookie_jar.cookies),
                timeout=timeout,
                proxies=options.request_options.proxies,
            )
            cookie_jar.ingest(page.headers)
            contents = extract_contents(page.text)
        except SearchError as e:
            LOGGER.error("search aborted terms=%r page=%d error=%s", terms, page_number, e)
            if options.partial_on_error:
                e.partial_result = result
            raise

        for item in contents:
            record = map_item(item)
            if record is not None:
                result.add(record)
        unique_count = len(result.recompute_unique_channel_ids())

        token = extract_continuation_token(page.text)
        LOGGER.info(
            "searching for unique channels terms=%r page=%d unique_channels=%d",
            terms,
            page_number,
            unique_count,
        )

        if monotonic() - started > settings.max_execution_seconds:
            LOGGER.warning(
                "search stopped after exceeding %.0f seconds terms=%r pages=%d",
                settings.max_execution_seconds,
                terms,
                page_number,
            )
            break
        if limit > 0 and unique_count >= limit:
            break
        if not token:
            break

        sleep(settings.throttle_seconds)
        url = continuation_url(terms, token)

    return result
