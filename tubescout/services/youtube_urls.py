"""URL construction for YouTube search pages.

Everything here is a pure function of its arguments.
"""

from urllib.parse import quote

BASE_URL = "https://www.youtube.com"

SEARCH_FILTERS = {
    "video": "&sp=EgIQAQ%253D%253D",
    "channel": "&sp=EgIQAg%253D%253D",
    "playlist": "&sp=EgIQAw%253D%253D",
    "film": "&sp=EgIQBA%253D%253D",
    "programme": "&sp=EgIQBQ%253D%253D",
}

# Structured continuation endpoint. Pagination does not call it: continuation
# pages are requested from the HTML search endpoint, whose markup the
# extractor understands.
CONTINUATION_ENDPOINT = f"{BASE_URL}/youtubei/v1/search?continuation="


def _encode(value: str) -> str:
    # Same reserved set as JavaScript's encodeURIComponent.
    return quote(value, safe="-_.!~*'()")


def search_url(terms: str) -> str:
    return f"{BASE_URL}/results?search_query={_encode(terms)}"


def with_filter(url: str, filter_type: str | None) -> str:
    """Append the result-type filter for filter_type, if it is a known one."""
    suffix = SEARCH_FILTERS.get(filter_type) if filter_type else None
    return url + suffix if suffix else url


def continuation_url(terms: str, token: str) -> str:
    return f"{search_url(terms)}&continuation={token}"


def absolute_url(path: str | None) -> str | None:
    """Prefix a site-relative path (e.g. /watch?v=...) with the YouTube origin."""
    if not path:
        return None
    return BASE_URL + path


def video_url(video_id: str) -> str:
    return f"{BASE_URL}/watch?v={_encode(video_id)}"


def playlist_url(playlist_id: str) -> str:
    return f"{BASE_URL}/playlist?list={_encode(playlist_id)}"


def channel_url(channel_id: str) -> str:
    return f"{BASE_URL}/channel/{channel_id}"
