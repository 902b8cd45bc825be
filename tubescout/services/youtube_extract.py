"""Pull the search results data out of a YouTube results page.

The results page inlines its initial state as JSON. There is no stable API
contract for it, so the section holding the result items is cut out of the
raw HTML between two fixed anchors. Those anchors live only in this module.
"""

import json
import re

from tubescout.exceptions import ParseError

CONTENTS_START_MARKER = '"sectionListRenderer":{"contents":[{"itemSectionRenderer":'
CONTENTS_END_MARKER = '},{"continuationItemRenderer"'

_CONTINUATION_TOKEN = re.compile(r'"continuationCommand":\{"token":"(.*?)"')


def slice_contents_island(raw: str) -> str:
    """Return the JSON text of the last itemSectionRenderer on the page."""
    start = raw.rfind(CONTENTS_START_MARKER)
    if start == -1:
        raise ParseError("Failed to parse contents from data. (results section marker not found)")
    end = raw.rfind(CONTENTS_END_MARKER)
    if end == -1:
        raise ParseError("Failed to parse contents from data. (continuation item marker not found)")
    start += len(CONTENTS_START_MARKER)
    if end < start:
        raise ParseError("Failed to parse contents from data. (markers out of order)")
    return raw[start:end]


def extract_contents(raw: str) -> list[dict]:
    """Return the renderer items of the page's results section.

    Raises ParseError when the section cannot be found or decoded.
    """
    island = slice_contents_island(raw)
    try:
        section = json.loads(island)
    except json.JSONDecodeError as e:
        raise ParseError(f"Failed to parse contents from data. ({e})") from e
    contents = section.get("contents") if isinstance(section, dict) else None
    if not isinstance(contents, list):
        raise ParseError("Failed to parse contents from data. (no contents list in results section)")
    return contents


def extract_continuation_token(raw: str) -> str | None:
    """Return the first continuation token on the page, or None if there is none."""
    match = _CONTINUATION_TOKEN.search(raw)
    if match and match.group(1):
        return match.group(1)
    return None
