"""Map YouTube renderer objects to result records.

Renderer objects are loosely shaped and change without notice. All field
access goes through dig(), so a missing or reshaped field becomes None on
the record instead of an exception.
"""

from typing import Any

from tubescout.models.youtube import (
    ChannelRecord,
    ChannelRef,
    Duration,
    PlaylistRecord,
    Published,
    Subscribers,
    Thumbnail,
    VideoRecord,
    Views,
)
from tubescout.services.youtube_urls import absolute_url, channel_url, playlist_url, video_url

WEB_URL = ("commandMetadata", "webCommandMetadata", "url")
ACCESSIBILITY_LABEL = ("accessibility", "accessibilityData", "label")


def dig(obj: Any, *path: str | int) -> Any:
    """Follow path through nested dicts/lists, returning None at the first missing step."""
    for key in path:
        if isinstance(key, int):
            if not isinstance(obj, list) or not -len(obj) <= key < len(obj):
                return None
        elif not isinstance(obj, dict) or key not in obj:
            return None
        obj = obj[key]
    return obj


def _text(obj: Any, *path: str | int) -> str | None:
    value = dig(obj, *path)
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    return value if isinstance(value, str) else None


def _int(value: Any) -> int | None:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def _thumbnails(obj: Any, *path: str | int) -> list[Thumbnail] | None:
    value = dig(obj, *path)
    if not isinstance(value, list):
        return None
    return [
        Thumbnail(url=_text(t, "url"), width=_int(t.get("width")), height=_int(t.get("height")))
        for t in value
        if isinstance(t, dict)
    ]


def _url(path: str | None, fallback_id: str | None, build) -> str | None:
    url = absolute_url(path)
    if url is None and fallback_id:
        return build(fallback_id)
    return url


def _badges(renderer: dict) -> list[str]:
    badges = dig(renderer, "ownerBadges") or []
    if not isinstance(badges, list):
        return []
    return [name for name in (_text(b, "metadataBadgeRenderer", "tooltip") for b in badges) if name]


def map_video(x: dict) -> VideoRecord:
    owner = dig(x, "ownerText", "runs", 0)
    video_id = _text(x, "videoId")
    channel_id = _text(owner, "navigationEndpoint", "browseEndpoint", "browseId")
    return VideoRecord(
        title=_text(x, "title", "runs", 0, "text"),
        id=video_id,
        url=_url(_text(x, "navigationEndpoint", *WEB_URL), video_id, video_url),
        channel=ChannelRef(
            name=_text(owner, "text"),
            id=channel_id,
            url=_url(_text(owner, "navigationEndpoint", *WEB_URL), channel_id, channel_url),
        ),
        duration=Duration(
            text=_text(x, "lengthText", "simpleText"),
            pretty=_text(x, "lengthText", *ACCESSIBILITY_LABEL),
        ),
        published=Published(pretty=_text(x, "publishedTimeText", "simpleText")),
        views=Views(
            text=_text(x, "viewCountText", "simpleText"),
            pretty=_text(x, "shortViewCountText", "simpleText"),
            pretty_long=_text(x, "shortViewCountText", *ACCESSIBILITY_LABEL),
        ),
        thumbnails=_thumbnails(x, "thumbnail", "thumbnails"),
    )


def map_channel(x: dict) -> ChannelRecord:
    channel_id = _text(x, "channelId")
    return ChannelRecord(
        name=_text(x, "title", "simpleText"),
        id=channel_id,
        url=_url(_text(x, "navigationEndpoint", "browseEndpoint", "canonicalBaseUrl"), channel_id, channel_url),
        subscribers=Subscribers(
            text=_text(x, "subscriberCountText", "simpleText"),
            pretty=_text(x, "subscriberCountText", *ACCESSIBILITY_LABEL),
        ),
        icons=_thumbnails(x, "thumbnail", "thumbnails"),
        badges=_badges(x),
    )


def map_playlist(x: dict) -> PlaylistRecord:
    playlist_id = _text(x, "playlistId")
    return PlaylistRecord(
        name=_text(x, "title", "simpleText"),
        id=playlist_id,
        url=_url(_text(x, "navigationEndpoint", *WEB_URL), playlist_id, playlist_url),
        thumbnails=_thumbnails(
            x, "thumbnailRenderer", "playlistVideoThumbnailRenderer", "thumbnail", "thumbnails"
        ),
        video_count=_text(x, "videoCount"),
        published=Published(pretty=_text(x, "publishedTimeText", "simpleText")),
    )


_MAPPERS = {
    "videoRenderer": map_video,
    "channelRenderer": map_channel,
    "playlistRenderer": map_playlist,
}


def map_item(item: Any) -> VideoRecord | ChannelRecord | PlaylistRecord | None:
    """Map one entry of a results section, or return None for unsupported items (ads, shelves...)."""
    if not isinstance(item, dict):
        return None
    for key, mapper in _MAPPERS.items():
        renderer = item.get(key)
        if isinstance(renderer, dict):
            return mapper(renderer)
    return None
