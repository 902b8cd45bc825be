import json

import pytest
from unittest.mock import MagicMock

import requests

from tubescout.config import Settings
from tubescout.cookies import CookieJar


# --- Canned renderer items ---

def video_item(video_id: str, channel_id: str, title: str = "A video") -> dict:
    return {
        "videoRenderer": {
            "videoId": video_id,
            "title": {"runs": [{"text": title}]},
            "navigationEndpoint": {
                "commandMetadata": {"webCommandMetadata": {"url": f"/watch?v={video_id}"}},
            },
            "ownerText": {
                "runs": [{
                    "text": f"Owner {channel_id}",
                    "navigationEndpoint": {
                        "browseEndpoint": {"browseId": channel_id},
                        "commandMetadata": {"webCommandMetadata": {"url": f"/@{channel_id}"}},
                    },
                }],
            },
            "lengthText": {
                "simpleText": "4:13",
                "accessibility": {"accessibilityData": {"label": "4 minutes, 13 seconds"}},
            },
            "publishedTimeText": {"simpleText": "2 years ago"},
            "viewCountText": {"simpleText": "1,234,567 views"},
            "shortViewCountText": {
                "simpleText": "1.2M views",
                "accessibility": {"accessibilityData": {"label": "1.2 million views"}},
            },
            "thumbnail": {"thumbnails": [{"url": "https://i.ytimg.com/vi/x/hq.jpg", "width": 480, "height": 360}]},
        }
    }


def channel_item(channel_id: str, name: str = "A channel") -> dict:
    return {
        "channelRenderer": {
            "channelId": channel_id,
            "title": {"simpleText": name},
            "navigationEndpoint": {"browseEndpoint": {"browseId": channel_id, "canonicalBaseUrl": f"/@{channel_id}"}},
            "subscriberCountText": {
                "simpleText": "1.5M subscribers",
                "accessibility": {"accessibilityData": {"label": "1.5 million subscribers"}},
            },
            "thumbnail": {"thumbnails": [{"url": "//yt3.ggpht.com/icon=s88", "width": 88, "height": 88}]},
            "ownerBadges": [
                {"metadataBadgeRenderer": {"style": "BADGE_STYLE_TYPE_VERIFIED", "tooltip": "Verified"}},
                {"metadataBadgeRenderer": {"style": "BADGE_STYLE_TYPE_UNKNOWN"}},
            ],
        }
    }


def playlist_item(playlist_id: str) -> dict:
    return {
        "playlistRenderer": {
            "playlistId": playlist_id,
            "title": {"simpleText": "Best of"},
            "navigationEndpoint": {
                "commandMetadata": {"webCommandMetadata": {"url": f"/watch?v=abc&list={playlist_id}"}},
            },
            "thumbnailRenderer": {
                "playlistVideoThumbnailRenderer": {
                    "thumbnail": {"thumbnails": [{"url": "https://i.ytimg.com/vi/p/hq.jpg", "width": 336, "height": 188}]},
                },
            },
            "videoCount": "42",
            "publishedTimeText": {"simpleText": "Updated today"},
        }
    }


# --- Canned result pages ---

def results_page(items: list[dict], token: str | None = None) -> str:
    """Render a results page the way YouTube inlines ytInitialData."""
    continuation_item = {"trigger": "CONTINUATION_TRIGGER_ON_ITEM_SHOWN"}
    if token:
        continuation_item["continuationEndpoint"] = {
            "continuationCommand": {"token": token, "request": "CONTINUATION_REQUEST_TYPE_SEARCH"},
        }
    data = {
        "contents": {
            "twoColumnSearchResultsRenderer": {
                "primaryContents": {
                    "sectionListRenderer": {
                        "contents": [
                            {"itemSectionRenderer": {"contents": items, "trackingParams": "CAoQ"}},
                            {"continuationItemRenderer": continuation_item},
                        ],
                    },
                },
            },
        },
    }
    state = json.dumps(data, separators=(",", ":"), ensure_ascii=False)
    return (
        "<!DOCTYPE html><html><head><title>YouTube</title></head><body>"
        f"<script nonce=\"n\">var ytInitialData = {state};</script>"
        "</body></html>"
    )


def fake_response(text: str = "", status_code: int = 200, set_cookies: list[str] | None = None) -> MagicMock:
    resp = MagicMock(spec=requests.Response)
    resp.status_code = status_code
    resp.text = text
    resp.history = []
    resp.raw = MagicMock()
    resp.raw.headers.iteritems.return_value = [("Content-Type", "text/html")] + [
        ("Set-Cookie", c) for c in (set_cookies or [])
    ]
    return resp


@pytest.fixture
def mock_http():
    """requests.Session stand-in; set get.side_effect to a list of fake responses."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def settings():
    return Settings(throttle_seconds=0, max_execution_seconds=1200)


@pytest.fixture
def cookie_jar():
    return CookieJar()


@pytest.fixture
def mock_sleep(mocker):
    return mocker.patch("tubescout.services.youtube.sleep")
