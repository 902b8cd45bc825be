from fastmcp import FastMCP

from tubescout.exceptions import FetchError, InputValidationError, ParseError, RateLimitError
from tubescout.services import youtube as youtube_service

mcp = FastMCP("Tubescout")


def _handle_mcp_error(e: Exception) -> dict:
    """Convert exceptions to agent-friendly error dicts."""
    if isinstance(e, InputValidationError):
        return {"error": "invalid_input", "message": str(e)}
    if isinstance(e, RateLimitError):
        return {"error": "rate_limit", "message": str(e), "action": "Wait a moment and retry"}
    if isinstance(e, FetchError):
        return {"error": "fetch_error", "message": str(e)}
    if isinstance(e, ParseError):
        return {"error": "parse_error", "message": str(e), "action": "YouTube markup may have changed"}
    return {"error": "unknown_error", "message": str(e)}


@mcp.tool
def youtube_search(terms: str, limit: int = 20, filter_type: str | None = None) -> dict:
    """Search YouTube and collect videos, channels and playlists until `limit` unique channels are found.
    filter_type narrows results to one of: video, channel, playlist, film, programme.
    Use limit=0 to page through every result (can take up to 20 minutes)."""
    try:
        result = youtube_service.search(terms, limit, {"filter_type": filter_type})
    except (InputValidationError, FetchError, ParseError) as e:
        return _handle_mcp_error(e)
    data = result.model_dump(mode="json")
    data["unique_channel_count"] = len(result.unique_channel_ids)
    return data
