from fastapi import APIRouter

from tubescout.models.youtube import SearchResult
from tubescout.services import youtube as youtube_service

router = APIRouter(prefix="/api/youtube", tags=["youtube"])


@router.get("/search")
def search(terms: str, limit: int = 20, filter_type: str | None = None) -> SearchResult:
    return youtube_service.search(terms, limit, {"filter_type": filter_type})
