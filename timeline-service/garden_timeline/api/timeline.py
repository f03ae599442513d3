import asyncio
import logging

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from garden_timeline.core import startup
from garden_timeline.core.config import DEFAULT_LANGUAGE
from garden_timeline.schemas.timeline import (
    Language,
    TimelineRequest,
    TimelineResponse,
    TopicsResponse,
)
from garden_timeline.services.timeline_service import analyze_timeline
from garden_timeline.services.topic_classifier import UnsupportedLanguageError

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Timeline"]
)


@router.post("/timeline", response_model=TimelineResponse)
async def timeline(req: TimelineRequest):
    """
    Per-year topic counts for the posted documents.

    Extraction is CPU-bound, so it runs in a worker thread.
    """
    language = req.language or DEFAULT_LANGUAGE
    try:
        analysis = await asyncio.to_thread(analyze_timeline, req.documents, language)
        return analysis.to_dict()
    except UnsupportedLanguageError as e:
        return JSONResponse(status_code=422, content={"detail": str(e)})
    except Exception as e:
        logger.exception("[ERROR] Timeline failed for %d documents", len(req.documents))
        # 503 so clients can tell service trouble from a bad request
        return JSONResponse(
            status_code=503,
            content={"detail": f"Service unavailable or error: {str(e)}"}
        )


@router.get("/topics", response_model=TopicsResponse)
def topics(language: Language = Query(DEFAULT_LANGUAGE)):
    """Active topic labels and their keyword dictionaries."""
    try:
        table = startup.get_topic_table(language)
    except UnsupportedLanguageError as e:
        return JSONResponse(status_code=422, content={"detail": str(e)})
    except RuntimeError as e:
        return JSONResponse(status_code=503, content={"detail": str(e)})

    return {
        "language": table.language,
        "topics": [
            {"label": t.label, "keywords": sorted(t.keywords)}
            for t in table.topics
        ],
    }
