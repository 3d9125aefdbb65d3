# ua_classifier/api.py

import asyncio
import logging

from fastapi import APIRouter, Depends, Request

from ua_classifier.errors import ClassificationTimeout
from ua_classifier.schemas import ClassifyRequest, ClassificationResponse, ErrorResponse
from ua_classifier.service import ClassificationService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_service(request: Request) -> ClassificationService:
    return request.app.state.service


@router.post(
    "/api/classify",
    response_model=ClassificationResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}, 504: {"model": ErrorResponse}},
)
async def classify_user_agent(
    payload: ClassifyRequest,
    service: ClassificationService = Depends(get_service),
) -> ClassificationResponse:
    """
    Classify a User-Agent string.
    Runs on a worker thread, raced against the parse budget.
    """
    deadline = service.new_deadline()
    loop = asyncio.get_running_loop()

    try:
        return await asyncio.wait_for(
            loop.run_in_executor(None, service.classify, payload.ua_string, deadline),
            timeout=deadline.remaining(),
        )
    except asyncio.TimeoutError:
        # The worker discards its result on its next deadline check
        deadline.cancel()
        raise ClassificationTimeout(
            f"UA parsing timed out after {service.settings.parse_timeout_ms} ms"
        )


@router.get("/health")
async def health_check():
    """Simple health check endpoint"""
    return {"status": "healthy"}


@router.get("/stats/cache")
async def cache_stats(service: ClassificationService = Depends(get_service)):
    """Cache occupancy and counters since the last report"""
    return {
        "size": len(service.cache),
        "capacity": service.cache.capacity,
        "parser_version": service.settings.parser_version,
        "counters": service.stats.snapshot(),
    }
