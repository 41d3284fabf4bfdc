"""
Beacon - System routes
  GET /health   liveness check
"""
import time

from fastapi import APIRouter, Request

from models import HealthResponse
from rendering import PrettyJSONResponse

router = APIRouter(tags=["System"])


@router.get("/health", response_model=HealthResponse, response_class=PrettyJSONResponse,
            summary="Health check")
async def health_check(request: Request):
    """Returns 200 with service identity and uptime. Use for uptime monitoring."""
    service = request.app.state.service
    return HealthResponse(
        status="healthy",
        service=service.service_name,
        version=service.version,
        timestamp=int(time.time()),
        uptime_seconds=service.uptime_seconds(),
        port=service.port,
    )
