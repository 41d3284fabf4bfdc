"""
Beacon - API description route
  GET /api/info   service metadata, endpoint list and feature list
"""
from fastapi import APIRouter, Request

from config import DESCRIPTION
from models import ApiInfoResponse
from rendering import PrettyJSONResponse

router = APIRouter(tags=["Info"])

ENDPOINTS = {
    "/health":   "GET - Health check endpoint",
    "/display":  "GET - Formatted text display (supports ?name= and ?theme= params)",
    "/api/info": "GET - API information",
    "/":         "GET - Redirects to /display",
}

FEATURES = [
    "FastAPI routing",
    "CORS enabled",
    "Request logging",
    "JSON responses",
    "HTML rendering",
    "Light and dark themes",
]


@router.get("/api/info", response_model=ApiInfoResponse, response_class=PrettyJSONResponse,
            summary="API information")
async def api_info(request: Request):
    service = request.app.state.service
    return ApiInfoResponse(
        service_name=service.service_name,
        version=service.version,
        description=DESCRIPTION,
        endpoints=ENDPOINTS,
        features=FEATURES,
    )
