"""
Beacon Web Service
==================
A small HTTP service with a health check, a themeable greeting page,
an API description endpoint and a root redirect.

Start it with ``python server.py [port]`` or the ``beacon`` console script;
server.py owns the listening socket, so the app is only built there.
"""

from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import DESCRIPTION
from models import ServiceState
from rendering import templates
from routers import display, info, system

CORS_HEADERS = {
    "Access-Control-Allow-Origin":  "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


# ── Access log ────────────────────────────────────────────────────────────────

def log_request(method: str, path: str, status_code: int) -> None:
    stamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{stamp}] {method} {path} - Status: {status_code}", flush=True)


# ── App ───────────────────────────────────────────────────────────────────────

def create_app(service: ServiceState) -> FastAPI:
    """Build the application around ``service``, which must exist before any request."""

    # Only the documented routes are served; everything else gets the 404 page.
    app = FastAPI(
        title=service.service_name,
        description=DESCRIPTION,
        version=service.version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.service = service

    # Answers preflight requests; the fixed headers below are set on top.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def cors_and_access_log(request: Request, call_next):
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        log_request(request.method, request.url.path, response.status_code)
        return response

    @app.exception_handler(StarletteHTTPException)
    async def not_found_page(request: Request, exc: StarletteHTTPException):
        # A known path with the wrong method is still an unmatched route.
        if exc.status_code in (404, 405):
            return templates.TemplateResponse(request, "not_found.html", {}, status_code=404)
        return await http_exception_handler(request, exc)

    # ── Routers ───────────────────────────────────────────────────────────────
    app.include_router(system.router)
    app.include_router(info.router)
    app.include_router(display.router)

    return app
