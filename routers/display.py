"""
Beacon - Display routes
  GET /          redirect to /display
  GET /display   themeable HTML greeting page
"""
from datetime import datetime

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from config import DEFAULT_NAME
from models import ThemeConfig
from rendering import templates

router = APIRouter(tags=["Display"])

HIGHLIGHTS = [
    ("⚡ Async handlers", "Served by FastAPI on uvicorn"),
    ("🔧 RESTful API", "Clean and scalable endpoints"),
    ("🎨 Themes", "Light and dark colour schemes"),
    ("📊 Health Monitoring", "Built-in health checks"),
]


def server_time() -> str:
    """Local wall-clock time as ``YYYY-MM-DD HH:MM:SS <zone>``."""
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S %Z")


@router.get("/", include_in_schema=False)
async def root():
    return RedirectResponse("/display", status_code=302)


@router.get("/display", response_class=HTMLResponse, summary="Greeting page")
async def display(request: Request, name: str | None = None, theme: str | None = None):
    """
    Render the greeting page.

    - **name** *(optional)*: who to greet. Empty or missing falls back to `DEFAULT_NAME`.
    - **theme** *(optional)*: `dark` for the dark scheme, anything else is light.
    """
    service = request.app.state.service
    return templates.TemplateResponse(
        request,
        "display.html",
        {
            "name": name or DEFAULT_NAME,
            "theme": ThemeConfig.for_theme(theme),
            "server_time": server_time(),
            "service_name": service.service_name,
            "version": service.version,
            "highlights": HIGHLIGHTS,
        },
    )
