"""
Beacon - Response rendering (shared instances)
Imported by main.py and the routers that return HTML or JSON bodies.
"""
import json
from pathlib import Path
from typing import Any

from fastapi.responses import JSONResponse
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

# Jinja2Templates autoescapes, so query values are encoded before insertion.
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


class PrettyJSONResponse(JSONResponse):
    """JSON body indented by two spaces."""

    def render(self, content: Any) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=False,
            allow_nan=False,
            indent=2,
        ).encode("utf-8")
