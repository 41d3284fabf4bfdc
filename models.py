"""
Beacon - Pydantic models (service state, themes, response shapes)
"""
import time
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


class ServiceState(BaseModel):
    """Service identity plus the start time, written once before serving."""

    model_config = ConfigDict(frozen=True)

    service_name: str
    version: str
    port: int
    start_time: float = Field(default_factory=time.monotonic)

    def uptime_seconds(self) -> int:
        return max(0, int(time.monotonic() - self.start_time))


class ThemeConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    background: str
    text: str
    accent: str
    toggle: str  # theme the "Switch Theme" link points to

    @classmethod
    def for_theme(cls, theme: str | None) -> "ThemeConfig":
        """Exactly "dark" selects the dark scheme; anything else is light."""
        if theme == "dark":
            return cls(name="dark", background="#1a1a1a", text="#ffffff", accent="#4a9eff", toggle="light")
        return cls(name="light", background="#f5f5f5", text="#333333", accent="#007bff", toggle="dark")


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    timestamp: int         # wall clock, epoch seconds
    uptime_seconds: int    # monotonic, since start
    port: int


class ApiInfoResponse(BaseModel):
    service_name: str
    version: str
    description: str
    endpoints: Dict[str, str]
    features: List[str]
