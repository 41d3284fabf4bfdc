"""
Beacon - Configuration
All settings are read from environment variables with sensible defaults.
"""
import os

from exceptions import ConfigurationError

# ── Identity ──────────────────────────────────────────────────────────────────
SERVICE_NAME     = os.getenv("BEACON_SERVICE_NAME", "beacon")
SERVICE_VERSION  = "1.0.0"
DESCRIPTION      = "Lightweight Python web service with health, info and display pages"

# ── Listener ──────────────────────────────────────────────────────────────────
HOST             = os.getenv("BEACON_HOST", "0.0.0.0")
DEFAULT_PORT     = os.getenv("BEACON_PORT", "8080")  # validated by parse_port
PORT_MIN         = 1024
PORT_MAX         = 65535
LOG_LEVEL        = os.getenv("BEACON_LOG_LEVEL", "info")  # uvicorn's own logger

# ── Display page ──────────────────────────────────────────────────────────────
DEFAULT_NAME     = os.getenv("BEACON_DEFAULT_NAME", "World")


def parse_port(value: str) -> int:
    """Validate a port given on the command line or in BEACON_PORT."""
    if not (isinstance(value, str) and value.isascii() and value.isdigit()):
        raise ConfigurationError(f"Invalid port number: {value}")
    port = int(value)
    if not PORT_MIN <= port <= PORT_MAX:
        raise ConfigurationError(f"Port must be between {PORT_MIN} and {PORT_MAX}")
    return port
